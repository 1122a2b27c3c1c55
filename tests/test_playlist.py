import pytest

from otodecks.playlist import PLAYER1_BUTTON, PLAYER2_BUTTON, Playlist


@pytest.fixture
def playlist(tmp_path):
    files = [tmp_path / "intro.wav", tmp_path / "drop.mp3"]
    for f in files:
        f.write_bytes(b"")
    pl = Playlist()
    pl.set_tracks(files)
    return pl


def test_set_tracks_with_no_files_adds_no_rows(playlist):
    playlist.set_tracks([])
    assert playlist.num_rows() == 2
    assert playlist.track_titles == ["intro", "drop"]


def test_titles_and_rows(playlist):
    assert playlist.track_titles == ["intro", "drop"]
    assert playlist.num_rows() == 2


def test_set_tracks_appends(playlist, tmp_path):
    playlist.set_tracks([tmp_path / "outro.wav"])
    assert playlist.num_rows() == 3
    assert playlist.track_titles[-1] == "outro"


def test_nothing_selected_initially(playlist):
    assert playlist.load_to_player(PLAYER1_BUTTON) is None
    assert playlist.load_to_player(PLAYER2_BUTTON) is None
    assert playlist.selection_text(PLAYER1_BUTTON) == ""
    assert playlist.track1_name == "track 1 not loaded"


def test_click_player1(playlist, tmp_path):
    track = playlist.click(0, PLAYER1_BUTTON)
    assert playlist.load_to_player(PLAYER1_BUTTON) == track
    assert track.btn_name == PLAYER1_BUTTON
    assert track.track_url == (tmp_path / "intro.wav").resolve().as_uri()
    assert playlist.selection_text(PLAYER1_BUTTON) == "Selected for player 1: intro"
    assert playlist.load_to_player(PLAYER2_BUTTON) is None


def test_click_player2(playlist):
    playlist.click(1, PLAYER2_BUTTON)
    assert playlist.load_to_player(PLAYER2_BUTTON).btn_name == PLAYER2_BUTTON
    assert playlist.selection_text(PLAYER2_BUTTON) == "Selected for player 2: drop"
    assert playlist.track2_name == "drop"
    assert playlist.selection_text(PLAYER1_BUTTON) == ""


def test_reselect_replaces(playlist):
    playlist.click(0, PLAYER1_BUTTON)
    playlist.click(1, PLAYER1_BUTTON)
    assert playlist.load_to_player(PLAYER1_BUTTON).track_url.endswith("drop.mp3")


def test_unknown_button(playlist):
    with pytest.raises(ValueError):
        playlist.click(0, "player3_btn")
    with pytest.raises(ValueError):
        playlist.load_to_player("nope")


@pytest.mark.parametrize("row", [-1, 2, 10])
def test_bad_row(playlist, row):
    with pytest.raises(IndexError):
        playlist.click(row, PLAYER1_BUTTON)