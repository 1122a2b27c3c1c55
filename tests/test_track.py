import dataclasses

import pytest

from otodecks.track import Track


def test_fields_keep_given_values():
    track = Track("player1_btn", "file:///music/song.wav")
    assert track.btn_name == "player1_btn"
    assert track.track_url == "file:///music/song.wav"


def test_tracks_with_same_fields_are_equal():
    first = Track("player2_btn", "file:///music/a.wav")
    second = Track("player2_btn", "file:///music/a.wav")
    assert first == second
    assert hash(first) == hash(second)


def test_tracks_for_different_buttons_differ():
    first = Track("player1_btn", "file:///music/a.wav")
    second = Track("player2_btn", "file:///music/a.wav")
    assert (first == second) is False


def test_track_is_immutable():
    track = Track("player1_btn", "file:///music/a.wav")
    with pytest.raises(dataclasses.FrozenInstanceError):
        track.track_url = "file:///music/b.wav"
    assert track.track_url == "file:///music/a.wav"
    assert track.btn_name == "player1_btn"