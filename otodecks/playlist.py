"""The playlist of tracks and each deck's pending selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

from otodecks.track import Track

PLAYER1_BUTTON = "player1_btn"
PLAYER2_BUTTON = "player2_btn"

COLUMNS = (
    ("Track title", 1, 200),
    ("Load to Player 1", 2, 200),
    ("Load to Player 2", 3, 200),
)

_PLAYER_NUMBERS = {PLAYER1_BUTTON: 1, PLAYER2_BUTTON: 2}


def _player_number(button_name: str) -> int:
    try:
        return _PLAYER_NUMBERS[button_name]
    except KeyError:
        raise ValueError(f"unknown player button: {button_name!r}") from None


@dataclass
class Playlist:
    """Track titles and locations, and which one each player has selected."""

    track_titles: list[str] = field(default_factory=list)
    track_urls: list[str] = field(default_factory=list)
    track_1: Track | None = None
    track_2: Track | None = None
    track1_name: str = "track 1 not loaded"
    track2_name: str = "track 2 not loaded"
    _selection: dict[int, str] = field(default_factory=lambda: {1: "", 2: ""})

    def set_tracks(self, paths: Iterable[Union[str, "PathLike[str]"]]) -> None:
        """Append files to the playlist, titled by their names without extension."""
        for item in paths:
            path = Path(item)
            self.track_titles.append(path.stem)
            self.track_urls.append(path.resolve().as_uri())

    def num_rows(self) -> int:
        return len(self.track_titles)

    def click(self, row: int, button_name: str) -> Track:
        """Select the track in `row` for the player that owns the button."""
        player = _player_number(button_name)
        if not 0 <= row < self.num_rows():
            raise IndexError(f"no track in row {row}")
        title = self.track_titles[row]
        track = Track(button_name, self.track_urls[row])
        if player == 1:
            self.track_1 = track
            self.track1_name = title
        else:
            self.track_2 = track
            self.track2_name = title
        self._selection[player] = f"Selected for player {player}: {title}"
        return track

    def load_to_player(self, button_name: str) -> Track | None:
        """The track selected for that player, or None if there is none yet."""
        return self.track_1 if _player_number(button_name) == 1 else self.track_2

    def selection_text(self, button_name: str) -> str:
        return self._selection[_player_number(button_name)]