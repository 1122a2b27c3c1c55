"""A track chosen in the playlist for one of the decks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Track:
    """A selected audio location, tagged with the button that picked it."""

    btn_name: str
    track_url: str