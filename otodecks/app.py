"""The two-deck mixer application and its command line."""

from __future__ import annotations

import argparse
import sys
import wave
from typing import Sequence

import numpy as np

from otodecks.audio_player import OUTPUT_CHANNELS, DJAudioPlayer
from otodecks.deck import Deck
from otodecks.playlist import PLAYER1_BUTTON, PLAYER2_BUTTON, Playlist

APPLICATION_NAME = "OtoDecks"
CONFIRM_TEXT = "CONFIRM SELECTION"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

Bounds = tuple[float, float, float, float]


class MainComponent:
    """Two decks mixed together, with a playlist to choose their tracks."""

    def __init__(self, playlist: Playlist | None = None) -> None:
        self.width = DEFAULT_WIDTH
        self.height = DEFAULT_HEIGHT
        self.player1 = DJAudioPlayer()
        self.player2 = DJAudioPlayer()
        self.deck1 = Deck(self.player1)
        self.deck2 = Deck(self.player2)
        self.playlist = playlist if playlist is not None else Playlist()
        self.confirm_text = CONFIRM_TEXT
        self._mixer_inputs: list[DJAudioPlayer] = []

    @property
    def decks(self) -> tuple[Deck, Deck]:
        return (self.deck1, self.deck2)

    def prepare_to_play(self, samples_per_block: int, sample_rate: float) -> None:
        for player in (self.player1, self.player2):
            player.prepare_to_play(samples_per_block, sample_rate)
            if player not in self._mixer_inputs:
                self._mixer_inputs.append(player)

    def next_audio_block(self, num_samples: int) -> np.ndarray:
        """Sum of every mixer input's next block, shaped (num_samples, 2)."""
        if num_samples < 0:
            raise ValueError("num_samples must not be negative")
        out = np.zeros((num_samples, OUTPUT_CHANNELS))
        for player in self._mixer_inputs:
            out += player.next_audio_block(num_samples)
        return out

    def release_resources(self) -> None:
        self.player1.release_resources()
        self.player2.release_resources()

    def set_track(self) -> None:
        """Load each player's playlist selection into its deck."""
        track_1 = self.playlist.load_to_player(PLAYER1_BUTTON)
        track_2 = self.playlist.load_to_player(PLAYER2_BUTTON)
        if track_1 is None:
            raise LookupError("no track selected for player 1")
        if track_2 is None:
            raise LookupError("no track selected for player 2")
        self.deck1.load_url(track_1.track_url)
        self.deck2.load_url(track_2.track_url)

    def layout(self, width: int, height: int) -> dict[str, Bounds]:
        """Bounds of the decks, playlist and confirm button."""
        self.width, self.height = width, height
        row_h = float(height // 6)
        half = float(width // 2)
        return {
            "deck1": (0.0, 0.0, half, row_h * 4),
            "deck2": (half, 0.0, half, row_h * 4),
            "playlist": (0.0, row_h * 4, float(width), row_h),
            "confirm": (0.0, row_h * 5, float(width), row_h),
        }


def _render(component: MainComponent, seconds: float, rate: int, block: int) -> np.ndarray:
    component.prepare_to_play(block, rate)
    for deck in component.decks:
        deck.click_play()
    remaining = int(round(seconds * rate))
    chunks = []
    while remaining > 0:
        count = min(block, remaining)
        chunks.append(component.next_audio_block(count))
        remaining -= count
    component.release_resources()
    if not chunks:
        return np.zeros((0, OUTPUT_CHANNELS))
    return np.vstack(chunks)


def _write_wav(path: str, audio: np.ndarray, rate: int) -> None:
    pcm = (np.clip(audio, -1.0, 1.0) * 32767).astype("<i2")
    with wave.open(path, "wb") as out:
        out.setnchannels(OUTPUT_CHANNELS)
        out.setsampwidth(2)
        out.setframerate(rate)
        out.writeframes(pcm.tobytes())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APPLICATION_NAME.lower(),
        description="Mix two tracks from a playlist on two decks.",
    )
    parser.add_argument("tracks", nargs="*", help="audio files for the playlist")
    parser.add_argument("--player1", type=int, help="playlist row for player 1")
    parser.add_argument("--player2", type=int, help="playlist row for player 2")
    parser.add_argument("--output", help="write the mix to this WAV file")
    parser.add_argument("--seconds", type=float, default=10.0, help="length of the mix")
    parser.add_argument("--rate", type=int, default=44100, help="output sample rate")
    parser.add_argument("--block", type=int, default=512, help="samples per block")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.seconds < 0:
        parser.error("--seconds must not be negative")
    if args.rate <= 0:
        parser.error("--rate must be positive")
    if args.block <= 0:
        parser.error("--block must be positive")

    component = MainComponent()
    component.playlist.set_tracks(args.tracks)
    for row, title in enumerate(component.playlist.track_titles):
        print(f"{row}: {title}")

    for row, button in ((args.player1, PLAYER1_BUTTON), (args.player2, PLAYER2_BUTTON)):
        if row is None:
            continue
        try:
            component.playlist.click(row, button)
        except IndexError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(component.playlist.selection_text(button))

    if args.output:
        try:
            component.set_track()
        except LookupError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        audio = _render(component, args.seconds, args.rate, args.block)
        _write_wav(args.output, audio, args.rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())