"""Waveform overview of a loaded track with a playhead marker."""

from __future__ import annotations

import logging

import numpy as np

from otodecks.audio_player import AudioClip, UrlLike, read_audio

logger = logging.getLogger(__name__)

SAMPLES_PER_POINT = 1000


class WaveformDisplay:
    """Summarises a track into min/max points and tracks the playhead."""

    def __init__(self, samples_per_point: int = SAMPLES_PER_POINT) -> None:
        if samples_per_point <= 0:
            raise ValueError("samples_per_point must be positive")
        self.samples_per_point = samples_per_point
        self.file_loaded = False
        self.position = 0.0
        self.repaints = 0
        self._points = np.zeros((0, 2))

    def _summarise(self, clip: AudioClip) -> np.ndarray:
        if clip.num_frames == 0 or clip.num_channels == 0:
            return np.zeros((0, 2))
        channel = clip.samples[:, 0]
        starts = np.arange(0, clip.num_frames, self.samples_per_point)
        lows = np.minimum.reduceat(channel, starts)
        highs = np.maximum.reduceat(channel, starts)
        return np.stack([lows, highs], axis=1)

    def load_url(self, url: UrlLike) -> bool:
        """Load a track's overview; returns whether it could be read."""
        self._points = np.zeros((0, 2))
        self.file_loaded = False
        try:
            clip = read_audio(url)
        except (OSError, ValueError):
            logger.warning("waveform not loaded: %s", url)
            return False
        self._points = self._summarise(clip)
        self.file_loaded = True
        self.repaints += 1
        return True

    def set_position_relative(self, pos: float) -> None:
        """Move the playhead; a repaint is only needed when it changes."""
        if pos != self.position:
            self.position = pos
            self.repaints += 1

    def peaks(self, width: int) -> np.ndarray:
        """Min/max of the first channel for each of `width` columns."""
        if not self.file_loaded:
            raise RuntimeError("File not loaded...")
        if width <= 0:
            raise ValueError("width must be positive")
        result = np.zeros((width, 2))
        for column, chunk in enumerate(np.array_split(self._points, width)):
            if len(chunk):
                result[column] = chunk[:, 0].min(), chunk[:, 1].max()
        return result

    def playhead(self, width: int, height: int) -> tuple[float, int, int, int] | None:
        """Playhead rectangle as (x, y, w, h), or None when nothing is loaded."""
        if not self.file_loaded:
            return None
        return (self.position * width, 0, width // 20, height)