"""Two-deck DJ mixer for WAV files: players, waveform overviews, a playlist and a mix renderer."""

__version__ = "0.1.0"