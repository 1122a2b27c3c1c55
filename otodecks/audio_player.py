"""Audio file decoding and the playback engine behind one deck."""

from __future__ import annotations

import wave
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union
from urllib.parse import urlparse
from urllib.request import url2pathname

import numpy as np

OUTPUT_CHANNELS = 2
MAX_SPEED = 100.0

UrlLike = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class AudioClip:
    """Decoded audio: float samples in [-1, 1], shaped (frames, channels)."""

    samples: np.ndarray
    sample_rate: float

    @property
    def num_frames(self) -> int:
        return int(self.samples.shape[0])

    @property
    def num_channels(self) -> int:
        return int(self.samples.shape[1])

    @property
    def length_seconds(self) -> float:
        if not self.sample_rate:
            return 0.0
        return self.num_frames / self.sample_rate


def _to_path(url: UrlLike) -> Path:
    """Turn a filesystem path or a file:// URL into a path."""
    if isinstance(url, PathLike):
        return Path(url)
    text = str(url)
    parsed = urlparse(text)
    if parsed.scheme == "file":
        return Path(url2pathname(parsed.path))
    return Path(text)


def _decode(raw: bytes, width: int) -> np.ndarray:
    if width == 1:
        return (np.frombuffer(raw, dtype=np.uint8).astype(np.float64) - 128.0) / 128.0
    if width == 2:
        return np.frombuffer(raw, dtype="<i2").astype(np.float64) / 32768.0
    if width == 3:
        octets = np.frombuffer(raw, dtype=np.uint8).reshape(-1, 3).astype(np.int32)
        values = octets[:, 0] | (octets[:, 1] << 8) | (octets[:, 2] << 16)
        values = np.where(values & 0x800000, values - 0x1000000, values)
        return values.astype(np.float64) / 8388608.0
    if width == 4:
        return np.frombuffer(raw, dtype="<i4").astype(np.float64) / 2147483648.0
    raise ValueError(f"unsupported sample width: {width} bytes")


def read_audio(path: UrlLike) -> AudioClip:
    """Decode a PCM WAV file given as a path or a file:// URL.

    Raises OSError when the file cannot be opened and ValueError when it is
    not audio that can be decoded.
    """
    file_path = _to_path(path)
    try:
        with wave.open(str(file_path), "rb") as wav:
            channels = wav.getnchannels()
            width = wav.getsampwidth()
            rate = wav.getframerate()
            raw = wav.readframes(wav.getnframes())
    except (wave.Error, EOFError) as exc:
        raise ValueError(f"cannot decode audio file: {file_path}") from exc
    samples = _decode(raw, width).reshape(-1, channels)
    return AudioClip(samples, float(rate))


def _stereo_frames(clip: AudioClip) -> np.ndarray:
    """Fit the clip to the output channels, with one silent frame appended."""
    samples = clip.samples
    if samples.shape[1] == 0:
        samples = np.zeros((samples.shape[0], OUTPUT_CHANNELS))
    elif samples.shape[1] < OUTPUT_CHANNELS:
        extra = np.repeat(samples[:, -1:], OUTPUT_CHANNELS - samples.shape[1], axis=1)
        samples = np.hstack([samples, extra])
    else:
        samples = samples[:, :OUTPUT_CHANNELS]
    return np.vstack([samples, np.zeros((1, OUTPUT_CHANNELS))])


class DJAudioPlayer:
    """Plays one loaded file with gain, speed and position control."""

    def __init__(self) -> None:
        self._clip: AudioClip | None = None
        self._frames = np.zeros((1, OUTPUT_CHANNELS))
        self._cursor = 0.0
        self._transport_playing = False
        self._toggled = False
        self._gain = 1.0
        self._speed = 1.0
        self.sample_rate: float | None = None
        self.block_size: int | None = None

    @property
    def gain(self) -> float:
        return self._gain

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def is_playing(self) -> bool:
        """Whether the transport is currently producing audio."""
        return self._transport_playing

    @property
    def loaded(self) -> bool:
        return self._clip is not None

    @property
    def length_seconds(self) -> float:
        return self._clip.length_seconds if self._clip is not None else 0.0

    @property
    def position(self) -> float:
        """Current playhead position in seconds."""
        if self._clip is None or not self._clip.sample_rate:
            return 0.0
        return self._cursor / self._clip.sample_rate

    def prepare_to_play(self, samples_per_block: int, sample_rate: float) -> None:
        self.block_size = samples_per_block
        self.sample_rate = float(sample_rate)

    def release_resources(self) -> None:
        self.block_size = None
        self.sample_rate = None

    def next_audio_block(self, num_samples: int) -> np.ndarray:
        """Render the next block as an array shaped (num_samples, 2)."""
        if num_samples < 0:
            raise ValueError("num_samples must not be negative")
        out = np.zeros((num_samples, OUTPUT_CHANNELS))
        clip = self._clip
        if clip is None or not self._transport_playing or num_samples == 0:
            return out

        device_rate = self.sample_rate or clip.sample_rate
        step = self._speed * clip.sample_rate / device_rate
        positions = self._cursor + step * np.arange(num_samples)
        frames = clip.num_frames
        valid = (positions >= 0) & (positions < frames)
        index = np.floor(positions[valid]).astype(np.int64)
        frac = (positions[valid] - index)[:, None]
        out[valid] = self._frames[index] * (1.0 - frac) + self._frames[index + 1] * frac
        out *= self._gain

        self._cursor += step * num_samples
        if self._cursor >= frames:
            self._cursor = float(frames)
            self._transport_playing = False
        return out

    def load_url(self, url: UrlLike) -> bool:
        """Load a file; on failure keep whatever was loaded before."""
        try:
            clip = read_audio(url)
        except (OSError, ValueError):
            return False
        self._clip = clip
        self._frames = _stereo_frames(clip)
        self._cursor = 0.0
        self._transport_playing = False
        return True

    def set_gain(self, gain: float) -> None:
        if gain < 0 or gain > 1.0:
            raise ValueError("gain should be between 0 and 1")
        self._gain = float(gain)

    def set_speed(self, ratio: float) -> None:
        if ratio < 0 or ratio > MAX_SPEED:
            raise ValueError("ratio should be between 0 and 100")
        self._speed = float(ratio)

    def set_position(self, seconds: float) -> None:
        clip = self._clip
        if clip is None:
            return
        frame = int(seconds * clip.sample_rate)
        self._cursor = float(min(max(frame, 0), clip.num_frames))

    def set_position_relative(self, pos: float) -> None:
        if pos < 0 or pos > 1.0:
            raise ValueError("pos should be between 0 and 1")
        self.set_position(self.length_seconds * pos)

    def start(self) -> None:
        """Toggle playback: start when idle, stop when already started."""
        self._transport_playing = not self._toggled
        self._toggled = not self._toggled

    def stop(self) -> None:
        self._transport_playing = False

    def position_relative(self) -> float:
        """Playhead position as a fraction of the track length."""
        length = self.length_seconds
        if length <= 0:
            return 0.0
        return self.position / length