"""One deck: transport controls, sliders and waveform for a single player."""

from __future__ import annotations

from typing import Iterable

from otodecks.audio_player import DJAudioPlayer, UrlLike
from otodecks.style import PlayButton, RotarySlider
from otodecks.waveform import WaveformDisplay

TIMER_INTERVAL_MS = 500
PLAY_TEXT = "PLAY"
STOP_TEXT = "STOP"
LOAD_TEXT = "LOAD"
SLIDER_ITEM_HEIGHT = 100
WAVEFORM_ITEM_HEIGHT = 100

SLIDER_RANGES = {
    "gain": (0.0, 1.0),
    "speed": (0.5, 5.0),
    "pos": (0.0, 1.0),
}
SLIDER_LABELS = {"gain": "Gain", "speed": "Speed", "pos": "Pos"}

Bounds = tuple[float, float, float, float]


class Deck:
    """Controls one player: play/stop, loading, gain, speed and position."""

    def __init__(
        self,
        player: DJAudioPlayer | None = None,
        waveform: WaveformDisplay | None = None,
    ) -> None:
        self.player = player if player is not None else DJAudioPlayer()
        self.waveform = waveform if waveform is not None else WaveformDisplay()
        self.play_button = PlayButton(text=PLAY_TEXT)
        self.load_button_text = LOAD_TEXT
        self.labels = dict(SLIDER_LABELS)
        self.timer_interval_ms = TIMER_INTERVAL_MS
        self.pending_drag: list[str] = []

        self.sliders: dict[str, RotarySlider] = {}
        for name, (low, high) in SLIDER_RANGES.items():
            slider = RotarySlider()
            slider.set_range(low, high)
            self.sliders[name] = slider

        self.play_button.listeners.append(self._play_clicked)
        self.sliders["gain"].listeners.append(self.player.set_gain)
        self.sliders["speed"].listeners.append(self.player.set_speed)
        self.sliders["pos"].listeners.append(self.player.set_position_relative)

    def _play_clicked(self, button: PlayButton) -> None:
        button.text = STOP_TEXT if button.toggle_state else PLAY_TEXT
        self.player.start()

    def click_play(self) -> bool:
        """Press the play button; returns whether it is now in the playing state."""
        return self.play_button.click()

    def load(self, url: UrlLike) -> bool:
        """Load a chosen file into both the player and the waveform."""
        loaded = self.player.load_url(url)
        self.waveform.load_url(url)
        return loaded

    def slider_changed(self, name: str, value: float) -> float:
        """Move the named slider ("gain", "speed" or "pos"); returns its new value."""
        try:
            slider = self.sliders[name]
        except KeyError:
            raise ValueError(f"unknown slider: {name!r}") from None
        return slider.set_value(value)

    def is_interested_in_file_drag(self, files: Iterable[str]) -> bool:
        """Accept any drag, remembering the files being dragged over the deck."""
        self.pending_drag = [str(f) for f in files]
        return True

    def files_dropped(self, files: Iterable[UrlLike]) -> bool:
        """Load a single dropped file into the player; more than one is ignored."""
        dropped = list(files)
        self.pending_drag = []
        if len(dropped) != 1:
            return False
        return self.player.load_url(dropped[0])

    def load_url(self, url: UrlLike) -> bool:
        """Stop the deck if it is playing, then load the track and its waveform."""
        if self.play_button.toggle_state:
            self.play_button.click()
        loaded = self.player.load_url(url)
        self.waveform.load_url(url)
        return loaded

    def timer_tick(self) -> None:
        self.waveform.set_position_relative(self.player.position_relative())

    def layout(self, width: int, height: int) -> dict[str, Bounds]:
        """Bounds of each control for a deck of the given size."""
        row_h = height // 7

        half = width // 2
        bounds: dict[str, Bounds] = {
            "play": (0.0, 0.0, float(half), float(row_h)),
            "load": (float(half), 0.0, float(half), float(row_h)),
        }

        slider_w = width // 3
        leftover = width - 3 * slider_w
        region_top = row_h
        region_h = 3 * row_h
        slider_y = region_top + (region_h - SLIDER_ITEM_HEIGHT) / 2
        for index, name in enumerate(("gain", "speed", "pos")):
            x = leftover / 6 + index * (slider_w + leftover / 3)
            bounds[name] = (x, slider_y, float(slider_w), float(SLIDER_ITEM_HEIGHT))

        bounds["waveform"] = (
            0.0,
            float(4 * row_h),
            float(width),
            float(WAVEFORM_ITEM_HEIGHT),
        )
        return bounds