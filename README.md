# otodecks

A two-deck DJ mixer for PCM WAV files, modelled without a GUI toolkit. Each
deck has an audio player with gain, speed and position controls, a waveform
overview with a playhead, three rotary sliders and a play/stop toggle. A
playlist lets you pick one track for each deck, and the main component mixes
both decks into one stereo stream.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The command

```
otodecks [TRACKS ...] [--player1 ROW] [--player2 ROW] [--output FILE]
         [--seconds S] [--rate HZ] [--block N]
```

The given files are added to the playlist and listed with their row numbers.
`--player1` and `--player2` select a playlist row for each deck and print the
selection. With `--output`, both selections are loaded into their decks, both
decks are started, and `--seconds` of the mix (default 10) is rendered at
`--rate` Hz (default 44100) in blocks of `--block` samples (default 512) and
written to `FILE` as a 16-bit stereo WAV file. `--output` needs a selection for
both players; a missing selection or a row outside the playlist is reported on
standard error and the command exits with status 1.

For example:

```
otodecks one.wav two.wav --player1 0 --player2 1 --output mix.wav --seconds 30
```

## Using it from Python

```python
from otodecks.audio_player import DJAudioPlayer, read_audio
from otodecks.waveform import WaveformDisplay
from otodecks.playlist import Playlist
from otodecks.deck import Deck
from otodecks.app import MainComponent

clip = read_audio("loop.wav")       # samples shaped (frames, channels)
print(clip.sample_rate, clip.length_seconds)

player = DJAudioPlayer()
player.prepare_to_play(512, 44100.0)
player.load_url("loop.wav")         # returns False and keeps the old track on failure
player.set_gain(0.8)                # ValueError outside 0..1
player.set_speed(1.5)               # ValueError outside 0..100
player.set_position_relative(0.25)  # ValueError outside 0..1
player.start()                      # start() toggles between playing and stopped
block = player.next_audio_block(512)  # array shaped (512, 2)
print(player.position_relative())

display = WaveformDisplay()
display.load_url("loop.wav")
display.set_position_relative(0.5)
print(display.peaks(100))           # min/max of the first channel per column
print(display.playhead(400, 100))   # (x, y, w, h), or None when nothing is loaded

playlist = Playlist()
playlist.set_tracks(["one.wav", "two.wav"])
playlist.click(0, "player1_btn")
playlist.click(1, "player2_btn")
print(playlist.selection_text("player1_btn"))  # "Selected for player 1: one"
track = playlist.load_to_player("player1_btn")
print(track.track_url)              # a file:// URL
```

`read_audio` and the `load_url` methods take a filesystem path or a `file://`
URL and decode uncompressed WAV files with 8-, 16-, 24- or 32-bit samples.

A `Deck` wires a player, a waveform display, three `RotarySlider`s (`"gain"`,
`"speed"` and `"pos"`, with ranges 0–1, 0.5–5 and 0–1) and a `PlayButton`
together. `Deck.slider_changed` clamps a value to the slider's range and, when
it changes, passes it on to the player. `Deck.click_play` toggles playback and
the button's label between `PLAY` and `STOP`. `Deck.load_url` stops a playing
deck before loading a track into the player and the waveform, and
`Deck.timer_tick` moves the waveform's playhead to follow the player.
`Deck.layout` and `MainComponent.layout` return the bounds of each control for
a given size.

`MainComponent.set_track` loads the playlist's current selections into both
decks (raising `LookupError` if either is missing), and
`MainComponent.next_audio_block` returns the sum of both players' blocks once
`prepare_to_play` has been called.

`otodecks.style.rotary_geometry` computes the arcs, thumb and pointer line for
drawing a rotary slider.

## What it does not do

There is no window, no file chooser and no live sound output: the controls are
plain Python objects, and the only way to hear a mix is to render it to a WAV
file with `--output`. Compressed formats such as MP3 or FLAC are not read.