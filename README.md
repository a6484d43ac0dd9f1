# gvncpy

Building blocks for VNC (RFB) clients, in pure Python with no dependencies:

- `gvncpy.colormap`: `ColorMap` and `ColorMapEntry`, the indexed palette that a
  server sends for colour-map pixel formats. `set()` and `lookup()` raise
  `IndexError` for an index outside `offset .. offset + size - 1`.
- `gvncpy.audiosample`: `AudioSample`, a fixed-capacity buffer for audio data with
  `length`, `capacity`, `payload` and `copy()`.
- `gvncpy.baseaudio`: `BaseAudio`, which passes playback start, stop and data events
  to handlers connected for each `AudioSignal`.
- `gvncpy.cursor`: `Cursor`, an RGBA cursor bitmap with its hot spot.
- `gvncpy.connection`: the protocol constants `Encoding`, `Auth`, `AuthVencrypt`,
  `Credential` and `LedState`, plus `tight_jpeg_encoding()`.
- `gvncpy.pixels`: `PixelFormat`, `ByteOrder`, byte swapping helpers
  (`swap16`, `swap32`, `swap64`) and `compute_render_params()`, which works out the
  masks and shifts for converting remote pixels into local pixels and returns them
  as a `RenderParams`.
- `gvncpy.framebuffer`: `BaseFramebuffer`, a framebuffer over a caller-owned
  writable buffer, with `copyrect()`, `set_color_map()`, `perfect_format_match()`,
  `render_params()`, `swap_local()` and `swap_remote()`.

## Installation

```
pip install gvncpy
```

## Examples

A colour map covers the indexes from `offset` up to `offset + size`:

```python
from gvncpy.colormap import ColorMap

cmap = ColorMap(offset=0, size=256)
cmap.set(1, 0xFFFF, 0, 0)
print(cmap.lookup(1))  # ColorMapEntry(red=65535, green=0, blue=0)
```

Audio handlers are called with the audio object followed by the event data:

```python
from gvncpy.audiosample import AudioSample
from gvncpy.baseaudio import AudioSignal, BaseAudio

audio = BaseAudio()
audio.connect(AudioSignal.PLAYBACK_DATA, lambda source, sample: print(sample.capacity))
audio.playback_data(AudioSample(4096))  # prints 4096
```

A framebuffer writes into a buffer that you keep:

```python
from gvncpy.framebuffer import BaseFramebuffer
from gvncpy.pixels import PixelFormat

fmt = PixelFormat(
    bits_per_pixel=32, depth=24, true_color_flag=True,
    red_max=255, green_max=255, blue_max=255,
    red_shift=16, green_shift=8, blue_shift=0,
)
width, height = 640, 480
buffer = bytearray(width * height * 4)
fb = BaseFramebuffer(buffer, width, height, width * 4, fmt, fmt)
print(fb.perfect_format_match())  # True
fb.copyrect(0, 0, 10, 10, 100, 100)
```

## What the package does not do

There is no network connection or protocol handling: `gvncpy.connection` holds
only constants. `BaseFramebuffer` does not decode encodings or convert and draw
remote pixel data; it computes the conversion parameters, swaps pixel byte order
and copies rectangles within its buffer. Nothing here plays audio or displays
anything on screen.

## Running the tests

```
pip install -e ".[test]"
pytest
```