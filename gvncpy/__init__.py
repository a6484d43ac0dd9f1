"""Framebuffer, pixel format, colour map, cursor, audio and protocol constant building blocks for VNC clients."""

__version__ = "0.1.0"

__all__ = [
    "audiosample",
    "baseaudio",
    "colormap",
    "connection",
    "cursor",
    "framebuffer",
    "pixels",
]