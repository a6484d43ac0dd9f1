"""Mouse cursor image sent by the remote desktop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_DIM_MAX = 1 << 15
_INT_FIELDS = ("hotx", "hoty", "width", "height")


@dataclass
class Cursor:
    """Cursor bitmap in RGBA format (4 bytes per pixel) with its hot point.

    ``data`` is expected to hold ``width * height * 4`` bytes.
    """

    data: bytes | None = None
    hotx: int = 0
    hoty: int = 0
    width: int = 0
    height: int = 0

    def __init__(
        self,
        data: bytes | bytearray | memoryview | None = None,
        hotx: int = 0,
        hoty: int = 0,
        width: int = 0,
        height: int = 0,
    ) -> None:
        self.data = data
        self.hotx = hotx
        self.hoty = hoty
        self.width = width
        self.height = height

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _INT_FIELDS:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= _DIM_MAX:
                raise ValueError(f"{name} must be in the range 0..{_DIM_MAX}, got {value}")
        elif name == "data" and value is not None:
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise TypeError(f"data must be bytes-like, got {type(value).__name__}")
            value = bytes(value)
        super().__setattr__(name, value)

    @property
    def hotspot(self) -> tuple[int, int]:
        """The hot point as an ``(x, y)`` pair."""
        return (self.hotx, self.hoty)

    @property
    def size(self) -> tuple[int, int]:
        """The bitmap dimensions as ``(width, height)``."""
        return (self.width, self.height)