"""Colour map used by palette-based remote pixel formats."""

from __future__ import annotations

from dataclasses import dataclass, field

_U16_MAX = 0xFFFF


def _check_u16(name: str, value: int) -> int:
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be in the range 0..{_U16_MAX}, got {value}")
    return value


@dataclass(frozen=True)
class ColorMapEntry:
    """A single 16-bit-per-channel RGB colour."""

    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass
class ColorMap:
    """Colour entries addressed by indexes from ``offset`` to ``offset + size``."""

    offset: int
    size: int
    colors: list[ColorMapEntry] = field(init=False, repr=False)

    def __init__(self, offset: int, size: int) -> None:
        self.offset = _check_u16("offset", offset)
        self.size = _check_u16("size", size)
        self.colors = [ColorMapEntry() for _ in range(size)]

    def __len__(self) -> int:
        return self.size

    def __contains__(self, idx: object) -> bool:
        return isinstance(idx, int) and self.offset <= idx < self.offset + self.size

    def _position(self, idx: int) -> int:
        if idx not in self:
            raise IndexError(
                f"colour map index {idx} outside "
                f"{self.offset}..{self.offset + self.size - 1}"
            )
        return idx - self.offset

    def copy(self) -> ColorMap:
        """Return an independent map holding the same entries."""
        dup = ColorMap(self.offset, self.size)
        dup.colors = list(self.colors)
        return dup

    def set(self, idx: int, red: int, green: int, blue: int) -> None:
        """Store the RGB value for entry ``idx``; IndexError if out of range."""
        position = self._position(idx)
        self.colors[position] = ColorMapEntry(
            _check_u16("red", red),
            _check_u16("green", green),
            _check_u16("blue", blue),
        )

    def lookup(self, idx: int) -> ColorMapEntry:
        """Return the entry at ``idx``; IndexError if out of range."""
        return self.colors[self._position(idx)]