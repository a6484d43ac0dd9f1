"""Fixed-capacity buffer of raw audio data."""

from __future__ import annotations

_U32_MAX = 0xFFFFFFFF


class AudioSample:
    """Audio bytes: ``data`` holds ``capacity`` bytes, of which ``length`` are in use."""

    __slots__ = ("data", "_length")

    def __init__(self, capacity: int) -> None:
        if not 0 <= capacity <= _U32_MAX:
            raise ValueError(f"capacity must be in the range 0..{_U32_MAX}, got {capacity}")
        self.data = bytearray(capacity)
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self.data)

    @property
    def length(self) -> int:
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        if not 0 <= value <= self.capacity:
            raise ValueError(f"length must be in the range 0..{self.capacity}, got {value}")
        self._length = value

    @property
    def payload(self) -> bytes:
        """The bytes currently in use."""
        return bytes(self.data[: self._length])

    def copy(self) -> AudioSample:
        """Return a new sample of equal capacity holding the used bytes."""
        dup = AudioSample(self.capacity)
        dup.data[: self._length] = self.data[: self._length]
        dup._length = self._length
        return dup

    def __repr__(self) -> str:
        return f"AudioSample(length={self._length}, capacity={self.capacity})"