"""Pixel formats, byte swapping and the parameters used to convert pixels."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from enum import IntEnum

_U16_MAX = 0xFFFF
_ALPHA_MASK_32 = 0xFF000000
_TABLE_BITS = {1: 8, 2: 16, 3: 32, 4: 64}


class ByteOrder(IntEnum):
    """Byte order of pixel data."""

    LITTLE_ENDIAN = 1234
    BIG_ENDIAN = 4321

    @classmethod
    def native(cls) -> ByteOrder:
        """The byte order of the running host."""
        return cls.LITTLE_ENDIAN if sys.byteorder == "little" else cls.BIG_ENDIAN


@dataclass(frozen=True)
class PixelFormat:
    """Layout of a pixel: size, depth, byte order and per-channel max and shift."""

    bits_per_pixel: int = 0
    depth: int = 0
    byte_order: ByteOrder = ByteOrder.native()
    true_color_flag: bool = False
    red_max: int = 0
    green_max: int = 0
    blue_max: int = 0
    red_shift: int = 0
    green_shift: int = 0
    blue_shift: int = 0

    def __post_init__(self) -> None:
        for name in ("red_max", "green_max", "blue_max"):
            value = getattr(self, name)
            if not 0 <= value <= _U16_MAX:
                raise ValueError(f"{name} must be in the range 0..{_U16_MAX}, got {value}")
        for name in ("bits_per_pixel", "depth", "red_shift", "green_shift", "blue_shift"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
        object.__setattr__(self, "byte_order", ByteOrder(self.byte_order))

    @property
    def is_native(self) -> bool:
        """Whether pixels in this format are stored in host byte order."""
        return self.byte_order == ByteOrder.native()


@dataclass(frozen=True)
class RenderParams:
    """Values derived from a local and remote format pair for pixel conversion.

    ``remote_format`` is the remote format as used for conversion: in colour
    map mode its channel maxima, shifts and byte order are replaced.
    ``src_bits`` and ``dst_bits`` select the conversion routine; when
    ``colormap`` is true ``src_bits`` is the size of a colour map index.
    """

    remote_format: PixelFormat
    perfect_match: bool
    red_mask: int
    green_mask: int
    blue_mask: int
    red_right_shift: int
    green_right_shift: int
    blue_right_shift: int
    red_left_shift: int
    green_left_shift: int
    blue_left_shift: int
    alpha_mask: int
    src_bits: int
    dst_bits: int
    colormap: bool

    @property
    def supports_rgb24(self) -> bool:
        """Whether 24-bit RGB data can be blitted (not in colour map mode)."""
        return not self.colormap


def _swap(pixel: int, nbytes: int) -> int:
    try:
        raw = pixel.to_bytes(nbytes, "little")
    except OverflowError:
        raise ValueError(
            f"pixel must be in the range 0..{(1 << (8 * nbytes)) - 1}, got {pixel}"
        ) from None
    return int.from_bytes(raw, "big")


def swap16(pixel: int) -> int:
    """Reverse the byte order of a 16-bit pixel."""
    return _swap(pixel, 2)


def swap32(pixel: int) -> int:
    """Reverse the byte order of a 32-bit pixel."""
    return _swap(pixel, 4)


def swap64(pixel: int) -> int:
    """Reverse the byte order of a 64-bit pixel."""
    return _swap(pixel, 8)


def _table_bits(bits_per_pixel: int, which: str) -> int:
    index = bits_per_pixel // 8
    if index == 0:
        raise ValueError(f"{which} bits_per_pixel must be at least 8, got {bits_per_pixel}")
    if index == 4:
        index = 3
    return _TABLE_BITS[min(index, 4)]


def _extra_shift(wider: int, narrower: int) -> int:
    count = 0
    while wider > narrower:
        wider >>= 1
        count += 1
    return count


def compute_render_params(local_format: PixelFormat, remote_format: PixelFormat) -> RenderParams:
    """Derive masks, shifts and routine selection for converting remote pixels."""
    remote = remote_format
    if not remote.true_color_flag:
        remote = replace(
            remote,
            red_max=_U16_MAX,
            green_max=_U16_MAX,
            blue_max=_U16_MAX,
            red_shift=32,
            green_shift=16,
            blue_shift=0,
            byte_order=ByteOrder.native(),
        )

    local = local_format
    perfect_match = (
        remote.true_color_flag
        and local.bits_per_pixel == remote.bits_per_pixel
        and local.red_max == remote.red_max
        and local.green_max == remote.green_max
        and local.blue_max == remote.blue_max
        and local.red_shift == remote.red_shift
        and local.green_shift == remote.green_shift
        and local.blue_shift == remote.blue_shift
        and local.is_native
        and remote.is_native
    )

    dst_bits = _table_bits(local.bits_per_pixel, "local")
    alpha_mask = _ALPHA_MASK_32 if local.bits_per_pixel // 8 == 4 else 0

    colormap = not remote.true_color_flag
    if colormap:
        src_bits = 8 if remote.bits_per_pixel == 8 else 16
    else:
        src_bits = _table_bits(remote.bits_per_pixel, "remote")

    return RenderParams(
        remote_format=remote,
        perfect_match=bool(perfect_match),
        red_mask=local.red_max & remote.red_max,
        green_mask=local.green_max & remote.green_max,
        blue_mask=local.blue_max & remote.blue_max,
        red_right_shift=remote.red_shift + _extra_shift(remote.red_max, local.red_max),
        green_right_shift=remote.green_shift + _extra_shift(remote.green_max, local.green_max),
        blue_right_shift=remote.blue_shift + _extra_shift(remote.blue_max, local.blue_max),
        red_left_shift=local.red_shift + _extra_shift(local.red_max, remote.red_max),
        green_left_shift=local.green_shift + _extra_shift(local.green_max, remote.green_max),
        blue_left_shift=local.blue_shift + _extra_shift(local.blue_max, remote.blue_max),
        alpha_mask=alpha_mask,
        src_bits=src_bits,
        dst_bits=dst_bits,
        colormap=colormap,
    )