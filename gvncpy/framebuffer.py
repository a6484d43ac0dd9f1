"""General purpose framebuffer storing remote screen updates in a caller's buffer."""

from __future__ import annotations

from .colormap import ColorMap
from .pixels import PixelFormat, RenderParams, compute_render_params, swap16, swap32, swap64

_U16_MAX = 0xFFFF
_ROWSTRIDE_MAX = 1 << 30
_SWAPPERS = {16: swap16, 32: swap32, 64: swap64}


def _check_range(name: str, value: int, upper: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be in the range 0..{upper}, got {value}")
    return value


def _swap_if(pixel: int, bits: int, needed: bool) -> int:
    if bits == 8:
        if not 0 <= pixel <= 0xFF:
            raise ValueError(f"pixel must be in the range 0..255, got {pixel}")
        return pixel
    try:
        swapper = _SWAPPERS[bits]
    except KeyError:
        raise ValueError(f"bits must be one of 8, 16, 32 or 64, got {bits}") from None
    swapped = swapper(pixel)
    return swapped if needed else pixel


class BaseFramebuffer:
    """Framebuffer writing into ``buffer``, which is ``height * rowstride`` bytes or more.

    ``buffer`` is used in place and must be writable; the framebuffer keeps a
    reference to it rather than a copy.
    """

    def __init__(
        self,
        buffer: bytearray | memoryview,
        width: int,
        height: int,
        rowstride: int,
        local_format: PixelFormat | None = None,
        remote_format: PixelFormat | None = None,
    ) -> None:
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("buffer must be writable")
        self.width = _check_range("width", width, _U16_MAX)
        self.height = _check_range("height", height, _U16_MAX)
        self.rowstride = _check_range("rowstride", rowstride, _ROWSTRIDE_MAX)
        view = view.cast("B")
        if len(view) < self.height * self.rowstride:
            raise ValueError(
                f"buffer holds {len(view)} bytes, need at least "
                f"{self.height * self.rowstride}"
            )
        self.buffer = buffer
        self._view = view
        self.local_format = local_format if local_format is not None else PixelFormat()
        self.remote_format = remote_format if remote_format is not None else PixelFormat()
        self.color_map: ColorMap | None = None
        self._params: RenderParams | None = None

    def render_params(self) -> RenderParams:
        """The conversion parameters for the local and remote format pair."""
        if self._params is None:
            self._params = compute_render_params(self.local_format, self.remote_format)
        return self._params

    def perfect_format_match(self) -> bool:
        """Whether remote pixels can be copied into the buffer unchanged."""
        return self.render_params().perfect_match

    def swap_local(self, pixel: int, bits: int) -> int:
        """Convert a host-native pixel of ``bits`` size to the local format's byte order."""
        return _swap_if(pixel, bits, not self.local_format.is_native)

    def swap_remote(self, pixel: int, bits: int) -> int:
        """Convert a remote pixel of ``bits`` size to host-native byte order."""
        return _swap_if(pixel, bits, not self.render_params().remote_format.is_native)

    def _offset(self, x: int, y: int) -> int:
        return y * self.rowstride + x * (self.local_format.bits_per_pixel // 8)

    def copyrect(
        self, srcx: int, srcy: int, dstx: int, dsty: int, width: int, height: int
    ) -> None:
        """Copy a rectangle of pixels within the framebuffer; regions may overlap."""
        for name, value in (("srcx", srcx), ("srcy", srcy), ("dstx", dstx), ("dsty", dsty),
                            ("width", width), ("height", height)):
            _check_range(name, value, _U16_MAX)
        if srcx + width > self.width or dstx + width > self.width:
            raise ValueError("rectangle extends past the framebuffer width")
        if srcy + height > self.height or dsty + height > self.height:
            raise ValueError("rectangle extends past the framebuffer height")

        self.render_params()
        nbytes = width * (self.local_format.bits_per_pixel // 8)
        rows = range(height)
        if srcy < dsty:
            rows = reversed(rows)
        for row in rows:
            src = self._offset(srcx, srcy + row)
            dst = self._offset(dstx, dsty + row)
            self._view[dst:dst + nbytes] = bytes(self._view[src:src + nbytes])

    def set_color_map(self, color_map: ColorMap) -> None:
        """Store a copy of ``color_map`` for palette-based remote formats."""
        if not isinstance(color_map, ColorMap):
            raise TypeError(f"color_map must be a ColorMap, got {type(color_map).__name__}")
        self.color_map = color_map.copy()