"""Protocol constants for a VNC client connection."""

from __future__ import annotations

from enum import IntEnum, IntFlag

_TIGHT_JPEG_MIN_QUALITY = 0
_TIGHT_JPEG_MAX_QUALITY = 9


class LedState(IntFlag):
    """Keyboard LED bits, as carried by the LED state pseudo encoding."""

    SCROLL_LOCK = 1 << 0
    NUM_LOCK = 1 << 1
    CAPS_LOCK = 1 << 2


class Encoding(IntEnum):
    """Framebuffer encodings and pseudo encodings."""

    RAW = 0
    COPY_RECT = 1
    RRE = 2
    CORRE = 4
    HEXTILE = 5
    TIGHT = 7
    ZRLE = 16

    # Tight JPEG quality levels
    TIGHT_JPEG0 = -32
    TIGHT_JPEG1 = -31
    TIGHT_JPEG2 = -30
    TIGHT_JPEG3 = -29
    TIGHT_JPEG4 = -28
    TIGHT_JPEG5 = -27
    TIGHT_JPEG6 = -26
    TIGHT_JPEG7 = -25
    TIGHT_JPEG8 = -24
    TIGHT_JPEG9 = -23

    # Pseudo encodings
    DESKTOP_RESIZE = -223
    WMVI = 0x574D5669

    CURSOR_POS = -232
    RICH_CURSOR = -239
    XCURSOR = -240

    POINTER_CHANGE = -257
    EXT_KEY_EVENT = -258
    AUDIO = -259
    LED_STATE = -261


class Auth(IntEnum):
    """Security types offered by a server."""

    INVALID = 0
    NONE = 1
    VNC = 2
    RA2 = 5
    RA2NE = 6
    TIGHT = 16
    ULTRA = 17
    TLS = 18
    VENCRYPT = 19
    SASL = 20
    ARD = 30
    MSLOGON = 0xFFFFFFFA


class AuthVencrypt(IntEnum):
    """Sub-types of the VeNCrypt security type."""

    PLAIN = 256
    TLSNONE = 257
    TLSVNC = 258
    TLSPLAIN = 259
    X509NONE = 260
    X509VNC = 261
    X509PLAIN = 262
    X509SASL = 263
    TLSSASL = 264


class Credential(IntEnum):
    """Kinds of credential a server may ask for."""

    PASSWORD = 0
    USERNAME = 1
    CLIENTNAME = 2


def tight_jpeg_encoding(quality: int) -> Encoding:
    """Return the Tight JPEG quality pseudo encoding for ``quality`` (0..9)."""
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise TypeError(f"quality must be an int, got {type(quality).__name__}")
    if not _TIGHT_JPEG_MIN_QUALITY <= quality <= _TIGHT_JPEG_MAX_QUALITY:
        raise ValueError(
            f"quality must be in the range "
            f"{_TIGHT_JPEG_MIN_QUALITY}..{_TIGHT_JPEG_MAX_QUALITY}, got {quality}"
        )
    return Encoding(Encoding.TIGHT_JPEG0 + quality)