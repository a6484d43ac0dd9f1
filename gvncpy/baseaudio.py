"""Audio sink that forwards playback events to connected handlers."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from .audiosample import AudioSample


class AudioSignal(str, Enum):
    """Events emitted by :class:`BaseAudio`."""

    PLAYBACK_START = "vnc-audio-playback-start"
    PLAYBACK_STOP = "vnc-audio-playback-stop"
    PLAYBACK_DATA = "vnc-audio-playback-data"


Handler = Callable[..., Any]


class BaseAudio:
    """Generic audio object; handlers receive the audio object then the event data."""

    def __init__(self) -> None:
        self._handlers: dict[AudioSignal, list[Handler]] = {sig: [] for sig in AudioSignal}

    def connect(self, signal: AudioSignal | str, handler: Handler) -> None:
        """Register ``handler`` to be called when ``signal`` is emitted."""
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handlers[AudioSignal(signal)].append(handler)

    def disconnect(self, signal: AudioSignal | str, handler: Handler) -> None:
        """Remove a handler previously connected to ``signal``."""
        try:
            self._handlers[AudioSignal(signal)].remove(handler)
        except ValueError:
            raise ValueError(f"handler not connected to {AudioSignal(signal).value}") from None

    def _emit(self, signal: AudioSignal, *args: Any) -> None:
        for handler in list(self._handlers[signal]):
            handler(self, *args)

    def playback_start(self, format: Any) -> bool:
        """Announce that playback begins in ``format``."""
        self._emit(AudioSignal.PLAYBACK_START, format)
        return True

    def playback_stop(self) -> bool:
        """Announce that playback has stopped."""
        self._emit(AudioSignal.PLAYBACK_STOP)
        return True

    def playback_data(self, sample: AudioSample) -> bool:
        """Deliver a sample of audio data."""
        self._emit(AudioSignal.PLAYBACK_DATA, sample)
        return True