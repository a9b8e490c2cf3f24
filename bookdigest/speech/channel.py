"""Single-owner narration channel.

There is only one narration at a time per process. Starting a new one cancels
whatever is playing (last request wins), and every operation is routed through
the handle returned by :meth:`NarrationChannel.start`, so a consumer holding a
stale handle cannot pause or stop someone else's narration.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol, TextIO

from loguru import logger


class SpeechSynthesizer(Protocol):
    """Platform text-to-speech backend."""

    def speak(self, text: str, on_end: Callable[[], None]) -> None:
        """Start speaking ``text``; call ``on_end`` when playback finishes."""
        ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...

    def cancel(self) -> None: ...


class NarrationState(str, Enum):
    SPEAKING = "speaking"
    PAUSED = "paused"
    FINISHED = "finished"
    CANCELLED = "cancelled"


class NarrationHandle:
    """Owner token for one narration started on a channel."""

    def __init__(self, channel: "NarrationChannel", narration_id: int, text: str) -> None:
        self._channel = channel
        self.narration_id = narration_id
        self.text = text
        self.state = NarrationState.SPEAKING

    @property
    def is_current(self) -> bool:
        return self._channel.current is self

    @property
    def active(self) -> bool:
        return self.state in {NarrationState.SPEAKING, NarrationState.PAUSED}

    @property
    def paused(self) -> bool:
        return self.state is NarrationState.PAUSED

    def pause(self) -> bool:
        return self._channel._pause(self)

    def resume(self) -> bool:
        return self._channel._resume(self)

    def toggle_pause(self) -> bool:
        """Flip between paused and speaking; returns the new paused flag."""

        if self.paused:
            self.resume()
        else:
            self.pause()
        return self.paused

    def stop(self) -> bool:
        return self._channel._stop(self)


class NarrationChannel:
    """Process-wide narration resource with acquire/cancel semantics."""

    def __init__(self, synthesizer: SpeechSynthesizer) -> None:
        self._synthesizer = synthesizer
        self._lock = threading.RLock()
        self._current: NarrationHandle | None = None
        self._next_id = 0

    @property
    def current(self) -> NarrationHandle | None:
        return self._current

    def start(self, text: str) -> NarrationHandle:
        """Cancel any in-flight narration and start speaking ``text``."""

        with self._lock:
            self._cancel_locked(reason="superseded")
            self._next_id += 1
            handle = NarrationHandle(self, self._next_id, text)
            self._current = handle
            logger.debug("Starting narration #{} ({} chars)", handle.narration_id, len(text))
            self._synthesizer.speak(text, lambda: self._finished(handle))
            return handle

    def cancel(self) -> None:
        """Stop whatever is playing; used when the document, style or view changes."""

        with self._lock:
            self._cancel_locked(reason="cancelled")

    def _cancel_locked(self, *, reason: str) -> None:
        handle = self._current
        if handle is None:
            return
        self._current = None
        if handle.active:
            logger.debug("Narration #{} {}", handle.narration_id, reason)
            handle.state = NarrationState.CANCELLED
            self._synthesizer.cancel()

    def _pause(self, handle: NarrationHandle) -> bool:
        with self._lock:
            if handle is not self._current or handle.state is not NarrationState.SPEAKING:
                return False
            self._synthesizer.pause()
            handle.state = NarrationState.PAUSED
            return True

    def _resume(self, handle: NarrationHandle) -> bool:
        with self._lock:
            if handle is not self._current or handle.state is not NarrationState.PAUSED:
                return False
            self._synthesizer.resume()
            handle.state = NarrationState.SPEAKING
            return True

    def _stop(self, handle: NarrationHandle) -> bool:
        with self._lock:
            if handle is not self._current:
                return False
            self._cancel_locked(reason="stopped")
            return True

    def _finished(self, handle: NarrationHandle) -> None:
        with self._lock:
            if handle.active:
                handle.state = NarrationState.FINISHED
            if handle is self._current:
                self._current = None
                logger.debug("Narration #{} finished", handle.narration_id)


@dataclass(slots=True)
class RecordingSynthesizer:
    """In-memory synthesizer that records calls instead of producing audio."""

    spoken: list[str] = field(default_factory=list)
    events: list[str] = field(default_factory=list)
    _on_end: Callable[[], None] | None = None

    def speak(self, text: str, on_end: Callable[[], None]) -> None:
        self.spoken.append(text)
        self.events.append("speak")
        self._on_end = on_end

    def pause(self) -> None:
        self.events.append("pause")

    def resume(self) -> None:
        self.events.append("resume")

    def cancel(self) -> None:
        self.events.append("cancel")
        self._on_end = None

    def finish(self) -> None:
        """Simulate the platform reporting the end of playback."""

        callback, self._on_end = self._on_end, None
        if callback is not None:
            callback()


class StreamSynthesizer:
    """Writes the narration script to a text stream, e.g. for piping into ``say``."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def speak(self, text: str, on_end: Callable[[], None]) -> None:
        self._stream.write(text + "\n")
        self._stream.flush()
        on_end()

    def pause(self) -> None:
        pass

    def resume(self) -> None:
        pass

    def cancel(self) -> None:
        pass


__all__ = [
    "StreamSynthesizer",
    "NarrationChannel",
    "NarrationHandle",
    "NarrationState",
    "RecordingSynthesizer",
    "SpeechSynthesizer",
]
