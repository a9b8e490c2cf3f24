"""Narration playback resources."""

from __future__ import annotations

from .channel import (
    NarrationChannel,
    NarrationHandle,
    NarrationState,
    RecordingSynthesizer,
    SpeechSynthesizer,
    StreamSynthesizer,
)

__all__ = [
    "NarrationChannel",
    "NarrationHandle",
    "NarrationState",
    "RecordingSynthesizer",
    "SpeechSynthesizer",
    "StreamSynthesizer",
]
