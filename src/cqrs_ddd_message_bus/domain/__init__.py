"""Domain layer: message base classes and recorders."""

from __future__ import annotations

from .messages import Message, NamedMessage
from .recording import AggregatesRecordedMessages, PublicMessageRecorder

__all__ = [
    "AggregatesRecordedMessages",
    "Message",
    "NamedMessage",
    "PublicMessageRecorder",
]
