"""IMessageBus — entry point protocol for dispatching messages."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IMessageBus(Protocol):
    """
    Interface for handing a message to the dispatch pipeline.
    """

    def handle(self, message: Any) -> None: ...
