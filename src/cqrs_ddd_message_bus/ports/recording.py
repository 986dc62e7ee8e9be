"""Message recording protocols."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IContainsRecordedMessages(Protocol):
    """Something holding messages recorded for later dispatch."""

    def recorded_messages(self) -> list[Any]:
        """Return recorded messages in recording order."""
        ...

    def erase_messages(self) -> None:
        """Forget all recorded messages."""
        ...


@runtime_checkable
class IRecordsMessages(IContainsRecordedMessages, Protocol):
    """A recorder that accepts new messages."""

    def record(self, message: Any) -> None: ...
