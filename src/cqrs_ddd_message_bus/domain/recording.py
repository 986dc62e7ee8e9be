"""Message recorders — collect messages now, dispatch them later."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..ports.recording import IContainsRecordedMessages


class PublicMessageRecorder:
    """Records messages for dispatch once the current message is handled.

    Usage::

        recorder = PublicMessageRecorder()
        recorder.record(UserRegistered(user_id="42"))
        recorder.recorded_messages()  # [UserRegistered(...)]
    """

    def __init__(self) -> None:
        self._messages: list[Any] = []

    def record(self, message: Any) -> None:
        """Record a message to be dispatched later."""
        self._messages.append(message)

    def recorded_messages(self) -> list[Any]:
        return list(self._messages)

    def erase_messages(self) -> None:
        self._messages.clear()


class AggregatesRecordedMessages:
    """Exposes the messages of several recorders as one.

    Messages are returned recorder by recorder, in the order the recorders
    were given.
    """

    def __init__(self, recorders: Iterable[IContainsRecordedMessages]) -> None:
        self._recorders = list(recorders)

    def recorded_messages(self) -> list[Any]:
        messages: list[Any] = []
        for recorder in self._recorders:
            messages.extend(recorder.recorded_messages())
        return messages

    def erase_messages(self) -> None:
        for recorder in self._recorders:
            recorder.erase_messages()
