"""HandlesRecordedMessagesMiddleware — dispatch recorded messages afterwards."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.bus import IMessageBus
    from ..ports.recording import IContainsRecordedMessages

logger = logging.getLogger(__name__)


class HandlesRecordedMessagesMiddleware(IMiddleware):
    """Dispatches recorded messages once the current message succeeded.

    Runs the rest of the chain first. On success, the messages collected by
    *recorder* are erased and handed to *bus* one by one. On failure they
    are erased without being dispatched and the error is re-raised.
    """

    def __init__(
        self, recorder: IContainsRecordedMessages, bus: IMessageBus
    ) -> None:
        self._recorder = recorder
        self._bus = bus

    def handle(self, message: Any, next_handler: Callable[[Any], None]) -> None:
        try:
            next_handler(message)
        except Exception:
            self._recorder.erase_messages()
            raise

        recorded = self._recorder.recorded_messages()
        self._recorder.erase_messages()
        if recorded:
            logger.debug(
                "Dispatching %d recorded message(s) after %s",
                len(recorded),
                type(message).__name__,
            )
        for recorded_message in recorded:
            self._bus.handle(recorded_message)
