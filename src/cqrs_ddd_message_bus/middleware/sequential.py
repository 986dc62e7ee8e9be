"""FinishesHandlingMessageBeforeHandlingNext — re-entrancy guard."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class FinishesHandlingMessageBeforeHandlingNext(IMiddleware):
    """Finishes handling one message before the next one starts.

    Messages handed to the bus while another message is still travelling
    down the chain (for instance, published by one of its subscribers) are
    queued instead of handled recursively. The outermost call drains the
    queue in FIFO order once the current message is done, so every message
    reaches all of its subscribers before any message it caused.

    If handling a message raises, draining stops and the error propagates
    to the outermost caller. Messages still queued stay pending and are
    handled, ahead of the new message, on the next call to ``handle()``.

    Instances hold per-bus state: give each bus its own guard, and place it
    before any middleware that should see the sequential order.
    """

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()
        self._is_handling = False

    @property
    def is_handling(self) -> bool:
        """``True`` while a message is draining through the chain."""
        return self._is_handling

    @property
    def pending_messages(self) -> list[Any]:
        """Messages waiting for their turn, oldest first."""
        return list(self._queue)

    def handle(self, message: Any, next_handler: Callable[[Any], None]) -> None:
        self._queue.append(message)

        if self._is_handling:
            logger.debug(
                "Queued %s until the current message is handled (%d pending)",
                type(message).__name__,
                len(self._queue),
            )
            return

        self._is_handling = True
        try:
            while self._queue:
                next_handler(self._queue.popleft())
        except Exception:
            if self._queue:
                logger.warning(
                    "Message handling failed; %d queued message(s) left pending",
                    len(self._queue),
                )
            raise
        finally:
            self._is_handling = False
