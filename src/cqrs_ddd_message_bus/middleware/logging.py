"""LoggingMiddleware — logs message handling details."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("cqrs_ddd.message_bus")


class LoggingMiddleware(IMiddleware):
    """Logs message handling — name, duration, correlation_id."""

    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level

    def handle(self, message: Any, next_handler: Callable[[Any], None]) -> None:
        msg_name = type(message).__name__
        correlation_id = getattr(message, "correlation_id", None)
        logger.log(
            self._level,
            "Handling %s (correlation_id=%s)",
            msg_name,
            correlation_id,
        )
        start = time.perf_counter()
        try:
            next_handler(message)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception("%s failed after %.2fms", msg_name, elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        logger.log(self._level, "%s handled in %.2fms", msg_name, elapsed)
