"""MessageBus — ordered middleware chain with a single entry point."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .middleware.pipeline import build_pipeline
from .ports.bus import IMessageBus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports.middleware import IMiddleware

logger = logging.getLogger(__name__)


class MessageBus(IMessageBus):
    """Passes every message through its middlewares, in append order.

    The bus itself knows nothing about subscribers: routing is the job of
    the middlewares it is configured with, typically ending in
    :class:`~.middleware.notification.NotifiesMessageSubscribersMiddleware`
    and guarded by
    :class:`~.middleware.sequential.FinishesHandlingMessageBeforeHandlingNext`.

    Middlewares are configured before the first ``handle()``; changing them
    while a message is in flight is not supported. Errors raised by any
    middleware propagate to the caller of ``handle()`` unchanged.

    Usage::

        bus = MessageBus([
            FinishesHandlingMessageBeforeHandlingNext(),
            NotifiesMessageSubscribersMiddleware(subscriber_resolver),
        ])
        bus.handle(UserRegistered(user_id="42"))
    """

    def __init__(self, middlewares: Iterable[IMiddleware] | None = None) -> None:
        self._middlewares: list[IMiddleware] = list(middlewares or [])

    # ── Configuration ────────────────────────────────────────────

    def append_middleware(self, middleware: IMiddleware) -> None:
        """Add *middleware* as the innermost link of the chain."""
        self._middlewares.append(middleware)
        logger.debug("Appended middleware %s", type(middleware).__name__)

    def prepend_middleware(self, middleware: IMiddleware) -> None:
        """Add *middleware* as the outermost link of the chain."""
        self._middlewares.insert(0, middleware)
        logger.debug("Prepended middleware %s", type(middleware).__name__)

    def get_middlewares(self) -> list[IMiddleware]:
        return list(self._middlewares)

    # ── Dispatching ──────────────────────────────────────────────

    def handle(self, message: Any) -> None:
        """Dispatch *message* through the middleware chain."""
        build_pipeline(self._middlewares)(message)
