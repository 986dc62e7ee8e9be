"""DelegatesToMessageHandlerMiddleware — single-handler command dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.subscribers import IHandlerResolver


class DelegatesToMessageHandlerMiddleware(IMiddleware):
    """Invokes the one handler responsible for the message.

    A missing handler raises
    :class:`~cqrs_ddd_message_bus.primitives.exceptions.UndefinedHandlerError`;
    commands must never go unhandled.
    """

    def __init__(self, handler_resolver: IHandlerResolver) -> None:
        self._handler_resolver = handler_resolver

    def handle(self, message: Any, next_handler: Callable[[Any], None]) -> None:
        handler = self._handler_resolver.resolve_handler(message)
        handler(message)
        next_handler(message)
