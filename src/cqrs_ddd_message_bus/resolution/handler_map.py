"""HandlerMap — exactly one handler per message name (command bus)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.subscribers import IHandlerResolver
from ..primitives.exceptions import UndefinedHandlerError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..ports.naming import IMessageNameResolver
    from ..ports.subscribers import ICallableResolver, SubscriberHandle

logger = logging.getLogger(__name__)


class HandlerMap:
    """Maps each message name to a single raw handler descriptor.

    Descriptors take the same shapes as subscriber descriptors and are
    resolved lazily through the given callable resolver.
    """

    def __init__(
        self,
        handlers_by_name: Mapping[str, object],
        callable_resolver: ICallableResolver,
    ) -> None:
        self._descriptors: dict[str, object] = dict(handlers_by_name)
        self._callable_resolver = callable_resolver

    def handler_for(self, message_name: str) -> SubscriberHandle:
        """Resolve the handler registered for *message_name*.

        Raises
        ------
        UndefinedHandlerError
            If no handler was registered under *message_name*.
        """
        if message_name not in self._descriptors:
            raise UndefinedHandlerError(message_name)
        return self._callable_resolver.resolve(self._descriptors[message_name])

    def has_handler(self, message_name: str) -> bool:
        return message_name in self._descriptors


class NameBasedHandlerResolver(IHandlerResolver):
    """Resolves the handler for a message through its name."""

    def __init__(
        self, name_resolver: IMessageNameResolver, handler_map: HandlerMap
    ) -> None:
        self._name_resolver = name_resolver
        self._handler_map = handler_map

    def resolve_handler(self, message: Any) -> SubscriberHandle:
        message_name = self._name_resolver.resolve_name(message)
        logger.debug("Resolving handler for %s", message_name)
        return self._handler_map.handler_for(message_name)
