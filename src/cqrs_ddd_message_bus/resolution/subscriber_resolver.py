"""NameBasedSubscriberResolver — message to ordered subscriber handles."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.subscribers import ISubscriberResolver

if TYPE_CHECKING:
    from ..ports.naming import IMessageNameResolver
    from ..ports.subscribers import (
        ICallableResolver,
        ISubscriberCollection,
        SubscriberHandle,
    )

logger = logging.getLogger(__name__)


class NameBasedSubscriberResolver(ISubscriberResolver):
    """Names the message, looks up its descriptors and resolves each one.

    Handles come back in registration order: later subscribers may rely on
    the side effects of earlier ones.
    """

    def __init__(
        self,
        name_resolver: IMessageNameResolver,
        collection: ISubscriberCollection,
        callable_resolver: ICallableResolver,
    ) -> None:
        self._name_resolver = name_resolver
        self._collection = collection
        self._callable_resolver = callable_resolver

    def resolve_subscribers(self, message: Any) -> list[SubscriberHandle]:
        message_name = self._name_resolver.resolve_name(message)
        descriptors = self._collection.descriptors_for(message_name)
        if not descriptors:
            logger.debug("No subscribers for %s", message_name)
            return []
        return [self._callable_resolver.resolve(d) for d in descriptors]
