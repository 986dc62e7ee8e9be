"""NotifiesMessageSubscribersMiddleware — invokes subscribers in order."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..correlation import get_correlation_id
from ..instrumentation import get_hook_registry
from ..ports.middleware import IMiddleware
from ..utils import describe

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..instrumentation import HookRegistry
    from ..ports.subscribers import ISubscriberResolver, SubscriberHandle

logger = logging.getLogger(__name__)


class NotifiesMessageSubscribersMiddleware(IMiddleware):
    """Hands the message to every interested subscriber, then continues.

    Subscribers run one after another in registration order. The first one
    to raise stops the remaining subscribers and the rest of the chain; the
    error propagates unchanged.
    """

    def __init__(self, subscriber_resolver: ISubscriberResolver) -> None:
        self._subscriber_resolver = subscriber_resolver

    def handle(self, message: Any, next_handler: Callable[[Any], None]) -> None:
        message_type_name = type(message).__name__
        registry = get_hook_registry()
        attributes: dict[str, object] = {
            "message.type": message_type_name,
            "correlation_id": get_correlation_id()
            or getattr(message, "correlation_id", None),
        }

        def _notify_all() -> None:
            handles = self._subscriber_resolver.resolve_subscribers(message)
            for handle in handles:
                self._notify(registry, attributes, handle, message)

        registry.execute_all(
            f"message.notify.{message_type_name}",
            attributes,
            _notify_all,
        )
        next_handler(message)

    def _notify(
        self,
        registry: HookRegistry,
        attributes: dict[str, object],
        handle: SubscriberHandle,
        message: Any,
    ) -> None:
        subscriber_name = describe(handle)
        message_type_name = type(message).__name__

        def _invoke() -> None:
            try:
                handle(message)
            except Exception:
                logger.exception(
                    "Subscriber %s failed for message %s",
                    subscriber_name,
                    message_type_name,
                )
                raise

        registry.execute_all(
            f"subscriber.invoke.{message_type_name}",
            {"subscriber.name": subscriber_name, **attributes},
            _invoke,
        )
