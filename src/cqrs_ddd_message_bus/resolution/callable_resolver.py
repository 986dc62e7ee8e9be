"""ServiceLocatorAwareCallableResolver — descriptor to handle resolution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..ports.subscribers import ICallableResolver
from ..primitives.exceptions import NotFoundError, UnresolvableSubscriberError
from .descriptors import (
    DirectSubscriber,
    NotifySubscriber,
    ServiceMethodSubscriber,
    ServiceSubscriber,
    to_descriptor,
)

if TYPE_CHECKING:
    from ..ports.service_locator import IServiceLocator
    from ..ports.subscribers import SubscriberHandle

logger = logging.getLogger(__name__)


class ServiceLocatorAwareCallableResolver(ICallableResolver):
    """Resolves descriptors to handles, locating services on demand.

    The locator is only consulted for ``ServiceSubscriber`` and
    ``ServiceMethodSubscriber``. Handles are resolved fresh on every call, so
    non-shared services are honoured.

    Parameters
    ----------
    service_locator:
        Optional :class:`~cqrs_ddd_message_bus.ports.service_locator.IServiceLocator`.
        Without one, service descriptors are unresolvable.
    """

    def __init__(self, service_locator: IServiceLocator | None = None) -> None:
        self._service_locator = service_locator

    def resolve(self, descriptor: object) -> SubscriberHandle:
        resolved = to_descriptor(descriptor)

        if isinstance(resolved, DirectSubscriber):
            if not callable(resolved.handle):
                raise UnresolvableSubscriberError(
                    descriptor,
                    f"handle ({type(resolved.handle).__name__}) is not callable",
                )
            return resolved.handle  # type: ignore[no-any-return]

        if isinstance(resolved, NotifySubscriber):
            notify = getattr(resolved.subscriber, "notify", None)
            if not callable(notify):
                raise UnresolvableSubscriberError(
                    descriptor,
                    f"subscriber ({type(resolved.subscriber).__name__}) "
                    "has no callable notify()",
                )
            return notify  # type: ignore[no-any-return]

        if isinstance(resolved, ServiceSubscriber):
            service = self._locate(descriptor, resolved.service_id)
            if not callable(service):
                raise UnresolvableSubscriberError(
                    descriptor,
                    f"service {resolved.service_id!r} "
                    f"({type(service).__name__}) is not callable",
                )
            return service

        if isinstance(resolved, ServiceMethodSubscriber):
            service = self._locate(descriptor, resolved.service_id)
            method = getattr(service, resolved.method, None)
            if not callable(method):
                raise UnresolvableSubscriberError(
                    descriptor,
                    f"service {resolved.service_id!r} "
                    f"({type(service).__name__}) has no method {resolved.method!r}",
                )
            return method  # type: ignore[no-any-return]

        raise UnresolvableSubscriberError(descriptor, "unsupported descriptor")

    def _locate(self, descriptor: object, service_id: str) -> object:
        if self._service_locator is None:
            raise UnresolvableSubscriberError(
                descriptor, "no service locator configured"
            )
        try:
            service = self._service_locator.resolve(service_id)
        except NotFoundError as exc:
            raise UnresolvableSubscriberError(descriptor, str(exc)) from exc
        logger.debug("Located service %r for subscriber", service_id)
        return service
