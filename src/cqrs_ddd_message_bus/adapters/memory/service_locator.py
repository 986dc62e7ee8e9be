"""InMemoryServiceLocator — dictionary-backed implementation of IServiceLocator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...ports.service_locator import IServiceLocator
from ...primitives.exceptions import ServiceNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclass
class _Registration:
    factory: Callable[[], Any]
    shared: bool


class InMemoryServiceLocator(IServiceLocator):
    """Builds services from factories the first time they are requested.

    Shared services (the default) are built once and reused. Non-shared
    services are rebuilt on every ``resolve()``.

    Usage::

        locator = InMemoryServiceLocator()
        locator.register("mailer", lambda: Mailer(smtp_host="localhost"))
        locator.register_instance("audit_log", audit_log)
    """

    def __init__(self) -> None:
        self._registrations: dict[str, _Registration] = {}
        self._instances: dict[str, Any] = {}

    def register(
        self,
        service_id: str,
        factory: Callable[[], Any],
        *,
        shared: bool = True,
    ) -> None:
        """Register a zero-argument *factory* under *service_id*."""
        self._registrations[service_id] = _Registration(factory, shared)
        self._instances.pop(service_id, None)

    def register_instance(self, service_id: str, instance: object) -> None:
        """Register a ready-made *instance* under *service_id*."""
        self._registrations[service_id] = _Registration(lambda: instance, True)
        self._instances[service_id] = instance

    def has(self, service_id: str) -> bool:
        return service_id in self._registrations

    def resolve(self, service_id: str) -> object:
        registration = self._registrations.get(service_id)
        if registration is None:
            raise ServiceNotFoundError(service_id)

        if not registration.shared:
            return registration.factory()

        if service_id not in self._instances:
            logger.debug("Instantiating service %r", service_id)
            self._instances[service_id] = registration.factory()
        return self._instances[service_id]

    def clear(self) -> None:
        """Remove all registrations (testing utility)."""
        self._registrations.clear()
        self._instances.clear()
