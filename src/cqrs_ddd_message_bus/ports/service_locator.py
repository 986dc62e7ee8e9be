"""IServiceLocator — lazy lookup of services by identifier."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IServiceLocator(Protocol):
    """Protocol for the container handing out subscriber services.

    Implementations raise
    :class:`~cqrs_ddd_message_bus.primitives.exceptions.ServiceNotFoundError`
    for unknown identifiers.
    """

    def resolve(self, service_id: str) -> object:
        """Return the service registered under *service_id*."""
        ...
