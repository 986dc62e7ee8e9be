"""SubscriberCollection — raw subscriber descriptors keyed by message name."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..ports.subscribers import ISubscriberCollection

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


class SubscriberCollection(ISubscriberCollection):
    """Holds, per message name, an ordered list of raw subscriber descriptors.

    Descriptors are stored exactly as configured. Nothing is resolved or
    validated here, so building the collection never instantiates a service;
    see :class:`~.callable_resolver.ServiceLocatorAwareCallableResolver`.

    Usage::

        collection = SubscriberCollection({
            "user_registered": [
                log_registration,                   # callable
                "mailer",                           # service id
                ("audit_log", "on_user_registered"),  # service id + method
            ],
        })
    """

    def __init__(
        self, subscribers_by_name: Mapping[str, Iterable[object]] | None = None
    ) -> None:
        self._descriptors: dict[str, list[object]] = {}
        for message_name, descriptors in (subscribers_by_name or {}).items():
            self._descriptors[message_name] = list(descriptors)

    # ── Registration ─────────────────────────────────────────────

    def subscribe(self, message_name: str, descriptor: object) -> None:
        """Append a descriptor for *message_name* (configuration time only)."""
        self._descriptors.setdefault(message_name, []).append(descriptor)
        logger.debug("Registered subscriber %r for %s", descriptor, message_name)

    # ── Lookup ───────────────────────────────────────────────────

    def descriptors_for(self, message_name: str) -> list[object]:
        return list(self._descriptors.get(message_name, []))

    # ── Introspection ────────────────────────────────────────────

    def message_names(self) -> list[str]:
        """Return every message name with at least one registration."""
        return list(self._descriptors.keys())
