"""Subscriber resolution protocols."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeAlias, runtime_checkable

SubscriberHandle: TypeAlias = Callable[[Any], Any]
"""A resolved subscriber, ready to receive a message."""


@runtime_checkable
class ICallableResolver(Protocol):
    """Turns a configuration-time descriptor into a :data:`SubscriberHandle`."""

    def resolve(self, descriptor: object) -> SubscriberHandle: ...


@runtime_checkable
class ISubscriberCollection(Protocol):
    """Raw subscriber descriptors grouped by message name."""

    def descriptors_for(self, message_name: str) -> Sequence[object]:
        """Return the descriptors registered for *message_name*, in order.

        Unknown names yield an empty sequence.
        """
        ...


@runtime_checkable
class ISubscriberResolver(Protocol):
    """Answers which handles are interested in a message."""

    def resolve_subscribers(self, message: Any) -> list[SubscriberHandle]: ...


@runtime_checkable
class IHandlerResolver(Protocol):
    """Finds the single handle responsible for a message (command bus)."""

    def resolve_handler(self, message: Any) -> SubscriberHandle: ...
