"""Instrumentation hooks wrapped around subscriber notification.

``NotifiesMessageSubscribersMiddleware`` reports two operations:

* ``message.notify.<MessageType>`` around the whole fan-out for a message;
* ``subscriber.invoke.<MessageType>`` around each single subscriber call.

Hooks register against glob patterns of those operation names and run
outermost-first by ascending priority.
"""

from __future__ import annotations

import fnmatch
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable


@runtime_checkable
class InstrumentationHook(Protocol):
    """Protocol for hooks wrapping a notification operation."""

    def __call__(
        self,
        operation: str,
        attributes: dict[str, Any],
        next_handler: Callable[[], Any],
    ) -> Any:
        """Run *next_handler* and return its result."""
        ...


class HookRegistration:
    """A hook bound to the operation patterns it applies to."""

    def __init__(
        self,
        hook: InstrumentationHook,
        *,
        priority: int = 0,
        operations: list[str] | None = None,
    ) -> None:
        self.hook = hook
        self.priority = priority
        self.operations = operations or ["*"]

    def matches(self, operation: str) -> bool:
        return any(fnmatch.fnmatchcase(operation, p) for p in self.operations)


class HookRegistry:
    """Ordered set of hooks consulted by the notification middleware."""

    def __init__(self) -> None:
        self._registrations: list[HookRegistration] = []

    def register(
        self,
        hook: InstrumentationHook,
        *,
        priority: int = 0,
        operations: list[str] | None = None,
    ) -> HookRegistration:
        """Register *hook*; lower priorities wrap higher ones.

        Hooks sharing a priority keep registration order.
        """
        registration = HookRegistration(
            hook, priority=priority, operations=operations
        )
        self._registrations.append(registration)
        self._registrations.sort(key=lambda r: r.priority)
        return registration

    def execute_all(
        self,
        operation: str,
        attributes: dict[str, Any],
        next_handler: Callable[[], Any],
    ) -> Any:
        """Run *next_handler* inside every hook matching *operation*."""
        matching = [r.hook for r in self._registrations if r.matches(operation)]

        def call(index: int) -> Any:
            if index == len(matching):
                return next_handler()
            return matching[index](operation, attributes, lambda: call(index + 1))

        return call(0)

    def clear(self) -> None:
        self._registrations.clear()


_hook_registry_var: ContextVar[HookRegistry | None] = ContextVar(
    "message_bus_hook_registry", default=None
)


def get_hook_registry() -> HookRegistry:
    """Return the registry for the current context, creating it on first use."""
    registry = _hook_registry_var.get()
    if registry is None:
        registry = HookRegistry()
        _hook_registry_var.set(registry)
    return registry


def set_hook_registry(registry: HookRegistry) -> None:
    _hook_registry_var.set(registry)
