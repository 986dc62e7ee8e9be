"""Message naming protocols."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IMessageNameResolver(Protocol):
    """Strategy deriving the logical name under which subscribers are looked up.

    Two messages that share subscribers must resolve to the same name.
    """

    def resolve_name(self, message: Any) -> str:
        """Return the message name for *message*."""
        ...


@runtime_checkable
class INamedMessage(Protocol):
    """A message type that knows its own name.

    The name belongs to the type, not to the instance.
    """

    @classmethod
    def message_name(cls) -> str: ...
