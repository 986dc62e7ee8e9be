"""Message name resolution strategies."""

from __future__ import annotations

import inspect
from typing import Any

from ..ports.naming import IMessageNameResolver
from ..primitives.exceptions import ConfigurationError


class ClassBasedNameResolver(IMessageNameResolver):
    """Names a message after its fully-qualified class.

    Requires no cooperation from the message: ``orders.events.OrderPlaced``.
    """

    def resolve_name(self, message: Any) -> str:
        message_type = type(message)
        return f"{message_type.__module__}.{message_type.__qualname__}"


class NamedMessageNameResolver(IMessageNameResolver):
    """Asks the message type for its name via ``message_name()``.

    Raises
    ------
    ConfigurationError
        If the message type does not implement ``message_name()``, declares
        it as an instance method, or the returned value is not a string.
    """

    def resolve_name(self, message: Any) -> str:
        message_type = type(message)
        declared = inspect.getattr_static(message_type, "message_name", None)
        if declared is None:
            raise ConfigurationError(
                f"{message_type.__qualname__} does not implement message_name(); "
                "it cannot be used with NamedMessageNameResolver"
            )
        if not isinstance(declared, (classmethod, staticmethod)):
            raise ConfigurationError(
                f"{message_type.__qualname__}.message_name must be a classmethod "
                "or staticmethod so it can be called on the type"
            )

        name = message_type.message_name()
        if not isinstance(name, str):
            raise ConfigurationError(
                f"{message_type.__qualname__}.message_name() returned "
                f"{type(name).__name__}, expected str"
            )
        return name
