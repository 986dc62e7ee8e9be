"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    MessageBusError,
    NotFoundError,
    ServiceNotFoundError,
    UndefinedHandlerError,
    UnresolvableSubscriberError,
)

__all__ = [
    "ConfigurationError",
    "MessageBusError",
    "NotFoundError",
    "ServiceNotFoundError",
    "UndefinedHandlerError",
    "UnresolvableSubscriberError",
]
