"""Configuration and resolution exceptions for cqrs-ddd-message-bus."""

from __future__ import annotations


class MessageBusError(Exception):
    """Root exception for the message bus package."""


class ConfigurationError(MessageBusError):
    """Raised when a message cannot be named under the active naming strategy.

    Usage: ``NamedMessageNameResolver`` raises this when the message type does
    not expose a ``message_name()`` classmethod.
    """


class NotFoundError(MessageBusError):
    """Base class for lookups that found nothing."""


class ServiceNotFoundError(NotFoundError):
    """Raised by a service locator when no service is registered under an id."""

    def __init__(self, service_id: str) -> None:
        self.service_id = service_id
        super().__init__(f"No service registered under id {service_id!r}")


class UnresolvableSubscriberError(MessageBusError):
    """Raised when a subscriber descriptor cannot be turned into a callable.

    Covers locator misses, missing methods on located services and raw
    descriptor values matching none of the supported shapes. Surfaces the
    first time the descriptor is needed, never at configuration time.
    """

    def __init__(self, descriptor: object, reason: str) -> None:
        self.descriptor = descriptor
        self.reason = reason
        super().__init__(f"Could not resolve subscriber {descriptor!r}: {reason}")


class UndefinedHandlerError(NotFoundError):
    """Raised when a command bus has no handler for a message name."""

    def __init__(self, message_name: str) -> None:
        self.message_name = message_name
        super().__init__(f"No handler defined for message {message_name!r}")
