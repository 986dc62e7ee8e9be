"""Correlation ID management for messages crossing the bus."""

from __future__ import annotations

import dataclasses
import uuid
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)
_causation_id: ContextVar[str | None] = ContextVar("causation_id", default=None)


def get_correlation_id() -> str | None:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


def get_causation_id() -> str | None:
    """Get current causation ID from context."""
    return _causation_id.get()


def set_causation_id(causation_id: str | None) -> None:
    """Set causation ID in context."""
    _causation_id.set(causation_id)


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


class CorrelationIdPropagator:
    """Middleware that carries correlation and causation ids across messages.

    A message handled while a correlation id is active inherits it, so every
    message published by a subscriber shares the id of the message that
    caused it. The ids are set only for the rest of the chain and restored
    afterwards.

    The caller's message is never mutated: pydantic messages are stamped via
    ``model_copy`` and dataclasses via ``dataclasses.replace``. Any other
    message passes through unchanged.
    """

    def __init__(self, correlation_id_key: str = "correlation_id") -> None:
        self._key = correlation_id_key

    def handle(self, message: Any, next_handler: Callable[[Any], None]) -> None:
        existing_correlation = get_correlation_id()
        if existing_correlation and not getattr(message, self._key, None):
            message = self._stamp(message, existing_correlation)

        cid = getattr(message, self._key, None)
        message_id = getattr(message, "message_id", None)
        correlation_token = _correlation_id.set(
            str(cid) if cid else existing_correlation
        )
        causation_token = _causation_id.set(
            str(message_id) if message_id else get_causation_id()
        )
        try:
            next_handler(message)
        finally:
            _causation_id.reset(causation_token)
            _correlation_id.reset(correlation_token)

    def _stamp(self, message: Any, correlation_id: str) -> Any:
        if hasattr(message, "model_copy"):
            return message.model_copy(update={self._key: correlation_id})
        if dataclasses.is_dataclass(message) and not isinstance(message, type):
            field_names = {f.name for f in dataclasses.fields(message) if f.init}
            if self._key in field_names:
                return dataclasses.replace(message, **{self._key: correlation_id})
        return message
