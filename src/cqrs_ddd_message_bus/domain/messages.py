"""Message base classes."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """Optional base class for messages travelling through the bus.

    The bus treats messages as opaque values; any object can be handled.
    Subclassing gives immutability and tracing fields that
    :class:`~cqrs_ddd_message_bus.correlation.CorrelationIdPropagator` and
    :class:`~cqrs_ddd_message_bus.middleware.logging.LoggingMiddleware`
    pick up.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    message_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    correlation_id: str | None = None
    causation_id: str | None = None


class NamedMessage(Message):
    """A message that names itself, for ``NamedMessageNameResolver``.

    Override :meth:`message_name` to decouple the routing key from the
    Python class name::

        class OrderPlaced(NamedMessage):
            order_id: str

            @classmethod
            def message_name(cls) -> str:
                return "order.placed"
    """

    @classmethod
    def message_name(cls) -> str:
        return cls.__name__
