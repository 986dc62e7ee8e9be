from cqrs_ddd_message_bus.ports.bus import IMessageBus
from cqrs_ddd_message_bus.ports.middleware import IMiddleware
from cqrs_ddd_message_bus.ports.naming import IMessageNameResolver, INamedMessage
from cqrs_ddd_message_bus.ports.recording import IContainsRecordedMessages, IRecordsMessages
from cqrs_ddd_message_bus.ports.service_locator import IServiceLocator
from cqrs_ddd_message_bus.ports.subscribers import (
    ICallableResolver,
    IHandlerResolver,
    ISubscriberCollection,
    ISubscriberResolver,
    SubscriberHandle,
)

__all__ = [
    "ICallableResolver",
    "IContainsRecordedMessages",
    "IHandlerResolver",
    "IMessageBus",
    "IMessageNameResolver",
    "IMiddleware",
    "INamedMessage",
    "IRecordsMessages",
    "IServiceLocator",
    "ISubscriberCollection",
    "ISubscriberResolver",
    "SubscriberHandle",
]
