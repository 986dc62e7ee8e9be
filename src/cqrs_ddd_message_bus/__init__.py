"""cqrs-ddd-message-bus — synchronous in-process message bus.

Messages pass through an ordered middleware chain and reach the subscribers
registered for their name. Subscribers are resolved lazily, so services that
are never notified are never built.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryServiceLocator
from .correlation import (
    CorrelationIdPropagator,
    generate_correlation_id,
    get_causation_id,
    get_correlation_id,
    set_causation_id,
    set_correlation_id,
)

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    AggregatesRecordedMessages,
    Message,
    NamedMessage,
    PublicMessageRecorder,
)
from .instrumentation import (
    HookRegistration,
    HookRegistry,
    InstrumentationHook,
    get_hook_registry,
    set_hook_registry,
)

# ── Bus & Middleware ─────────────────────────────────────────────
from .message_bus import MessageBus
from .middleware import (
    DelegatesToMessageHandlerMiddleware,
    FinishesHandlingMessageBeforeHandlingNext,
    HandlesRecordedMessagesMiddleware,
    LoggingMiddleware,
    NotifiesMessageSubscribersMiddleware,
    build_pipeline,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import (
    ICallableResolver,
    IContainsRecordedMessages,
    IHandlerResolver,
    IMessageBus,
    IMessageNameResolver,
    IMiddleware,
    INamedMessage,
    IRecordsMessages,
    IServiceLocator,
    ISubscriberCollection,
    ISubscriberResolver,
    SubscriberHandle,
)

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    ConfigurationError,
    MessageBusError,
    NotFoundError,
    ServiceNotFoundError,
    UndefinedHandlerError,
    UnresolvableSubscriberError,
)

# ── Resolution ───────────────────────────────────────────────────
from .resolution import (
    ClassBasedNameResolver,
    DirectSubscriber,
    HandlerMap,
    NameBasedHandlerResolver,
    NameBasedSubscriberResolver,
    NamedMessageNameResolver,
    NotifySubscriber,
    ServiceLocatorAwareCallableResolver,
    ServiceMethodSubscriber,
    ServiceSubscriber,
    SubscriberCollection,
    SubscriberDescriptor,
    to_descriptor,
)

__all__ = [
    # Adapters
    "InMemoryServiceLocator",
    # Correlation
    "CorrelationIdPropagator",
    "generate_correlation_id",
    "get_causation_id",
    "get_correlation_id",
    "set_causation_id",
    "set_correlation_id",
    # Domain
    "AggregatesRecordedMessages",
    "Message",
    "NamedMessage",
    "PublicMessageRecorder",
    # Instrumentation
    "HookRegistration",
    "HookRegistry",
    "InstrumentationHook",
    "get_hook_registry",
    "set_hook_registry",
    # Bus & Middleware
    "DelegatesToMessageHandlerMiddleware",
    "FinishesHandlingMessageBeforeHandlingNext",
    "HandlesRecordedMessagesMiddleware",
    "LoggingMiddleware",
    "MessageBus",
    "NotifiesMessageSubscribersMiddleware",
    "build_pipeline",
    # Ports
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
    # Primitives
    "ConfigurationError",
    "MessageBusError",
    "NotFoundError",
    "ServiceNotFoundError",
    "UndefinedHandlerError",
    "UnresolvableSubscriberError",
    # Resolution
    "ClassBasedNameResolver",
    "DirectSubscriber",
    "HandlerMap",
    "NameBasedHandlerResolver",
    "NameBasedSubscriberResolver",
    "NamedMessageNameResolver",
    "NotifySubscriber",
    "ServiceLocatorAwareCallableResolver",
    "ServiceMethodSubscriber",
    "ServiceSubscriber",
    "SubscriberCollection",
    "SubscriberDescriptor",
    "to_descriptor",
]
