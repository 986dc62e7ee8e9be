"""Message naming and subscriber resolution."""

from __future__ import annotations

from .callable_resolver import ServiceLocatorAwareCallableResolver
from .collection import SubscriberCollection
from .descriptors import (
    DirectSubscriber,
    NotifySubscriber,
    ServiceMethodSubscriber,
    ServiceSubscriber,
    SubscriberDescriptor,
    to_descriptor,
)
from .handler_map import HandlerMap, NameBasedHandlerResolver
from .name_resolver import ClassBasedNameResolver, NamedMessageNameResolver
from .subscriber_resolver import NameBasedSubscriberResolver

__all__ = [
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
