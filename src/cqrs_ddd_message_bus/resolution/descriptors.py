"""Subscriber descriptors — how to obtain a subscriber, before resolution.

Configuration maps message names to *raw* descriptor values. A raw value is
classified into one of four closed variants only when it is first needed:

=====================  ==========================  ===========================
Variant                Raw shape                   Resolves to
=====================  ==========================  ===========================
``DirectSubscriber``   any callable                the callable itself
``ServiceSubscriber``  ``"service_id"``            the located service
``ServiceMethod...``   ``("service_id", "meth")``  a bound method of the service
``NotifySubscriber``   object with ``notify()``    its ``notify`` method
=====================  ==========================  ===========================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from ..primitives.exceptions import UnresolvableSubscriberError


@dataclass(frozen=True)
class DirectSubscriber:
    """A callable used as-is."""

    handle: Any


@dataclass(frozen=True)
class ServiceSubscriber:
    """A service which is itself callable with the message."""

    service_id: str


@dataclass(frozen=True)
class ServiceMethodSubscriber:
    """A named method on a located service."""

    service_id: str
    method: str


@dataclass(frozen=True)
class NotifySubscriber:
    """A legacy subscriber object exposing ``notify(message)``."""

    subscriber: Any


SubscriberDescriptor: TypeAlias = (
    DirectSubscriber | ServiceSubscriber | ServiceMethodSubscriber | NotifySubscriber
)

_VARIANTS = (
    DirectSubscriber,
    ServiceSubscriber,
    ServiceMethodSubscriber,
    NotifySubscriber,
)


def to_descriptor(raw: object) -> SubscriberDescriptor:
    """Classify a raw configuration value into a :data:`SubscriberDescriptor`.

    Already-classified descriptors are returned unchanged.

    Raises
    ------
    UnresolvableSubscriberError
        If *raw* matches none of the supported shapes.
    """
    if isinstance(raw, _VARIANTS):
        return raw
    if isinstance(raw, str):
        return ServiceSubscriber(raw)
    if isinstance(raw, (tuple, list)):
        if len(raw) == 2 and all(isinstance(part, str) for part in raw):
            return ServiceMethodSubscriber(raw[0], raw[1])
        raise UnresolvableSubscriberError(
            raw, "expected a (service_id, method_name) pair of strings"
        )
    if callable(raw):
        return DirectSubscriber(raw)
    if callable(getattr(raw, "notify", None)):
        return NotifySubscriber(raw)
    raise UnresolvableSubscriberError(
        raw,
        "expected a callable, a service id, a (service_id, method) pair "
        "or an object with notify()",
    )
