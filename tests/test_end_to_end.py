"""Event bus wired the way an application would wire it."""

from __future__ import annotations

import logging
from typing import Any
from unittest.mock import Mock

from cqrs_ddd_message_bus import (
    CorrelationIdPropagator,
    FinishesHandlingMessageBeforeHandlingNext,
    HandlesRecordedMessagesMiddleware,
    InMemoryServiceLocator,
    LoggingMiddleware,
    MessageBus,
    NamedMessage,
    NamedMessageNameResolver,
    NameBasedSubscriberResolver,
    NotifiesMessageSubscribersMiddleware,
    PublicMessageRecorder,
    ServiceLocatorAwareCallableResolver,
    SubscriberCollection,
    get_correlation_id,
)


class UserRegistered(NamedMessage):
    user_id: str

    @classmethod
    def message_name(cls) -> str:
        return "user_registered"


class WelcomeMailSent(NamedMessage):
    user_id: str

    @classmethod
    def message_name(cls) -> str:
        return "welcome_mail_sent"


class Mailer:
    def __init__(self, bus: MessageBus, calls: list[str]) -> None:
        self._bus = bus
        self._calls = calls

    def send_welcome(self, message: UserRegistered) -> None:
        self._calls.append(f"mail({message.user_id})")
        self._bus.handle(WelcomeMailSent(user_id=message.user_id))


class AuditLog:
    def __init__(self, calls: list[str]) -> None:
        self._calls = calls

    def notify(self, message: Any) -> None:
        self._calls.append(f"audit({type(message).__name__})")


def _build_bus(calls: list[str], locator: InMemoryServiceLocator) -> MessageBus:
    bus = MessageBus()
    collection = SubscriberCollection(
        {
            "user_registered": [
                lambda m: calls.append(f"log({m.user_id})"),
                ("mailer", "send_welcome"),
            ],
            "welcome_mail_sent": ["audit_listener", AuditLog(calls)],
        }
    )
    bus.append_middleware(CorrelationIdPropagator())
    bus.append_middleware(FinishesHandlingMessageBeforeHandlingNext())
    bus.append_middleware(LoggingMiddleware())
    bus.append_middleware(
        NotifiesMessageSubscribersMiddleware(
            NameBasedSubscriberResolver(
                NamedMessageNameResolver(),
                collection,
                ServiceLocatorAwareCallableResolver(locator),
            )
        )
    )
    return bus


def test_registration_logs_mails_then_audits(calls, locator, caplog) -> None:
    caplog.set_level(logging.INFO)
    bus = _build_bus(calls, locator)
    locator.register("mailer", lambda: Mailer(bus, calls))
    locator.register_instance(
        "audit_listener", lambda m: calls.append(f"listener({m.user_id})")
    )

    bus.handle(UserRegistered(user_id="42", correlation_id="corr-1"))

    assert calls == [
        "log(42)",
        "mail(42)",
        "listener(42)",
        "audit(WelcomeMailSent)",
    ]
    assert get_correlation_id() is None
    assert "Handling WelcomeMailSent (correlation_id=corr-1)" in caplog.text


def test_unused_services_are_never_built(calls, locator) -> None:
    bus = _build_bus(calls, locator)
    mailer_factory = Mock()
    locator.register("mailer", mailer_factory)
    locator.register_instance("audit_listener", lambda m: calls.append("listener"))

    bus.handle(WelcomeMailSent(user_id="7"))

    mailer_factory.assert_not_called()
    assert calls == ["listener", "audit(WelcomeMailSent)"]
