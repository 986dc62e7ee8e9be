from __future__ import annotations

from unittest.mock import Mock

import pytest

from cqrs_ddd_message_bus.adapters.memory import InMemoryServiceLocator
from cqrs_ddd_message_bus.ports.service_locator import IServiceLocator
from cqrs_ddd_message_bus.primitives.exceptions import (
    NotFoundError,
    ServiceNotFoundError,
)


def test_locator_implements_port() -> None:
    assert isinstance(InMemoryServiceLocator(), IServiceLocator)


def test_factory_runs_on_first_resolve_only(locator) -> None:
    factory = Mock(return_value=object())
    locator.register("mailer", factory)
    factory.assert_not_called()

    first = locator.resolve("mailer")
    second = locator.resolve("mailer")

    factory.assert_called_once()
    assert first is second


def test_non_shared_service_is_rebuilt(locator) -> None:
    locator.register("mailer", object, shared=False)

    assert locator.resolve("mailer") is not locator.resolve("mailer")


def test_register_instance(locator) -> None:
    service = object()
    locator.register_instance("audit", service)

    assert locator.has("audit")
    assert locator.resolve("audit") is service


def test_re_registering_drops_cached_instance(locator) -> None:
    locator.register_instance("audit", "old")
    locator.register("audit", lambda: "new")

    assert locator.resolve("audit") == "new"


def test_unknown_service_raises(locator) -> None:
    with pytest.raises(ServiceNotFoundError) as exc:
        locator.resolve("missing")

    assert isinstance(exc.value, NotFoundError)
    assert exc.value.service_id == "missing"


def test_clear(locator) -> None:
    locator.register_instance("audit", object())
    locator.clear()

    assert not locator.has("audit")
