from __future__ import annotations

from dataclasses import dataclass

import pytest

from cqrs_ddd_message_bus.domain.messages import NamedMessage
from cqrs_ddd_message_bus.primitives.exceptions import ConfigurationError
from cqrs_ddd_message_bus.resolution.name_resolver import (
    ClassBasedNameResolver,
    NamedMessageNameResolver,
)


@dataclass
class UserRegistered:
    user_id: str


class OrderPlaced(NamedMessage):
    order_id: str

    @classmethod
    def message_name(cls) -> str:
        return "order.placed"


class PlainNamed:
    @classmethod
    def message_name(cls) -> str:
        return "plain.named"


class BrokenNamed:
    @classmethod
    def message_name(cls) -> object:
        return 42


class InstanceNamed:
    def message_name(self) -> str:
        return "instance.named"


class AutoNamed(NamedMessage):
    pass


def test_class_based_resolver_uses_fully_qualified_name() -> None:
    resolver = ClassBasedNameResolver()

    assert resolver.resolve_name(UserRegistered("1")) == (
        f"{__name__}.UserRegistered"
    )


def test_class_based_resolver_is_stable_across_instances() -> None:
    resolver = ClassBasedNameResolver()

    assert resolver.resolve_name(UserRegistered("1")) == resolver.resolve_name(
        UserRegistered("2")
    )


def test_class_based_resolver_distinguishes_same_short_name() -> None:
    resolver = ClassBasedNameResolver()

    class UserRegistered:  # shadows the module-level class on purpose
        pass

    assert resolver.resolve_name(UserRegistered()) != resolver.resolve_name(
        globals()["UserRegistered"]("1")
    )


def test_named_resolver_returns_message_name_unchanged() -> None:
    resolver = NamedMessageNameResolver()

    assert resolver.resolve_name(OrderPlaced(order_id="1")) == "order.placed"
    assert resolver.resolve_name(PlainNamed()) == "plain.named"


def test_named_message_defaults_to_class_name() -> None:
    assert NamedMessageNameResolver().resolve_name(AutoNamed()) == "AutoNamed"


def test_named_resolver_rejects_unnamed_message() -> None:
    resolver = NamedMessageNameResolver()

    with pytest.raises(ConfigurationError, match="does not implement message_name"):
        resolver.resolve_name(UserRegistered("1"))


def test_named_resolver_rejects_non_string_name() -> None:
    with pytest.raises(ConfigurationError, match="expected str"):
        NamedMessageNameResolver().resolve_name(BrokenNamed())


def test_named_resolver_rejects_instance_method_name() -> None:
    with pytest.raises(ConfigurationError, match="must be a classmethod"):
        NamedMessageNameResolver().resolve_name(InstanceNamed())
