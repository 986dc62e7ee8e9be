from __future__ import annotations

from typing import Any

from cqrs_ddd_message_bus.instrumentation import (
    HookRegistry,
    get_hook_registry,
    set_hook_registry,
)


class RecordingHook:
    def __init__(self, name: str, order: list[str]) -> None:
        self._name = name
        self._order = order

    def __call__(
        self,
        _operation: str,
        _attributes: dict[str, Any],
        next_handler: Any,
    ) -> Any:
        self._order.append(f"before:{self._name}")
        result = next_handler()
        self._order.append(f"after:{self._name}")
        return result


def test_hook_registry_executes_in_priority_order() -> None:
    order: list[str] = []
    registry = HookRegistry()
    registry.register(RecordingHook("inner", order), priority=0, operations=["*"])
    registry.register(RecordingHook("outer", order), priority=-10, operations=["*"])

    def _handler() -> str:
        order.append("handler")
        return "ok"

    assert registry.execute_all("message.notify.Sample", {}, _handler) == "ok"
    assert order == [
        "before:outer",
        "before:inner",
        "handler",
        "after:inner",
        "after:outer",
    ]


def test_hooks_with_equal_priority_keep_registration_order() -> None:
    order: list[str] = []
    registry = HookRegistry()
    registry.register(RecordingHook("first", order))
    registry.register(RecordingHook("second", order))

    registry.execute_all("subscriber.invoke.Sample", {}, lambda: None)

    assert order == ["before:first", "before:second", "after:second", "after:first"]


def test_hook_registry_filters_by_operation_pattern() -> None:
    order: list[str] = []
    registry = HookRegistry()
    registry.register(RecordingHook("subscribers", order), operations=["subscriber.*"])

    registry.execute_all("message.notify.Sample", {}, lambda: order.append("h"))

    assert order == ["h"]


def test_context_registry_can_be_replaced() -> None:
    custom = HookRegistry()
    set_hook_registry(custom)

    assert get_hook_registry() is custom


def test_clear_removes_hooks() -> None:
    order: list[str] = []
    registry = HookRegistry()
    registry.register(RecordingHook("x", order))

    registry.clear()
    registry.execute_all("message.notify.Sample", {}, lambda: order.append("h"))

    assert order == ["h"]
