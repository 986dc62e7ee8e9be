from __future__ import annotations

import pytest

from cqrs_ddd_message_bus.adapters.memory import InMemoryServiceLocator
from cqrs_ddd_message_bus.correlation import set_causation_id, set_correlation_id
from cqrs_ddd_message_bus.instrumentation import HookRegistry, set_hook_registry


@pytest.fixture(autouse=True)
def _isolated_context():
    """Reset context-scoped state so tests never see each other's hooks or ids."""
    set_hook_registry(HookRegistry())
    set_correlation_id(None)
    set_causation_id(None)
    yield
    set_hook_registry(HookRegistry())
    set_correlation_id(None)
    set_causation_id(None)


@pytest.fixture()
def calls() -> list[str]:
    """Shared log of subscriber invocations, in call order."""
    return []


@pytest.fixture()
def locator() -> InMemoryServiceLocator:
    return InMemoryServiceLocator()

