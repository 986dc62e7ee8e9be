"""Common utility functions and helpers."""

from __future__ import annotations

from typing import Any


def describe(obj: Any) -> str:
    """Return a short human-readable name for a callable or object."""
    name = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None)
    if name is not None:
        return str(name)
    return type(obj).__name__
