"""build_pipeline — construct the middleware continuation chain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ..ports.middleware import IMiddleware


def _no_op(_message: Any) -> None:
    return None


def build_pipeline(
    middlewares: Sequence[IMiddleware],
) -> Callable[[Any], None]:
    """Build a chain whose entry point runs the first middleware.

    Continuations are created lazily: the *next_handler* given to middleware
    N is only turned into a call of middleware N+1 when invoked. The last
    middleware receives a no-op. The sequence is snapshotted, so later
    changes to *middlewares* do not affect the returned chain.
    """
    chain = tuple(middlewares)

    def continuation(index: int) -> Callable[[Any], None]:
        if index >= len(chain):
            return _no_op
        middleware = chain[index]

        def _next(message: Any) -> None:
            middleware.handle(message, continuation(index + 1))

        return _next

    return continuation(0)
