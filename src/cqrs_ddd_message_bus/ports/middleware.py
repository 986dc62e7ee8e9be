"""IMiddleware — message bus middleware protocol."""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Protocol,
    runtime_checkable,
)

if TYPE_CHECKING:
    from collections.abc import Callable


@runtime_checkable
class IMiddleware(Protocol):
    """Protocol for a link in the message bus chain.

    Middleware can act before and after the rest of the chain, or
    short-circuit it by never calling *next_handler*.
    The chain runs in append order (first appended = outermost).
    """

    def handle(
        self,
        message: Any,
        next_handler: Callable[[Any], None],
    ) -> None:
        """Handle *message* and call *next_handler* to proceed.

        Parameters
        ----------
        message:
            The message being dispatched (event or command).
        next_handler:
            Callable representing the rest of the chain. A no-op when
            this middleware is the last one.
        """
        ...
