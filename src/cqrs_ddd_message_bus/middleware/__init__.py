"""Middleware components."""

from .delegation import DelegatesToMessageHandlerMiddleware
from .logging import LoggingMiddleware
from .notification import NotifiesMessageSubscribersMiddleware
from .pipeline import build_pipeline
from .recorded_messages import HandlesRecordedMessagesMiddleware
from .sequential import FinishesHandlingMessageBeforeHandlingNext

__all__ = [
    "DelegatesToMessageHandlerMiddleware",
    "FinishesHandlingMessageBeforeHandlingNext",
    "HandlesRecordedMessagesMiddleware",
    "LoggingMiddleware",
    "NotifiesMessageSubscribersMiddleware",
    "build_pipeline",
]
