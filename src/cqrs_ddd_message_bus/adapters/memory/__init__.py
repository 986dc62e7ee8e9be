from .service_locator import InMemoryServiceLocator

__all__ = [
    "InMemoryServiceLocator",
]
