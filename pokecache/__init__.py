"""An in-memory, capacity-bounded Pokemon cache with a WSGI HTTP interface."""

__version__ = "0.1.0"
__all__ = ["app", "cache", "models", "server"]