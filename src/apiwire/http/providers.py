"""
Friendly names for HTTP backend classes.
"""
from typing import Callable, Dict, Type

# Registry for backend friendly names
_backend_friendly_names: Dict[Type, str] = {}


def backend_name(friendly_name: str) -> Callable:
    """
    Decorator to assign a friendly name to a backend class.

    Usage:
        @backend_name("requests")
        class RequestsHTTPClient(BaseHTTPClient):
            pass
    """
    def decorator(cls: Type) -> Type:
        _backend_friendly_names[cls] = friendly_name
        return cls
    return decorator


def get_backend_friendly_name(backend_class: Type) -> str:
    """Return the friendly name of a backend class, or its class name if undecorated."""
    return _backend_friendly_names.get(backend_class, backend_class.__name__)
