"""
HTTP backend package.

Provides one request contract with interchangeable transport implementations.
"""

from .base_client import BaseHTTPClient, Form, Headers, Payload, Query, merge_headers
from .factory import available_backends, create_http_client
from .providers import backend_name, get_backend_friendly_name

__all__ = [
    'BaseHTTPClient',
    'Headers',
    'Query',
    'Form',
    'Payload',
    'merge_headers',
    'create_http_client',
    'available_backends',
    'backend_name',
    'get_backend_friendly_name',
]
