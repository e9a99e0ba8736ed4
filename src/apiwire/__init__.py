"""
apiwire: HTTP request layer for REST API clients.

Sends requests through interchangeable HTTP backends while resolving
endpoint paths against a base URL and attaching authorization headers.
"""

from .auth import Token, TokenStore
from .client import APIClient
from .config import ClientConfig, bootstrap_logging, load_client_config
from .exceptions import (
    AuthenticationUnavailableError,
    BackendConfigurationError,
    BodyError,
    ClientError,
    ConfigurationError,
    HTTPStatusError,
    HTTPTransportError,
    PayloadEncodingError,
)
from .http import BaseHTTPClient, available_backends, create_http_client
from .version import __version__

__all__ = [
    'APIClient',
    'ClientConfig',
    'load_client_config',
    'bootstrap_logging',
    'Token',
    'TokenStore',
    'BaseHTTPClient',
    'create_http_client',
    'available_backends',
    'ClientError',
    'HTTPTransportError',
    'HTTPStatusError',
    'BodyError',
    'PayloadEncodingError',
    'AuthenticationUnavailableError',
    'BackendConfigurationError',
    'ConfigurationError',
    '__version__',
]
