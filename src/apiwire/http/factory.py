"""HTTP backend factory with configuration-driven selection.

Backends are listed in providers.yaml by dotted class path and imported on
demand, so an application only needs the transport library it selects.
"""

import importlib
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..exceptions import BackendConfigurationError
from .base_client import BaseHTTPClient

logger = logging.getLogger(__name__)

BACKEND_ENV_VAR = "APIWIRE_HTTP_BACKEND"

_providers_config: Optional[Dict[str, Any]] = None


def _load_providers_config() -> Dict[str, Any]:
    """Load backend configuration from providers.yaml."""
    global _providers_config
    if _providers_config is not None:
        return _providers_config

    providers_file = Path(__file__).parent / "providers.yaml"
    try:
        with open(providers_file, 'r') as f:
            _providers_config = yaml.safe_load(f) or {}
        logger.debug(f"Loaded providers config from {providers_file}")
        return _providers_config
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load providers config from {providers_file}: {e}")
        raise BackendConfigurationError(f"Could not load HTTP backend configuration: {e}") from e


def available_backends() -> List[str]:
    """Return the names of all configured backends."""
    return sorted(_load_providers_config().get('providers', {}).keys())


def default_backend() -> str:
    """Return the backend used when none is requested explicitly."""
    return os.environ.get(BACKEND_ENV_VAR) or _load_providers_config().get('default_provider', 'httpx')


def create_http_client(backend: Optional[str] = None, **kwargs: Any) -> BaseHTTPClient:
    """Create an HTTP backend by name.

    Args:
        backend: Backend name from providers.yaml; defaults to the
            APIWIRE_HTTP_BACKEND environment variable, then default_provider
        **kwargs: Passed to the backend constructor (timeout, default_headers, ...)

    Returns:
        New BaseHTTPClient instance

    Raises:
        BackendConfigurationError: If the backend is unknown or cannot be imported
    """
    backend = backend or default_backend()
    providers = _load_providers_config().get('providers', {})

    if backend not in providers:
        raise BackendConfigurationError(
            f"Unknown HTTP backend: {backend}. Available: {available_backends()}"
        )

    class_path = providers[backend]['class']
    module_path, class_name = class_path.rsplit('.', 1)

    try:
        module = importlib.import_module(module_path)
        backend_class = getattr(module, class_name)
    except (ImportError, AttributeError) as e:
        logger.error(f"Failed to load {backend} backend from {class_path}: {e}")
        raise BackendConfigurationError(f"Could not load HTTP backend {backend}: {e}") from e

    logger.debug(f"Creating HTTP backend of type: {backend}")
    return backend_class(**kwargs)
