"""
Client configuration.

Values come from an optional YAML file and may be overridden by
environment variables.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "https://api.example.com/v1/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONFIG_PATH = Path("config") / "apiwire.yaml"


@dataclass(frozen=True)
class ClientConfig:
    """Settings fixed for the lifetime of an API client."""
    prefix: str = DEFAULT_PREFIX
    backend: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.debug(f"{path} not found, using defaults")
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load client config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping")
    logger.debug(f"Loaded client config from {path}")
    return data


def load_client_config(path: Optional[str] = None) -> ClientConfig:
    """Load client configuration from YAML and environment variables.

    Args:
        path: YAML file to read; defaults to config/apiwire.yaml in the working directory

    Returns:
        ClientConfig instance

    Raises:
        ConfigurationError: If the file is unreadable or a value is invalid
    """
    data = _load_yaml(Path(path) if path else DEFAULT_CONFIG_PATH)

    prefix = os.getenv("APIWIRE_API_PREFIX", data.get("prefix", DEFAULT_PREFIX))
    backend = os.getenv("APIWIRE_HTTP_BACKEND", data.get("backend"))
    raw_timeout = os.getenv("APIWIRE_TIMEOUT", data.get("timeout", DEFAULT_TIMEOUT))

    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid timeout value: {raw_timeout!r}")
    if timeout <= 0:
        raise ConfigurationError(f"Timeout must be positive, got {timeout}")

    return ClientConfig(prefix=prefix, backend=backend or None, timeout=timeout)
