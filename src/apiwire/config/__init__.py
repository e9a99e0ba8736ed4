"""
Client configuration and logging setup.
"""

from .logging import bootstrap_logging
from .settings import ClientConfig, load_client_config

__all__ = ['ClientConfig', 'load_client_config', 'bootstrap_logging']
