"""
Centralized logging configuration.

bootstrap_logging() configures logging from a logging.ini file using
Python's native INI format, with a LOG_LEVEL environment override.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the current working directory, then falls back
    to the copy shipped with the package.
    """
    for candidate in (Path('logging.ini'), Path(__file__).parent / 'logging.ini'):
        if candidate.exists():
            return candidate
    return None


def _get_log_level() -> str:
    log_level = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in LOG_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        return 'INFO'
    return log_level


def bootstrap_logging(name: Optional[str] = None) -> None:
    """
    Bootstrap logging configuration for the application.

    Loads logging.ini with logging.config.fileConfig() and then applies the
    LOG_LEVEL environment variable to the root logger and its stream handlers.

    Args:
        name: Optional logger name to report the configuration on
    """
    level = _get_log_level()
    config_path = _find_logging_config()

    if config_path is None:
        logging.basicConfig(
            level=level,
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr
        )
        return

    try:
        logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
    except (OSError, ValueError, KeyError) as e:
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        logging.basicConfig(
            level=level,
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr
        )
        return

    if 'LOG_LEVEL' in os.environ:
        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setLevel(level)
        logging.getLogger('apiwire').setLevel(level)

    logging.getLogger(name).debug(f"Logging configured from {config_path}")

