"""
Root pytest configuration for apiwire.
"""

# Auto-bootstrap logging for all tests
from apiwire.config.logging import bootstrap_logging
bootstrap_logging()
