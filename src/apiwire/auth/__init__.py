"""
Access token model and storage used by authenticated requests.
"""

from .store import TokenStore
from .token import Token

__all__ = ['Token', 'TokenStore']
