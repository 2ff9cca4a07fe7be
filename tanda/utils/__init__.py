"""
Utility modules for Tanda payment operations.
"""

from .http_client import HTTPClient
from .carriers import service_provider

__all__ = [
    'HTTPClient',
    'service_provider',
]
