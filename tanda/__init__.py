"""
Tanda Payment Utility for Django

A reusable client for Tanda mobile money C2B payments.
"""

from .client import TandaClient
from .config import TandaConfig, TandaSettings
from .exceptions import AuthenticationError, ConfigurationError, TandaException
from .models import C2BRequest, TandaFunding
from .services import C2BService
from .utils.carriers import service_provider

__version__ = "0.1.0"

__all__ = [
    'TandaClient',
    'TandaConfig',
    'TandaSettings',
    'C2BService',
    'C2BRequest',
    'TandaFunding',
    'TandaException',
    'AuthenticationError',
    'ConfigurationError',
    'service_provider',
]
