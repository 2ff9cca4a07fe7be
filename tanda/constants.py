"""
Constants and enums for Tanda payment operations.
"""

from enum import Enum


class Mode(str, Enum):
    """Deployment modes, each with its own base URL."""
    UAT = "uat"
    LIVE = "live"


class TokenState(str, Enum):
    """Lifecycle of the client's access token."""
    UNSET = "UNSET"
    PENDING = "PENDING"
    SET = "SET"
    FAILED = "FAILED"


class ServiceProvider(str, Enum):
    """Mobile money providers in Kenya."""
    MPESA = "MPESA"
    AIRTEL_MONEY = "AIRTELMONEY"
    TKASH = "TKASH"
    EQUITEL = "EQUITEL"


class AirtimeProvider(str, Enum):
    """Airtime networks in Kenya."""
    SAFARICOM = "SAFARICOM"
    AIRTEL = "AIRTEL"
    TELKOM = "TELKOM"


# API Endpoints
class APIEndpoints:
    """Tanda API endpoints."""
    GENERATE_TOKEN = "accounts/v1/oauth/token"


# Command sent with every C2B request
C2B_COMMAND_ID = "CustomerPayment"

# Status returned by Tanda when a request is accepted
SUCCESS_STATUS = "000001"

# Returned by carrier detection when no numbering plan matches
UNKNOWN_PROVIDER = "0"

# Any status in this range is a normal response, not a transport failure
ACCEPTED_STATUS_MIN = 200
ACCEPTED_STATUS_MAX = 500

# Minimum length of client credentials
MIN_CREDENTIAL_LENGTH = 5

# Default settings
DEFAULT_MODE = Mode.UAT


class SettingsKeys:
    """Django settings names read by TandaSettings."""
    CLIENT_ID = "TANDA_CLIENT_ID"
    CLIENT_SECRET = "TANDA_CLIENT_SECRET"
    MODE = "TANDA_MODE"
    DEBUG = "TANDA_DEBUG"
    UAT_URL = "TANDA_UAT_URL"
    LIVE_URL = "TANDA_LIVE_URL"


class EnvironmentKeys:
    """Process environment fallbacks when Django is not configured."""
    CLIENT_ID = "TANDA_CLIENT_ID"
    CLIENT_SECRET = "TANDA_CLIENT_SECRET"
    MODE = "TANDA_MODE"
    DEBUG = "TANDA_DEBUG"
    UAT_URL = "UAT_URL"
    LIVE_URL = "PROD_URL"
