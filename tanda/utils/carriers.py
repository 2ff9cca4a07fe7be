"""
Carrier detection for Kenyan mobile numbers.
"""

import re

from ..constants import UNKNOWN_PROVIDER, AirtimeProvider, ServiceProvider

# Kenyan numbering plan, with or without the leading 0
SAFARICOM_PATTERN = re.compile(
    r'(?:0)?((?:(?:7(?:(?:[01249][0-9])|(?:5[789])|(?:6[89])))|(?:1(?:[1][0-5])))[0-9]{6})$'
)
AIRTEL_PATTERN = re.compile(
    r'(?:0)?((?:(?:7(?:(?:3[0-9])|(?:5[0-6])|(8[5-9])))|(?:1(?:[0][0-2])))[0-9]{6})$'
)
TELKOM_PATTERN = re.compile(r'(?:0)?(77[0-9][0-9]{6})')
EQUITEL_PATTERN = re.compile(r'0?(76[3-6][0-9]{6})')

# Checked in order, first match wins
_MONEY_PROVIDERS = (
    (SAFARICOM_PATTERN, ServiceProvider.MPESA),
    (AIRTEL_PATTERN, ServiceProvider.AIRTEL_MONEY),
    (TELKOM_PATTERN, ServiceProvider.TKASH),
    (EQUITEL_PATTERN, ServiceProvider.EQUITEL),
)

# Equitel does not sell airtime through Tanda
_AIRTIME_PROVIDERS = (
    (SAFARICOM_PATTERN, AirtimeProvider.SAFARICOM),
    (AIRTEL_PATTERN, AirtimeProvider.AIRTEL),
    (TELKOM_PATTERN, AirtimeProvider.TELKOM),
)


def service_provider(msisdn: str, airtime: bool = False) -> str:
    """
    Detect the carrier of a phone number.

    Args:
        msisdn: Phone number, e.g. 0712345678 or 254712345678
        airtime: Return airtime network codes instead of mobile money codes

    Returns:
        Provider code (e.g. "MPESA", or "SAFARICOM" for airtime), or "0" if
        the number matches no known carrier
    """
    providers = _AIRTIME_PROVIDERS if airtime else _MONEY_PROVIDERS
    for pattern, provider in providers:
        if pattern.search(msisdn):
            return provider.value
    return UNKNOWN_PROVIDER
