"""
Custom exceptions for Tanda payment operations.
"""


class TandaException(Exception):
    """
    Base exception for all Tanda-related errors.

    Every failure raised by ``TandaClient.call`` is an instance of this class,
    carrying the upstream (or synthesized) HTTP status in ``error_code``.
    """

    def __init__(self, message, error_code=None, response_data=None):
        self.message = message
        self.error_code = error_code
        self.response_data = response_data
        super().__init__(self.message)


class AuthenticationError(TandaException):
    """Raised when an access token cannot be obtained from the Tanda API."""
    pass


class ConfigurationError(TandaException):
    """Raised when there's a configuration issue."""
    pass
