"""
HTTP client for Tanda API communication.
"""

import requests
import logging
from typing import Any, Dict, Optional
from tanda.constants import ACCEPTED_STATUS_MIN, ACCEPTED_STATUS_MAX

logger = logging.getLogger(__name__)


class HTTPClient:
    """
    HTTP client wrapper for Tanda API requests.
    Handles dispatch, status acceptance and logging.

    Any status between ``ACCEPTED_STATUS_MIN`` and ``ACCEPTED_STATUS_MAX``
    (inclusive) is returned as a normal response. Anything else raises
    ``requests.HTTPError`` with the response attached. Transport errors from
    ``requests`` propagate unchanged.
    """

    SUPPORTED_METHODS = ("GET", "POST")

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        debug: bool = False,
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Base URL for API requests
            session: Session to send requests with (a new one by default)
            timeout: Request timeout in seconds (no timeout by default)
            debug: Whether to log request and response payloads
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.debug = debug
        self.session = session if session is not None else requests.Session()

    def _get_full_url(self, endpoint: str) -> str:
        """Get full URL for endpoint."""
        if endpoint.startswith(('http://', 'https://')):
            return endpoint
        endpoint = endpoint.lstrip('/')
        return f"{self.base_url}/{endpoint}"

    def _log_request(self, method: str, url: str, headers: Dict, payload: Any = None):
        """Log API request details."""
        logger.info(f"Tanda API Request: {method} {url}")
        logger.debug(f"Headers: {self._sanitize_headers(headers)}")
        if payload is not None and self.debug:
            logger.debug(f"Payload: {payload}")

    def _log_response(self, response: requests.Response):
        """Log API response details."""
        logger.info(f"Tanda API Response: {response.status_code}")
        if self.debug:
            logger.debug(f"Response: {response.text}")

    def _sanitize_headers(self, headers: Dict) -> Dict:
        """Remove sensitive data from headers for logging."""
        sanitized = dict(headers)
        if 'Authorization' in sanitized:
            sanitized['Authorization'] = 'Bearer ***'
        return sanitized

    @staticmethod
    def is_accepted(status_code: int) -> bool:
        return ACCEPTED_STATUS_MIN <= status_code <= ACCEPTED_STATUS_MAX

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Handle API response and extract data.

        Args:
            response: Response object from requests

        Returns:
            Decoded JSON body, or the raw text when the body is not JSON

        Raises:
            requests.HTTPError: If the status is outside the accepted range
        """
        self._log_response(response)

        if not self.is_accepted(response.status_code):
            raise requests.HTTPError(
                f"Unaccepted status {response.status_code} for {response.url}",
                response=response,
            )

        try:
            return response.json()
        except ValueError:
            return response.text

    def request(self, method: str, endpoint: str, **options) -> Any:
        """
        Make a request to the API.

        Args:
            method: HTTP method (GET or POST)
            endpoint: API endpoint path, or an absolute URL
            **options: Keyword arguments for ``requests.Session.request``
                (json, data, params, headers, auth)

        Returns:
            Response data

        Raises:
            ValueError: If the method is not supported
            requests.RequestException: If the request fails
        """
        method = method.upper()
        if method not in self.SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = self._get_full_url(endpoint)
        headers = options.get('headers') or {}
        self._log_request(method, url, headers, options.get('json', options.get('data')))

        options.setdefault('timeout', self.timeout)
        response = self.session.request(method, url, **options)
        return self._handle_response(response)

    def close(self):
        """Close the session."""
        self.session.close()
