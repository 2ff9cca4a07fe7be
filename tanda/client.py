"""
Authenticated client for the Tanda API.
Handles configuration, access token acquisition and request dispatch.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import requests

from .config import TandaConfig, TandaSettings, normalize_keys
from .constants import APIEndpoints, TokenState
from .exceptions import AuthenticationError, TandaException
from .utils.http_client import HTTPClient

logger = logging.getLogger(__name__)


class TandaClient:
    """
    Client for interacting with the Tanda API.

    On construction the client validates its configuration and starts
    fetching an OAuth 2.0 access token (client credentials flow) in the
    background. It does not wait for the token unless ``wait_for_token`` is
    set: calls made before the token arrives are sent without an
    ``Authorization`` header. Use ``ready()`` to wait for the token
    explicitly.

    The token is fetched once and never refreshed.

    Usage:
        ```python
        client = TandaClient({"mode": "live"})
        client.ready()
        result = client.call("io/v2/organizations/ORG/requests", {"json": payload})
        ```
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        *,
        settings: Optional[TandaSettings] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        wait_for_token: bool = False,
    ):
        """
        Initialize the client and start token acquisition.

        Args:
            config: Configuration overriding the defaults (mode, client_id,
                client_secret, debug)
            settings: Source of default configuration and base URLs
                (Django settings / environment by default)
            session: requests session to send requests with
            timeout: Request timeout in seconds (no timeout by default)
            wait_for_token: Block until the access token has been fetched

        Raises:
            ConfigurationError: If the merged configuration is invalid or no
                base URL is configured for the mode
            TandaException: If ``wait_for_token`` is set and the token fetch
                fails
        """
        self.settings = settings if settings is not None else TandaSettings()
        self.config = TandaConfig.parse({**self.settings.defaults(), **normalize_keys(config)})
        self.base_url = self.settings.get_base_url(self.config.mode)

        self.http_client = HTTPClient(
            self.base_url,
            session=session,
            timeout=timeout,
            debug=self.config.debug,
        )

        self._access_token: Optional[str] = None
        self._token_state = TokenState.UNSET
        self._token_future = self._start_token_acquisition()

        if wait_for_token:
            try:
                self.ready()
            except Exception:
                self.close()
                raise

    @property
    def access_token(self) -> Optional[str]:
        """Current access token, or None if it has not been obtained."""
        return self._access_token

    @property
    def token_state(self) -> TokenState:
        return self._token_state

    def _start_token_acquisition(self) -> Future:
        """Run the token fetch on a background thread without waiting for it."""
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="tanda-token")
        self._token_state = TokenState.PENDING
        try:
            return executor.submit(self._acquire_token)
        finally:
            executor.shutdown(wait=False)

    def _acquire_token(self) -> str:
        try:
            token = self._generate_access_token()
        except Exception as e:
            self._token_state = TokenState.FAILED
            logger.error(f"Failed to obtain Tanda access token: {str(e)}")
            raise

        self._access_token = token
        self._token_state = TokenState.SET
        logger.info("Successfully obtained Tanda access token")
        return token

    def _generate_access_token(self) -> str:
        """
        Generate an OAuth 2.0 access token from the Tanda API.

        Returns:
            Access token string

        Raises:
            AuthenticationError: If the response carries no access token
            TandaException: If the request fails
        """
        logger.info("Generating new Tanda access token")

        options = {
            'auth': (self.config.client_id, self.config.client_secret),
            'headers': {'Content-Type': 'application/x-www-form-urlencoded'},
            'data': urlencode({'grant_type': 'client_credentials'}),
        }
        response = self.call(APIEndpoints.GENERATE_TOKEN, options, "POST")

        token = response.get('access_token') if isinstance(response, dict) else None
        if not token:
            raise AuthenticationError(
                "Token generation failed: No access_token in response",
                response_data=response,
            )
        return token

    def ready(self, timeout: Optional[float] = None) -> str:
        """
        Wait for the background token fetch to finish.

        Args:
            timeout: Seconds to wait (forever by default)

        Returns:
            The access token

        Raises:
            TandaException: If the token fetch failed
            concurrent.futures.TimeoutError: If the fetch is still running
                after ``timeout`` seconds
        """
        return self._token_future.result(timeout=timeout)

    def call(
        self,
        url: str,
        options: Optional[Mapping[str, Any]] = None,
        method: str = "POST",
    ) -> Any:
        """
        Make an API call to the Tanda platform.

        The access token is attached as a bearer token if one is available
        at call time.

        Args:
            url: Endpoint path (relative to the base URL) or absolute URL
            options: requests keyword arguments (json, data, params,
                headers, auth)
            method: "POST" or "GET"

        Returns:
            Decoded response body

        Raises:
            TandaException: If the request fails
        """
        request_options: Dict[str, Any] = dict(options or {})
        headers = dict(request_options.get('headers') or {})
        if self._access_token:
            headers['Authorization'] = f"Bearer {self._access_token}"
        request_options['headers'] = headers

        try:
            return self.http_client.request(method, url, **request_options)
        except Exception as e:
            self._handle_error(e)

    def _handle_error(self, error: Exception):
        """
        Convert a request failure into a TandaException.

        Raises:
            TandaException: Always
        """
        if isinstance(error, requests.HTTPError) and error.response is not None:
            response = error.response
            raise TandaException(
                f"Tanda APIs Error: {self._upstream_message(response)}",
                error_code=response.status_code,
                response_data=response.text,
            ) from error

        if isinstance(error, (requests.ConnectionError, requests.Timeout)):
            raise TandaException("Tanda APIs: Gateway Timeout", error_code=504) from error

        raise TandaException(f"Tanda APIs: {str(error)}", error_code=500) from error

    @staticmethod
    def _upstream_message(response: requests.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get('message'):
            return str(data['message'])
        return response.reason or f"HTTP {response.status_code}"

    def close(self):
        """Close the underlying session."""
        self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
