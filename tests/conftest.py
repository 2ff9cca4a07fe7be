"""
Pytest configuration and fixtures.
"""
import json
import threading
from types import SimpleNamespace

import django
import pytest
import requests
from django.conf import settings

from tanda.client import TandaClient
from tanda.config import TandaSettings
from tanda.constants import APIEndpoints

UAT_URL = "https://uat.tanda.test"
LIVE_URL = "https://live.tanda.test"
TOKEN = "tanda_tok_abc"


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["tanda"],
            USE_TZ=True,
        )
        django.setup()


def make_response(status_code=200, json_data=None, text=None, reason="OK"):
    """Build a real requests.Response with the given body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    if json_data is not None:
        response._content = json.dumps(json_data).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    return response


class FakeSession:
    """
    Stand-in for requests.Session that routes requests by URL suffix.

    A route handler is a Response, an exception instance (raised), or a
    callable taking (method, url, kwargs) and returning either.
    """

    def __init__(self):
        self.calls = []
        self.routes = {}
        self.closed = False
        self._lock = threading.Lock()

    def add(self, endpoint, handler):
        self.routes[endpoint] = handler
        return self

    def request(self, method, url, **kwargs):
        with self._lock:
            self.calls.append(SimpleNamespace(method=method, url=url, kwargs=kwargs))

        for endpoint, handler in self.routes.items():
            if url.endswith(endpoint):
                if callable(handler) and not isinstance(handler, requests.Response):
                    handler = handler(method, url, kwargs)
                if isinstance(handler, Exception):
                    raise handler
                handler.url = url
                return handler

        raise AssertionError(f"Unexpected request: {method} {url}")

    def calls_to(self, endpoint):
        return [call for call in self.calls if call.url.endswith(endpoint)]

    def close(self):
        self.closed = True


@pytest.fixture
def tanda_settings():
    return TandaSettings(
        client_id="client-123",
        client_secret="secret-123",
        mode="uat",
        debug=False,
        base_urls={"uat": UAT_URL, "live": LIVE_URL},
    )


@pytest.fixture
def session():
    return FakeSession().add(
        APIEndpoints.GENERATE_TOKEN,
        lambda method, url, kwargs: make_response(200, {"access_token": TOKEN, "expires_in": "3599"}),
    )


@pytest.fixture
def client(tanda_settings, session):
    """Client whose access token has already been obtained."""
    client = TandaClient(settings=tanda_settings, session=session, wait_for_token=True)
    yield client
    client.close()
