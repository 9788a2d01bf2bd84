"""Pytest shared fixtures: an in-memory PingFederate admin API."""
import copy
import json
import pathlib
import sys
from types import SimpleNamespace
from urllib.parse import unquote, urlsplit

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from baton_pingfederate.core.pingfederate import API_PATH, PingFederateClient

BASE_URL = "https://pingfed.example.com:9999"


def sample_accounts():
    return [
        {
            "username": "sam-ng",
            "emailAddress": "sam.ng@example.com",
            "encryptedPassword": "OBF:JWE:sam",
            "phoneNumber": "+1 555 0100",
            "department": "Platform",
            "description": "Platform admin",
            "auditor": False,
            "active": True,
            "roles": ["ADMINISTRATOR", "CRYPTO_ADMINISTRATOR"],
        },
        {
            "username": "kurt-bitner",
            "encryptedPassword": "OBF:JWE:kurt",
            "description": "",
            "auditor": True,
            "active": False,
            "roles": [],
        },
        {
            "username": "lee-chan",
            "emailAddress": "lee.chan@example.com",
            "encryptedPassword": "OBF:JWE:lee",
            "description": "Identity team",
            "auditor": False,
            "active": True,
            "roles": ["USER_ADMINISTRATOR", "EXPRESSION_ADMINISTRATOR"],
        },
    ]


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str = None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


class FakePingFederate:
    """Stand-in for ``requests.Session`` backed by an account store.

    Supports the three admin API calls the connector makes. Overrides set
    through ``fail_next`` are consumed by the next request.
    """

    def __init__(self, accounts):
        self.accounts = {a["username"]: copy.deepcopy(a) for a in accounts}
        self.auth = None
        self.headers = {}
        self.calls = []
        self.closed = False
        self._next = []

    def fail_next(self, response=None, exc: Exception = None):
        self._next.append((response, exc))

    def close(self):
        self.closed = True

    def calls_for(self, method):
        return [c for c in self.calls if c.method == method]

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.calls.append(SimpleNamespace(
            method=method,
            url=url,
            json=copy.deepcopy(json),
            headers=dict(headers or {}),
            timeout=timeout,
        ))
        if self._next:
            response, exc = self._next.pop(0)
            if exc is not None:
                raise exc
            return response

        path = urlsplit(url).path
        assert path.startswith(API_PATH), f"unexpected URL {url}"
        path = path[len(API_PATH):]

        if path == "/administrativeAccounts" and method == "GET":
            return FakeResponse({"items": [copy.deepcopy(a) for a in self.accounts.values()]})

        prefix = "/administrativeAccounts/"
        if path.startswith(prefix):
            user_id = unquote(path[len(prefix):])
            if user_id not in self.accounts:
                return FakeResponse(text=f'{{"resultId":"resource_not_found","message":"{user_id}"}}',
                                    status_code=404)
            if method == "GET":
                return FakeResponse(copy.deepcopy(self.accounts[user_id]))
            if method == "PUT":
                self.accounts[user_id] = copy.deepcopy(json)
                return FakeResponse(copy.deepcopy(json))

        raise AssertionError(f"Unexpected {method} {url}")


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """Fail any real HTTP call from unit tests.

    Integration tests are marked with @pytest.mark.integration and skip this.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _refuse(self, method, url, *args, **kwargs):
        raise RuntimeError(f"Unexpected network access in tests: {method} {url}")

    monkeypatch.setattr(requests.Session, "request", _refuse)


@pytest.fixture()
def pingfed(monkeypatch):
    """In-memory PingFederate; every new client session talks to it."""
    server = FakePingFederate(sample_accounts())
    monkeypatch.setattr(requests, "Session", lambda: server)
    return server


@pytest.fixture()
def client(pingfed):
    return PingFederateClient(BASE_URL, "admin", "2FederateM0re")
