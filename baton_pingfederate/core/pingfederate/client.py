"""Low-level HTTP client for the PingFederate Admin API.

Handles basic authentication, the CSRF header and JSON marshalling.
"""
from __future__ import annotations
import logging
from typing import Any, Optional

import requests

from .exceptions import (
    ConfigurationError,
    PingFederateAPIError,
    PingFederateDecodeError,
    PingFederateTransportError,
)

logger = logging.getLogger(__name__)

API_PATH = "/pf-admin-api/v1"
REQUEST_TIMEOUT = 5

# PingFederate rejects admin API calls without this header (CSRF protection)
XSRF_HEADER = ("X-XSRF-Header", "PingFederate")


class PingFederateClient:
    """HTTP client for the PingFederate Admin API.

    The transport (a ``requests.Session`` carrying credentials and the fixed
    headers) is created lazily on first use and reused afterwards.

    Usage:
        client = PingFederateClient("https://pingfed:9999", "admin", "secret")
        accounts = client.get("/administrativeAccounts")["items"]
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """Initialize PingFederate client.

        Args:
            base_url: PingFederate base URL, scheme included
            username: Admin account username
            password: Admin account password
            timeout: Per-request timeout in seconds
        """
        self.base_url = (base_url or "").rstrip("/")
        self.username = username
        self.password = password
        self.timeout = timeout
        self._session: Optional[requests.Session] = None
        self.initialized = False

    def initialize(self) -> None:
        """Set up the HTTP transport once.

        Raises:
            ConfigurationError: If no base URL was configured
        """
        if self.initialized:
            logger.debug("PingFederate client already initialized")
            return
        logger.debug("Initializing PingFederate client")

        if not self.base_url:
            raise ConfigurationError("base URL is required")

        session = requests.Session()
        session.auth = (self.username, self.password)
        session.headers.update({
            XSRF_HEADER[0]: XSRF_HEADER[1],
            "Accept": "application/json",
        })
        self._session = session
        self.initialized = True

    def close(self) -> None:
        """Release the HTTP transport; the next request sets it up again."""
        if self._session is not None:
            self._session.close()
        self._session = None
        self.initialized = False

    def __enter__(self) -> "PingFederateClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get(self, path: str) -> Any:
        """Execute GET request and return the decoded JSON body.

        Args:
            path: Path below the admin API root (e.g., "/administrativeAccounts")

        Raises:
            PingFederateTransportError: On network failure
            PingFederateAPIError: On non-200 status
            PingFederateDecodeError: On malformed JSON
        """
        return self._request("GET", path)

    def put(self, path: str, json: Any) -> None:
        """Execute PUT request with a JSON body.

        Args:
            path: Path below the admin API root
            json: Payload to serialize

        Raises:
            PingFederateTransportError: On network failure
            PingFederateAPIError: On non-200 status
        """
        self._request("PUT", path, body=json, decode=False)

    def _request(self, method: str, path: str, body: Any = None, decode: bool = True) -> Any:
        self.initialize()
        url = f"{self.base_url}{API_PATH}{path}"

        headers = {}
        if body is not None:
            headers["Content-Type"] = "application/json"

        try:
            resp = self._session.request(
                method,
                url,
                json=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise PingFederateTransportError(url, exc) from exc

        self._handle_error(resp, url)

        logger.debug(
            "response method=%s path=%s status_code=%s",
            method,
            path,
            resp.status_code,
        )

        if not decode:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise PingFederateDecodeError(url, resp.text) from exc

    def _handle_error(self, resp: requests.Response, url: str) -> None:
        """Centralized error handling for HTTP responses.

        Raises:
            PingFederateAPIError: If status is anything other than 200
        """
        if resp.status_code != 200:
            raise PingFederateAPIError(resp.status_code, resp.text, url)
