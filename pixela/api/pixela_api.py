# pixela/api/pixela_api.py

# SECTION: MODULE DOCSTRING
"""Synchronous HTTP transport for the pixe.la API.

Requests always carry the current user token in ``X-USER-TOKEN`` and return
the raw response body. Non-2xx statuses are not raised; callers decode the
body and check its ``isSuccess`` flag.
"""

# SECTION: IMPORTS
from __future__ import annotations

import json
from types import TracebackType
from typing import Any, TypeAlias

import httpx
from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pixela.api.endpoints import PixelaEndpoints
from pixela.helpers._logger import log

# SECTION: TYPE ALIASES
PixelaPayload: TypeAlias = dict[str, Any]

# SECTION: CONSTANTS
DEFAULT_BASE_URL: str = "https://pixe.la"
DEFAULT_API_VERSION: str = "v1"
DEFAULT_TIMEOUT: float = 30.0
TOKEN_HEADER: str = "X-USER-TOKEN"

# SECTION: CONFIGURATION MODEL


# KLASS: PixelaConfig
class PixelaConfig(BaseSettings):
    """Pydantic settings model for pixe.la API configuration."""

    pixela_username: str = Field(..., description="pixe.la username")
    pixela_token: SecretStr = Field(..., description="pixe.la user token")
    pixela_base_url: str = Field(DEFAULT_BASE_URL, description="pixe.la host")
    pixela_api_version: str = Field(DEFAULT_API_VERSION, description="API version path segment")
    pixela_timeout: float = Field(DEFAULT_TIMEOUT, description="Request timeout in seconds")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# SECTION: API CLIENT CLASS


# KLASS: PixelaAPI
class PixelaAPI:
    """Blocking transport issuing one request per call against pixe.la."""

    # FUNC: __init__
    def __init__(
        self,
        username: str | None = None,
        token: str | None = None,
        config: PixelaConfig | None = None,
        base_url: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the transport with credentials and configuration.

        Args:
            username: pixe.la username. Overrides the config value.
            token: pixe.la user token. Overrides the config value.
            config: Settings object; loaded from the environment when needed.
            base_url: Override the host (default ``https://pixe.la``).
            api_version: Override the API version segment (default ``v1``).
            timeout: Override the request timeout in seconds.
            transport: Custom httpx transport, mainly for tests.

        Raises:
            ValueError: If credentials are incomplete and no configuration
                could be loaded from the environment.
        """
        log.debug("Initializing PixelaAPI client...")
        if config is None and (username is None or token is None):
            try:
                config = PixelaConfig()
                log.debug("Loaded PixelaConfig from environment.")
            except ValidationError as e:
                log.error(f"Failed to load PixelaConfig from environment: {e}")
                raise ValueError("pixe.la credentials not provided and failed to load from .env") from e

        self.username: str = username if username is not None else config.pixela_username
        self._token: str = token if token is not None else config.pixela_token.get_secret_value()
        if base_url is None:
            base_url = config.pixela_base_url if config else DEFAULT_BASE_URL
        if api_version is None:
            api_version = config.pixela_api_version if config else DEFAULT_API_VERSION
        if timeout is None:
            timeout = config.pixela_timeout if config else DEFAULT_TIMEOUT
        self.base_url: str = base_url
        self.api_version: str = api_version
        self.timeout: float = timeout

        self.endpoints = PixelaEndpoints(self.base_url, self.api_version, self.username)

        self._transport = transport
        self._http_client: httpx.Client | None = None
        log.info(f"PixelaAPI client initialized for user '{self.username}'.")

    # FUNC: token
    @property
    def token(self) -> str:
        """The token sent with every subsequent request."""
        return self._token

    # FUNC: set_token
    def set_token(self, token: str) -> None:
        """Replace the user token used for all later requests.

        Requests already sent keep the header they were built with.
        """
        self._token = token
        log.debug(f"Token replaced for user '{self.username}' ({token[:4]}...).")

    # FUNC: get_http_client (Lazy initialization of httpx client)
    def get_http_client(self) -> httpx.Client:
        """Returns the httpx.Client instance, creating it if necessary."""
        if self._http_client is None or self._http_client.is_closed:
            log.debug("Creating new httpx.Client instance.")
            self._http_client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._http_client

    # FUNC: close
    def close(self) -> None:
        """Closes the underlying httpx client."""
        if self._http_client is not None and not self._http_client.is_closed:
            log.debug("Closing httpx.Client.")
            self._http_client.close()
        self._http_client = None

    def __enter__(self) -> PixelaAPI:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # FUNC: _headers
    def _headers(self, with_body: bool) -> dict[str, str]:
        headers = {TOKEN_HEADER: self._token}
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    # FUNC: _request
    def _request(self, method: str, url: str, payload: PixelaPayload | None = None) -> str:
        """Send one request and return the response body as text.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            url: Fully-qualified endpoint URL.
            payload: JSON body for POST/PUT. ``None`` sends no body.

        Returns:
            The response body, whatever the status code.

        Raises:
            httpx.RequestError: On network-level failures (DNS, connect, timeout).
        """
        headers = self._headers(with_body=method in ("POST", "PUT"))
        content = json.dumps(payload) if payload is not None else None
        client = self.get_http_client()
        log.debug(f"Request: {method} {url}, payload keys: {sorted(payload) if payload else []}")

        try:
            response = client.request(method, url, content=content, headers=headers)
        except httpx.RequestError as err:
            log.error(f"Network error for {method} {url}: {err}")
            raise

        log.debug(f"Response: {response.status_code} {response.reason_phrase}")
        if response.is_error:
            log.warning(f"HTTP {response.status_code} for {method} {url}: {response.text[:200]}")
        return response.text

    # --- HTTP Method Helpers ---

    # FUNC: get
    def get(self, url: str) -> str:
        """Make a GET request and return the body text."""
        return self._request("GET", url)

    # FUNC: post
    def post(self, url: str, payload: PixelaPayload | None = None) -> str:
        """Make a POST request with an optional JSON payload."""
        return self._request("POST", url, payload)

    # FUNC: put
    def put(self, url: str, payload: PixelaPayload | None = None) -> str:
        """Make a PUT request with an optional JSON payload."""
        return self._request("PUT", url, payload)

    # FUNC: delete
    def delete(self, url: str) -> str:
        """Make a DELETE request and return the body text."""
        return self._request("DELETE", url)
