"""
AccessGrid Python SDK client.

Example usage:
    ```python
    from accessgrid import AccessGrid, ProvisionCardRequest

    with AccessGrid(account_id="your-account-id", secret_key="your-secret") as client:
        card = client.access_cards.provision(
            ProvisionCardRequest(
                card_template_id="0xd3adb00b5",
                full_name="Employee name",
                email="employee@example.com",
            )
        )
        print(card.install_url)

    async with AsyncAccessGrid(account_id="...", secret_key="...") as client:
        templates = await client.console.list_templates()
    ```
"""
from __future__ import annotations

import logging
import os
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import httpx

from ._version import __version__
from .models.errors import (
    APIError,
    ConfigurationError,
    ConnectionError,
    DecodeError,
    TimeoutError,
    TransportError,
)
from .resources.access_cards import AccessCardsResource, AsyncAccessCardsResource
from .resources.base import TimeoutTypes
from .resources.console import AsyncConsoleResource, ConsoleResource
from .signing import serialize_body, sign_payload

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.accessgrid.com"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"accessgrid.py @ v{__version__}"

ACCOUNT_ID_HEADER = "X-ACCT-ID"
SIGNATURE_HEADER = "X-PAYLOAD-SIG"


@dataclass(frozen=True)
class ClientConfig:
    """Client configuration, applied once at construction.

    Attributes:
        base_url: API base URL
        timeout: Default request timeout in seconds
        transport: Optional httpx transport override. Pass an
            ``httpx.BaseTransport`` to ``AccessGrid`` and an
            ``httpx.AsyncBaseTransport`` to ``AsyncAccessGrid``.
        headers: Extra static headers sent with every request
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: TimeoutTypes = DEFAULT_TIMEOUT
    transport: Optional[Any] = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Build a config from ``ACCESSGRID_BASE_URL`` and ``ACCESSGRID_TIMEOUT``."""
        env = os.environ if environ is None else environ
        timeout_raw = env.get("ACCESSGRID_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(
                f"ACCESSGRID_TIMEOUT must be a number, got {timeout_raw!r}",
                field="timeout",
            ) from e
        return cls(
            base_url=env.get("ACCESSGRID_BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
        )


class _BaseClient:
    """Credential handling, signing and response normalization shared by both clients."""

    def __init__(
        self,
        account_id: Optional[str],
        secret_key: Optional[str],
        config: Optional[ClientConfig] = None,
    ) -> None:
        if not account_id:
            raise ConfigurationError("account_id is required", field="account_id")
        if not secret_key:
            raise ConfigurationError("secret_key is required", field="secret_key")

        self._config = config or ClientConfig()
        self._account_id = account_id
        self._secret_key = secret_key
        self._base_url = self._config.base_url.rstrip("/")
        self._timeout = self._config.timeout

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def base_url(self) -> str:
        return self._base_url

    @classmethod
    def _credentials_from_env(cls, environ: Optional[Mapping[str, str]]) -> Dict[str, Any]:
        env = os.environ if environ is None else environ
        return {
            "account_id": env.get("ACCESSGRID_ACCOUNT_ID"),
            "secret_key": env.get("ACCESSGRID_SECRET_KEY"),
            "config": ClientConfig.from_env(env),
        }

    def _build_headers(self, content: Optional[bytes]) -> Dict[str, str]:
        headers = dict(self._config.headers)
        headers.update(
            {
                "Content-Type": "application/json",
                ACCOUNT_ID_HEADER: self._account_id,
                "User-Agent": USER_AGENT,
                SIGNATURE_HEADER: sign_payload(self._secret_key, content),
            }
        )
        return headers

    @staticmethod
    def _transport_error(exc: httpx.RequestError, method: str, path: str) -> TransportError:
        if isinstance(exc, httpx.TimeoutException):
            return TimeoutError(f"Request timed out: {method} {path}", method=method, path=path)
        return ConnectionError(f"Error sending request: {method} {path}: {exc}", method=method, path=path)

    @staticmethod
    def _handle_response(response: httpx.Response, method: str, path: str, started: float) -> Any:
        logger.debug(
            "%s %s -> %d (%.1fms)",
            method,
            path,
            response.status_code,
            (time.monotonic() - started) * 1000,
        )
        if response.status_code >= 400:
            raise APIError.from_response(response.status_code, response.text, response.headers)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"Error decoding response for {method} {path}: {e}",
                stage="response",
                raw_body=response.text,
            ) from e


class AccessGrid(_BaseClient):
    """
    Synchronous AccessGrid API client.

    Resources:
    - access_cards: Provision, read, update and manage the lifecycle of cards
    - console: Card templates and event logs

    Args:
        account_id: Account identifier, sent as ``X-ACCT-ID``
        secret_key: Shared secret used to sign request payloads
        config: Optional ClientConfig (base URL, timeout, transport override)

    Raises:
        ConfigurationError: If account_id or secret_key is empty
    """

    def __init__(
        self,
        account_id: Optional[str] = None,
        secret_key: Optional[str] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        super().__init__(account_id, secret_key, config)
        self._client: Optional[httpx.Client] = None
        self._client_lock = threading.Lock()

        self.access_cards = AccessCardsResource(self)
        self.console = ConsoleResource(self)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AccessGrid":
        """Create a client from ``ACCESSGRID_*`` environment variables."""
        return cls(**cls._credentials_from_env(environ))

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        with self._client_lock:
            if self._client is None or self._client.is_closed:
                self._client = httpx.Client(
                    base_url=self._base_url,
                    timeout=self._timeout,
                    transport=self._config.transport,
                )
            return self._client

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Send one signed request and return the decoded JSON body (or None).

        Raises:
            APIError: The API answered with status >= 400
            TransportError: No response was received
            DecodeError: A successful response was not valid JSON
        """
        content = serialize_body(json)
        headers = self._build_headers(content)
        client = self._get_client()

        started = time.monotonic()
        try:
            response = client.request(
                method,
                path,
                params=params,
                content=content,
                headers=headers,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.RequestError as e:
            raise self._transport_error(e, method, path) from e
        return self._handle_response(response, method, path, started)

    def close(self) -> None:
        """Close the HTTP client."""
        with self._client_lock:
            if self._client is not None and not self._client.is_closed:
                self._client.close()
            self._client = None

    def __enter__(self) -> "AccessGrid":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncAccessGrid(_BaseClient):
    """
    Asynchronous AccessGrid API client.

    Same resources and arguments as ``AccessGrid``; every operation is a
    coroutine. Cancelling the awaiting task aborts the in-flight request and
    raises ``asyncio.CancelledError``.
    """

    def __init__(
        self,
        account_id: Optional[str] = None,
        secret_key: Optional[str] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        super().__init__(account_id, secret_key, config)
        self._client: Optional[httpx.AsyncClient] = None

        self.access_cards = AsyncAccessCardsResource(self)
        self.console = AsyncConsoleResource(self)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AsyncAccessGrid":
        """Create a client from ``ACCESSGRID_*`` environment variables."""
        return cls(**cls._credentials_from_env(environ))

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._config.transport,
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Send one signed request and return the decoded JSON body (or None)."""
        content = serialize_body(json)
        headers = self._build_headers(content)
        client = self._get_client()

        started = time.monotonic()
        try:
            response = await client.request(
                method,
                path,
                params=params,
                content=content,
                headers=headers,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.RequestError as e:
            raise self._transport_error(e, method, path) from e
        return self._handle_response(response, method, path, started)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncAccessGrid":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()


__all__ = [
    "AccessGrid",
    "AsyncAccessGrid",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
]
