"""Error models for the AccessGrid SDK."""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from .._version import __version__

REQUEST_ID_HEADER = "X-Request-ID"


class AccessGridError(Exception):
    """Base exception for the AccessGrid SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "ACCESSGRID_ERROR"
        self.details = details or {}
        self.request_id = request_id

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "request_id": self.request_id,
            }
        }


class ConfigurationError(AccessGridError, ValueError):
    """Raised when a client is constructed with missing credentials."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details={"field": field})
        self.field = field


class TransportError(AccessGridError):
    """The request never produced an HTTP response.

    The underlying ``httpx`` exception is always chained as ``__cause__``.
    """

    def __init__(self, message: str, code: Optional[str] = None, method: str = "", path: str = ""):
        super().__init__(message, code=code or "TRANSPORT_ERROR", details={"method": method, "path": path})
        self.method = method
        self.path = path


class ConnectionError(TransportError):  # noqa: A001
    """Network failure (DNS, refused connection, protocol error)."""

    def __init__(self, message: str, method: str = "", path: str = ""):
        super().__init__(message, code="CONNECTION_ERROR", method=method, path=path)


class TimeoutError(TransportError):  # noqa: A001
    """The request did not complete before its deadline."""

    def __init__(self, message: str, method: str = "", path: str = ""):
        super().__init__(message, code="TIMEOUT", method=method, path=path)


class DecodeError(AccessGridError):
    """A successful response did not match the expected shape.

    ``stage`` names the parse that failed: ``"response"`` for the transport's
    JSON decode, ``"peek"`` for the card/unified-pass discriminant check, and
    ``"card"`` or ``"unified_access_pass"`` for the full decode.
    """

    def __init__(self, message: str, stage: str, raw_body: Optional[str] = None):
        super().__init__(message, code="DECODE_ERROR", details={"stage": stage})
        self.stage = stage
        self.raw_body = raw_body


class APIError(AccessGridError):
    """Error response (status >= 400) returned by the AccessGrid API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        request_id: Optional[str] = None,
        raw_body: str = "",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code or "API_ERROR", details, request_id)
        self.status_code = status_code
        self.raw_body = raw_body

    @property
    def retryable(self) -> bool:
        """Whether the failure is transient. Informational only, nothing retries."""
        return self.status_code == 429 or self.status_code >= 500

    def __str__(self) -> str:
        msg = f"accessgrid.py v{__version__}: API error (status {self.status_code}): {self.message}"
        if self.request_id:
            msg += f" (request ID: {self.request_id})"
        return msg

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "APIError":
        """Build the error for a failed response.

        The message prefers the body's ``message`` field, then ``error``, then
        the raw body text. The request ID prefers the body's ``request_id``
        field, then the ``X-Request-ID`` response header.
        """
        message = body
        request_id = None
        try:
            parsed = json.loads(body)
        except ValueError:
            parsed = None
        if isinstance(parsed, dict):
            if isinstance(parsed.get("message"), str) and parsed["message"]:
                message = parsed["message"]
            elif isinstance(parsed.get("error"), str) and parsed["error"]:
                message = parsed["error"]
            if isinstance(parsed.get("request_id"), str) and parsed["request_id"]:
                request_id = parsed["request_id"]
        if request_id is None and headers is not None:
            request_id = headers.get(REQUEST_ID_HEADER) or None

        error_cls: type[APIError] = cls
        extra: dict[str, Any] = {}
        if status_code in (401, 403):
            error_cls = AuthenticationError
        elif status_code == 404:
            error_cls = NotFoundError
        elif status_code == 429:
            error_cls = RateLimitError
            extra["retry_after"] = _parse_retry_after(headers)
        return error_cls(
            message=message,
            status_code=status_code,
            request_id=request_id,
            raw_body=body,
            **extra,
        )


class AuthenticationError(APIError):
    """Invalid account ID, secret key, or signature."""

    def __init__(self, message: str = "Invalid credentials or signature", status_code: int = 401, **kwargs: Any):
        kwargs.setdefault("code", "AUTHENTICATION_ERROR")
        super().__init__(message, status_code, **kwargs)


class NotFoundError(APIError):
    """Requested card or template does not exist."""

    def __init__(self, message: str = "Resource not found", status_code: int = 404, **kwargs: Any):
        kwargs.setdefault("code", "NOT_FOUND")
        super().__init__(message, status_code, **kwargs)


class RateLimitError(APIError):
    """Rate limit exceeded error."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        status_code: int = 429,
        retry_after: Optional[int] = None,
        **kwargs: Any,
    ):
        kwargs.setdefault("code", "RATE_LIMIT_EXCEEDED")
        kwargs.setdefault("details", {"retry_after": retry_after})
        super().__init__(message, status_code, **kwargs)
        self.retry_after = retry_after


def _parse_retry_after(headers: Optional[Mapping[str, str]]) -> Optional[int]:
    if headers is None:
        return None
    value = headers.get("Retry-After")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
