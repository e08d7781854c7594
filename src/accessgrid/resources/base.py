"""
Base resource classes for the AccessGrid SDK.

This module provides the foundation for all API resource classes,
supporting both synchronous and asynchronous clients.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ..models.errors import DecodeError

if TYPE_CHECKING:
    from ..client import AccessGrid, AsyncAccessGrid

TimeoutTypes = Union[float, httpx.Timeout]

M = TypeVar("M", bound=BaseModel)


def coerce_request(model_cls: Type[M], request: Optional[M], fields: Dict[str, Any]) -> M:
    """Accept either a request model or its fields as keyword arguments."""
    if request is not None:
        if fields:
            raise TypeError(f"Pass either a {model_cls.__name__} or keyword fields, not both")
        return request
    return model_cls(**fields)


def parse_model(model_cls: Type[M], data: Any) -> M:
    """Validate a decoded response body against ``model_cls``.

    Raises:
        DecodeError: If the body does not match the model
    """
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Error parsing {model_cls.__name__}: {e}", stage="response") from e


def parse_list(model_cls: Type[M], data: Any, key: str) -> List[M]:
    """Validate a list response given either as a bare array or as ``{key: [...]}``."""
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get(key) or []
    if not isinstance(data, list):
        raise DecodeError(
            f"Expected a list of {model_cls.__name__}, got {type(data).__name__}",
            stage="response",
        )
    return [parse_model(model_cls, item) for item in data]


def build_path(template: str, *segments: str) -> str:
    """Fill ``{}`` placeholders in ``template`` with escaped path segments.

    Raises:
        ValueError: If any segment is empty
    """
    escaped = []
    for segment in segments:
        if not segment:
            raise ValueError("Resource identifier must be a non-empty string")
        escaped.append(quote(str(segment), safe=""))
    return template.format(*escaped)


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncAccessGrid") -> None:
        self._client = client

    async def _get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Make a GET request.

        Args:
            path: API endpoint path
            params: Query parameters
            timeout: Optional timeout override

        Returns:
            Decoded response body
        """
        return await self._client._request("GET", path, params=params or None, timeout=timeout)

    async def _post(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Make a POST request.

        Args:
            path: API endpoint path
            data: Request body
            timeout: Optional timeout override

        Returns:
            Decoded response body
        """
        return await self._client._request("POST", path, json=data, timeout=timeout)

    async def _put(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Make a PUT request."""
        return await self._client._request("PUT", path, json=data, timeout=timeout)

    async def _patch(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Make a PATCH request."""
        return await self._client._request("PATCH", path, json=data, timeout=timeout)

    async def _delete(
        self,
        path: str,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Make a DELETE request."""
        return await self._client._request("DELETE", path, timeout=timeout)


class SyncBaseResource:
    """Base class for sync API resources.

    Attributes:
        _client: The sync client instance
    """

    def __init__(self, client: "AccessGrid") -> None:
        self._client = client

    def _get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Make a GET request.

        Args:
            path: API endpoint path
            params: Query parameters
            timeout: Optional timeout override

        Returns:
            Decoded response body
        """
        return self._client._request("GET", path, params=params or None, timeout=timeout)

    def _post(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Make a POST request.

        Args:
            path: API endpoint path
            data: Request body
            timeout: Optional timeout override

        Returns:
            Decoded response body
        """
        return self._client._request("POST", path, json=data, timeout=timeout)

    def _put(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Make a PUT request."""
        return self._client._request("PUT", path, json=data, timeout=timeout)

    def _patch(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Make a PATCH request."""
        return self._client._request("PATCH", path, json=data, timeout=timeout)

    def _delete(
        self,
        path: str,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Any:
        """Make a DELETE request."""
        return self._client._request("DELETE", path, timeout=timeout)


__all__ = [
    "AsyncBaseResource",
    "SyncBaseResource",
    "build_path",
    "coerce_request",
    "parse_list",
    "parse_model",
]
