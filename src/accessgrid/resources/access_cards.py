"""Access cards resource for the AccessGrid SDK."""
from __future__ import annotations

from typing import Any, List, Optional

from ..models.card import (
    Card,
    CardResponse,
    ListKeysFilter,
    ProvisionCardRequest,
    UpdateCardRequest,
    resolve_card_response,
)
from .base import (
    AsyncBaseResource,
    SyncBaseResource,
    TimeoutTypes,
    build_path,
    coerce_request,
    parse_list,
    parse_model,
)

KEY_CARDS_PATH = "/v1/key-cards"
KEY_CARD_PATH = "/v1/key-cards/{}"
KEY_CARD_ACTION_PATH = "/v1/key-cards/{}/{}"


class AsyncAccessCardsResource(AsyncBaseResource):
    """NFC key and access pass operations (async)."""

    async def provision(
        self,
        request: Optional[ProvisionCardRequest] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> CardResponse:
        """Provision a new card.

        Returns a ``UnifiedAccessPass`` when the account issues multi-device
        passes, otherwise a ``Card``.
        """
        request = coerce_request(ProvisionCardRequest, request, fields)
        data = await self._post(KEY_CARDS_PATH, request.to_dict(), timeout=timeout)
        return resolve_card_response(data)

    async def get(
        self,
        card_id: str,
        timeout: Optional[TimeoutTypes] = None,
    ) -> CardResponse:
        data = await self._get(build_path(KEY_CARD_PATH, card_id), timeout=timeout)
        return resolve_card_response(data)

    async def update(
        self,
        request: Optional[UpdateCardRequest] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> Card:
        request = coerce_request(UpdateCardRequest, request, fields)
        path = build_path(KEY_CARD_PATH, request.card_id)
        data = await self._patch(path, request.to_dict(), timeout=timeout)
        return parse_model(Card, data)

    async def list(
        self,
        filter: Optional[ListKeysFilter] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> List[Card]:
        """List cards, optionally filtered by template, state, employee, card number or site code."""
        filter = coerce_request(ListKeysFilter, filter, fields)
        data = await self._get(KEY_CARDS_PATH, params=filter.to_params(), timeout=timeout)
        return parse_list(Card, data, "keys")

    async def suspend(self, card_id: str, timeout: Optional[TimeoutTypes] = None) -> None:
        await self._action(card_id, "suspend", timeout)

    async def resume(self, card_id: str, timeout: Optional[TimeoutTypes] = None) -> None:
        await self._action(card_id, "resume", timeout)

    async def unlink(self, card_id: str, timeout: Optional[TimeoutTypes] = None) -> None:
        await self._action(card_id, "unlink", timeout)

    async def delete(self, card_id: str, timeout: Optional[TimeoutTypes] = None) -> None:
        await self._action(card_id, "delete", timeout)

    async def _action(self, card_id: str, action: str, timeout: Optional[TimeoutTypes]) -> None:
        # Lifecycle actions always carry an empty JSON object body.
        await self._post(build_path(KEY_CARD_ACTION_PATH, card_id, action), {}, timeout=timeout)


class AccessCardsResource(SyncBaseResource):
    """NFC key and access pass operations."""

    def provision(
        self,
        request: Optional[ProvisionCardRequest] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> CardResponse:
        """Provision a new card.

        Returns a ``UnifiedAccessPass`` when the account issues multi-device
        passes, otherwise a ``Card``.
        """
        request = coerce_request(ProvisionCardRequest, request, fields)
        data = self._post(KEY_CARDS_PATH, request.to_dict(), timeout=timeout)
        return resolve_card_response(data)

    def get(
        self,
        card_id: str,
        timeout: Optional[TimeoutTypes] = None,
    ) -> CardResponse:
        data = self._get(build_path(KEY_CARD_PATH, card_id), timeout=timeout)
        return resolve_card_response(data)

    def update(
        self,
        request: Optional[UpdateCardRequest] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> Card:
        request = coerce_request(UpdateCardRequest, request, fields)
        path = build_path(KEY_CARD_PATH, request.card_id)
        data = self._patch(path, request.to_dict(), timeout=timeout)
        return parse_model(Card, data)

    def list(
        self,
        filter: Optional[ListKeysFilter] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> List[Card]:
        """List cards, optionally filtered by template, state, employee, card number or site code."""
        filter = coerce_request(ListKeysFilter, filter, fields)
        data = self._get(KEY_CARDS_PATH, params=filter.to_params(), timeout=timeout)
        return parse_list(Card, data, "keys")

    def suspend(self, card_id: str, timeout: Optional[TimeoutTypes] = None) -> None:
        self._action(card_id, "suspend", timeout)

    def resume(self, card_id: str, timeout: Optional[TimeoutTypes] = None) -> None:
        self._action(card_id, "resume", timeout)

    def unlink(self, card_id: str, timeout: Optional[TimeoutTypes] = None) -> None:
        self._action(card_id, "unlink", timeout)

    def delete(self, card_id: str, timeout: Optional[TimeoutTypes] = None) -> None:
        self._action(card_id, "delete", timeout)

    def _action(self, card_id: str, action: str, timeout: Optional[TimeoutTypes]) -> None:
        self._post(build_path(KEY_CARD_ACTION_PATH, card_id, action), {}, timeout=timeout)


__all__ = ["AccessCardsResource", "AsyncAccessCardsResource"]
