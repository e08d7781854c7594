"""Access card models for the AccessGrid SDK."""
from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Any, List, Mapping, Optional, Union

from pydantic import Field, ValidationError

from .base import AccessGridModel
from .errors import DecodeError


class CardState(str, Enum):
    """Lifecycle state of an access card."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    UNLINK = "unlink"
    DELETED = "deleted"


class Card(AccessGridModel):
    """A single provisioned NFC key or access pass."""

    id: Optional[str] = None
    card_template_id: Optional[str] = None
    employee_id: Optional[str] = None
    card_number: Optional[str] = None
    site_code: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    classification: Optional[str] = None
    title: Optional[str] = None
    start_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    employee_photo: Optional[str] = None
    # Kept as text; compare against CardState members.
    state: Optional[str] = None
    install_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def url(self) -> Optional[str]:
        return self.install_url


class UnifiedAccessPass(AccessGridModel):
    """A multi-device access grant wrapping one card record per device."""

    id: Optional[str] = None
    install_url: Optional[str] = None
    state: Optional[str] = None
    status: Optional[str] = None
    template_id: Optional[str] = None
    details: List[Card] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def url(self) -> Optional[str]:
        return self.install_url


CardResponse = Union[Card, UnifiedAccessPass]


class ProvisionCardRequest(AccessGridModel):
    """Request to provision a new card."""

    card_template_id: str
    employee_id: Optional[str] = None
    card_number: Optional[str] = None
    site_code: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    classification: Optional[str] = None
    title: Optional[str] = None
    start_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    employee_photo: Optional[str] = None


class UpdateCardRequest(AccessGridModel):
    """Request to update an existing card.

    ``card_id`` selects the path and is also sent in the body.
    """

    card_id: str
    employee_id: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    classification: Optional[str] = None
    title: Optional[str] = None
    expiration_date: Optional[datetime] = None
    employee_photo: Optional[str] = None


class ListKeysFilter(AccessGridModel):
    """Query filters for listing cards."""

    template_id: Optional[str] = None
    state: Optional[str] = None
    employee_id: Optional[str] = None
    card_number: Optional[str] = None
    site_code: Optional[str] = None


def resolve_card_response(raw: Union[str, bytes, Mapping[str, Any]]) -> CardResponse:
    """Decode a provision/get payload into a Card or a UnifiedAccessPass.

    There is no type tag on the wire. A non-empty ``details`` list means the
    account issues unified access passes; anything else (missing, null, or an
    empty list) is a plain card. A ``details`` value of any other type is
    malformed.

    Raises:
        DecodeError: ``stage`` is ``"peek"`` when the payload is not a JSON
            object or ``details`` is not a list, otherwise the name of the
            shape that failed validation.
    """
    raw_text: Optional[str] = None
    if isinstance(raw, (str, bytes)):
        raw_text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        try:
            payload = json.loads(raw)
        except ValueError as e:
            raise DecodeError(f"Invalid JSON in card response: {e}", stage="peek", raw_body=raw_text) from e
    else:
        payload = raw

    if not isinstance(payload, Mapping):
        raise DecodeError(
            f"Expected a JSON object for card response, got {type(payload).__name__}",
            stage="peek",
            raw_body=raw_text,
        )

    details = payload.get("details")
    if details is not None and not isinstance(details, list):
        raise DecodeError(
            f"Expected a list for card response details, got {type(details).__name__}",
            stage="peek",
            raw_body=raw_text,
        )
    if isinstance(details, list) and len(details) > 0:
        try:
            return UnifiedAccessPass.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(
                f"Error parsing unified access pass: {e}",
                stage="unified_access_pass",
                raw_body=raw_text,
            ) from e

    try:
        return Card.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Error parsing card: {e}", stage="card", raw_body=raw_text) from e


__all__ = [
    "Card",
    "CardResponse",
    "CardState",
    "ListKeysFilter",
    "ProvisionCardRequest",
    "UnifiedAccessPass",
    "UpdateCardRequest",
    "resolve_card_response",
]
