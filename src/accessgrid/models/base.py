"""Base model for the AccessGrid SDK."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict


def format_rfc3339(value: datetime) -> str:
    """Format a datetime as RFC3339 with seconds precision.

    Naive datetimes are taken to be UTC. UTC is rendered with a ``Z`` suffix.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


class AccessGridModel(BaseModel):
    """Base for request and response payloads.

    Unknown response fields are ignored so newer API versions keep decoding.
    Request models serialize through ``to_dict`` (JSON bodies) or
    ``to_params`` (query strings); both leave out fields that were never set.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready body, dropping unset fields."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_params(self) -> dict[str, str]:
        """Query parameters for the set, non-empty fields. Dates are RFC3339."""
        params: dict[str, str] = {}
        for key, value in self.model_dump(exclude_none=True).items():
            if isinstance(value, datetime):
                params[key] = format_rfc3339(value)
            elif isinstance(value, bool):
                params[key] = "true" if value else "false"
            elif value != "":
                params[key] = str(value)
        return params
