"""Console (card template and event log) models for the AccessGrid SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from .base import AccessGridModel, format_rfc3339


class TemplateDesign(AccessGridModel):
    """Visual design of a card template."""

    background_color: Optional[str] = None
    label_color: Optional[str] = None
    label_secondary_color: Optional[str] = None
    background_image: Optional[str] = None
    logo_image: Optional[str] = None
    icon_image: Optional[str] = None


class SupportInfo(AccessGridModel):
    """Support contact information shown on the pass."""

    support_url: Optional[str] = None
    support_phone_number: Optional[str] = None
    support_email: Optional[str] = None
    privacy_policy_url: Optional[str] = None
    terms_and_conditions_url: Optional[str] = None


class Template(AccessGridModel):
    """A card template."""

    id: Optional[str] = None
    name: Optional[str] = None
    platform: Optional[str] = None
    use_case: Optional[str] = None
    protocol: Optional[str] = None
    allow_on_multiple_devices: Optional[bool] = None
    watch_count: Optional[int] = None
    iphone_count: Optional[int] = None
    design: Optional[TemplateDesign] = None
    support_info: Optional[SupportInfo] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateTemplateRequest(AccessGridModel):
    """Request to create a card template."""

    name: str
    platform: str
    use_case: Optional[str] = None
    protocol: Optional[str] = None
    allow_on_multiple_devices: Optional[bool] = None
    watch_count: Optional[int] = None
    iphone_count: Optional[int] = None
    design: Optional[TemplateDesign] = None
    support_info: Optional[SupportInfo] = None


class UpdateTemplateRequest(AccessGridModel):
    """Request to update a card template.

    ``card_template_id`` selects the path and is also sent in the body.
    """

    card_template_id: str
    name: Optional[str] = None
    allow_on_multiple_devices: Optional[bool] = None
    watch_count: Optional[int] = None
    iphone_count: Optional[int] = None
    design: Optional[TemplateDesign] = None
    support_info: Optional[SupportInfo] = None


class EventLogFilter(AccessGridModel):
    """Optional filters for a template's event log."""

    device: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    event_type: Optional[str] = None


class Event(AccessGridModel):
    """An entry in a template's event log."""

    id: Optional[str] = None
    type: Optional[str] = None
    user_id: Optional[str] = None
    card_id: Optional[str] = None
    template_id: Optional[str] = None
    device: Optional[str] = None
    timestamp: Optional[datetime] = None
    details: Optional[Any] = None


__all__ = [
    "CreateTemplateRequest",
    "Event",
    "EventLogFilter",
    "SupportInfo",
    "Template",
    "TemplateDesign",
    "UpdateTemplateRequest",
    "format_rfc3339",
]
