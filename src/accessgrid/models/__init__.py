"""AccessGrid SDK Models."""
from .base import AccessGridModel
from .card import (
    Card,
    CardResponse,
    CardState,
    ListKeysFilter,
    ProvisionCardRequest,
    UnifiedAccessPass,
    UpdateCardRequest,
    resolve_card_response,
)
from .template import (
    CreateTemplateRequest,
    Event,
    EventLogFilter,
    SupportInfo,
    Template,
    TemplateDesign,
    UpdateTemplateRequest,
)
from .errors import (
    AccessGridError,
    APIError,
    AuthenticationError,
    ConfigurationError,
    ConnectionError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    TimeoutError,
    TransportError,
)

__all__ = [
    "AccessGridModel",
    "Card",
    "CardResponse",
    "CardState",
    "ListKeysFilter",
    "ProvisionCardRequest",
    "UnifiedAccessPass",
    "UpdateCardRequest",
    "resolve_card_response",
    "CreateTemplateRequest",
    "Event",
    "EventLogFilter",
    "SupportInfo",
    "Template",
    "TemplateDesign",
    "UpdateTemplateRequest",
    "AccessGridError",
    "APIError",
    "AuthenticationError",
    "ConfigurationError",
    "ConnectionError",
    "DecodeError",
    "NotFoundError",
    "RateLimitError",
    "TimeoutError",
    "TransportError",
]
