"""
AccessGrid Python SDK

Client for the AccessGrid API: provision and manage NFC access cards and
their templates.
"""

from ._version import __version__
from .client import AccessGrid, AsyncAccessGrid, ClientConfig
from .models.errors import (
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
from .models.card import (
    Card,
    CardResponse,
    CardState,
    ListKeysFilter,
    ProvisionCardRequest,
    UnifiedAccessPass,
    UpdateCardRequest,
    resolve_card_response,
)
from .models.template import (
    CreateTemplateRequest,
    Event,
    EventLogFilter,
    SupportInfo,
    Template,
    TemplateDesign,
    UpdateTemplateRequest,
)
from .signing import sign_payload, verify_signature

__all__ = [
    "__version__",
    # Client
    "AccessGrid",
    "AsyncAccessGrid",
    "ClientConfig",
    # Errors
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
    # Card models
    "Card",
    "CardResponse",
    "CardState",
    "ListKeysFilter",
    "ProvisionCardRequest",
    "UnifiedAccessPass",
    "UpdateCardRequest",
    "resolve_card_response",
    # Console models
    "CreateTemplateRequest",
    "Event",
    "EventLogFilter",
    "SupportInfo",
    "Template",
    "TemplateDesign",
    "UpdateTemplateRequest",
    # Signing
    "sign_payload",
    "verify_signature",
]
