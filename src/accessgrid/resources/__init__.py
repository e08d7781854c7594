"""
Resources for the AccessGrid SDK.

This module exports both sync and async resource classes for all API endpoints.
"""
from .base import AsyncBaseResource, SyncBaseResource
from .access_cards import AccessCardsResource, AsyncAccessCardsResource
from .console import AsyncConsoleResource, ConsoleResource

__all__ = [
    # Base classes
    "AsyncBaseResource",
    "SyncBaseResource",
    # Access cards
    "AccessCardsResource",
    "AsyncAccessCardsResource",
    # Console
    "ConsoleResource",
    "AsyncConsoleResource",
]
