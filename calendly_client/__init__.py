"""
Calendly API Client.

A small client for the Calendly v2 REST API: webhook subscriptions,
the current user and the echo endpoint.
"""

__version__ = "1.0.0"

from .api import CalendlyAPIClient, get_client, WebhookEvent
from .config import CalendlyConfig, DEFAULT_BASE_URL
from .exceptions import CalendlyError, APIError, ValidationError

__all__ = [
    "__version__",
    "CalendlyAPIClient",
    "get_client",
    "WebhookEvent",
    "CalendlyConfig",
    "DEFAULT_BASE_URL",
    "CalendlyError",
    "APIError",
    "ValidationError",
]
