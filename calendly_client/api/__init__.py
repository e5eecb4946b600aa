"""
Calendly API Client Package.

Structure:
    - client.py: Main CalendlyAPIClient facade
    - _http.py: Base HTTP client with session, auth and error handling
    - webhooks.py: Webhook subscriptions
    - users.py: User lookup
    - system.py: Echo

Usage:
    from calendly_client.api import CalendlyAPIClient, WebhookEvent
    
    with CalendlyAPIClient("token") as client:
        user = client.get_current_user()
        client.create_webhook(
            "https://example.com/hook",
            [WebhookEvent.INVITEE_CREATED],
            user["resource"]["current_organization"],
            user["resource"]["uri"],
        )
"""

from .client import CalendlyAPIClient, get_client
from ._http import HTTPClient
from .webhooks import WebhooksAPI, WebhookEvent
from .users import UsersAPI
from .system import SystemAPI

__all__ = [
    # Main client
    "CalendlyAPIClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    # Domain APIs
    "WebhooksAPI",
    "WebhookEvent",
    "UsersAPI",
    "SystemAPI",
]
