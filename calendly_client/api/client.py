"""
Calendly API Client - Main facade for all API operations.
"""

from typing import Optional, Any, Iterable, Union

import requests

from ..config import CalendlyConfig, DEFAULT_BASE_URL
from ._http import HTTPClient
from .webhooks import WebhooksAPI, WebhookEvent
from .users import UsersAPI
from .system import SystemAPI


class CalendlyAPIClient:
    """
    Client for the Calendly v2 API.

    Offers domain-specific sub-clients (client.webhooks, client.users,
    client.system) and flat methods for every operation.

    Usage:
        client = CalendlyAPIClient("token")
        client.echo()
        hooks = client.get_webhooks()
    """

    def __init__(
        self,
        api_key: str,
        session: Optional[requests.Session] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        verify_ssl: bool = True
    ):
        """
        Initialize the API client.

        Args:
            api_key: Personal access token
            session: Optional pre-built session, used instead of one carrying
                the bearer token
            base_url: API root URL
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
        """
        config = CalendlyConfig(
            token=api_key,
            base_url=base_url,
            timeout=timeout,
            verify_ssl=verify_ssl,
        )
        self._http = HTTPClient(config, session)

        self.webhooks = WebhooksAPI(self._http)
        self.users = UsersAPI(self._http)
        self.system = SystemAPI(self._http)

    @property
    def config(self) -> CalendlyConfig:
        """Get the configuration."""
        return self._http.config

    @property
    def token(self) -> str:
        """Bearer token used by this client."""
        return self._http.config.token

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self._http.base_url

    # ========== Webhook Methods ==========

    def create_webhook(
        self,
        url: str,
        events: Iterable[Union[str, WebhookEvent]],
        organization_url: str,
        user_url: str,
        signing_key: Optional[str] = None
    ) -> Any:
        """Create a webhook subscription."""
        return self.webhooks.create(url, events, organization_url, user_url, signing_key)

    def get_webhook(self, webhook_id: str) -> Any:
        """Get a webhook subscription."""
        return self.webhooks.get(webhook_id)

    def get_webhooks(
        self,
        organization: Optional[str] = None,
        user: Optional[str] = None,
        scope: Optional[str] = None,
        count: Optional[int] = None,
        page_token: Optional[str] = None
    ) -> Any:
        """List webhook subscriptions."""
        return self.webhooks.list(organization, user, scope, count, page_token)

    def delete_webhook(self, webhook_id: str) -> None:
        """Delete a webhook subscription, ignoring missing ones."""
        self.webhooks.delete(webhook_id)

    # ========== User Methods ==========

    def get_current_user(self) -> Any:
        """Get the current user."""
        return self.users.get_current()

    # ========== System Methods ==========

    def echo(self) -> Any:
        """Check connectivity and the token."""
        return self.system.echo()

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "CalendlyAPIClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def get_client(api_key: str, **kwargs: Any) -> CalendlyAPIClient:
    """
    Get an API client instance.

    Args:
        api_key: Personal access token
        **kwargs: Passed to CalendlyAPIClient

    Returns:
        CalendlyAPIClient instance
    """
    return CalendlyAPIClient(api_key, **kwargs)
