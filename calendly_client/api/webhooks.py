"""
Webhooks API - Webhook subscription management.
"""

import logging
from enum import Enum
from typing import Optional, Dict, Any, Iterable, Union

from ..exceptions import APIError, ValidationError
from ..utils import extract_uuid, validate_choices
from ._http import HTTPClient

logger = logging.getLogger(__name__)


class WebhookEvent(str, Enum):
    """Event kinds a webhook subscription can listen to."""
    
    INVITEE_CREATED = "invitee.created"
    INVITEE_CANCELED = "invitee.canceled"


class WebhooksAPI:
    """
    API for webhook subscriptions.
    
    Handles:
    - Subscription creation with event validation
    - Lookup and listing
    - Idempotent deletion
    """
    
    COLLECTION = "webhook_subscriptions"
    SCOPE = "user"
    
    def __init__(self, http: HTTPClient):
        """
        Initialize Webhooks API.
        
        Args:
            http: HTTP client instance
        """
        self._http = http
    
    def _path(self, webhook_id: str) -> str:
        return f"{self.COLLECTION}/{extract_uuid(webhook_id, self.COLLECTION)}"
    
    def create(
        self,
        url: str,
        events: Iterable[Union[str, WebhookEvent]],
        organization_url: str,
        user_url: str,
        signing_key: Optional[str] = None
    ) -> Any:
        """
        Create a user-scoped webhook subscription.
        
        Args:
            url: Callback URL Calendly will POST to
            events: Event kinds to subscribe to
            organization_url: Organization URI
            user_url: User URI
            signing_key: Optional key Calendly uses to sign deliveries
        
        Returns:
            Created subscription
        
        Raises:
            ValidationError: If an event kind is not supported; no request is made
        """
        try:
            event_names = validate_choices(events, [e.value for e in WebhookEvent])
        except ValueError as e:
            raise ValidationError(
                "The specified event types do not exist",
                details=str(e)
            ) from e
        
        payload: Dict[str, Any] = {
            "url": url,
            "events": event_names,
            "organization": organization_url,
            "user": user_url,
            "scope": self.SCOPE,
        }
        if signing_key:
            payload["signing_key"] = signing_key
        
        return self._http.request("POST", self.COLLECTION, params=payload)
    
    def get(self, webhook_id: str) -> Any:
        """Get a webhook subscription by UUID or URI."""
        return self._http.request("GET", self._path(webhook_id))
    
    def list(
        self,
        organization: Optional[str] = None,
        user: Optional[str] = None,
        scope: Optional[str] = None,
        count: Optional[int] = None,
        page_token: Optional[str] = None
    ) -> Any:
        """
        List webhook subscriptions.
        
        Args:
            organization: Organization URI filter
            user: User URI filter
            scope: Scope filter (user, organization)
            count: Page size
            page_token: Token of the page to fetch
        
        Returns:
            Subscription collection and pagination data
        """
        params: Dict[str, Any] = {
            "organization": organization,
            "user": user,
            "scope": scope,
            "count": count,
            "page_token": page_token,
        }
        return self._http.request("GET", self.COLLECTION, params=params)
    
    def delete(self, webhook_id: str) -> None:
        """
        Delete a webhook subscription.
        
        A subscription that no longer exists counts as deleted.
        """
        try:
            self._http.request("DELETE", self._path(webhook_id))
        except APIError as e:
            if e.status_code != 404:
                raise
            logger.debug(f"Webhook {webhook_id} already deleted")
