"""
Shared fixtures for Calendly client tests.
"""

import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

from calendly_client import CalendlyAPIClient

REASONS = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    401: "Unauthorized",
    404: "Not Found",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def build_response(
    status_code: int = 200,
    body: Any = None,
    content_type: Optional[str] = "application/json; charset=utf-8",
    url: str = "https://api.calendly.com/echo",
) -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = REASONS.get(status_code, "")
    response.url = url
    if content_type:
        response.headers["Content-Type"] = content_type
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode() if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode()
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    """Factory for fake HTTP responses."""
    return build_response


@pytest.fixture
def session():
    """Create a mock requests session."""
    return MagicMock()


@pytest.fixture
def client(session):
    """Create a client wired to the mock session."""
    return CalendlyAPIClient("test-token", session=session)
