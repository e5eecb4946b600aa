"""
Users API - User lookup.
"""

from typing import Any

from ._http import HTTPClient


class UsersAPI:
    """API for user operations."""
    
    def __init__(self, http: HTTPClient):
        """
        Initialize Users API.
        
        Args:
            http: HTTP client instance
        """
        self._http = http
    
    def get_current(self) -> Any:
        """Get the user the token belongs to."""
        return self._http.request("GET", "users/me")
