"""
System API - Connectivity checks.
"""

from typing import Any

from ._http import HTTPClient


class SystemAPI:
    """API for service-level operations."""
    
    def __init__(self, http: HTTPClient):
        self._http = http
    
    def echo(self) -> Any:
        """
        Call the echo endpoint.
        
        Succeeds only when the service is reachable and the token is accepted.
        """
        return self._http.request("GET", "echo")
