"""
Configuration for the Calendly API client.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://api.calendly.com"


@dataclass(frozen=True)
class CalendlyConfig:
    """
    Immutable client settings.
    
    Attributes:
        token: Personal access token sent as a bearer token
        base_url: API root URL
        timeout: Request timeout in seconds (None uses the requests default)
        verify_ssl: Whether to verify TLS certificates
    """
    
    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None
    verify_ssl: bool = True
    
    def __post_init__(self):
        # Normalized once so endpoint joins never produce a double slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
    
    def __repr__(self) -> str:
        return (
            f"CalendlyConfig(base_url={self.base_url!r}, timeout={self.timeout!r}, "
            f"verify_ssl={self.verify_ssl!r})"
        )
    
    def auth_header(self) -> str:
        """Value of the Authorization header."""
        return f"Bearer {self.token}"
