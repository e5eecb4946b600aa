"""
Exceptions raised by the Calendly API client.
"""

from typing import Optional, Dict, Any


class CalendlyError(Exception):
    """Base exception for all Calendly client errors."""
    
    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
    
    def __str__(self) -> str:
        return self.message


class APIError(CalendlyError):
    """
    Error returned by the Calendly API or raised while talking to it.
    
    Attributes:
        status_code: HTTP status when known, 500 for undecodable bodies,
            0 when no response was received
        response_data: Parsed error body, if any
    """
    
    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response_data: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data or {}
    
    @property
    def code(self) -> int:
        """Alias for status_code."""
        return self.status_code
    
    def __repr__(self) -> str:
        return f"APIError({self.message!r}, status_code={self.status_code})"


class ValidationError(CalendlyError):
    """Request arguments were rejected before any call was made."""
    pass
