"""
Utility functions for the Calendly API client.
"""

from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse


def extract_uuid(value: str, collection: str) -> str:
    """
    Return the trailing UUID of a Calendly resource URI.
    
    Only absolute URIs whose parent path segment is ``collection`` are
    reduced; anything else is returned unchanged. With ``collection`` set
    to ``webhook_subscriptions``,
    ``https://api.calendly.com/webhook_subscriptions/ABC`` gives ``ABC``
    while ``ABC`` and ``team/ABC`` are kept as they are.
    """
    text = str(value)
    if not text.startswith(("http://", "https://")):
        return text
    
    segments = urlparse(text).path.rstrip("/").split("/")
    if len(segments) >= 2 and segments[-2] == collection and segments[-1]:
        return segments[-1]
    return text


def validate_choices(values: Iterable[Any], allowed: Iterable[str]) -> List[str]:
    """
    Check that every value is one of the allowed strings.
    
    Args:
        values: Values to check (strings or str-valued enum members)
        allowed: Accepted string values
    
    Returns:
        The values as plain strings, in their original order
    
    Raises:
        ValueError: If any value is not allowed
    """
    accepted = set(allowed)
    result = []
    for value in values:
        text = getattr(value, "value", value)
        if not isinstance(text, str) or text not in accepted:
            raise ValueError(f"Unsupported value: {value!r}")
        result.append(text)
    return result


def drop_none(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Remove keys whose value is None."""
    if not params:
        return {}
    return {k: v for k, v in params.items() if v is not None}
