"""
Base HTTP client for the Calendly API.

Handles session management, authentication and the translation of
responses and transport failures into decoded values or APIError.
"""

import logging
import threading
from typing import Optional, Dict, Any

import requests

from .. import __version__
from ..config import CalendlyConfig
from ..exceptions import APIError
from ..utils import drop_none

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class HTTPClient:
    """
    Base HTTP client for the Calendly API.

    Handles:
    - Session management
    - Authentication headers
    - Response decoding
    - Error normalization
    """

    def __init__(
        self,
        config: CalendlyConfig,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the HTTP client.

        Args:
            config: Client configuration
            session: Optional pre-built session. It is used as is, so it
                must already carry whatever headers the caller needs.
        """
        self.config = config
        self._session = session
        self._owns_session = session is None
        self._session_lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            with self._session_lock:
                if self._session is None:
                    self._session = self._build_session()

        return self._session

    def _build_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            "Authorization": self.config.auth_header(),
            "User-Agent": f"calendly-client/{__version__}",
            "Accept": JSON_CONTENT_TYPE,
        })
        return session

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self.config.base_url

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make an API request.

        GET parameters are sent as a query string, everything else as a
        JSON body.

        Args:
            method: HTTP method
            endpoint: API endpoint, relative to the base URL
            params: Query or body parameters

        Returns:
            Parsed JSON, raw body text for non-JSON responses, or None
            for 204 responses

        Raises:
            APIError: On any HTTP, transport or decoding failure
        """
        method = method.upper()
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        params = drop_none(params)

        query = None
        body = None
        if method == "GET":
            query = params or None
        elif params:
            body = params

        logger.debug(f"Request: {method} {url}")

        try:
            try:
                response = self.session.request(
                    method=method,
                    url=url,
                    params=query,
                    json=body,
                    timeout=self.config.timeout,
                    verify=self.config.verify_ssl,
                )
                response.raise_for_status()
            except requests.exceptions.RequestException as e:
                raise self._error_from_exception(e) from e

            logger.debug(f"Response: {response.status_code}")

            return self._decode_response(response)
        except APIError as error:
            self._log_error(method, url, error)
            raise

    @staticmethod
    def _log_error(method: str, url: str, error: APIError) -> None:
        # 404 is an expected outcome for lookups of deleted resources
        level = logging.DEBUG if error.status_code == 404 else logging.WARNING
        logger.log(
            level,
            "API error [%s %s] status=%d: %s",
            method, url, error.status_code, error.message
        )

    def _error_from_exception(self, exc: requests.exceptions.RequestException) -> APIError:
        """Translate a requests exception into an APIError."""
        response = exc.response

        if response is None:
            return APIError(f"Failed to get Calendly data: {exc}", status_code=0)

        if not 400 <= response.status_code < 500:
            return APIError(
                f"Failed to get Calendly data: {exc}",
                status_code=response.status_code
            )

        message = response.text
        error_data: Dict[str, Any] = {}

        if self._is_json(response):
            parsed = self._parse_json(response)
            if isinstance(parsed, dict):
                error_data = parsed
                if parsed.get("message"):
                    message = parsed["message"]

        return APIError(message, status_code=response.status_code, response_data=error_data)

    def _decode_response(self, response: requests.Response) -> Any:
        """Decode a successful response according to its content type."""
        if response.status_code == 204:
            return None

        if self._is_json(response):
            return self._parse_json(response)

        return response.text

    @staticmethod
    def _is_json(response: requests.Response) -> bool:
        content_type = response.headers.get("Content-Type", "")
        return content_type.startswith(JSON_CONTENT_TYPE)

    @staticmethod
    def _parse_json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"Invalid JSON: {e}", status_code=500) from e

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        with self._session_lock:
            if self._session is not None and self._owns_session:
                self._session.close()
                self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
