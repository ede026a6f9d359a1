"""HTTP transport for Graph API requests."""

from typing import Any, Mapping, Optional, Protocol

import httpx

from instagraph.core.exceptions import ApiError, ParsingError
from instagraph.utils.config import CONNECT_TIMEOUT, READ_TIMEOUT, USER_AGENT
from instagraph.utils.logging import get_logger

logger = get_logger(__name__)


class Transport(Protocol):
    """What the resource client needs from an HTTP layer."""

    def get_json(self, url: str) -> Any: ...

    def post_form(self, url: str, form: Optional[Mapping[str, Any]] = None) -> Any: ...

    def delete_url(self, url: str) -> None: ...


def redact(url: str) -> str:
    """Mask the access token in a URL so it can be logged."""
    parsed = httpx.URL(url)
    if "access_token" in parsed.params:
        parsed = parsed.copy_set_param("access_token", "***")
    return str(parsed)


class HttpTransport:
    """
    Synchronous transport backed by ``httpx.Client``.

    URLs are used exactly as given; credentials are already part of them.
    May be used as a context manager to close the underlying client.
    """

    def __init__(self, client: Optional[httpx.Client] = None, timeout: Optional[httpx.Timeout] = None):
        """
        Initialize transport.

        Args:
            client: Preconfigured httpx client (optional, one is created if None)
            timeout: Timeout for a created client (default: from config)
        """
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                timeout=timeout or httpx.Timeout(CONNECT_TIMEOUT, read=READ_TIMEOUT),
                follow_redirects=True,
            )
        self.client = client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self.client.close()

    def _get_headers(self) -> dict:
        return {
            "User-Agent": USER_AGENT,
            "Accept": "application/json, text/javascript",
        }

    def get_json(self, url: str) -> Any:
        logger.debug(f"GET {redact(url)}")
        response = self.client.get(url, headers=self._get_headers())
        return self._handle_response(response)

    def post_form(self, url: str, form: Optional[Mapping[str, Any]] = None) -> Any:
        logger.debug(f"POST {redact(url)}")
        response = self.client.post(url, data=dict(form or {}), headers=self._get_headers())
        return self._handle_response(response)

    def delete_url(self, url: str) -> None:
        logger.debug(f"DELETE {redact(url)}")
        response = self.client.delete(url, headers=self._get_headers())
        self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        """
        Decode a response body.

        Raises:
            ApiError: If the status is not 2xx
            ParsingError: If a successful response is not valid JSON
        """
        if not response.is_success:
            error = self._error_payload(response)
            logger.warning(f"Instagram API error {response.status_code} for {redact(str(response.url))}")
            logger.debug(f"Error body: {response.text[:500]}")
            raise ApiError(response.status_code, error)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.debug(f"Response content: {response.text[:500]}")
            raise ParsingError(f"Invalid JSON response from Instagram: {e}")

    @staticmethod
    def _error_payload(response: httpx.Response) -> Any:
        """Extract the provider error object, falling back to the raw body."""
        try:
            body = response.json()
        except ValueError:
            return response.text or None
        if isinstance(body, dict) and "error" in body:
            return body["error"]
        return body
