"""
Transport adapter for the payment service API.

Resource clients talk to the service only through the ``Transport``
protocol, so tests can substitute an in-memory implementation.
"""

from typing import Any, Protocol
from urllib.parse import urlencode

import httpx
import structlog

from payclient.exceptions import (
    AuthenticationError,
    RemoteServiceError,
    TransportError,
    error_from_response,
)
from payclient.settings import ClientSettings, get_settings

logger = structlog.get_logger(__name__)

QueryPairs = list[tuple[str, str]]

GET = "GET"
POST = "POST"
DELETE = "DELETE"


class Transport(Protocol):
    """Executes one request and returns the decoded JSON object."""

    def execute(
        self, method: str, path: str, params: QueryPairs | None = None
    ) -> dict[str, Any]: ...  # pragma: no cover - protocol definition


class HttpxTransport:
    """Synchronous ``httpx`` implementation of ``Transport``.

    One attempt per call. Failures are mapped onto the client's exception
    hierarchy and never retried here.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            settings: Client settings, defaults to the process-wide instance
            client: Pre-built ``httpx.Client`` (e.g. with a mock transport)
        """
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=self.settings.api_base,
            timeout=httpx.Timeout(self.settings.timeout),
        )

    def _headers(self, method: str) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.settings.api_key.get_secret_value()}",
            "User-Agent": self.settings.user_agent,
        }
        if self.settings.api_version:
            headers["Stripe-Version"] = self.settings.api_version
        if method == POST:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
        return headers

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()

    def execute(
        self, method: str, path: str, params: QueryPairs | None = None
    ) -> dict[str, Any]:
        """
        Make an HTTP request to the service.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: API path (e.g., /v1/invoices)
            params: Ordered parameter pairs; query string for GET/DELETE,
                form body for POST

        Returns:
            Response data as dictionary

        Raises:
            PayClientError: On request failure
        """
        if not self.settings.is_configured:
            raise AuthenticationError(
                "No API key provided. Set PAYCLIENT_API_KEY or pass settings explicitly."
            )

        pairs = params or []
        request_kwargs: dict[str, Any] = {"headers": self._headers(method)}
        if method == POST:
            request_kwargs["content"] = urlencode(pairs)
        elif pairs:
            request_kwargs["params"] = pairs

        logger.debug("payment API request", method=method, path=path)

        try:
            response = self._client.request(method, path, **request_kwargs)
        except httpx.TimeoutException as e:
            logger.error("payment API request timeout", method=method, path=path, error=str(e))
            raise TransportError(f"Request timeout: {method} {path}") from e
        except httpx.RequestError as e:
            logger.error("payment API request error", method=method, path=path, error=str(e))
            raise TransportError(f"Request failed: {str(e)}") from e
        except httpx.InvalidURL as e:
            logger.error("payment API invalid URL", method=method, path=path, error=str(e))
            raise TransportError(
                f"Invalid request URL for {method} {path}: {e}",
                context={"api_base": self.settings.api_base},
            ) from e

        request_id = response.headers.get("request-id")
        logger.debug(
            "payment API response",
            method=method,
            path=path,
            status_code=response.status_code,
            request_id=request_id,
        )

        try:
            payload = response.json()
        except ValueError as e:
            if response.status_code >= 400:
                raise RemoteServiceError(
                    f"Invalid error response body: {response.text[:200]}",
                    status_code=response.status_code,
                    request_id=request_id,
                ) from e
            raise TransportError(
                f"Could not decode response body of {method} {path}",
                context={"status_code": response.status_code, "request_id": request_id},
            ) from e

        if response.status_code >= 400:
            error = error_from_response(response.status_code, payload, request_id)
            logger.warning(
                "payment API error",
                method=method,
                path=path,
                status_code=response.status_code,
                error_code=error.error_code,
                request_id=request_id,
            )
            raise error

        if not isinstance(payload, dict):
            raise TransportError(
                f"Expected a JSON object from {method} {path}",
                context={"request_id": request_id},
            )

        return payload
