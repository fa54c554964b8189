"""
Client exceptions.

Every failure surfaced by the client is a ``PayClientError`` carrying a
machine-readable code, the HTTP status (when one exists), context about
the failing request and a recovery hint.
"""

from typing import Any


class PayClientError(Exception):
    """
    Base client error with enhanced context.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        status_code: HTTP status code returned by the service, if any
        context: Additional context data about the error
        recovery_hint: Suggested action to resolve the error
        request_id: Service request id, useful when contacting support
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
        recovery_hint: str | None = None,
        request_id: str | None = None,
    ):
        self.message = message
        self.error_code = error_code or "PAYCLIENT_ERROR"
        self.status_code = status_code
        self.context = context or {}
        self.recovery_hint = recovery_hint
        self.request_id = request_id
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging or API responses."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "status_code": self.status_code,
            "context": self.context,
            "recovery_hint": self.recovery_hint,
            "request_id": self.request_id,
        }


class ValidationError(PayClientError):
    """Malformed or missing parameters, detected locally or by the service."""

    def __init__(
        self,
        message: str,
        param: str | None = None,
        status_code: int | None = None,
        request_id: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        context = dict(context or {})
        if param:
            context["param"] = param

        super().__init__(
            message,
            "VALIDATION_ERROR",
            status_code=status_code,
            context=context,
            recovery_hint="Check the request parameters against the API reference",
            request_id=request_id,
        )
        self.param = param


class NotFoundError(PayClientError):
    """Unknown resource id."""

    def __init__(
        self,
        message: str,
        resource_id: str | None = None,
        request_id: str | None = None,
    ) -> None:
        context = {}
        if resource_id:
            context["resource_id"] = resource_id

        super().__init__(
            message,
            "NOT_FOUND",
            status_code=404,
            context=context,
            recovery_hint="Verify the id and ensure the resource exists",
            request_id=request_id,
        )
        self.resource_id = resource_id


class PaymentError(PayClientError):
    """Payment attempt declined."""

    def __init__(
        self,
        message: str,
        decline_code: str | None = None,
        code: str | None = None,
        charge: str | None = None,
        status_code: int | None = 402,
        request_id: str | None = None,
    ):
        context = {}
        if decline_code:
            context["decline_code"] = decline_code
        if code:
            context["code"] = code
        if charge:
            context["charge"] = charge

        super().__init__(
            message,
            "PAYMENT_ERROR",
            status_code=status_code,
            context=context,
            recovery_hint="Use another payment source; do not retry blindly to avoid double charges",
            request_id=request_id,
        )
        self.decline_code = decline_code
        self.code = code
        self.charge = charge


class TransportError(PayClientError):
    """Network, timeout or decode failure."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            "TRANSPORT_ERROR",
            context=context,
            recovery_hint="Check connectivity to the service; the request outcome is unknown",
        )


class RemoteServiceError(PayClientError):
    """Error payload the client does not model specifically."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: str | None = None,
        request_id: str | None = None,
        recovery_hint: str | None = None,
    ):
        context = {}
        if error_type:
            context["error_type"] = error_type

        super().__init__(
            message,
            "REMOTE_SERVICE_ERROR",
            status_code=status_code,
            context=context,
            recovery_hint=recovery_hint or "Inspect the request id in the service dashboard",
            request_id=request_id,
        )
        self.error_type = error_type


class AuthenticationError(RemoteServiceError):
    """API key missing, invalid or revoked."""

    def __init__(self, message: str, request_id: str | None = None) -> None:
        super().__init__(
            message,
            status_code=401,
            error_type="authentication_error",
            request_id=request_id,
            recovery_hint="Set PAYCLIENT_API_KEY to a valid secret key",
        )
        self.error_code = "AUTHENTICATION_ERROR"


class RateLimitError(RemoteServiceError):
    """Too many requests hit the service too quickly."""

    def __init__(self, message: str, request_id: str | None = None) -> None:
        super().__init__(
            message,
            status_code=429,
            error_type="rate_limit_error",
            request_id=request_id,
            recovery_hint="Slow down; retry policy is up to the caller",
        )
        self.error_code = "RATE_LIMIT_ERROR"


def error_from_response(
    status_code: int,
    payload: dict[str, Any] | None,
    request_id: str | None = None,
) -> PayClientError:
    """
    Build the exception matching an error response of the service.

    Args:
        status_code: HTTP status of the response
        payload: Decoded body, expected to hold an ``error`` object
        request_id: Value of the ``Request-Id`` header

    Returns:
        The exception to raise
    """
    body = (payload or {}).get("error") or {}
    if not isinstance(body, dict):
        body = {"message": str(body)}

    message = body.get("message") or f"Request failed with status {status_code}"
    error_type = body.get("type")

    if status_code == 401 or error_type == "authentication_error":
        return AuthenticationError(message, request_id=request_id)

    if status_code == 402 or error_type == "card_error":
        return PaymentError(
            message,
            decline_code=body.get("decline_code"),
            code=body.get("code"),
            charge=body.get("charge"),
            status_code=status_code,
            request_id=request_id,
        )

    if status_code == 404:
        return NotFoundError(message, request_id=request_id)

    if status_code == 429 or error_type == "rate_limit_error":
        return RateLimitError(message, request_id=request_id)

    if status_code == 400 or error_type == "invalid_request_error":
        return ValidationError(
            message,
            param=body.get("param"),
            status_code=status_code,
            request_id=request_id,
        )

    return RemoteServiceError(
        message,
        status_code=status_code,
        error_type=error_type,
        request_id=request_id,
    )


__all__ = [
    "PayClientError",
    "ValidationError",
    "NotFoundError",
    "PaymentError",
    "TransportError",
    "RemoteServiceError",
    "AuthenticationError",
    "RateLimitError",
    "error_from_response",
]
