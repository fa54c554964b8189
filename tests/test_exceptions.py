"""Tests for the error taxonomy and response mapping."""

import pytest

from payclient.exceptions import (
    AuthenticationError,
    NotFoundError,
    PayClientError,
    PaymentError,
    RateLimitError,
    RemoteServiceError,
    TransportError,
    ValidationError,
    error_from_response,
)

pytestmark = pytest.mark.unit


class TestErrorFromResponse:
    """Mapping of service error payloads onto exceptions."""

    def test_invalid_request_maps_to_validation_error(self):
        error = error_from_response(
            400,
            {"error": {"type": "invalid_request_error", "message": "Bad amount", "param": "amount"}},
            request_id="req_1",
        )
        assert isinstance(error, ValidationError)
        assert error.param == "amount"
        assert error.status_code == 400
        assert error.request_id == "req_1"

    def test_404_maps_to_not_found(self):
        error = error_from_response(
            404, {"error": {"type": "invalid_request_error", "message": "No such invoice: in_x"}}
        )
        assert isinstance(error, NotFoundError)
        assert error.message == "No such invoice: in_x"

    def test_card_error_maps_to_payment_error(self):
        error = error_from_response(
            402,
            {
                "error": {
                    "type": "card_error",
                    "message": "Your card was declined.",
                    "code": "card_declined",
                    "decline_code": "insufficient_funds",
                    "charge": "ch_1",
                }
            },
        )
        assert isinstance(error, PaymentError)
        assert error.decline_code == "insufficient_funds"
        assert error.code == "card_declined"
        assert error.context["charge"] == "ch_1"

    def test_401_maps_to_authentication_error(self):
        error = error_from_response(401, {"error": {"message": "Invalid API Key"}})
        assert isinstance(error, AuthenticationError)
        assert isinstance(error, RemoteServiceError)
        assert error.error_code == "AUTHENTICATION_ERROR"

    def test_429_maps_to_rate_limit_error(self):
        error = error_from_response(429, {"error": {"type": "rate_limit_error", "message": "slow"}})
        assert isinstance(error, RateLimitError)

    def test_unknown_error_falls_back_to_remote_service_error(self):
        error = error_from_response(500, {"error": {"type": "api_error", "message": "boom"}})
        assert type(error) is RemoteServiceError
        assert error.error_type == "api_error"
        assert error.status_code == 500

    def test_missing_error_body_gets_generic_message(self):
        error = error_from_response(503, {})
        assert isinstance(error, RemoteServiceError)
        assert "503" in error.message

    def test_non_dict_error_body(self):
        error = error_from_response(500, {"error": "exploded"})
        assert error.message == "exploded"


class TestErrorContext:
    def test_to_dict(self):
        error = NotFoundError("missing", resource_id="in_1", request_id="req_9")
        assert error.to_dict() == {
            "error_code": "NOT_FOUND",
            "message": "missing",
            "status_code": 404,
            "context": {"resource_id": "in_1"},
            "recovery_hint": "Verify the id and ensure the resource exists",
            "request_id": "req_9",
        }

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError("x"),
            NotFoundError("x"),
            PaymentError("x"),
            TransportError("x"),
            RemoteServiceError("x"),
        ],
    )
    def test_all_errors_share_base(self, error):
        assert isinstance(error, PayClientError)
        assert str(error) == "x"
