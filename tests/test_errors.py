"""Tests for payzcore.models.errors."""

from __future__ import annotations

import pytest

from payzcore.models.errors import (
    STATUS_ERRORS,
    AuthenticationError,
    ForbiddenError,
    IdempotencyError,
    NotFoundError,
    PayzCoreError,
    RateLimitError,
    ValidationError,
    WebhookSignatureError,
    parse_retry_after,
)


class TestPayzCoreError:
    def test_fields(self):
        err = PayzCoreError("boom", 502, "api_error")
        assert err.message == "boom"
        assert err.status == 502
        assert err.code == "api_error"
        assert err.details is None
        assert str(err) == "[api_error] boom"

    def test_to_dict_shape(self):
        err = ValidationError("bad", [{"code": "invalid", "path": ["slug"], "message": "m"}])
        as_dict = err.to_dict()
        assert as_dict["error"]["status"] == 400
        assert as_dict["error"]["code"] == "validation_error"
        assert as_dict["error"]["message"] == "bad"
        assert as_dict["error"]["details"][0]["path"] == ["slug"]


class TestDefaults:
    @pytest.mark.parametrize(
        "error,status,code,message",
        [
            (AuthenticationError(), 401, "authentication_error", "Invalid or missing API key"),
            (ForbiddenError(), 403, "forbidden", "Access denied"),
            (NotFoundError(), 404, "not_found", "Resource not found"),
            (RateLimitError(), 429, "rate_limit_error", "Rate limit exceeded"),
            (
                IdempotencyError(),
                409,
                "idempotency_error",
                "external_order_id already used with a different external_ref",
            ),
        ],
    )
    def test_fixed_status_and_code(self, error, status, code, message):
        assert error.status == status
        assert error.code == code
        assert error.message == message

    def test_validation_error(self):
        err = ValidationError("Invalid amount")
        assert err.status == 400
        assert err.code == "validation_error"
        assert err.details is None

    def test_rate_limit_fields(self):
        err = RateLimitError("slow down", retry_after=30, is_daily=True)
        assert err.retry_after == 30
        assert err.is_daily is True

    def test_webhook_signature_error_is_separate(self):
        err = WebhookSignatureError()
        assert str(err) == "Webhook signature verification failed"
        assert not isinstance(err, PayzCoreError)
        assert not hasattr(err, "status")


class TestFromResponse:
    @pytest.mark.parametrize(
        "status_code,error_class",
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (403, ForbiddenError),
            (404, NotFoundError),
            (409, IdempotencyError),
            (429, RateLimitError),
        ],
    )
    def test_mapped_statuses(self, status_code, error_class):
        err = PayzCoreError.from_response(status_code, {"error": "message"})
        assert type(err) is error_class
        assert err.status == status_code
        assert err.message == "message"

    @pytest.mark.parametrize("status_code", [402, 418, 422, 500, 503])
    def test_unmapped_statuses_are_generic(self, status_code):
        err = PayzCoreError.from_response(status_code, {"error": "message"})
        assert type(err) is PayzCoreError
        assert err.status == status_code
        assert err.code == "api_error"

    def test_table_covers_taxonomy(self):
        assert set(STATUS_ERRORS) == {400, 401, 403, 404, 409, 429}

    def test_validation_details(self):
        details = [{"code": "invalid_type", "path": ["amount"], "message": "Expected number"}]
        err = PayzCoreError.from_response(400, {"error": "Invalid", "details": details})
        assert err.details == details

    def test_rate_limit_headers(self):
        err = PayzCoreError.from_response(
            429,
            {"error": "Too many"},
            {"X-RateLimit-Reset": "60", "X-RateLimit-Daily": "false"},
        )
        assert err.retry_after == 60
        assert err.is_daily is False

    def test_missing_message(self):
        err = PayzCoreError.from_response(500, {})
        assert err.message == "Unknown error"


class TestParseRetryAfter:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("120", 120),
            (" 45", 45),
            ("12.9", 12),
            ("30s", 30),
            ("soon", None),
            ("", None),
            (None, None),
        ],
    )
    def test_leading_integer(self, value, expected):
        assert parse_retry_after(value) == expected
