"""Error models for PayzCore SDK."""
from __future__ import annotations

import re
from typing import Any, Callable, Mapping, Optional

ErrorDetails = list[dict[str, Any]]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class PayzCoreError(Exception):
    """Base exception for errors returned by (or while reaching) the PayzCore API.

    ``status`` is the HTTP status code, or ``0`` when no response was received.
    """

    def __init__(
        self,
        message: str,
        status: int,
        code: str,
        details: Optional[ErrorDetails] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.details = details

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "status": self.status,
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> "PayzCoreError":
        """Create the matching error for a non-2xx API response."""
        message = body.get("error") or "Unknown error"
        if not isinstance(message, str):
            message = str(message)
        factory = STATUS_ERRORS.get(status_code)
        if factory is None:
            return cls(message, status_code, "api_error")
        return factory(message, body, headers or {})


class AuthenticationError(PayzCoreError):
    """Authentication error."""

    def __init__(self, message: str = "Invalid or missing API key"):
        super().__init__(message, 401, "authentication_error")


class ForbiddenError(PayzCoreError):
    """The key is valid but not allowed to perform the operation."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, 403, "forbidden")


class NotFoundError(PayzCoreError):
    """Resource not found error."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, 404, "not_found")


class ValidationError(PayzCoreError):
    """Request rejected by the API's input validation.

    ``details`` holds the field-level problems as ``{code, path, message}``.
    """

    def __init__(self, message: str, details: Optional[ErrorDetails] = None):
        super().__init__(message, 400, "validation_error", details)


class RateLimitError(PayzCoreError):
    """Rate limit exceeded error."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        is_daily: bool = False,
    ):
        super().__init__(message, 429, "rate_limit_error")
        self.retry_after = retry_after
        self.is_daily = is_daily


class IdempotencyError(PayzCoreError):
    """An external order id was reused with a different external reference."""

    def __init__(
        self,
        message: str = "external_order_id already used with a different external_ref",
    ):
        super().__init__(message, 409, "idempotency_error")


class WebhookSignatureError(Exception):
    """Raised when a webhook delivery cannot be authenticated or decoded."""

    def __init__(self, message: str = "Webhook signature verification failed"):
        super().__init__(message)
        self.message = message


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of an ``X-RateLimit-Reset`` header."""
    if not value:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def _rate_limit_error(
    message: str, body: Mapping[str, Any], headers: Mapping[str, str]
) -> RateLimitError:
    return RateLimitError(
        message,
        retry_after=parse_retry_after(headers.get("X-RateLimit-Reset")),
        is_daily=headers.get("X-RateLimit-Daily") == "true",
    )


ErrorFactory = Callable[[str, Mapping[str, Any], Mapping[str, str]], PayzCoreError]

STATUS_ERRORS: dict[int, ErrorFactory] = {
    400: lambda message, body, headers: ValidationError(message, body.get("details")),
    401: lambda message, body, headers: AuthenticationError(message),
    403: lambda message, body, headers: ForbiddenError(message),
    404: lambda message, body, headers: NotFoundError(message),
    409: lambda message, body, headers: IdempotencyError(message),
    429: _rate_limit_error,
}
