"""
PayzCore webhook verification and parsing.

Deliveries carry two headers: ``X-PayzCore-Signature``, the lowercase hex
HMAC-SHA256 of ``timestamp + "." + body`` keyed with the project's webhook
secret, and ``X-PayzCore-Timestamp``. Binding the timestamp into the signed
message means a captured signature cannot be replayed with a fresh timestamp.

Example::

    from payzcore import SIGNATURE_HEADER, TIMESTAMP_HEADER, WebhookSignatureError, construct_event

    try:
        event = construct_event(
            raw_body,
            headers[SIGNATURE_HEADER],
            os.environ["PAYZCORE_WEBHOOK_SECRET"],
            timestamp=headers.get(TIMESTAMP_HEADER),
        )
    except WebhookSignatureError:
        return 400
"""
from __future__ import annotations

import hashlib
import hmac
import json
import logging
import time
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from pydantic import ValidationError as ModelValidationError

from .models.errors import WebhookSignatureError
from .models.payment import Network, Token
from .models.webhook import WebhookPayload

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-PayzCore-Signature"
TIMESTAMP_HEADER = "X-PayzCore-Timestamp"

DEFAULT_TOLERANCE_MS = 5 * 60 * 1000

SUPPORTED_NETWORKS = tuple(n.value for n in Network)
SUPPORTED_TOKENS = tuple(t.value for t in Token)

# Numeric timestamps above this are already in milliseconds
_MS_THRESHOLD = Decimal("1e11")
# Epoch values longer than this many digits cannot be a real timestamp
_MAX_EPOCH_DIGITS = 16
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Body = Union[str, bytes]


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _to_bytes(value: Body) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def parse_timestamp_ms(value: str) -> Optional[int]:
    """Convert a timestamp header to Unix milliseconds.

    Accepts ISO-8601 (naive values are taken as UTC) or a numeric Unix epoch
    in seconds or milliseconds. Returns None when the value is unparseable
    or out of range.
    """
    value = value.strip()
    try:
        number = Decimal(value)
    except InvalidOperation:
        pass
    else:
        if not number.is_finite() or number.adjusted() >= _MAX_EPOCH_DIGITS:
            return None
        try:
            return int(number if abs(number) > _MS_THRESHOLD else number * 1000)
        except ArithmeticError:
            return None

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (parsed - _EPOCH) // timedelta(milliseconds=1)


def compute_webhook_signature(body: Body, secret: str, timestamp: str) -> str:
    """Compute the signature PayzCore sends for ``body`` at ``timestamp``.

    Useful for tests and local tooling that need to produce valid deliveries.
    """
    message = f"{timestamp}.".encode("utf-8") + _to_bytes(body)
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def verify_webhook_signature(
    body: Body,
    signature: str,
    secret: str,
    timestamp: Optional[str] = None,
    tolerance_ms: int = DEFAULT_TOLERANCE_MS,
) -> bool:
    """
    Verify a webhook signature from PayzCore.

    Never raises; every failure yields False.

    Args:
        body: Raw request body, exactly as received
        signature: Value of the ``X-PayzCore-Signature`` header
        secret: Webhook secret from project creation (``whsec_...``)
        timestamp: Value of the ``X-PayzCore-Timestamp`` header (required)
        tolerance_ms: Maximum clock distance in milliseconds (default: 5 minutes)

    Returns:
        True if the signature is valid and the timestamp is fresh
    """
    if not body or not signature or not secret:
        return False
    if not timestamp:
        return False

    ts = parse_timestamp_ms(timestamp)
    if ts is None or abs(_now_ms() - ts) > tolerance_ms:
        return False

    expected = compute_webhook_signature(body, secret, timestamp).encode("utf-8")
    supplied = signature.encode("utf-8")
    if len(supplied) != len(expected):
        return False
    return hmac.compare_digest(supplied, expected)


def parse_webhook(body: Body) -> WebhookPayload:
    """
    Parse a raw webhook body into a WebhookPayload.

    Unknown network and token values are logged and kept, so deliveries for
    networks added after this release still parse.

    Raises:
        WebhookSignatureError: If the body is not a valid payload
    """
    try:
        raw = json.loads(body)
    except ValueError as e:
        raise WebhookSignatureError("Invalid webhook payload: malformed JSON") from e
    if not isinstance(raw, dict):
        raise WebhookSignatureError("Invalid webhook payload: expected a JSON object")

    network = raw.get("network")
    if network and network not in SUPPORTED_NETWORKS:
        logger.warning("Unknown network in PayzCore webhook: %s", network)
    token = raw.get("token")
    if token and token not in SUPPORTED_TOKENS:
        logger.warning("Unknown token in PayzCore webhook: %s", token)

    try:
        return WebhookPayload.model_validate(raw)
    except ModelValidationError as e:
        raise WebhookSignatureError(
            f"Invalid webhook payload: {e.error_count()} invalid field(s)"
        ) from e


def construct_event(
    body: Body,
    signature: str,
    secret: str,
    timestamp: Optional[str] = None,
    tolerance_ms: int = DEFAULT_TOLERANCE_MS,
) -> WebhookPayload:
    """
    Verify the signature and parse the webhook payload.

    Parsing problems after a valid signature are reported with a generic
    message so webhook senders learn nothing about the parser.

    Raises:
        WebhookSignatureError: If the signature is invalid or the payload
            cannot be parsed
    """
    if not verify_webhook_signature(body, signature, secret, timestamp, tolerance_ms):
        raise WebhookSignatureError()

    try:
        return parse_webhook(body)
    except Exception as e:
        raise WebhookSignatureError("Invalid webhook payload") from e
