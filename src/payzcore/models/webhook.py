"""Webhook models for PayzCore SDK."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

from pydantic import Field, field_validator

from .base import PayzCoreModel


class WebhookEventType(str, Enum):
    """Webhook event types."""

    PAYMENT_COMPLETED = "payment.completed"
    PAYMENT_OVERPAID = "payment.overpaid"
    PAYMENT_PARTIAL = "payment.partial"
    PAYMENT_EXPIRED = "payment.expired"
    PAYMENT_CANCELLED = "payment.cancelled"


class WebhookPayload(PayzCoreModel):
    """A decoded webhook delivery.

    Every field is optional so partial or newer payload shapes still parse.
    ``event``, ``network``, ``token`` and ``status`` are kept as plain strings
    so values added server-side after this release are accepted. Amounts and
    timestamps fall back to the raw string when they are not in a readable
    format.

    Compare the string fields against :class:`WebhookEventType`,
    :class:`~payzcore.models.payment.Network`,
    :class:`~payzcore.models.payment.Token` and
    :class:`~payzcore.models.payment.PaymentStatus`.
    """

    event: Optional[str] = None
    payment_id: Optional[str] = None
    external_ref: Optional[str] = None
    external_order_id: Optional[str] = None
    network: Optional[str] = None
    token: str = "USDT"
    address: Optional[str] = None
    expected_amount: Optional[Union[Decimal, str]] = Field(default=None, union_mode="left_to_right")
    paid_amount: Optional[Union[Decimal, str]] = Field(default=None, union_mode="left_to_right")
    tx_hash: Optional[str] = None
    status: Optional[str] = None
    # Only set for payment.completed and payment.overpaid
    paid_at: Optional[Union[datetime, str]] = Field(default=None, union_mode="left_to_right")
    metadata: dict[str, Any] = Field(default_factory=dict)
    timestamp: Optional[Union[datetime, str]] = Field(default=None, union_mode="left_to_right")
    # Payment link buyer fields
    buyer_email: Optional[str] = None
    buyer_name: Optional[str] = None
    buyer_note: Optional[str] = None
    payment_link_id: Optional[str] = None
    payment_link_slug: Optional[str] = None

    @field_validator("token", mode="before")
    @classmethod
    def _default_token(cls, value: Any) -> Any:
        return "USDT" if value is None else value

    @field_validator("metadata", mode="before")
    @classmethod
    def _default_metadata(cls, value: Any) -> Any:
        return {} if value is None else value
