"""Payment models for PayzCore SDK."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import PayzCoreModel


class Network(str, Enum):
    """Supported blockchain networks."""

    TRC20 = "TRC20"
    BEP20 = "BEP20"
    ERC20 = "ERC20"
    POLYGON = "POLYGON"
    ARBITRUM = "ARBITRUM"


class Token(str, Enum):
    """Supported stablecoin tokens."""

    USDT = "USDT"
    USDC = "USDC"


class PaymentStatus(str, Enum):
    """Payment status."""

    PENDING = "pending"
    CONFIRMING = "confirming"
    PARTIAL = "partial"
    PAID = "paid"
    OVERPAID = "overpaid"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class AvailableNetwork(PayzCoreModel):
    """A network the payer may choose on the hosted payment page."""

    network: str
    name: str
    tokens: list[str] = Field(default_factory=list)


class Payment(PayzCoreModel):
    """A payment as returned on creation."""

    id: str
    address: Optional[str] = None
    amount: Decimal
    network: Optional[str] = None
    token: Optional[str] = None
    status: str
    expires_at: datetime
    external_order_id: Optional[str] = None
    qr_code: Optional[str] = None
    # Static wallet pool mode
    notice: Optional[str] = None
    original_amount: Optional[Decimal] = None
    requires_txid: Optional[bool] = None
    confirm_endpoint: Optional[str] = None
    # Set when the payment was created without a network
    awaiting_network: Optional[bool] = None
    payment_url: Optional[str] = None
    available_networks: Optional[list[AvailableNetwork]] = None


class CreatePaymentResponse(PayzCoreModel):
    """Response from payment creation."""

    success: bool = True
    existing: bool = False
    payment: Payment


class PaymentListItem(PayzCoreModel):
    """A payment as returned by the list endpoint."""

    id: str
    external_ref: str
    external_order_id: Optional[str] = None
    network: Optional[str] = None
    token: Optional[str] = None
    address: Optional[str] = None
    expected_amount: Decimal
    paid_amount: Decimal
    status: str
    tx_hash: Optional[str] = None
    expires_at: datetime
    paid_at: Optional[datetime] = None
    created_at: datetime


class ListPaymentsResponse(PayzCoreModel):
    """Response from listing payments."""

    success: bool = True
    payments: list[PaymentListItem] = Field(default_factory=list)


class Transaction(PayzCoreModel):
    """An on-chain transfer observed for a payment."""

    tx_hash: str
    amount: Decimal
    from_address: str = Field(alias="from")
    confirmed: bool
    confirmations: int = 0


class PaymentDetail(PayzCoreModel):
    """Full payment state including observed transactions."""

    id: str
    status: str
    expected_amount: Decimal
    paid_amount: Decimal
    address: Optional[str] = None
    network: Optional[str] = None
    token: Optional[str] = None
    tx_hash: Optional[str] = None
    expires_at: datetime
    transactions: list[Transaction] = Field(default_factory=list)
    awaiting_network: Optional[bool] = None


class GetPaymentResponse(PayzCoreModel):
    """Response from fetching a payment."""

    success: bool = True
    payment: PaymentDetail


class CancelledPayment(PayzCoreModel):
    """Payment summary returned after cancellation."""

    id: str
    status: str = PaymentStatus.CANCELLED.value
    expected_amount: Decimal
    address: Optional[str] = None
    network: Optional[str] = None
    token: Optional[str] = None
    expires_at: datetime


class CancelPaymentResponse(PayzCoreModel):
    """Response from cancelling a payment."""

    success: bool = True
    payment: CancelledPayment


class ConfirmPaymentResponse(PayzCoreModel):
    """Response from submitting a transaction hash for a payment."""

    success: bool = True
    status: str
    verified: bool
    amount_received: Optional[Decimal] = None
    amount_expected: Optional[Decimal] = None
    message: Optional[str] = None
