"""
Payments resource for PayzCore SDK.

This module provides both async and sync interfaces for payment operations.
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..models.payment import (
    CancelPaymentResponse,
    ConfirmPaymentResponse,
    CreatePaymentResponse,
    GetPaymentResponse,
    ListPaymentsResponse,
    Network,
    PaymentStatus,
    Token,
)
from .base import AsyncBaseResource, SyncBaseResource, encode_id

Amount = Union[int, float, Decimal]


def _value(item: Any) -> Any:
    return item.value if isinstance(item, Enum) else item


def _create_body(
    amount: Amount,
    external_ref: str,
    network: Optional[Union[Network, str]],
    token: Optional[Union[Token, str]],
    external_order_id: Optional[str],
    address: Optional[str],
    expires_in: Optional[int],
    metadata: Optional[Dict[str, Any]],
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "amount": float(amount) if isinstance(amount, Decimal) else amount,
        "external_ref": external_ref,
    }
    # Without a network the payer picks one on the hosted payment page
    optional = {
        "network": _value(network),
        "token": _value(token),
        "external_order_id": external_order_id,
        "address": address,
        "expires_in": expires_in,
        "metadata": metadata,
    }
    body.update({k: v for k, v in optional.items() if v is not None})
    return body


def _list_params(
    status: Optional[Union[PaymentStatus, str]],
    limit: Optional[int],
    offset: Optional[int],
) -> Dict[str, Any]:
    return {"status": _value(status) or None, "limit": limit, "offset": offset}


class AsyncPaymentsResource(AsyncBaseResource):
    """Async resource for payment operations.

    Example:
        ```python
        async with AsyncPayzCore("pk_live_xxx") as client:
            created = await client.payments.create(amount=50, external_ref="user-123")
            detail = await client.payments.get(created.payment.id)
        ```
    """

    async def create(
        self,
        amount: Amount,
        external_ref: str,
        network: Optional[Union[Network, str]] = None,
        token: Optional[Union[Token, str]] = None,
        external_order_id: Optional[str] = None,
        address: Optional[str] = None,
        expires_in: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> CreatePaymentResponse:
        """Create a payment (or return the existing one for the same external ref).

        Args:
            amount: Amount to collect. Sent as a JSON number, so Decimal
                values are converted to float; amounts beyond float precision
                (about 15 significant digits) are rounded
            external_ref: Your reference for the payer
            network: Blockchain network, omit to let the payer choose
            token: Token to monitor, server default is USDT
            external_order_id: Your order id, used for idempotency
            address: Static address to assign (dedicated mode only)
            expires_in: Expiry in seconds (300-86400)
            metadata: Arbitrary data echoed back in webhooks

        Returns:
            CreatePaymentResponse with the payment and whether it already existed
        """
        response = await self._post(
            "/v1/payments",
            _create_body(
                amount, external_ref, network, token, external_order_id, address, expires_in, metadata
            ),
        )
        return CreatePaymentResponse.model_validate(response)

    async def list(
        self,
        status: Optional[Union[PaymentStatus, str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> ListPaymentsResponse:
        """List payments, optionally filtered by status."""
        response = await self._get("/v1/payments", params=_list_params(status, limit, offset))
        return ListPaymentsResponse.model_validate(response)

    async def get(self, payment_id: str) -> GetPaymentResponse:
        """Get a payment with its observed transactions."""
        response = await self._get(f"/v1/payments/{encode_id(payment_id)}")
        return GetPaymentResponse.model_validate(response)

    async def cancel(self, payment_id: str) -> CancelPaymentResponse:
        """Cancel a pending payment."""
        response = await self._patch(
            f"/v1/payments/{encode_id(payment_id)}",
            {"status": PaymentStatus.CANCELLED.value},
        )
        return CancelPaymentResponse.model_validate(response)

    async def confirm(self, payment_id: str, tx_hash: str) -> ConfirmPaymentResponse:
        """Submit the payer's transaction hash (txid pool mode)."""
        response = await self._post(
            f"/v1/payments/{encode_id(payment_id)}/confirm",
            {"tx_hash": tx_hash},
        )
        return ConfirmPaymentResponse.model_validate(response)


class PaymentsResource(SyncBaseResource):
    """Sync resource for payment operations.

    Example:
        ```python
        with PayzCore("pk_live_xxx") as client:
            created = client.payments.create(amount=50, external_ref="user-123")
            client.payments.cancel(created.payment.id)
        ```
    """

    def create(
        self,
        amount: Amount,
        external_ref: str,
        network: Optional[Union[Network, str]] = None,
        token: Optional[Union[Token, str]] = None,
        external_order_id: Optional[str] = None,
        address: Optional[str] = None,
        expires_in: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> CreatePaymentResponse:
        """Create a payment (or return the existing one for the same external ref).

        See :meth:`AsyncPaymentsResource.create` for the arguments.
        """
        response = self._post(
            "/v1/payments",
            _create_body(
                amount, external_ref, network, token, external_order_id, address, expires_in, metadata
            ),
        )
        return CreatePaymentResponse.model_validate(response)

    def list(
        self,
        status: Optional[Union[PaymentStatus, str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> ListPaymentsResponse:
        """List payments, optionally filtered by status."""
        response = self._get("/v1/payments", params=_list_params(status, limit, offset))
        return ListPaymentsResponse.model_validate(response)

    def get(self, payment_id: str) -> GetPaymentResponse:
        """Get a payment with its observed transactions."""
        response = self._get(f"/v1/payments/{encode_id(payment_id)}")
        return GetPaymentResponse.model_validate(response)

    def cancel(self, payment_id: str) -> CancelPaymentResponse:
        """Cancel a pending payment."""
        response = self._patch(
            f"/v1/payments/{encode_id(payment_id)}",
            {"status": PaymentStatus.CANCELLED.value},
        )
        return CancelPaymentResponse.model_validate(response)

    def confirm(self, payment_id: str, tx_hash: str) -> ConfirmPaymentResponse:
        """Submit the payer's transaction hash (txid pool mode)."""
        response = self._post(
            f"/v1/payments/{encode_id(payment_id)}/confirm",
            {"tx_hash": tx_hash},
        )
        return ConfirmPaymentResponse.model_validate(response)


__all__ = [
    "AsyncPaymentsResource",
    "PaymentsResource",
]
