"""
PayzCore Python SDK

Client library for the PayzCore blockchain payment monitoring API, plus
webhook signature verification.
"""

from .client import AsyncPayzCore, PayzCore
from .config import ClientConfig
from .models.errors import (
    AuthenticationError,
    ForbiddenError,
    IdempotencyError,
    NotFoundError,
    PayzCoreError,
    RateLimitError,
    ValidationError,
    WebhookSignatureError,
)
from .models.payment import (
    AvailableNetwork,
    CancelPaymentResponse,
    ConfirmPaymentResponse,
    CreatePaymentResponse,
    GetPaymentResponse,
    ListPaymentsResponse,
    Network,
    Payment,
    PaymentDetail,
    PaymentListItem,
    PaymentStatus,
    Token,
    Transaction,
)
from .models.project import CreateProjectResponse, ListProjectsResponse, Project, ProjectListItem
from .models.webhook import WebhookEventType, WebhookPayload
from .webhooks import (
    SIGNATURE_HEADER,
    SUPPORTED_NETWORKS,
    SUPPORTED_TOKENS,
    TIMESTAMP_HEADER,
    compute_webhook_signature,
    construct_event,
    parse_webhook,
    verify_webhook_signature,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "PayzCore",
    "AsyncPayzCore",
    "ClientConfig",
    # Errors
    "PayzCoreError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "IdempotencyError",
    "WebhookSignatureError",
    # Webhooks
    "verify_webhook_signature",
    "compute_webhook_signature",
    "parse_webhook",
    "construct_event",
    "SUPPORTED_NETWORKS",
    "SUPPORTED_TOKENS",
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    # Payment models
    "Network",
    "Token",
    "PaymentStatus",
    "AvailableNetwork",
    "Payment",
    "CreatePaymentResponse",
    "PaymentListItem",
    "ListPaymentsResponse",
    "Transaction",
    "PaymentDetail",
    "GetPaymentResponse",
    "CancelPaymentResponse",
    "ConfirmPaymentResponse",
    # Project models
    "Project",
    "CreateProjectResponse",
    "ProjectListItem",
    "ListProjectsResponse",
    # Webhook models
    "WebhookEventType",
    "WebhookPayload",
]
