"""PayzCore SDK Models."""
from .base import PayzCoreModel
from .errors import (
    AuthenticationError,
    ForbiddenError,
    IdempotencyError,
    NotFoundError,
    PayzCoreError,
    RateLimitError,
    ValidationError,
    WebhookSignatureError,
)
from .payment import (
    AvailableNetwork,
    CancelledPayment,
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
from .project import CreateProjectResponse, ListProjectsResponse, Project, ProjectListItem
from .webhook import WebhookEventType, WebhookPayload

__all__ = [
    "PayzCoreModel",
    "PayzCoreError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "IdempotencyError",
    "WebhookSignatureError",
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
    "CancelledPayment",
    "CancelPaymentResponse",
    "ConfirmPaymentResponse",
    "Project",
    "CreateProjectResponse",
    "ProjectListItem",
    "ListProjectsResponse",
    "WebhookEventType",
    "WebhookPayload",
]
