"""Domain package exports for value objects and ports."""

from .entities import (
    Borrower,
    DisbursementRequest,
    DraftBorrower,
    Notification,
    NotificationType,
    OnboardingLink,
    coerce_amount,
)
from .errors import (
    ConfigError,
    DomainError,
    GatewayError,
    SchemaError,
    TransportError,
    ValidationError,
)
from .ports import BorrowerGateway, BorrowerId, TimerPort, UseCaseError

__all__ = [
    "Borrower",
    "BorrowerGateway",
    "BorrowerId",
    "ConfigError",
    "DisbursementRequest",
    "DomainError",
    "DraftBorrower",
    "GatewayError",
    "Notification",
    "NotificationType",
    "OnboardingLink",
    "SchemaError",
    "TimerPort",
    "TransportError",
    "UseCaseError",
    "ValidationError",
    "coerce_amount",
]
