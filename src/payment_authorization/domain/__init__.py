"""Domain layer - business entities and rules."""

from payment_authorization.domain.exceptions import (
    AccountNotFoundError,
    DomainError,
    OptimisticLockError,
    RepositoryError,
)
from payment_authorization.domain.models import (
    Account,
    AccountStatus,
    AllowedPaymentSchemes,
    MakePaymentRequest,
    MakePaymentResult,
    PaymentScheme,
)


__all__ = [
    "Account",
    "AccountNotFoundError",
    "AccountStatus",
    "AllowedPaymentSchemes",
    "DomainError",
    "MakePaymentRequest",
    "MakePaymentResult",
    "OptimisticLockError",
    "PaymentScheme",
    "RepositoryError",
]
