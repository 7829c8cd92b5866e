"""Application layer - services and use cases."""

from payment_authorization.application.notifications import LoggingNotifier, PaymentNotifier
from payment_authorization.application.services import PaymentService
from payment_authorization.application.unit_of_work import UnitOfWork


__all__ = [
    "LoggingNotifier",
    "PaymentNotifier",
    "PaymentService",
    "UnitOfWork",
]
