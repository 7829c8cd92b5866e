from decimal import Decimal
from typing import Any, Protocol

import structlog

from payment_authorization.domain.models import PaymentScheme


logger = structlog.get_logger()


ACCOUNT_NOT_FOUND = "No account found for account number : {account_number}"
SCHEME_NOT_ENABLED = "Payment scheme : {scheme} - is not enabled for account : {account_number}"
INSUFFICIENT_BALANCE = "Account : {account_number} - does not have the required balance to complete the transaction"
ACCOUNT_NOT_LIVE = "Account : {account_number} - is not live"
PAYMENT_AUTHORIZED = "Payment of {amount} via {scheme} authorized for account : {account_number}"


def account_not_found(account_number: str) -> str:
    return ACCOUNT_NOT_FOUND.format(account_number=account_number)


def scheme_not_enabled(scheme: PaymentScheme, account_number: str) -> str:
    return SCHEME_NOT_ENABLED.format(scheme=scheme.value, account_number=account_number)


def insufficient_balance(account_number: str) -> str:
    return INSUFFICIENT_BALANCE.format(account_number=account_number)


def account_not_live(account_number: str) -> str:
    return ACCOUNT_NOT_LIVE.format(account_number=account_number)


def payment_authorized(amount: Decimal, scheme: PaymentScheme, account_number: str) -> str:
    return PAYMENT_AUTHORIZED.format(amount=amount, scheme=scheme.value, account_number=account_number)


class PaymentNotifier(Protocol):
    """Receives one message per authorization decision.

    Implementations must not raise into the caller's control flow; the
    decision is already made when ``notify`` is called.
    """

    def notify(self, message: str, **context: Any) -> None: ...


class LoggingNotifier:
    def __init__(self, log: structlog.stdlib.BoundLogger | None = None) -> None:
        self._log = log or logger

    def notify(self, message: str, **context: Any) -> None:
        self._log.info("payment_notification", message=message, **context)
