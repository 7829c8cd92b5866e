from decimal import Decimal
from typing import Any, cast

import structlog
from sqlalchemy import CursorResult, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from payment_authorization.domain.exceptions import AccountNotFoundError, OptimisticLockError, RepositoryError
from payment_authorization.domain.models import Account, AccountStatus, AllowedPaymentSchemes


logger = structlog.get_logger()


def to_cents(amount: Decimal) -> int:
    cents = amount.scaleb(2)
    if cents != cents.to_integral_value():
        raise ValueError(f"Amount {amount} has more precision than whole cents")
    return int(cents)


def from_cents(cents: int) -> Decimal:
    return Decimal(cents).scaleb(-2)


class SqlAccountRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def get_account(self, account_number: str) -> Account | None:
        try:
            result = self._session.execute(
                text("""
                    SELECT account_number, balance_cents, status,
                           allowed_payment_schemes, version
                    FROM accounts
                    WHERE account_number = :account_number
                """),
                {"account_number": account_number},
            )
            row = result.fetchone()
        except SQLAlchemyError as exc:
            raise RepositoryError("read", account_number, str(exc)) from exc

        logger.debug("account_retrieved", account_number=account_number, found=row is not None)
        if not row:
            return None
        return Account(
            account_number=row.account_number,
            balance=from_cents(row.balance_cents),
            status=AccountStatus(row.status),
            allowed_payment_schemes=AllowedPaymentSchemes(row.allowed_payment_schemes),
            version=row.version,
        )

    def add_account(self, account: Account) -> None:
        balance_cents = self._balance_cents(account, "insert")
        try:
            self._session.execute(
                text("""
                    INSERT INTO accounts
                        (account_number, balance_cents, status, allowed_payment_schemes, version)
                    VALUES
                        (:account_number, :balance_cents, :status, :allowed_payment_schemes, :version)
                """),
                {
                    "account_number": account.account_number,
                    "balance_cents": balance_cents,
                    "status": account.status.value,
                    "allowed_payment_schemes": account.allowed_payment_schemes.value,
                    "version": account.version,
                },
            )
        except SQLAlchemyError as exc:
            raise RepositoryError("insert", account.account_number, str(exc)) from exc

    def update_account(self, account: Account) -> None:
        balance_cents = self._balance_cents(account, "update")
        try:
            result = cast(
                "CursorResult[Any]",
                self._session.execute(
                    text("""
                        UPDATE accounts
                        SET balance_cents = :balance_cents,
                            status = :status,
                            allowed_payment_schemes = :allowed_payment_schemes,
                            version = version + 1,
                            updated_at = CURRENT_TIMESTAMP
                        WHERE account_number = :account_number AND version = :expected_version
                    """),
                    {
                        "account_number": account.account_number,
                        "balance_cents": balance_cents,
                        "status": account.status.value,
                        "allowed_payment_schemes": account.allowed_payment_schemes.value,
                        "expected_version": account.version,
                    },
                ),
            )
        except SQLAlchemyError as exc:
            raise RepositoryError("update", account.account_number, str(exc)) from exc

        if (result.rowcount or 0) == 0:
            if self._exists(account.account_number):
                raise OptimisticLockError(account.account_number, account.version)
            raise AccountNotFoundError(account.account_number)
        logger.debug("account_updated", account_number=account.account_number, version=account.version + 1)

    def _exists(self, account_number: str) -> bool:
        try:
            result = self._session.execute(
                text("SELECT 1 FROM accounts WHERE account_number = :account_number"),
                {"account_number": account_number},
            )
            return result.fetchone() is not None
        except SQLAlchemyError as exc:
            raise RepositoryError("read", account_number, str(exc)) from exc

    @staticmethod
    def _balance_cents(account: Account, operation: str) -> int:
        try:
            return to_cents(account.balance)
        except ValueError as exc:
            raise RepositoryError(operation, account.account_number, str(exc)) from exc
