import threading
from dataclasses import replace
from decimal import Decimal
from typing import Self

import structlog

from payment_authorization.domain.exceptions import AccountNotFoundError, OptimisticLockError
from payment_authorization.domain.models import Account, AccountStatus, AllowedPaymentSchemes


logger = structlog.get_logger()


class InMemoryAccountRepository:
    def __init__(self, accounts: list[Account] | None = None) -> None:
        self._accounts: dict[str, Account] = {}
        self._lock = threading.Lock()
        for account in accounts or []:
            self.add_account(account)

    @classmethod
    def with_default_accounts(cls) -> Self:
        return cls(
            [
                Account(
                    account_number="1",
                    balance=Decimal("200.00"),
                    status=AccountStatus.LIVE,
                    allowed_payment_schemes=AllowedPaymentSchemes.BANK_TO_BANK_TRANSFER,
                )
            ]
        )

    def add_account(self, account: Account) -> None:
        with self._lock:
            self._accounts[account.account_number] = replace(account)

    def get_account(self, account_number: str) -> Account | None:
        logger.debug("account_retrieved", account_number=account_number)
        with self._lock:
            stored = self._accounts.get(account_number)
            return replace(stored) if stored else None

    def update_account(self, account: Account) -> None:
        logger.debug("account_updated", account_number=account.account_number)
        with self._lock:
            stored = self._accounts.get(account.account_number)
            if stored is None:
                raise AccountNotFoundError(account.account_number)
            if stored.version != account.version:
                raise OptimisticLockError(account.account_number, account.version)
            self._accounts[account.account_number] = replace(account, version=account.version + 1)

    def __len__(self) -> int:
        return len(self._accounts)
