"""Shared pytest fixtures for payment authorization tests."""

from collections.abc import Generator
from decimal import Decimal
from typing import Any
from unittest.mock import MagicMock

import pytest

from payment_authorization.domain.models import (
    Account,
    AccountStatus,
    AllowedPaymentSchemes,
    MakePaymentRequest,
    PaymentScheme,
)
from payment_authorization.infrastructure.database import Database
from payment_authorization.infrastructure.repositories import InMemoryAccountRepository


class RecordingNotifier:
    """Notifier test double that keeps every message it receives."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.contexts: list[dict[str, Any]] = []

    def notify(self, message: str, **context: Any) -> None:
        self.messages.append(message)
        self.contexts.append(context)


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Create a notifier that records messages."""
    return RecordingNotifier()


@pytest.fixture
def mock_account_repository() -> MagicMock:
    """Create mock AccountRepository."""
    repo = MagicMock()
    repo.get_account = MagicMock(return_value=None)
    repo.update_account = MagicMock(return_value=None)
    return repo


@pytest.fixture
def sample_account() -> Account:
    """Create the runner's sample account: live, bank-to-bank only, 200.00."""
    return Account(
        account_number="1",
        balance=Decimal("200.00"),
        status=AccountStatus.LIVE,
        allowed_payment_schemes=AllowedPaymentSchemes.BANK_TO_BANK_TRANSFER,
    )


@pytest.fixture
def memory_repository(sample_account: Account) -> InMemoryAccountRepository:
    """Create in-memory repository holding the sample account."""
    return InMemoryAccountRepository([sample_account])


@pytest.fixture
def database() -> Generator[Database, None, None]:
    """Create an in-memory SQLite database with the accounts schema."""
    db = Database("sqlite:///:memory:")
    db.create_schema()
    yield db
    db.close()


def create_account(
    balance: str | Decimal = "20.00",
    status: AccountStatus = AccountStatus.LIVE,
    allowed: AllowedPaymentSchemes = AllowedPaymentSchemes.AUTOMATED_CLEARING,
    account_number: str = "1",
    version: int = 1,
) -> Account:
    """Helper to create Account with custom values."""
    return Account(
        account_number=account_number,
        balance=Decimal(balance),
        status=status,
        allowed_payment_schemes=allowed,
        version=version,
    )


def create_request(
    amount: str | Decimal = "20.00",
    scheme: PaymentScheme = PaymentScheme.AUTOMATED_CLEARING,
    account_number: str = "1",
) -> MakePaymentRequest:
    """Helper to create MakePaymentRequest with custom values."""
    return MakePaymentRequest(
        debtor_account_number=account_number,
        amount=Decimal(amount),
        payment_scheme=scheme,
    )
