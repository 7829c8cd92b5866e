"""Unit tests for InMemoryAccountRepository."""

from decimal import Decimal

import pytest

from payment_authorization.domain.exceptions import AccountNotFoundError, OptimisticLockError
from payment_authorization.domain.models import AccountStatus, AllowedPaymentSchemes
from payment_authorization.infrastructure.repositories import InMemoryAccountRepository
from tests.conftest import create_account


class TestInMemoryAccountRepository:
    """Tests for the dict-backed account store."""

    def test_get_unknown_account_returns_none(self) -> None:
        """Unknown account number yields None."""
        assert InMemoryAccountRepository().get_account("999") is None

    def test_default_accounts(self) -> None:
        """Default store holds the runner's sample account."""
        repository = InMemoryAccountRepository.with_default_accounts()

        account = repository.get_account("1")

        assert len(repository) == 1
        assert account is not None
        assert account.balance == Decimal("200.00")
        assert account.status == AccountStatus.LIVE
        assert account.allowed_payment_schemes == AllowedPaymentSchemes.BANK_TO_BANK_TRANSFER

    def test_get_returns_copy(self) -> None:
        """Mutating a read account does not touch the store."""
        repository = InMemoryAccountRepository([create_account(balance="20.00")])

        account = repository.get_account("1")
        assert account is not None
        account.debit(Decimal("5.00"))

        stored = repository.get_account("1")
        assert stored is not None
        assert stored.balance == Decimal("20.00")
        assert stored is not account

    def test_add_stores_copy(self) -> None:
        """Seeded accounts are not aliased."""
        seed = create_account(balance="20.00")
        repository = InMemoryAccountRepository([seed])

        seed.debit(Decimal("20.00"))

        stored = repository.get_account("1")
        assert stored is not None
        assert stored.balance == Decimal("20.00")

    def test_update_overwrites_and_bumps_version(self) -> None:
        """Update persists the account and increments its version."""
        repository = InMemoryAccountRepository([create_account(balance="20.00")])
        account = repository.get_account("1")
        assert account is not None
        account.debit(Decimal("7.50"))

        repository.update_account(account)

        stored = repository.get_account("1")
        assert stored is not None
        assert stored.balance == Decimal("12.50")
        assert stored.version == 2

    def test_update_with_stale_version_raises(self) -> None:
        """Second writer holding the old version loses."""
        repository = InMemoryAccountRepository([create_account(balance="20.00")])
        first = repository.get_account("1")
        second = repository.get_account("1")
        assert first is not None
        assert second is not None

        first.debit(Decimal("15.00"))
        repository.update_account(first)
        second.debit(Decimal("15.00"))

        with pytest.raises(OptimisticLockError):
            repository.update_account(second)

        stored = repository.get_account("1")
        assert stored is not None
        assert stored.balance == Decimal("5.00")

    def test_update_unknown_account_raises(self) -> None:
        """Updating an account the store never held is a fault."""
        with pytest.raises(AccountNotFoundError):
            InMemoryAccountRepository().update_account(create_account(account_number="404"))
