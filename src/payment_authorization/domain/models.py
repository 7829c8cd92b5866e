from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum, Flag

from ulid import ULID


class AccountStatus(Enum):
    LIVE = "LIVE"
    DISABLED = "DISABLED"
    INBOUND_PAYMENTS_ONLY = "INBOUND_PAYMENTS_ONLY"


class PaymentScheme(Enum):
    AUTOMATED_CLEARING = "AUTOMATED_CLEARING"
    EXPEDITED_TRANSFER = "EXPEDITED_TRANSFER"
    BANK_TO_BANK_TRANSFER = "BANK_TO_BANK_TRANSFER"

    @property
    def flag(self) -> "AllowedPaymentSchemes":
        return _SCHEME_FLAGS[self]


class AllowedPaymentSchemes(Flag):
    """Outbound schemes an account may use, one independent bit per scheme."""

    NONE = 0
    AUTOMATED_CLEARING = 1 << 0
    EXPEDITED_TRANSFER = 1 << 1
    BANK_TO_BANK_TRANSFER = 1 << 2
    ALL = AUTOMATED_CLEARING | EXPEDITED_TRANSFER | BANK_TO_BANK_TRANSFER

    @classmethod
    def from_schemes(cls, schemes: Iterable[PaymentScheme]) -> "AllowedPaymentSchemes":
        allowed = cls.NONE
        for scheme in schemes:
            allowed |= scheme.flag
        return allowed

    def permits(self, scheme: PaymentScheme) -> bool:
        return (self & scheme.flag).value != 0


_SCHEME_FLAGS: dict[PaymentScheme, AllowedPaymentSchemes] = {
    PaymentScheme.AUTOMATED_CLEARING: AllowedPaymentSchemes.AUTOMATED_CLEARING,
    PaymentScheme.EXPEDITED_TRANSFER: AllowedPaymentSchemes.EXPEDITED_TRANSFER,
    PaymentScheme.BANK_TO_BANK_TRANSFER: AllowedPaymentSchemes.BANK_TO_BANK_TRANSFER,
}


def to_decimal(value: Decimal | int | str) -> Decimal:
    if isinstance(value, float):
        raise TypeError("Currency amounts must not be floats")
    if isinstance(value, Decimal):
        return value
    return Decimal(value)


@dataclass
class Account:
    account_number: str
    balance: Decimal
    status: AccountStatus = AccountStatus.LIVE
    allowed_payment_schemes: AllowedPaymentSchemes = AllowedPaymentSchemes.NONE
    version: int = 1
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        self.balance = to_decimal(self.balance)
        if self.balance < 0:
            raise ValueError("Balance cannot be negative")

    def debit(self, amount: Decimal) -> None:
        if amount <= 0:
            raise ValueError("Debit amount must be positive")
        if amount > self.balance:
            raise ValueError(f"Debit of {amount} exceeds balance of account {self.account_number}")
        self.balance -= amount
        self.updated_at = datetime.now(UTC)


@dataclass
class MakePaymentRequest:
    debtor_account_number: str
    amount: Decimal
    payment_scheme: PaymentScheme
    payment_date: datetime = field(default_factory=lambda: datetime.now(UTC))
    request_id: str = field(default_factory=lambda: str(ULID()))

    def __post_init__(self) -> None:
        self.amount = to_decimal(self.amount)
        if self.amount <= 0:
            raise ValueError("Amount must be positive")


@dataclass
class MakePaymentResult:
    success: bool = False
