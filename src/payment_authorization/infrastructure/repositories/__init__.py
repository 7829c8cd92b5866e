"""Repository implementations."""

from payment_authorization.infrastructure.repositories.account import SqlAccountRepository
from payment_authorization.infrastructure.repositories.base import AccountRepository
from payment_authorization.infrastructure.repositories.memory import InMemoryAccountRepository


__all__ = [
    "AccountRepository",
    "InMemoryAccountRepository",
    "SqlAccountRepository",
]
