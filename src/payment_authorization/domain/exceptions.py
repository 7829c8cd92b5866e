class DomainError(Exception):
    """Base exception for domain errors."""


class RepositoryError(DomainError):
    """Raised when the account store cannot complete a read or write."""

    def __init__(self, operation: str, account_number: str, reason: str) -> None:
        self.operation = operation
        self.account_number = account_number
        self.reason = reason
        super().__init__(f"Account store {operation} failed for account {account_number}: {reason}")


class AccountNotFoundError(RepositoryError):
    """Raised when an update targets an account the store does not hold."""

    def __init__(self, account_number: str) -> None:
        super().__init__("update", account_number, "account not found")


class OptimisticLockError(RepositoryError):
    """Raised when optimistic locking conflict occurs."""

    def __init__(self, account_number: str, expected_version: int) -> None:
        self.expected_version = expected_version
        super().__init__("update", account_number, f"version {expected_version} is stale")
