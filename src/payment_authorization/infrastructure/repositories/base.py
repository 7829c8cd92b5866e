from typing import Protocol

from payment_authorization.domain.models import Account


class AccountRepository(Protocol):
    """Account store the authorization engine reads from and writes back to.

    ``get_account`` returns an owned copy or ``None`` for an unknown account
    number. ``update_account`` overwrites the stored account by account
    number. Store faults surface as ``RepositoryError``.
    """

    def get_account(self, account_number: str) -> Account | None: ...

    def update_account(self, account: Account) -> None: ...
