from types import TracebackType
from typing import Self

from sqlalchemy.orm import Session

from payment_authorization.infrastructure.repositories import SqlAccountRepository


class UnitOfWork:
    def __init__(self, session: Session) -> None:
        self._session = session
        self.accounts = SqlAccountRepository(session)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()
