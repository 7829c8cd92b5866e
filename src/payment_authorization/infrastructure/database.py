from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    func,
)
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


metadata = MetaData()

accounts_table = Table(
    "accounts",
    metadata,
    Column("account_number", String(34), primary_key=True),
    Column("balance_cents", BigInteger, nullable=False),
    Column("status", String(32), nullable=False, server_default="LIVE"),
    Column("allowed_payment_schemes", Integer, nullable=False, server_default="0"),
    Column("version", Integer, nullable=False, server_default="1"),
    Column("updated_at", DateTime(timezone=True), server_default=func.now()),
    CheckConstraint("balance_cents >= 0", name="ck_accounts_balance_non_negative"),
)


class Database:
    def __init__(self, database_url: str) -> None:
        engine_options: dict[str, object] = {"echo": False, "pool_pre_ping": True}
        if database_url.startswith("sqlite") and ":memory:" in database_url:
            # One shared connection, otherwise every checkout sees an empty database.
            engine_options["connect_args"] = {"check_same_thread": False}
            engine_options["poolclass"] = StaticPool
        self.engine = create_engine(database_url, **engine_options)
        self.session_factory = sessionmaker(
            self.engine,
            class_=Session,
            expire_on_commit=False,
            autoflush=False,
        )

    def create_schema(self) -> None:
        metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        with self.session_factory() as session:
            try:
                yield session
            except Exception:
                session.rollback()
                raise

    def close(self) -> None:
        self.engine.dispose()
