from decimal import Decimal
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from payment_authorization.domain.models import PaymentScheme


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Account store: seeded in-memory accounts or a SQL database
    account_store: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///./accounts.db"

    # Request issued by the console runner
    runner_account_number: str = "1"
    runner_amount: Decimal = Decimal("100.00")
    runner_payment_scheme: PaymentScheme = PaymentScheme.BANK_TO_BANK_TRANSFER


settings = Settings()
