import sys

import structlog

from payment_authorization.application.services import PaymentService
from payment_authorization.application.unit_of_work import UnitOfWork
from payment_authorization.config import Settings, settings
from payment_authorization.domain.models import MakePaymentRequest, MakePaymentResult
from payment_authorization.infrastructure.database import Database
from payment_authorization.infrastructure.repositories import InMemoryAccountRepository
from payment_authorization.logging import configure_logging


logger = structlog.get_logger()


def build_request(config: Settings) -> MakePaymentRequest:
    return MakePaymentRequest(
        debtor_account_number=config.runner_account_number,
        amount=config.runner_amount,
        payment_scheme=config.runner_payment_scheme,
    )


def authorize_with_database(request: MakePaymentRequest, database: Database) -> MakePaymentResult:
    database.create_schema()
    with database.session() as session, UnitOfWork(session) as uow:
        result = PaymentService(uow.accounts).make_payment(request)
        if result.success:
            uow.commit()
        return result


def run(config: Settings) -> MakePaymentResult:
    request = build_request(config)

    if config.account_store == "sql":
        database = Database(config.database_url)
        try:
            result = authorize_with_database(request, database)
        finally:
            database.close()
    else:
        service = PaymentService(InMemoryAccountRepository.with_default_accounts())
        result = service.make_payment(request)

    logger.info(
        f"Payment was {'Successful' if result.success else 'Unsuccessful'} "
        f"for account : {request.debtor_account_number}",
        request_id=request.request_id,
    )
    return result


def main() -> int:
    configure_logging(
        level=settings.log_level,
        log_format=settings.log_format,
    )

    logger.info(
        "starting_payment_runner",
        account_store=settings.account_store,
        log_level=settings.log_level,
    )

    result = run(settings)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
