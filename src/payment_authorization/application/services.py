import structlog

from payment_authorization.application import notifications
from payment_authorization.application.notifications import LoggingNotifier, PaymentNotifier
from payment_authorization.domain.exceptions import RepositoryError
from payment_authorization.domain.models import (
    Account,
    AccountStatus,
    MakePaymentRequest,
    MakePaymentResult,
)
from payment_authorization.infrastructure.metrics import (
    PAYMENT_REQUESTS_TOTAL,
    REPOSITORY_ERRORS_TOTAL,
    track_payment_duration,
)
from payment_authorization.infrastructure.repositories import AccountRepository


logger = structlog.get_logger()


class PaymentService:
    """Authorizes outbound payments and debits the debtor account.

    Checks run in a fixed order: account lookup, scheme eligibility, balance,
    then status. The first failing check declines the payment and nothing is
    written. Balance is checked before status, so a non-live account with too
    little money is reported as short of funds.
    """

    def __init__(
        self,
        accounts: AccountRepository,
        notifier: PaymentNotifier | None = None,
    ) -> None:
        self.accounts = accounts
        self.notifier = notifier or LoggingNotifier()

    @track_payment_duration
    def make_payment(self, request: MakePaymentRequest) -> MakePaymentResult:
        log = logger.bind(
            request_id=request.request_id,
            account_number=request.debtor_account_number,
            payment_scheme=request.payment_scheme.value,
            amount=str(request.amount),
        )

        try:
            account = self.accounts.get_account(request.debtor_account_number)
        except RepositoryError as exc:
            self._record_fault("get_account", exc, log)
            raise

        if account is None:
            return self._decline(
                request,
                "ACCOUNT_NOT_FOUND",
                notifications.account_not_found(request.debtor_account_number),
                log,
            )

        if not account.allowed_payment_schemes.permits(request.payment_scheme):
            return self._decline(
                request,
                "SCHEME_NOT_ENABLED",
                notifications.scheme_not_enabled(request.payment_scheme, account.account_number),
                log,
            )

        if account.balance < request.amount:
            log.debug("balance_check_failed", available=str(account.balance))
            return self._decline(
                request,
                "INSUFFICIENT_BALANCE",
                notifications.insufficient_balance(account.account_number),
                log,
            )

        if account.status != AccountStatus.LIVE:
            return self._decline(
                request,
                "ACCOUNT_NOT_LIVE",
                notifications.account_not_live(account.account_number),
                log,
            )

        self._commit(account, request, log)

        PAYMENT_REQUESTS_TOTAL.labels(status="AUTHORIZED", reason="").inc()
        self.notifier.notify(
            notifications.payment_authorized(request.amount, request.payment_scheme, account.account_number),
            request_id=request.request_id,
            account_number=account.account_number,
            outcome="AUTHORIZED",
        )
        return MakePaymentResult(success=True)

    def _commit(
        self,
        account: Account,
        request: MakePaymentRequest,
        log: structlog.stdlib.BoundLogger,
    ) -> None:
        balance_before = account.balance
        account.debit(request.amount)

        try:
            self.accounts.update_account(account)
        except RepositoryError as exc:
            self._record_fault("update_account", exc, log)
            raise

        log.info(
            "payment_authorized",
            balance_before=str(balance_before),
            balance_after=str(account.balance),
        )

    def _decline(
        self,
        request: MakePaymentRequest,
        reason: str,
        message: str,
        log: structlog.stdlib.BoundLogger,
    ) -> MakePaymentResult:
        log.info("payment_declined", reason=reason)
        PAYMENT_REQUESTS_TOTAL.labels(status="DECLINED", reason=reason).inc()
        self.notifier.notify(
            message,
            request_id=request.request_id,
            account_number=request.debtor_account_number,
            outcome="DECLINED",
        )
        return MakePaymentResult(success=False)

    def _record_fault(
        self,
        operation: str,
        exc: RepositoryError,
        log: structlog.stdlib.BoundLogger,
    ) -> None:
        REPOSITORY_ERRORS_TOTAL.labels(operation=operation).inc()
        log.error("payment_authorization_failed", operation=operation, error=str(exc))
