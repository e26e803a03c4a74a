from collections.abc import Callable

import structlog

from bank_account.domain.exceptions import (
    AccountNotFoundError,
    DomainError,
    SynchronizationFailedError,
)
from bank_account.domain.models import Account
from bank_account.domain.oracle import BalanceOracle, RandomBalanceOracle
from bank_account.infrastructure.metrics import (
    ACCOUNT_OPERATIONS_TOTAL,
    BALANCE_SYNC_TOTAL,
    track_sync_duration,
)
from bank_account.infrastructure.repositories import AccountRepository


logger = structlog.get_logger()


class AccountService:
    """Id-addressed account use cases.

    Domain errors are logged with their code, counted and re-raised unchanged.
    """

    def __init__(
        self,
        repository: AccountRepository,
        oracle_factory: Callable[[], BalanceOracle] = RandomBalanceOracle,
    ) -> None:
        self.repository = repository
        self._oracle_factory = oracle_factory

    def open_account(self, initial_balance: float = 0, oracle: BalanceOracle | None = None) -> Account:
        try:
            account = Account(initial_balance, oracle=oracle if oracle is not None else self._oracle_factory())
        except DomainError as exc:
            self._rejected("open_account", exc, initial_balance=initial_balance)
            raise

        self.repository.add(account)
        ACCOUNT_OPERATIONS_TOTAL.labels(operation="open_account", status="ok").inc()
        logger.info("account_opened", account_id=account.id, balance=account.balance)
        return account

    def get_account(self, account_id: str) -> Account:
        account = self.repository.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def get_balance(self, account_id: str) -> float:
        return self.get_account(account_id).get_balance()

    def deposit(self, account_id: str, amount: float) -> float:
        log = logger.bind(account_id=account_id, amount=amount)
        try:
            account = self.get_account(account_id)
            account.deposit(amount)
        except DomainError as exc:
            self._rejected("deposit", exc, log=log)
            raise

        ACCOUNT_OPERATIONS_TOTAL.labels(operation="deposit", status="ok").inc()
        log.info("balance_deposited", balance_after=account.balance)
        return account.balance

    def withdraw(self, account_id: str, amount: float) -> float:
        log = logger.bind(account_id=account_id, amount=amount)
        try:
            account = self.get_account(account_id)
            account.withdraw(amount)
        except DomainError as exc:
            self._rejected("withdraw", exc, log=log)
            raise

        ACCOUNT_OPERATIONS_TOTAL.labels(operation="withdraw", status="ok").inc()
        log.info("balance_withdrawn", balance_after=account.balance)
        return account.balance

    def transfer(self, source_id: str, target_id: str, amount: float) -> None:
        log = logger.bind(source=source_id, target=target_id, amount=amount)
        try:
            source = self.get_account(source_id)
            target = self.get_account(target_id)
            source.transfer(amount, target)
        except DomainError as exc:
            self._rejected("transfer", exc, log=log)
            raise

        ACCOUNT_OPERATIONS_TOTAL.labels(operation="transfer", status="ok").inc()
        log.info(
            "balance_transferred",
            source_balance_after=source.balance,
            target_balance_after=target.balance,
        )

    @track_sync_duration
    async def synchronize(self, account_id: str) -> float:
        log = logger.bind(account_id=account_id)
        try:
            account = self.get_account(account_id)
            balance_before = account.balance
            await account.synchronize_balance()
        except SynchronizationFailedError as exc:
            BALANCE_SYNC_TOTAL.labels(outcome="failed").inc()
            self._rejected("synchronize", exc, log=log)
            raise
        except DomainError as exc:
            self._rejected("synchronize", exc, log=log)
            raise
        except Exception:
            BALANCE_SYNC_TOTAL.labels(outcome="error").inc()
            ACCOUNT_OPERATIONS_TOTAL.labels(operation="synchronize", status="ERROR").inc()
            log.exception("synchronize_failed")
            raise

        BALANCE_SYNC_TOTAL.labels(outcome="success").inc()
        ACCOUNT_OPERATIONS_TOTAL.labels(operation="synchronize", status="ok").inc()
        log.info("balance_synchronized", balance_before=balance_before, balance_after=account.balance)
        return account.balance

    def _rejected(
        self,
        operation: str,
        exc: DomainError,
        log: structlog.stdlib.BoundLogger | None = None,
        **context: object,
    ) -> None:
        ACCOUNT_OPERATIONS_TOTAL.labels(operation=operation, status=exc.code).inc()
        (log or logger).info(f"{operation}_rejected", error_code=exc.code, reason=str(exc), **context)
