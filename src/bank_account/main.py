import asyncio
import sys

import structlog

from bank_account.application.services import AccountService
from bank_account.config import Settings, settings
from bank_account.domain.exceptions import SynchronizationFailedError
from bank_account.domain.oracle import RandomBalanceOracle
from bank_account.infrastructure.metrics import start_metrics_server
from bank_account.infrastructure.repositories import AccountRepository
from bank_account.logging import configure_logging


logger = structlog.get_logger()


async def reconcile(config: Settings) -> int:
    """Open an account, synchronize it once and return the process exit code."""
    service = AccountService(
        AccountRepository(),
        oracle_factory=lambda: RandomBalanceOracle.from_settings(config),
    )
    account = service.open_account(config.initial_balance)

    try:
        balance = await service.synchronize(account.id)
    except SynchronizationFailedError:
        logger.warning("reconciliation_failed", account_id=account.id, balance=account.balance)
        return 1

    logger.info("reconciliation_completed", account_id=account.id, balance=balance)
    return 0


def main() -> None:
    configure_logging(
        level=settings.log_level,
        log_format=settings.log_format,
    )

    logger.info(
        "starting_reconciliation",
        initial_balance=settings.initial_balance,
        oracle_failure_rate=settings.oracle_failure_rate,
        log_level=settings.log_level,
        metrics_enabled=settings.metrics_enabled,
    )

    if settings.metrics_enabled:
        start_metrics_server(host=settings.metrics_host, port=settings.metrics_port)

    sys.exit(asyncio.run(reconcile(settings)))


if __name__ == "__main__":
    main()
