"""Domain layer - business entities and rules."""

from bank_account.domain.exceptions import (
    AccountNotFoundError,
    DomainError,
    InsufficientFundsError,
    InvalidAmountError,
    SynchronizationFailedError,
    TransferToSelfError,
)
from bank_account.domain.models import Account
from bank_account.domain.oracle import FAILED_FETCH, BalanceOracle, RandomBalanceOracle


__all__ = [
    "FAILED_FETCH",
    "Account",
    "AccountNotFoundError",
    "BalanceOracle",
    "DomainError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "RandomBalanceOracle",
    "SynchronizationFailedError",
    "TransferToSelfError",
]
