import math

from ulid import ULID

from bank_account.domain.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    SynchronizationFailedError,
    TransferToSelfError,
)
from bank_account.domain.oracle import BalanceOracle, RandomBalanceOracle


def is_usable_number(value: object) -> bool:
    """True for ints and finite floats; bools are rejected."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def validate_amount(amount: object) -> float:
    if not is_usable_number(amount):
        raise InvalidAmountError(amount, "Amount must be a finite number")
    if amount <= 0:  # type: ignore[operator]
        raise InvalidAmountError(amount, "Amount must be positive")
    return amount  # type: ignore[return-value]


class Account:
    """
    Single-entity ledger holding a non-negative balance.

    Accounts compare by identity: two accounts with equal balances are still
    distinct entities. Deposit, withdraw and transfer validate everything before
    mutating, so a rejected call leaves every balance untouched.
    """

    def __init__(
        self,
        initial_balance: float = 0,
        oracle: BalanceOracle | None = None,
        account_id: str | None = None,
    ) -> None:
        if not is_usable_number(initial_balance):
            raise InvalidAmountError(initial_balance, "Initial balance must be a finite number")
        if initial_balance < 0:
            raise InvalidAmountError(initial_balance, "Initial balance cannot be negative")
        self.id = account_id or str(ULID())
        self._balance = initial_balance
        self._oracle = oracle if oracle is not None else RandomBalanceOracle()

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, balance={self._balance!r})"

    @property
    def balance(self) -> float:
        return self._balance

    def get_balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> None:
        amount = validate_amount(amount)
        self._balance = self._credited(amount)

    def withdraw(self, amount: float) -> None:
        amount = validate_amount(amount)
        self._balance = self._debited(amount)

    def transfer(self, amount: float, target: "Account") -> None:
        """Move ``amount`` from this account to ``target``.

        Self-transfer is judged by identity and rejected before any funds check.
        """
        if target is self:
            raise TransferToSelfError(self.id)
        amount = validate_amount(amount)
        source_balance = self._debited(amount)
        target_balance = target._credited(amount)

        self._balance = source_balance
        target._balance = target_balance

    def _debited(self, amount: float) -> float:
        if amount > self._balance:
            raise InsufficientFundsError(self.id, required=amount, available=self._balance)
        try:
            return self._balance - amount
        except OverflowError:
            raise InvalidAmountError(amount, "Resulting balance is not finite") from None

    def _credited(self, amount: float) -> float:
        """Balance after adding ``amount``; must stay finite."""
        try:
            new_balance = self._balance + amount
        except OverflowError:
            new_balance = math.inf
        if not is_usable_number(new_balance):
            raise InvalidAmountError(amount, "Resulting balance is not finite")
        return new_balance

    async def fetch_balance(self) -> float | None:
        return await self._oracle.fetch_balance()

    async def synchronize_balance(self) -> None:
        """Replace the balance with the oracle's value.

        The oracle is queried exactly once. A usable value overwrites the
        balance as-is, negative values included; anything else raises
        ``SynchronizationFailedError`` and keeps the current balance.
        """
        fetched = await self.fetch_balance()
        if not is_usable_number(fetched):
            raise SynchronizationFailedError(self.id, fetched)
        self._balance = fetched  # type: ignore[assignment]
