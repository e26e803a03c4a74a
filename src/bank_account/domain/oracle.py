import asyncio
import random
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable


if TYPE_CHECKING:
    from bank_account.config import Settings


FAILED_FETCH: Final = None


@runtime_checkable
class BalanceOracle(Protocol):
    """External source of an authoritative account balance.

    Returns a number on success or ``FAILED_FETCH`` when no value is available.
    Raising is reserved for conditions outside that contract.
    """

    async def fetch_balance(self) -> float | None: ...


class RandomBalanceOracle:
    """
    Unreliable balance source backed by a random number generator.

    Each call draws an integer balance in ``[min_balance, max_balance]`` and,
    independently, reports a failed fetch with probability ``failure_rate``.
    """

    def __init__(
        self,
        min_balance: int = 0,
        max_balance: int = 100,
        failure_rate: float = 0.5,
        latency_seconds: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        if min_balance > max_balance:
            raise ValueError("min_balance must not exceed max_balance")
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be between 0 and 1")
        if latency_seconds < 0:
            raise ValueError("latency_seconds cannot be negative")
        self._min_balance = min_balance
        self._max_balance = max_balance
        self._failure_rate = failure_rate
        self._latency_seconds = latency_seconds
        self._rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RandomBalanceOracle":
        return cls(
            min_balance=settings.oracle_min_balance,
            max_balance=settings.oracle_max_balance,
            failure_rate=settings.oracle_failure_rate,
            latency_seconds=settings.oracle_latency_seconds,
            rng=random.Random(settings.oracle_seed),
        )

    async def fetch_balance(self) -> float | None:
        if self._latency_seconds:
            await asyncio.sleep(self._latency_seconds)

        balance = self._rng.randint(self._min_balance, self._max_balance)
        request_failed = self._rng.random() < self._failure_rate
        return FAILED_FETCH if request_failed else balance
