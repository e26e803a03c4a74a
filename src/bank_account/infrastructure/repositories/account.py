from bank_account.domain.models import Account


class AccountRepository:
    """In-process registry of accounts keyed by id."""

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def add(self, account: Account) -> None:
        if account.id in self._accounts:
            raise ValueError(f"Account {account.id} already registered")
        self._accounts[account.id] = account

    def get(self, account_id: str) -> Account | None:
        return self._accounts.get(account_id)

    def list_all(self) -> list[Account]:
        return list(self._accounts.values())
