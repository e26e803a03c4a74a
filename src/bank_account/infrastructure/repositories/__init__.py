from bank_account.infrastructure.repositories.account import AccountRepository


__all__ = [
    "AccountRepository",
]
