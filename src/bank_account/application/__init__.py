"""Application layer - services and use cases."""

from bank_account.application.services import AccountService


__all__ = [
    "AccountService",
]
