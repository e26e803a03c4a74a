"""Shared pytest fixtures for bank account tests."""

from unittest.mock import AsyncMock

import pytest

from bank_account.application.services import AccountService
from bank_account.domain.models import Account
from bank_account.infrastructure.repositories import AccountRepository


def create_oracle(return_value: object = 50) -> AsyncMock:
    """Helper to create a balance oracle double resolving to a fixed value."""
    oracle = AsyncMock()
    oracle.fetch_balance = AsyncMock(return_value=return_value)
    return oracle


@pytest.fixture
def mock_oracle() -> AsyncMock:
    """Create oracle double that resolves to 50."""
    return create_oracle(50)


@pytest.fixture
def failing_oracle() -> AsyncMock:
    """Create oracle double that resolves to the failure sentinel."""
    return create_oracle(None)


@pytest.fixture
def account(mock_oracle: AsyncMock) -> Account:
    """Create account with balance 100."""
    return Account(100, oracle=mock_oracle)


@pytest.fixture
def other_account(mock_oracle: AsyncMock) -> Account:
    """Create second account with balance 100."""
    return Account(100, oracle=mock_oracle)


@pytest.fixture
def repository() -> AccountRepository:
    """Create empty in-memory account repository."""
    return AccountRepository()


@pytest.fixture
def service(repository: AccountRepository, mock_oracle: AsyncMock) -> AccountService:
    """Create AccountService whose accounts use the mock oracle by default."""
    return AccountService(repository, oracle_factory=lambda: mock_oracle)
