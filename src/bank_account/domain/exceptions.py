class DomainError(Exception):
    """Base exception for domain errors."""

    code = "DOMAIN_ERROR"


class InvalidAmountError(DomainError):
    """Raised when an amount is not a positive finite number."""

    code = "INVALID_AMOUNT"

    def __init__(self, amount: object, reason: str) -> None:
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount!r}: {reason}")


class InsufficientFundsError(DomainError):
    """Raised when account has insufficient funds for a withdrawal or transfer."""

    code = "INSUFFICIENT_FUNDS"

    def __init__(self, account_id: str, required: float, available: float) -> None:
        self.account_id = account_id
        self.required = required
        self.available = available
        super().__init__(f"Account {account_id} has insufficient funds: required {required}, available {available}")


class TransferToSelfError(DomainError):
    """Raised when the transfer target is the source account itself."""

    code = "TRANSFER_TO_SELF"

    def __init__(self, account_id: str) -> None:
        self.account_id = account_id
        super().__init__(f"Cannot transfer to the same account: {account_id}")


class SynchronizationFailedError(DomainError):
    """Raised when the balance oracle returns no usable value."""

    code = "SYNCHRONIZATION_FAILED"

    def __init__(self, account_id: str, value: object = None) -> None:
        self.account_id = account_id
        self.value = value
        super().__init__(f"Balance synchronization failed for account {account_id}: got {value!r}")


class AccountNotFoundError(DomainError):
    """Raised when an account cannot be found."""

    code = "ACCOUNT_NOT_FOUND"

    def __init__(self, account_id: str) -> None:
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found")
