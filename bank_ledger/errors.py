"""
Ledger Error Module

Domain errors raised by accounts and the ledger. Every error is a rejection
of an attempted operation; none of them leaves an account half-updated.
Each class carries an ErrorKind tag so callers can branch on the kind of
failure without matching on message text.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Kinds of ledger rejections"""
    ILLEGAL_AMOUNT = "illegal_amount"          # Amount <= 0 or negative opening balance
    ILLEGAL_ARGUMENT = "illegal_argument"      # Negative rate or overdraft limit
    ACCOUNT_NOT_FOUND = "account_not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"  # Withdrawal would breach balance floor


class LedgerError(ValueError):
    """Base class for all ledger errors"""
    kind: ErrorKind


class IllegalAmountError(LedgerError):
    """Raised when a monetary amount is not acceptable"""
    kind = ErrorKind.ILLEGAL_AMOUNT

    def __init__(self, amount: Any):
        self.amount = amount
        super().__init__(f"Illegal amount: {amount}")


class IllegalArgumentError(LedgerError):
    """Raised at construction time for a negative rate or overdraft limit"""
    kind = ErrorKind.ILLEGAL_ARGUMENT


class AccountNotFoundError(LedgerError):
    """Raised when an account id is not known to the ledger"""
    kind = ErrorKind.ACCOUNT_NOT_FOUND

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Account not found: {account_id}")


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal would take the balance below its floor"""
    kind = ErrorKind.INSUFFICIENT_FUNDS

    def __init__(
        self,
        message: str,
        account_id: Optional[str] = None,
        requested: Optional[Decimal] = None,
        floor: Optional[Decimal] = None
    ):
        self.account_id = account_id
        self.requested = requested
        self.floor = floor
        super().__init__(message)
