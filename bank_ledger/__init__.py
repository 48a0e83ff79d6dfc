"""
Bank Ledger

An in-memory ledger of customers, savings and current accounts, with
deposits, withdrawals, transfers and monthly interest accrual under
enforced balance invariants.
"""

__version__ = "1.0.0"

from .accounts import Account, AccountKind, AccountView, CurrentAccount, InterestBearing, SavingsAccount
from .customers import Customer, CustomerRegistry
from .errors import (
    AccountNotFoundError, ErrorKind, IllegalAmountError, IllegalArgumentError,
    InsufficientFundsError, LedgerError
)
from .ledger import Ledger
from .results import OperationResult, attempt
