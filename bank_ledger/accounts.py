"""
Account Module

Account abstraction and its two variants. Each variant owns its balance
floor: a savings account never goes below zero, a current account never
goes below minus its overdraft limit. Interest accrual is an optional
capability that only savings accounts provide.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Protocol, Type, runtime_checkable

from .customers import Customer
from .errors import IllegalAmountError, IllegalArgumentError, InsufficientFundsError

MONTHS_PER_YEAR = Decimal('12')


class AccountKind(Enum):
    """Account variants; the value is the display name"""
    SAVINGS = "SavingsAccount"
    CURRENT = "CurrentAccount"


def describe(type_name: str, account_id: str, owner: Customer, balance: Decimal) -> str:
    """One-line display form of an account"""
    return f"{type_name}{{id='{account_id}', owner='{owner.name}', balance={balance:.2f}}}"


@dataclass(frozen=True)
class AccountView:
    """
    Read-only snapshot of an account

    Handed out by ledger queries so that callers can inspect accounts
    without holding a reference that can move money.
    """
    id: str
    owner: Customer
    kind: AccountKind
    balance: Decimal
    balance_floor: Decimal
    annual_rate: Optional[Decimal] = None
    overdraft_limit: Optional[Decimal] = None

    @property
    def type_name(self) -> str:
        return self.kind.value

    @property
    def available_to_withdraw(self) -> Decimal:
        return self.balance - self.balance_floor

    def __str__(self) -> str:
        return describe(self.type_name, self.id, self.owner, self.balance)


def to_decimal(value: Any, error: Type[Exception] = IllegalAmountError) -> Decimal:
    """
    Convert a numeric input to Decimal

    Args:
        value: int, float, str or Decimal
        error: Error class raised (with the raw value) if value is not a finite number

    Returns:
        Decimal value, unrounded
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            raise error(value) from None

    if not result.is_finite():
        raise error(value)
    return result


def positive_amount(amount: Any) -> Decimal:
    """Coerce a movement amount, rejecting anything <= 0"""
    value = to_decimal(amount)
    if value <= 0:
        raise IllegalAmountError(amount)
    return value


@runtime_checkable
class InterestBearing(Protocol):
    """Capability of accounts that accrue monthly interest"""
    annual_rate: Decimal

    def monthly_interest(self, balance: Decimal) -> Decimal:
        ...

    def apply_monthly_interest(self) -> Decimal:
        ...


class Account(ABC):
    """
    Balance holder with a variant-specific withdrawal policy

    The owner is a shared reference to a registry Customer. The balance is
    read-only from outside; it only changes through deposit, withdraw and
    (for savings) interest accrual.
    """

    kind: AccountKind

    def __init__(self, account_id: str, owner: Customer, initial: Any = 0):
        if account_id is None or owner is None:
            raise TypeError("Account id and owner are required")

        opening = to_decimal(initial)
        if opening < 0:
            raise IllegalAmountError(initial)

        self.id = account_id
        self.owner = owner
        self._balance = opening

    @property
    def balance(self) -> Decimal:
        """Current balance"""
        return self._balance

    @property
    def type_name(self) -> str:
        """Display discriminator for the variant"""
        return self.kind.value

    @property
    @abstractmethod
    def balance_floor(self) -> Decimal:
        """Lowest balance this account may reach"""

    @property
    def available_to_withdraw(self) -> Decimal:
        """Largest amount a single withdrawal can take right now"""
        return self._balance - self.balance_floor

    @abstractmethod
    def _insufficient_funds_message(self, amount: Decimal) -> str:
        """Message for a withdrawal that would breach the floor"""

    def deposit(self, amount: Any) -> None:
        """Add a positive amount to the balance"""
        self._balance += positive_amount(amount)

    def withdraw(self, amount: Any) -> None:
        """
        Remove a positive amount from the balance

        Raises:
            IllegalAmountError: amount <= 0
            InsufficientFundsError: the balance would fall below balance_floor
        """
        value = positive_amount(amount)
        next_balance = self._balance - value
        if next_balance < self.balance_floor:
            raise InsufficientFundsError(
                self._insufficient_funds_message(value),
                account_id=self.id,
                requested=value,
                floor=self.balance_floor
            )
        self._balance = next_balance

    def snapshot(self) -> AccountView:
        """Read-only copy of the account's current state"""
        return AccountView(
            id=self.id,
            owner=self.owner,
            kind=self.kind,
            balance=self._balance,
            balance_floor=self.balance_floor,
            annual_rate=getattr(self, 'annual_rate', None),
            overdraft_limit=getattr(self, 'overdraft_limit', None)
        )

    def __str__(self) -> str:
        return describe(self.type_name, self.id, self.owner, self._balance)

    __repr__ = __str__


class SavingsAccount(Account):
    """Interest-bearing account that can never go negative"""

    kind = AccountKind.SAVINGS

    def __init__(self, account_id: str, owner: Customer, initial: Any = 0, annual_rate: Any = 0):
        super().__init__(account_id, owner, initial)

        rate = to_decimal(annual_rate, IllegalArgumentError)
        if rate < 0:
            raise IllegalArgumentError("Rate must be >= 0")
        self.annual_rate = rate

    @property
    def balance_floor(self) -> Decimal:
        return Decimal('0')

    def _insufficient_funds_message(self, amount: Decimal) -> str:
        return "Savings cannot go negative"

    def monthly_interest(self, balance: Any) -> Decimal:
        """One month of simple interest on balance: balance * annual_rate / 12"""
        return to_decimal(balance) * self.annual_rate / MONTHS_PER_YEAR

    def apply_monthly_interest(self) -> Decimal:
        """Credit one month of interest on the current balance"""
        interest = self.monthly_interest(self._balance)
        self._balance += interest
        return interest


class CurrentAccount(Account):
    """Transaction account with an overdraft allowance"""

    kind = AccountKind.CURRENT

    def __init__(self, account_id: str, owner: Customer, initial: Any = 0, overdraft_limit: Any = 0):
        super().__init__(account_id, owner, initial)

        limit = to_decimal(overdraft_limit, IllegalArgumentError)
        if limit < 0:
            raise IllegalArgumentError("Overdraft must be >= 0")
        self.overdraft_limit = limit

    @property
    def balance_floor(self) -> Decimal:
        return -self.overdraft_limit

    def _insufficient_funds_message(self, amount: Decimal) -> str:
        return f"Overdraft exceeded. Limit={self.overdraft_limit}, attempted={amount}"
