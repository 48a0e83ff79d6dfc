"""
Ledger Aggregate Module

The bank aggregate: owns every customer and account, mints identifiers,
and is the single entry point for money movement. All public operations
run under one re-entrant lock so that identifier allocation and the two
legs of a transfer are atomic with respect to concurrent callers.
"""

from decimal import Decimal
from typing import Any, Callable, Dict, Iterator, List, Optional
import threading

from .accounts import (
    Account, AccountKind, AccountView, CurrentAccount, InterestBearing, SavingsAccount, positive_amount
)
from .config import LedgerConfig, get_config
from .customers import Customer, CustomerRegistry
from .errors import AccountNotFoundError, LedgerError
from .logging_config import get_logger, log_action


class Ledger:
    """
    In-memory bank ledger

    Accounts are created through the open_* operations and are never
    removed. Account ids have the form <PREFIX>-<n> where n comes from a
    single counter shared by both account variants.
    """

    def __init__(self, name: Optional[str] = None, config: Optional[LedgerConfig] = None):
        self.config = config or get_config()
        self.name = name or self.config.bank_name

        self._accounts: Dict[str, Account] = {}
        self._registry = CustomerRegistry(id_prefix=self.config.customer_prefix)
        self._sequence = self.config.id_sequence_start
        self._lock = threading.RLock()

        self._prefixes = {
            AccountKind.SAVINGS: self.config.savings_prefix,
            AccountKind.CURRENT: self.config.current_prefix,
        }

        self.logger = get_logger("bank_ledger.ledger")

    def _next_id(self, kind: AccountKind) -> str:
        self._sequence += 1
        return f"{self._prefixes[kind]}-{self._sequence}"

    def _require(self, account_id: str) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def _rejected(self, action: str, error: LedgerError, resource: Optional[str] = None) -> None:
        log_action(
            self.logger, "warning", str(error),
            action=action,
            resource=resource,
            details={"error_kind": error.kind.value}
        )

    # Customers

    def get_or_create_customer(self, name: str) -> Customer:
        """Return the customer for name (case-insensitive), creating it if new"""
        with self._lock:
            known = len(self._registry)
            customer = self._registry.get_or_create(name)
            if len(self._registry) > known:
                log_action(
                    self.logger, "info", "Customer created",
                    action="create_customer",
                    resource=customer.id,
                    details={"name": customer.name}
                )
            return customer

    def customers(self) -> List[Customer]:
        """All customers in creation order"""
        with self._lock:
            return self._registry.all()

    def customer_accounts(self, customer_name: str) -> List[AccountView]:
        """Snapshots of the named customer's accounts, sorted by id"""
        with self._lock:
            customer = self._registry.find(customer_name)
            if customer is None:
                return []
            owned = sorted(
                (a for a in self._accounts.values() if a.owner is customer),
                key=lambda a: a.id
            )
            return [a.snapshot() for a in owned]

    # Account opening

    def _open(self, kind: AccountKind, customer_name: str, factory: Callable[[str, Customer], Account]) -> str:
        with self._lock:
            customer = self.get_or_create_customer(customer_name)
            account_id = self._next_id(kind)
            try:
                account = factory(account_id, customer)
            except LedgerError as e:
                self._rejected("open_account", e, resource=account_id)
                raise
            self._accounts[account_id] = account

            log_action(
                self.logger, "info", "Account opened",
                action="open_account",
                resource=account_id,
                details={
                    "type": account.type_name,
                    "customer_id": customer.id,
                    "balance": str(account.balance)
                }
            )
            return account_id

    def open_savings_account(self, customer_name: str, initial: Any, annual_rate: Any) -> str:
        """
        Open a savings account

        Args:
            customer_name: Owner's display name; the customer is created on first use
            initial: Opening balance, >= 0
            annual_rate: Annual interest rate as a fraction (0.05 for 5%), >= 0

        Returns:
            New account id (SAV-<n>)

        Raises:
            IllegalAmountError: negative opening balance
            IllegalArgumentError: negative rate
        """
        return self._open(
            AccountKind.SAVINGS, customer_name,
            lambda account_id, owner: SavingsAccount(account_id, owner, initial, annual_rate)
        )

    def open_current_account(self, customer_name: str, initial: Any, overdraft_limit: Any) -> str:
        """
        Open a current account

        Args:
            customer_name: Owner's display name; the customer is created on first use
            initial: Opening balance, >= 0
            overdraft_limit: How far below zero the balance may go, >= 0

        Returns:
            New account id (CUR-<n>)

        Raises:
            IllegalAmountError: negative opening balance
            IllegalArgumentError: negative overdraft limit
        """
        return self._open(
            AccountKind.CURRENT, customer_name,
            lambda account_id, owner: CurrentAccount(account_id, owner, initial, overdraft_limit)
        )

    # Money movement

    def deposit(self, account_id: str, amount: Any) -> None:
        """Deposit a positive amount into an account"""
        with self._lock:
            try:
                account = self._require(account_id)
                account.deposit(amount)
            except LedgerError as e:
                self._rejected("deposit", e, resource=account_id)
                raise

            log_action(
                self.logger, "info", "Deposit posted",
                action="deposit",
                resource=account_id,
                details={"amount": str(amount), "balance": str(account.balance)}
            )

    def withdraw(self, account_id: str, amount: Any) -> None:
        """Withdraw a positive amount, subject to the account's balance floor"""
        with self._lock:
            try:
                account = self._require(account_id)
                account.withdraw(amount)
            except LedgerError as e:
                self._rejected("withdraw", e, resource=account_id)
                raise

            log_action(
                self.logger, "info", "Withdrawal posted",
                action="withdraw",
                resource=account_id,
                details={"amount": str(amount), "balance": str(account.balance)}
            )

    def transfer(self, from_id: str, to_id: str, amount: Any) -> None:
        """
        Move a positive amount from one account to another

        Both accounts are resolved before either is touched. The withdrawal
        leg runs first; the deposit leg cannot fail once the amount is valid
        and the destination exists, so there is no compensating step.

        Raises:
            IllegalAmountError: amount <= 0
            AccountNotFoundError: either account is unknown
            InsufficientFundsError: the source would breach its balance floor
        """
        with self._lock:
            try:
                value = positive_amount(amount)
                source = self._require(from_id)
                destination = self._require(to_id)
                source.withdraw(value)
            except LedgerError as e:
                self._rejected("transfer", e, resource=from_id)
                raise
            destination.deposit(value)

            log_action(
                self.logger, "info", "Transfer posted",
                action="transfer",
                resource=from_id,
                details={"to_account_id": to_id, "amount": str(value)}
            )

    def apply_monthly_updates(self) -> int:
        """
        Accrue one month of interest on every interest-bearing account

        Returns:
            Number of accounts that accrued interest
        """
        with self._lock:
            updated = 0
            for account in self._accounts.values():
                if isinstance(account, InterestBearing):
                    interest = account.apply_monthly_interest()
                    updated += 1
                    log_action(
                        self.logger, "debug", "Interest credited",
                        action="apply_interest",
                        resource=account.id,
                        details={"interest": str(interest), "balance": str(account.balance)}
                    )

            log_action(
                self.logger, "info", "Monthly updates applied",
                action="apply_monthly_updates",
                details={"accounts_updated": updated}
            )
            return updated

    # Queries

    def get_account(self, account_id: str) -> AccountView:
        """Snapshot of one account"""
        with self._lock:
            return self._require(account_id).snapshot()

    def get_balance(self, account_id: str) -> Decimal:
        """Current balance of an account"""
        with self._lock:
            try:
                return self._require(account_id).balance
            except LedgerError as e:
                self._rejected("get_balance", e, resource=account_id)
                raise

    def accounts(self) -> List[AccountView]:
        """Snapshots of all accounts, sorted by id, taken at one instant"""
        with self._lock:
            return [a.snapshot() for a in sorted(self._accounts.values(), key=lambda a: a.id)]

    def total_balance(self) -> Decimal:
        """Net sum of all balances; overdrawn current accounts count negatively"""
        with self._lock:
            return sum((a.balance for a in self._accounts.values()), Decimal('0'))

    def format_accounts(self) -> str:
        """Listing of every account, sorted by id, under a bank header"""
        lines = [f"=== {self.name} Accounts ==="]
        lines.extend(str(account) for account in self.accounts())
        return "\n".join(lines) + "\n"

    def print_all_accounts(self, output: Callable[[str], Any] = print) -> None:
        """Write the account listing through output"""
        output(self.format_accounts())

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        with self._lock:
            return account_id in self._accounts

    def __iter__(self) -> Iterator[AccountView]:
        return iter(self.accounts())
