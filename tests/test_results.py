"""
Test suite for results module

Tests wrapping ledger calls into result values.
"""

import pytest
from decimal import Decimal

from bank_ledger.config import LedgerConfig
from bank_ledger.errors import AccountNotFoundError, ErrorKind, InsufficientFundsError
from bank_ledger.ledger import Ledger
from bank_ledger.results import OperationResult, attempt


class TestAttempt:
    """Test attempt() over ledger operations"""

    def setup_method(self):
        """Set up test fixtures"""
        self.ledger = Ledger(config=LedgerConfig())
        self.account_id = self.ledger.open_savings_account("Alice", 100, 0)

    def test_success_carries_value(self):
        """Test a successful call"""
        result = attempt(self.ledger.get_balance, self.account_id)

        assert result.ok
        assert result.value == Decimal('100')
        assert result.error_kind is None
        assert result.unwrap() == Decimal('100')

    def test_success_without_value(self):
        """Test a call that returns nothing"""
        result = attempt(self.ledger.deposit, self.account_id, 5)

        assert result.ok
        assert result.value is None
        assert self.ledger.get_balance(self.account_id) == Decimal('105')

    def test_keyword_arguments(self):
        """Test that keyword arguments are passed through"""
        result = attempt(self.ledger.open_current_account, customer_name="Bob", initial=0, overdraft_limit=10)
        assert result.ok
        assert result.value == "CUR-1002"

    @pytest.mark.parametrize("call, kind", [
        (lambda l, a: l.withdraw(a, 1000), ErrorKind.INSUFFICIENT_FUNDS),
        (lambda l, a: l.deposit(a, 0), ErrorKind.ILLEGAL_AMOUNT),
        (lambda l, a: l.get_balance("SAV-9999"), ErrorKind.ACCOUNT_NOT_FOUND),
        (lambda l, a: l.open_current_account("Bob", 1, -1), ErrorKind.ILLEGAL_ARGUMENT),
    ])
    def test_failure_carries_kind(self, call, kind):
        """Test each error kind is captured"""
        result = attempt(call, self.ledger, self.account_id)

        assert not result.ok
        assert result.error_kind == kind
        assert result.message
        assert result.value is None

    def test_unwrap_reraises(self):
        """Test that unwrap raises the captured error"""
        result = attempt(self.ledger.get_balance, "CUR-1")

        with pytest.raises(AccountNotFoundError, match="Account not found: CUR-1"):
            result.unwrap()

    def test_other_exceptions_propagate(self):
        """Test that non-ledger errors are not captured"""
        def broken():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            attempt(broken)


class TestOperationResult:
    """Test OperationResult construction"""

    def test_failure_from_error(self):
        """Test building a failure directly"""
        error = InsufficientFundsError("Savings cannot go negative", account_id="SAV-1")
        result = OperationResult.failure(error)

        assert result.error_kind == ErrorKind.INSUFFICIENT_FUNDS
        assert result.message == "Savings cannot go negative"
        assert result.error is error

    def test_results_are_immutable(self):
        """Test frozen results"""
        result = OperationResult.success(1)
        with pytest.raises(AttributeError):
            result.value = 2
