"""
Interactive Menu

Thin text front end over the ledger API. Reads one choice at a time,
prompts for the operation's inputs, and reports ledger rejections without
ending the session.
"""

import sys
from typing import Any, Callable, Optional

from .config import LedgerConfig, get_config
from .errors import ErrorKind
from .ledger import Ledger
from .logging_config import get_logger, setup_logging
from .results import OperationResult, attempt


MENU = """
===== BANK MENU =====
1. Open Savings Account
2. Open Current Account
3. Deposit
4. Withdraw
5. Transfer
6. Check Balance
7. Apply Monthly Updates
8. Show All Accounts
9. Exit"""

EXIT_CHOICE = 9

HINTS = {
    ErrorKind.ACCOUNT_NOT_FOUND: "Use option 8 to list account IDs.",
    ErrorKind.INSUFFICIENT_FUNDS: "Use option 6 to check the balance.",
}


class BankMenu:
    """
    Menu loop driving a Ledger

    input_func and output default to the console; tests pass scripted
    replacements.
    """

    def __init__(
        self,
        ledger: Ledger,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], Any] = print
    ):
        self.ledger = ledger
        self.input = input_func
        self.output = output
        self.logger = get_logger("bank_ledger.menu")

        self._actions = {
            1: self._open_savings,
            2: self._open_current,
            3: self._deposit,
            4: self._withdraw,
            5: self._transfer,
            6: self._check_balance,
            7: self._apply_monthly_updates,
            8: self._show_all_accounts,
        }

    def run(self) -> None:
        """Loop until the user exits or input ends"""
        while True:
            self.output(MENU)
            try:
                raw = self.input("Choose an option: ")
            except EOFError:
                self.output("Exiting. Goodbye!")
                return

            try:
                choice = int(raw.strip())
            except ValueError:
                self.output("Invalid input.")
                continue

            if choice == EXIT_CHOICE:
                self.output("Exiting. Goodbye!")
                return

            action = self._actions.get(choice)
            if action is None:
                self.output("Invalid choice.")
                continue

            try:
                action()
            except EOFError:
                self.output("Exiting. Goodbye!")
                return
            except Exception as e:
                self.logger.exception("Menu action %s failed", choice)
                self.output(f"Unexpected error: {e!r}")

    def _report(self, result: OperationResult, success: str) -> None:
        if result.ok:
            self.output(success)
            return

        self.output(f"Error: {result.message}")
        hint = HINTS.get(result.error_kind)
        if hint:
            self.output(hint)

    def _open_savings(self) -> None:
        name = self.input("Customer name: ")
        initial = self.input("Initial deposit: ")
        rate = self.input("Annual interest rate (e.g., 0.05 for 5%): ")
        result = attempt(self.ledger.open_savings_account, name, initial, rate)
        self._report(result, f"Savings account created with ID: {result.value}")

    def _open_current(self) -> None:
        name = self.input("Customer name: ")
        initial = self.input("Initial deposit: ")
        limit = self.input("Overdraft limit: ")
        result = attempt(self.ledger.open_current_account, name, initial, limit)
        self._report(result, f"Current account created with ID: {result.value}")

    def _deposit(self) -> None:
        account_id = self.input("Account ID: ")
        amount = self.input("Amount: ")
        self._report(attempt(self.ledger.deposit, account_id, amount), "Deposit successful.")

    def _withdraw(self) -> None:
        account_id = self.input("Account ID: ")
        amount = self.input("Amount: ")
        self._report(attempt(self.ledger.withdraw, account_id, amount), "Withdrawal successful.")

    def _transfer(self) -> None:
        from_id = self.input("From Account ID: ")
        to_id = self.input("To Account ID: ")
        amount = self.input("Amount: ")
        self._report(attempt(self.ledger.transfer, from_id, to_id, amount), "Transfer successful.")

    def _check_balance(self) -> None:
        account_id = self.input("Account ID: ")
        result = attempt(self.ledger.get_balance, account_id)
        self._report(result, f"Balance = {result.value:.2f}" if result.ok else "")

    def _apply_monthly_updates(self) -> None:
        self.ledger.apply_monthly_updates()
        self.output("Monthly updates applied.")

    def _show_all_accounts(self) -> None:
        self.ledger.print_all_accounts(self.output)


def main(config: Optional[LedgerConfig] = None) -> int:
    """Console entry point"""
    config = config or get_config()
    setup_logging(
        level=config.log_level,
        log_format=config.log_format,
        log_file=config.log_file
    )

    try:
        BankMenu(Ledger(config=config)).run()
    except KeyboardInterrupt:
        print("\nExiting. Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
