"""
Operation Results Module

Runs a ledger call and reports its outcome as a value instead of an
exception, so presentation code can branch on the error kind.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import ErrorKind, LedgerError


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one ledger call"""
    value: Any = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    error: Optional[LedgerError] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def unwrap(self) -> Any:
        """Return the value, or raise the captured error"""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value: Any = None) -> 'OperationResult':
        return cls(value=value)

    @classmethod
    def failure(cls, error: LedgerError) -> 'OperationResult':
        return cls(error_kind=error.kind, message=str(error), error=error)


def attempt(operation: Callable[..., Any], *args, **kwargs) -> OperationResult:
    """
    Call operation and wrap the outcome

    Only LedgerError is captured; anything else propagates to the caller.
    """
    try:
        return OperationResult.success(operation(*args, **kwargs))
    except LedgerError as e:
        return OperationResult.failure(e)
