"""
Success/failure container returned by both conversion stages.
File: bool_postfix/core/result.py
"""

from typing import Generic, Optional, TypeVar
from dataclasses import dataclass

from bool_postfix.core.exceptions import ErrorKind, ExpressionError


T = TypeVar('T')


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a payload (tokens or postfix) or the error that stopped the stage."""
    value: Optional[T] = None
    error: Optional[ExpressionError] = None

    @classmethod
    def ok(cls, value: T) -> 'Result[T]':
        return cls(value=value)

    @classmethod
    def fail(cls, error: ExpressionError) -> 'Result[T]':
        return cls(error=error)

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    def unwrap(self) -> T:
        """Return the payload, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    def __str__(self):
        if self.success:
            return f"Result(ok, {len(self.value)} tokens)"
        return f"Result(failed, {self.kind.value}: {self.message})"


# End of file #
