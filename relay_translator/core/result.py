"""
Result type returned by the relay orchestrator.

A relay either succeeds with a value or fails with a tagged error;
callers branch on ``is_ok()`` instead of catching exceptions.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar('T')  # Success type
E = TypeVar('E')  # Error type
R = TypeVar('R')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self):
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def map(self, func: Callable[[T], R]) -> 'Ok[R]':
        """Apply ``func`` to the wrapped value."""
        return Ok(func(self.value))


@dataclass(frozen=True)
class Err(Generic[E]):
    """Error result."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raises the wrapped error if it is an exception, ValueError otherwise."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error

    def map(self, func: Callable) -> 'Err[E]':
        """No-op for Err."""
        return self


Result = Union[Ok[T], Err[E]]
