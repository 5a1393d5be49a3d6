"""Execution result envelope returned by every shelf handler.

A result is either ``Success`` carrying the handler's value or ``Failure``
carrying the cause. Results are terminal: nothing retries them.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from shelf.errors import ShelfError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    cause: ShelfError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self):
        """Raise the failure cause."""
        raise self.cause


ExecutionResult = Success[T] | Failure
