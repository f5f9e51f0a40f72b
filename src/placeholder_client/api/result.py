"""
Result Module

Discriminated success/failure values returned by the client instead of
raising.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .errors import APIError


T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successfully decoded value."""
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def value_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A failed request with the reason."""
    error: APIError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error."""
        raise self.error

    def value_or(self, default: Any) -> Any:
        return default


Result = Union[Success[T], Failure]
