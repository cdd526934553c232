# shelf/result.py
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from shelf.errors import ShelfError

T = TypeVar('T')

@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service call: either a value or a ShelfError.

    Example:
        result = service.find_book_by_id(3)
        if result.ok:
            print(result.value.title)
        else:
            print(result.error)
    """
    value: Optional[T] = None
    error: Optional[ShelfError] = None

    @classmethod
    def success(cls, value: T = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ShelfError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure"""
        if self.error is not None:
            raise self.error
        return self.value
