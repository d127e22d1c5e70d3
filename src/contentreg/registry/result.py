"""Operation results.

Usage:
    result = registry.register(ctx, "doc.pdf", 1024, "desc", ["a"])
    if result.ok:
        record_id = result.value
    else:
        print(result.error)

    record_id = result.unwrap()  # raises RegistryError on failure
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from contentreg.core.errors import ErrorCode, RegistryError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class OperationResult(Generic[T]):
    """Success value or ErrorCode returned by every registry operation."""

    _value: T | None = None
    _error: ErrorCode | None = None

    @classmethod
    def success(cls, value: T) -> OperationResult[T]:
        return cls(_value=value)

    @classmethod
    def failure(cls, error: ErrorCode) -> OperationResult[T]:
        return cls(_error=error)

    @property
    def ok(self) -> bool:
        """True if the operation committed."""
        return self._error is None

    @property
    def error(self) -> ErrorCode | None:
        """Failure code, None on success."""
        return self._error

    @property
    def value(self) -> T:
        """Success value.

        Raises:
            RegistryError: If the operation failed.
        """
        return self.unwrap()

    def unwrap(self) -> T:
        """Return the success value or raise the failure.

        Raises:
            RegistryError: Carrying the failure's ErrorCode.
        """
        if self._error is not None:
            raise RegistryError(self._error)
        return self._value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.ok
