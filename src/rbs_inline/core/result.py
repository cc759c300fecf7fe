"""Result type separating produced values from structural errors.

A structural error means the syntax node or annotation violates a shape the
translation relies on (for example an alias whose names are not literal
symbols). It is returned to the caller inside a ``Result`` instead of being
raised, so a driver can report it for one declaration and continue.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class StructuralError(Exception):
    """Input shape not supported by the translation."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a structural error, never both."""

    value: T | None = None
    error: StructuralError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, message: str, details: str | None = None) -> Result[T]:
        return cls(error=StructuralError(message, details))

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the structural error if there is one.

        Raises:
            StructuralError: If this result carries an error.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
