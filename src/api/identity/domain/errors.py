"""Domain-level error descriptions for the identity context.

Value objects and the User aggregate report invariant violations as
``DomainError`` values wrapped in ``Err`` results instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Categories of domain invariant violations."""

    INVALID_FORMAT = "invalid_format"
    WEAK_PASSWORD = "weak_password"
    EMPTY_HASH = "empty_hash"
    VALIDATION = "validation"


@dataclass(frozen=True)
class DomainError:
    """A single violated rule.

    Attributes:
        kind: Category of the violation
        message: Human-readable message shown to callers
        field: Name of the offending attribute, when attributable
    """

    kind: ErrorKind
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return self.message
