from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class FieldViolation:
    """A single failed constraint on one property of an entity."""

    property: str
    message: str
    invalid_value: Any = None


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(
        self,
        message: str = "Validation failed",
        violations: Sequence[FieldViolation] = (),
        *,
        entity: Optional[str] = None,
    ):
        super().__init__(message)
        self.violations = list(violations)
        self.entity = entity

    def __str__(self) -> str:
        if not self.violations:
            return super().__str__()
        return "; ".join(f"{v.property}: {v.message}" for v in self.violations)


class NotFoundError(DomainError):
    """Raised when an operation references a record that does not exist."""


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness constraint."""


class DuplicateEmailError(ConflictError):
    def __init__(self, email: str):
        super().__init__(f"email already in use: {email}")
        self.email = email
