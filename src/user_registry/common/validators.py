from __future__ import annotations

from typing import Any, Callable, Iterable

import email_validator
from email_validator import EmailNotValidError, validate_email

from ..core.exceptions import FieldViolation, ValidationError

# Syntax check only: reserved names (*.local, localhost, *.invalid, ...) are ordinary domains here.
# The list is read by the library on every call, so it is emptied in place.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def _reject(field_name: str, message: str, value: Any) -> None:
    raise ValidationError(f"{field_name} {message}", [FieldViolation(field_name, message, value)])


def require_not_null(value: Any, field_name: str) -> Any:
    if value is None:
        _reject(field_name, "may not be null", value)
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        _reject(field_name, "may not be empty", value)
    if not isinstance(value, str):
        _reject(field_name, "must be a string", value)
    return value


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    if not isinstance(value, str):
        _reject(field_name, "must be a string", value)
    if len(value) < min_len:
        _reject(field_name, f"length must be at least {min_len}", value)
    return value


def require_email(value: str, field_name: str) -> str:
    # No DNS lookups; a dotless host such as localhost is accepted.
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        _reject(field_name, "not a well-formed email address", value)
    return value


def collect_violations(checks: Iterable[Callable[[], Any]]) -> list[FieldViolation]:
    """Run every check and gather their violations instead of stopping at the first."""
    violations: list[FieldViolation] = []
    for check in checks:
        try:
            check()
        except ValidationError as e:
            violations.extend(e.violations)
    return violations
