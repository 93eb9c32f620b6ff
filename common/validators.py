"""Validation helpers shared across the CLI and the HTTP API."""

from __future__ import annotations

import math

from .exceptions import ValidationError

MIN_MONTH = 0
MAX_MONTH = 12


def parse_amount(raw: object, field: str = "amount") -> float:
    """Convert raw input to a positive, finite float."""
    if isinstance(raw, bool):
        raise ValidationError(f"{field} must be a numeric value")
    try:
        amount = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field} must be a numeric value") from exc

    if not math.isfinite(amount):
        raise ValidationError(f"{field} must be a finite number")
    if amount <= 0:
        raise ValidationError(f"{field} must be greater than zero")
    return amount


def validate_description(value: object, field: str = "description") -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    if not value:
        raise ValidationError(f"{field} cannot be empty")
    return value


def validate_month(value: object, field: str = "month") -> int:
    """Accept 0 (all months) or a calendar month number."""
    month = _parse_int(value, field)
    if month < MIN_MONTH or month > MAX_MONTH:
        raise ValidationError(f"{field} must be between {MIN_MONTH} and {MAX_MONTH}")
    return month


def validate_expense_id(value: object, field: str = "id") -> int:
    expense_id = _parse_int(value, field)
    if expense_id <= 0:
        raise ValidationError(f"{field} must be a positive integer")
    return expense_id


def _parse_int(value: object, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise ValidationError(f"{field} must be an integer") from exc
