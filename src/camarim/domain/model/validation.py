"""Field rules shared by every entity and ledger.

Each check raises ValidationError and returns the (possibly normalised)
value, so callers can validate a whole set of fields before assigning any
of them.
"""

from __future__ import annotations

from camarim.domain.exceptions import ValidationError


def require_non_empty(text: str | None, field: str = "Name") -> str:
    if text is None or not text.strip():
        raise ValidationError(f"{field} cannot be empty")
    return text.strip()


def require_non_negative_id(value: int, field: str = "ID") -> int:
    if value < 0:
        raise ValidationError(f"{field} cannot be negative, got {value}")
    return value


def require_non_negative(value: int, field: str = "Quantity") -> int:
    if value < 0:
        raise ValidationError(f"{field} cannot be negative, got {value}")
    return value


def require_positive(value: int, field: str = "Quantity") -> int:
    if value <= 0:
        raise ValidationError(f"{field} must be greater than zero, got {value}")
    return value
