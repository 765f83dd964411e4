from __future__ import annotations

from ..core.enums import DateBasis, Weekday
from ..core.exceptions import ValidationError


def require_weekday(value: Weekday | str) -> Weekday:
    if isinstance(value, Weekday):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Unknown weekday: {value!r}")
    tag = value.strip()[:3].capitalize()
    try:
        return Weekday(tag)
    except ValueError:
        raise ValidationError(f"Unknown weekday: {value!r}") from None


def require_date_basis(value: DateBasis | str) -> DateBasis:
    if isinstance(value, DateBasis):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Unknown date basis: {value!r}")
    try:
        return DateBasis(value.strip())
    except ValueError:
        raise ValidationError(f"Unknown date basis: {value!r}") from None
