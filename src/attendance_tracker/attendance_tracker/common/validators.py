from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_DIGITS = re.compile(r"^\d+$")
_LETTERS = re.compile(r"^[a-zA-Z]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required.")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} should be at least {min_len} characters.")
    return value


def require_digits(value: str, field_name: str) -> str:
    if not _DIGITS.match(value or ""):
        raise ValidationError(f"{field_name} must be a number.")
    return value


def require_letters(value: str, field_name: str) -> str:
    if not _LETTERS.match(value or ""):
        raise ValidationError(f"{field_name} must contain only letters.")
    return value
