"""Argument validation shared by the resource accessors."""

from __future__ import annotations

import re
from typing import Any, Final

from fanart_tv.core.exceptions import ValidationError

DATE_PATTERN: Final = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def validate_positive_id(value: Any, name: str) -> int:
    """Ensure ``value`` is a positive integer (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(name, f"must be a positive integer, got {value!r}")
    return value


def validate_mbid(value: Any, name: str = "MusicBrainz ID") -> str:
    """Ensure ``value`` is a non-empty string and return it trimmed."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(name, "must be a non-empty string")
    return value.strip()


def validate_date(value: Any) -> str | None:
    """Ensure an optional date filter matches YYYY-MM-DD.

    Only the format is checked, so ``"2024-13-45"`` is accepted. ``None`` and
    the empty string mean no filter.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise ValidationError("date", f"must be in YYYY-MM-DD format, got {value!r}")
    return value
