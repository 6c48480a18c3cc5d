"""Shared parsing helpers for settings and payload value normalization."""

from __future__ import annotations


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_optional_float(value: object, field_name: str) -> float | None:
    """Parse an optional numeric value, returning `None` for blank input.

    Args:
        value: Number or numeric text.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the value is present but not a finite number.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a number.")
    if isinstance(value, int | float):
        parsed = float(value)
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            return None
        try:
            parsed = float(normalized)
        except ValueError as exc:
            raise ValueError(f"`{field_name}` must be a number.") from exc

    if parsed != parsed or parsed in (float("inf"), float("-inf")):
        raise ValueError(f"`{field_name}` must be a finite number.")
    return parsed


def is_blank(value: object) -> bool:
    """Return whether a value is `None`, not a string, or whitespace-only text."""

    return not isinstance(value, str) or not value.strip()
