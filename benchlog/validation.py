"""Validation of weight and repetition input fields.

Each ``validate_*`` helper returns an error message for display next to the
field, or ``None`` when the text is acceptable.
"""

from __future__ import annotations

# Upper bounds beyond which input is treated as a typo
MAX_WEIGHT = 1000.0
MAX_REPS = 100


def validate_weight(value: str | None) -> str | None:
    if value is None or not value.strip():
        return "Enter weight"
    try:
        weight = float(value)
    except ValueError:
        return "Invalid number format"
    if weight != weight:  # NaN
        return "Invalid number format"
    if weight <= 0:
        return "Weight must be positive"
    if weight > MAX_WEIGHT:
        return "Weight seems unrealistic"
    return None


def validate_reps(value: str | None) -> str | None:
    if value is None or not value.strip():
        return "Enter reps"
    try:
        reps = int(value)
    except ValueError:
        return "Invalid number format"
    if reps <= 0:
        return "Reps must be positive"
    if reps > MAX_REPS:
        return "Reps seem excessive"
    return None


def parse_weight(value: str) -> float:
    """Return ``value`` as a weight or raise ``ValueError`` with the reason."""

    error = validate_weight(value)
    if error:
        raise ValueError(error)
    return float(value)


def parse_reps(value: str) -> int:
    error = validate_reps(value)
    if error:
        raise ValueError(error)
    return int(value)
