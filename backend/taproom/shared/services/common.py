"""
Helpers shared by the catalog services.
"""

from typing import Any

from taproom.shared.core.exceptions import ValidationError


def is_present(value: Any) -> bool:
    """True for a value a sparse update should apply: not None and not blank."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def require_text(value: Any, label: str, field: str) -> str:
    """
    Return value if it is a non-blank string.

    Raises:
        ValidationError: "<label> must not be blank", details {"field": field}
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} must not be blank", details={"field": field})
    return value
