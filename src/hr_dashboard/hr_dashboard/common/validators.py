from __future__ import annotations

import math
import re
from typing import Optional

from ..core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_positive(value: Optional[float], field_name: str) -> float:
    if value is None or not value > 0:
        raise ValidationError(f"Valid {field_name.lower()} is required")
    return value


def require_email(value: Optional[str], field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not EMAIL_PATTERN.match(value):
        raise ValidationError("Invalid email format")
    return value


def require_choice(value: Optional[str], field_name: str, choices) -> str:
    if not value or value not in choices:
        raise ValidationError(f"{field_name} is required")
    return value


def parse_number(value, field_name: str) -> Optional[float]:
    """Parse a form value into a number; blank means missing."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Valid {field_name.lower()} is required")
    if not math.isfinite(number):
        raise ValidationError(f"Valid {field_name.lower()} is required")
    return number
