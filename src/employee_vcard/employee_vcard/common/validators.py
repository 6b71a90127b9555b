from __future__ import annotations

import re

from ..core.constants import MAX_EMPLOYEE_ID_LENGTH
from ..core.exceptions import ValidationError

_SAFE_ID_RE = re.compile(r"[A-Za-z0-9_-]+")
# hex, rgb()/rgba()/hsl()/hsla() with numeric arguments, or a named colour
_CSS_COLOR_RE = re.compile(
    r"#[0-9A-Fa-f]{3,8}"
    r"|(?:rgb|rgba|hsl|hsla)\([0-9.%,\s/]+(?:deg)?[0-9.%,\s/]*\)"
    r"|[A-Za-z]+"
)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Missing {field_name}")
    return value.strip()


def is_safe_identifier(value: str) -> bool:
    """True when ``value`` can be used as both a file name and a URL path segment."""
    if not value or len(value) > MAX_EMPLOYEE_ID_LENGTH:
        return False
    return bool(_SAFE_ID_RE.fullmatch(value))


def require_identifier(value: str, field_name: str = "employee id") -> str:
    value = require_non_empty(value, field_name)
    if not is_safe_identifier(value):
        raise ValidationError(f"Invalid {field_name}")
    return value


def require_css_color(value: str, field_name: str = "backgroundColor") -> str:
    """Accept an empty string or a single CSS colour token."""
    if value and not _CSS_COLOR_RE.fullmatch(value):
        raise ValidationError(f"{field_name} must be a hex, rgb(), hsl() or named colour")
    return value
