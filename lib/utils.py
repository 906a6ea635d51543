# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Input normalization helpers shared by the resource models:
# - list fields that arrive as arrays or comma-separated strings
# - optional text and numeric fields sent as blanks by HTML forms
# - email format checks
# =============================================================================

import math
import re
from typing import Any

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


# =============================================================================
# List Fields
# =============================================================================

def split_list_field(value: Any) -> list[str]:
    """
    Normalize a tags/gallery style field into a list of strings.

    Accepts a list or a comma-separated string. Items are trimmed, empty
    items dropped, order kept. Duplicates are not removed.

    Example:
        split_list_field("react, ,  seo") -> ["react", "seo"]
        split_list_field(["react ", "seo"]) -> ["react", "seo"]
        split_list_field(None) -> []
    """
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        return []

    result = []
    for item in items:
        if item is None:
            continue
        text = str(item).strip()
        if text:
            result.append(text)
    return result


# =============================================================================
# Scalar Fields
# =============================================================================

def clean_optional_text(value: Any) -> str | None:
    """Trim a text field; blanks become None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def coerce_optional_int(value: Any) -> int | None:
    """
    Coerce a number or numeric string to int.

    Blank, NaN and non-numeric values become None.

    Example:
        coerce_optional_int(" 3 ") -> 3
        coerce_optional_int("abc") -> None
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None

    if math.isnan(number) or math.isinf(number):
        return None
    return int(number)


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))
