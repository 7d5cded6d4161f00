from __future__ import annotations

import re

from ..core.constants import FILE_ENCODING, RESERVED_FIELD_CHARS
from ..core.exceptions import InvalidKeyError, ValidationError

_KEY_RE = re.compile(r"[0-9]+")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} can't be empty")
    return value.strip()


def require_record_text(value: str, field_name: str) -> str:
    """Non-empty text that can be stored as one field of a record line."""
    value = require_non_empty(value, field_name)
    if any(ch in value for ch in RESERVED_FIELD_CHARS):
        raise ValidationError(f"{field_name} can't contain commas or parentheses")
    try:
        value.encode(FILE_ENCODING)
    except UnicodeError:
        raise ValidationError(f"{field_name} contains characters that can't be stored")
    return value


def parse_key(value, field_name: str) -> int:
    """Parse a record key typed by the user (digits only)."""
    if isinstance(value, bool):
        raise InvalidKeyError(f"{field_name} must be an integer value")
    if isinstance(value, int):
        return value
    text = str(value or "").strip()
    if not _KEY_RE.fullmatch(text):
        raise InvalidKeyError(f"{field_name} must be an integer value")
    return int(text)
