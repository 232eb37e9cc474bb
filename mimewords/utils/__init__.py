"""Utility functions"""

from .address_utils import decode_address_list
from .unicode_utils import (
    WHITESPACE_CHARS,
    collapse_whitespace,
    is_whitespace,
    normalize_header_text,
    strip_control_chars,
)

__all__ = [
    "WHITESPACE_CHARS",
    "collapse_whitespace",
    "is_whitespace",
    "normalize_header_text",
    "strip_control_chars",
    "decode_address_list",
]
