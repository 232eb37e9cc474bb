"""Charset conversion collaborators."""

from .base import (
    CharsetConversionError,
    CharsetConverter,
    InvalidByteSequenceError,
    UnsupportedCharsetError,
)
from .codecs_converter import CodecsCharsetConverter

__all__ = [
    "CharsetConverter",
    "CharsetConversionError",
    "UnsupportedCharsetError",
    "InvalidByteSequenceError",
    "CodecsCharsetConverter",
]
