"""Decoding of RFC 2047 encoded-words in MIME header fields."""

from .models import Mode
from .services.decoding import HeaderDecoder, decode_phrase, decode_text

__version__ = "0.1.0"

__all__ = ["HeaderDecoder", "Mode", "decode_text", "decode_phrase"]
