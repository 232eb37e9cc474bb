"""RFC 2047 decoding engine."""

from .header_decoder import HeaderDecoder, decode_phrase, decode_text
from .normalizer import Normalizer
from .scanner import MAX_ENCODED_WORD_LENGTH, RFC822_SPECIALS, Scanner
from .word_decoder import WordDecoder

__all__ = [
    "HeaderDecoder",
    "decode_text",
    "decode_phrase",
    "Scanner",
    "WordDecoder",
    "Normalizer",
    "MAX_ENCODED_WORD_LENGTH",
    "RFC822_SPECIALS",
]
