"""Decoding services"""

from .charset import CharsetConverter, CodecsCharsetConverter
from .decoding import HeaderDecoder, Normalizer, Scanner, WordDecoder
from .headers import HeaderExtractor, HeaderParseError

__all__ = [
    "CharsetConverter",
    "CodecsCharsetConverter",
    "HeaderDecoder",
    "Scanner",
    "WordDecoder",
    "Normalizer",
    "HeaderExtractor",
    "HeaderParseError",
]
