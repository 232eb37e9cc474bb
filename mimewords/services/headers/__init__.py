"""Header field extraction."""

from .base import HeaderParseError
from .header_extractor import HeaderExtractor

__all__ = ["HeaderExtractor", "HeaderParseError"]
