"""Data models for header decoding"""

from .outcomes import DecodeOutcome, Decoded, Fallback
from .tokens import EncodedWord, Mode, PlainRun, QuotedString, Token, TransferEncoding

__all__ = [
    "Mode",
    "TransferEncoding",
    "PlainRun",
    "EncodedWord",
    "QuotedString",
    "Token",
    "Decoded",
    "Fallback",
    "DecodeOutcome",
]
