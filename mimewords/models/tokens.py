"""Token model produced by the header scanner."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Mode(str, Enum):
    """Decoding mode for a header field body."""

    TEXT = "text"
    PHRASE = "phrase"


class TransferEncoding(str, Enum):
    """RFC 2047 transfer encoding of an encoded-word."""

    BASE64 = "B"
    QUOTED_PRINTABLE = "Q"

    @classmethod
    def from_letter(cls, letter: str) -> "TransferEncoding":
        return cls(letter.upper())


@dataclass(frozen=True)
class PlainRun:
    """A literal span copied verbatim into the result."""

    text: str


@dataclass(frozen=True)
class EncodedWord:
    """
    One RFC 2047 encoded-word as matched in the source.

    Attributes:
        leading_whitespace: Whitespace run captured right before ``=?``
        charset: Charset name from the word
        transfer: Transfer encoding (B or Q)
        payload: Encoded text between the last ``?`` delimiters
        literal: Exact source text of the match, leading whitespace included
    """

    leading_whitespace: str
    charset: str
    transfer: TransferEncoding
    payload: str
    literal: str

    @property
    def word_length(self) -> int:
        """Length of the word without its leading whitespace."""
        return len(self.literal) - len(self.leading_whitespace)


@dataclass(frozen=True)
class QuotedString:
    """
    An RFC 822 quoted-string (phrase mode only).

    Attributes:
        content: Text between the quotes, backslash escapes still present
        literal: Exact source text including the quotes
    """

    content: str
    literal: str


Token = Union[PlainRun, EncodedWord, QuotedString]
