"""Decoding of single encoded-words and quoted-strings."""

import base64
import logging
import re

from mimewords.models.outcomes import DecodeOutcome, Decoded, Fallback
from mimewords.models.tokens import EncodedWord, QuotedString, TransferEncoding
from mimewords.services.charset.base import CharsetConversionError, CharsetConverter

logger = logging.getLogger(__name__)

_HEX_ESCAPE_RE = re.compile(rb"=([0-9A-Fa-f]{2})")
_QUOTED_PAIR_RE = re.compile(r"\\(.)", re.DOTALL)


def decode_base64_payload(payload: str) -> bytes:
    """
    Decode a B-encoded payload made of complete 4-character groups.

    Decoding ends at the first padded group; groups after it are ignored.

    Examples:
        >>> decode_base64_payload("SGVsbG8=")
        b'Hello'
    """
    return base64.b64decode(payload)


def decode_q_payload(payload: str) -> bytes:
    """
    Decode a Q-encoded payload: ``_`` is a space, ``=XX`` a hex byte.

    Examples:
        >>> decode_q_payload("Caf=C3=A9_au_lait")
        b'Caf\\xc3\\xa9 au lait'
    """
    data = payload.replace("_", " ").encode("ascii")
    return _HEX_ESCAPE_RE.sub(lambda m: bytes([int(m.group(1), 16)]), data)


class WordDecoder:
    """Turn encoded-words into Unicode with strict failure semantics."""

    def __init__(self, converter: CharsetConverter):
        """
        Initialize word decoder.

        Args:
            converter: Strict charset-to-Unicode converter
        """
        self.converter = converter

    def decode(self, word: EncodedWord) -> DecodeOutcome:
        """
        Decode one encoded-word.

        Args:
            word: Matched encoded-word

        Returns:
            Decoded text, or Fallback carrying the word's source text when the
            charset is unknown or the bytes are invalid for it
        """
        data = self.unwrap(word)

        try:
            text = self.converter.convert_to_unicode(word.charset, data)
        except (CharsetConversionError, LookupError, UnicodeError) as e:
            logger.warning("Cannot decode encoded-word %r: %s", word.literal.lstrip(), e)
            return Fallback(word.literal)

        return Decoded(text)

    @staticmethod
    def unwrap(word: EncodedWord) -> bytes:
        """Undo the transfer encoding of a word."""
        if word.transfer is TransferEncoding.BASE64:
            return decode_base64_payload(word.payload)
        return decode_q_payload(word.payload)

    @staticmethod
    def unquote(quoted: QuotedString) -> str:
        """Remove backslash escapes from a quoted-string (``\\X`` becomes ``X``)."""
        return _QUOTED_PAIR_RE.sub(r"\1", quoted.content)
