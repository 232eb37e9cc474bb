"""Tokenizer locating encoded-words and quoted-strings in a header value."""

import logging
import string
from typing import Iterator, Optional, Tuple

from mimewords.models.tokens import EncodedWord, Mode, PlainRun, QuotedString, Token, TransferEncoding
from mimewords.utils.unicode_utils import is_whitespace

logger = logging.getLogger(__name__)

# RFC 2047 asks for 75 characters; longer words are still accepted up to this cap
MAX_ENCODED_WORD_LENGTH = 255

RFC822_SPECIALS = frozenset('()<>[]:;@\\,."')

_CHARSET_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
_BASE64_CHARS = frozenset(string.ascii_letters + string.digits + "+/")


class Scanner:
    """
    Single left-to-right scan over a header value.

    ``tokens()`` yields the structured tokens in source order, each preceded
    by the plain text leading up to it. ``remainder()`` then consumes the
    trailing plain text. ``cursor`` always points at the first unconsumed
    character.
    """

    def __init__(
        self,
        value: str,
        mode: Mode,
        start: int = 0,
        max_word_length: int = MAX_ENCODED_WORD_LENGTH,
    ):
        """
        Initialize scanner.

        Args:
            value: Raw header value
            mode: Text or phrase mode
            start: Position where scanning begins
            max_word_length: Longest encoded-word accepted, leading whitespace excluded
        """
        self.value = value
        self.mode = mode
        self.start = start
        self.cursor = start
        self.max_word_length = max_word_length

    def tokens(self) -> Iterator[Token]:
        """
        Yield tokens until no further encoded-word or quoted-string matches.

        Yields:
            PlainRun for non-empty text before a structured token, then the
            EncodedWord or QuotedString itself. An over-long encoded-word is
            yielded as a PlainRun of its source text and ends the scan.
        """
        while True:
            found = self._find_next()
            if found is None:
                return

            position, token = found
            prefix = self.value[self.cursor : position]
            self.cursor = position + len(token.literal)

            if prefix:
                yield PlainRun(prefix)

            if isinstance(token, EncodedWord) and token.word_length > self.max_word_length:
                logger.debug(
                    "Encoded-word at %d is %d characters long, keeping it as text",
                    position,
                    token.word_length,
                )
                yield PlainRun(token.literal)
                return

            yield token

    def remainder(self) -> PlainRun:
        """
        Consume the trailing plain text.

        Text mode takes everything that is left. Phrase mode stops at the
        first RFC 822 special character so the caller can continue parsing
        from there.
        """
        value = self.value
        if self.mode is Mode.TEXT:
            end = len(value)
        else:
            end = self.cursor
            while end < len(value) and value[end] not in RFC822_SPECIALS:
                end += 1

        run = PlainRun(value[self.cursor : end])
        self.cursor = end
        return run

    def _find_next(self) -> Optional[Tuple[int, Token]]:
        """Return the earliest structured token at or after the cursor."""
        value = self.value
        phrase = self.mode is Mode.PHRASE

        for position in range(self.cursor, len(value)):
            char = value[position]

            # a whitespace run is only tried from its first character
            if position > self.cursor and is_whitespace(char) and is_whitespace(value[position - 1]):
                continue

            word = self._match_encoded_word(position)
            if word is not None:
                return position, word

            if phrase:
                if char == '"':
                    quoted = self._match_quoted_string(position)
                    if quoted is not None:
                        return position, quoted
                if char in RFC822_SPECIALS:
                    return None

        return None

    def _match_encoded_word(self, position: int) -> Optional[EncodedWord]:
        """
        Match ``WS =?charset?X?payload?=`` at ``position``.

        Leading whitespace may only be absent at the start of the scan.
        """
        value = self.value
        length = len(value)

        begin = position
        while begin < length and is_whitespace(value[begin]):
            begin += 1
        if begin == position and position != self.start:
            return None

        if not value.startswith("=?", begin):
            return None

        charset_end = begin + 2
        while charset_end < length and value[charset_end] in _CHARSET_CHARS:
            charset_end += 1
        if charset_end == begin + 2 or not value.startswith("?", charset_end):
            return None

        letter = value[charset_end + 1 : charset_end + 2]
        if letter not in ("B", "b", "Q", "q") or not value.startswith("?", charset_end + 2):
            return None

        transfer = TransferEncoding.from_letter(letter)
        payload_start = charset_end + 3
        if transfer is TransferEncoding.BASE64:
            payload_end = self._scan_base64(payload_start)
        else:
            payload_end = self._scan_q(payload_start)

        if payload_end == payload_start or not value.startswith("?=", payload_end):
            return None

        end = payload_end + 2
        if not self._is_word_boundary(end):
            return None

        return EncodedWord(
            leading_whitespace=value[position:begin],
            charset=value[begin + 2 : charset_end],
            transfer=transfer,
            payload=value[payload_start:payload_end],
            literal=value[position:end],
        )

    def _scan_base64(self, position: int) -> int:
        """Return the end of the run of complete base64 groups at ``position``."""
        value = self.value
        while position + 4 <= len(value):
            first, second, third, fourth = value[position : position + 4]
            if first not in _BASE64_CHARS or second not in _BASE64_CHARS:
                break
            if third == "=" and fourth == "=":
                position += 4
            elif third in _BASE64_CHARS and (fourth in _BASE64_CHARS or fourth == "="):
                position += 4
            else:
                break
        return position

    def _scan_q(self, position: int) -> int:
        """Return the end of the run of Q-encoding payload characters."""
        value = self.value
        phrase = self.mode is Mode.PHRASE
        while position < len(value):
            char = value[position]
            if char == "?" or not "\x20" < char < "\x7f":
                break
            if phrase and char in RFC822_SPECIALS:
                break
            position += 1
        return position

    def _is_word_boundary(self, position: int) -> bool:
        """Check what may follow the closing ``?=`` of an encoded-word."""
        if position == len(self.value):
            return True
        char = self.value[position]
        if is_whitespace(char):
            return True
        return self.mode is Mode.PHRASE and char in RFC822_SPECIALS

    def _match_quoted_string(self, position: int) -> Optional[QuotedString]:
        """Match an RFC 822 quoted-string starting at ``position``."""
        value = self.value
        index = position + 1
        while index < len(value):
            char = value[index]
            if char == '"':
                return QuotedString(
                    content=value[position + 1 : index],
                    literal=value[position : index + 1],
                )
            # escaped pair; a trailing backslash leaves the string unterminated
            index += 2 if char == "\\" else 1
        return None
