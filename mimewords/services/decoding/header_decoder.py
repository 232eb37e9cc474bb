"""Public entry points for decoding RFC 2047 header values."""

from typing import Optional, Tuple

from mimewords.config.decoder_config import DecoderSettings
from mimewords.models.outcomes import Fallback
from mimewords.models.tokens import EncodedWord, Mode, QuotedString
from mimewords.services.charset.base import CharsetConverter
from mimewords.services.charset.codecs_converter import CodecsCharsetConverter
from .normalizer import Normalizer
from .scanner import Scanner
from .word_decoder import WordDecoder


class HeaderDecoder:
    """
    Decode MIME header field bodies containing RFC 2047 encoded-words.

    The decoder keeps no state between calls and may be shared between
    threads, provided its charset converter can be.
    """

    def __init__(
        self,
        converter: Optional[CharsetConverter] = None,
        settings: Optional[DecoderSettings] = None,
    ):
        """
        Initialize decoder.

        Args:
            converter: Charset converter (default: Python codecs with configured aliases)
            settings: Decoder settings (default: DecoderSettings())
        """
        self.settings = settings or DecoderSettings()
        self.converter = converter or CodecsCharsetConverter(self.settings.charset_aliases)
        self.word_decoder = WordDecoder(self.converter)

    def decode_text(self, value: Optional[str]) -> str:
        """
        Decode a '*text' field body such as Subject or Comments.

        Args:
            value: Raw header value (may be None)

        Returns:
            Decoded string, trimmed and with whitespace collapsed

        Examples:
            >>> HeaderDecoder().decode_text("=?UTF-8?Q?Caf=C3=A9?=")
            'Café'
        """
        if not value:
            return ""

        text, _ = self._decode(value, Mode.TEXT, 0)
        return text

    def decode_phrase(self, value: Optional[str], cursor: int = 0) -> Tuple[str, int]:
        """
        Decode an RFC 822 phrase, e.g. the display name before an address.

        Quoted-strings are unquoted and decoding stops at the first RFC 822
        special character, so address parsing can resume from the returned
        cursor.

        Args:
            value: Raw header value (may be None)
            cursor: Position to start decoding from

        Returns:
            Tuple of (decoded phrase, position of the first unconsumed
            special character or end of input)

        Raises:
            ValueError: If cursor lies outside the value

        Examples:
            >>> HeaderDecoder().decode_phrase('"John Doe" <foo@example.com>')
            ('John Doe', 11)
        """
        value = value or ""
        if not 0 <= cursor <= len(value):
            raise ValueError(f"Cursor {cursor} out of range for value of length {len(value)}")

        if not value:
            return "", cursor

        return self._decode(value, Mode.PHRASE, cursor)

    def _decode(self, value: str, mode: Mode, start: int) -> Tuple[str, int]:
        """Scan, decode and normalize ``value`` from ``start``."""
        scanner = Scanner(value, mode, start, self.settings.max_encoded_word_length)
        normalizer = Normalizer()

        for token in scanner.tokens():
            if isinstance(token, EncodedWord):
                outcome = self.word_decoder.decode(token)
                if isinstance(outcome, Fallback):
                    # the rest of the value is left undecoded
                    normalizer.add_fallback(outcome.literal)
                    break
                normalizer.add_decoded(token, outcome.text)
            elif isinstance(token, QuotedString):
                normalizer.add_quoted(self.word_decoder.unquote(token))
            else:
                normalizer.add_plain(token.text)

        normalizer.add_plain(scanner.remainder().text)
        return normalizer.result(), scanner.cursor


_default_decoder = HeaderDecoder()


def decode_text(value: Optional[str]) -> str:
    """Decode a '*text' header value with the default decoder."""
    return _default_decoder.decode_text(value)


def decode_phrase(value: Optional[str], cursor: int = 0) -> Tuple[str, int]:
    """Decode an RFC 822 phrase with the default decoder."""
    return _default_decoder.decode_phrase(value, cursor)
