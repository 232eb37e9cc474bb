"""Interface for charset-to-Unicode conversion."""

from abc import ABC, abstractmethod


class CharsetConversionError(Exception):
    """Base exception for charset conversion failures."""

    pass


class UnsupportedCharsetError(CharsetConversionError):
    """Raised when a charset name is not recognized."""

    pass


class InvalidByteSequenceError(CharsetConversionError):
    """Raised when bytes are not valid in the named charset."""

    pass


class CharsetConverter(ABC):
    """
    Strict conversion of bytes in a named charset to Unicode.

    The decoding engine depends only on this interface, so the charset
    catalog backing it can be swapped without touching the decoder.
    """

    @abstractmethod
    def convert_to_unicode(self, charset_name: str, data: bytes) -> str:
        """
        Convert ``data`` from ``charset_name`` to a Unicode string.

        Args:
            charset_name: Charset name as written in the encoded-word
            data: Raw bytes after transfer decoding

        Returns:
            Decoded text

        Raises:
            UnsupportedCharsetError: If the charset name is unknown
            InvalidByteSequenceError: If ``data`` is invalid for the charset

        Notes:
            - Implementations must never substitute replacement characters
        """
        pass
