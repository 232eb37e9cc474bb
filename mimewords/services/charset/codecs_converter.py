"""Charset converter backed by Python's codec registry."""

import codecs
from typing import Mapping, Optional

from .base import CharsetConverter, InvalidByteSequenceError, UnsupportedCharsetError


class CodecsCharsetConverter(CharsetConverter):
    """Resolve charset names through an alias map and :mod:`codecs`."""

    def __init__(self, aliases: Optional[Mapping[str, str]] = None):
        """
        Initialize converter.

        Args:
            aliases: Optional charset name overrides, matched case-insensitively
        """
        self.aliases = {name.lower(): target for name, target in (aliases or {}).items()}

    def resolve(self, charset_name: str) -> codecs.CodecInfo:
        """
        Look up the codec for a charset name.

        Raises:
            UnsupportedCharsetError: If no text codec exists for the name
        """
        name = self.aliases.get(charset_name.lower(), charset_name)
        try:
            info = codecs.lookup(name)
        except LookupError:
            raise UnsupportedCharsetError(f"Unknown charset: {charset_name}")

        # bytes-to-bytes codecs (base64, zlib, rot13...) are not charsets;
        # _is_text_encoding is a CPython internal of CodecInfo
        if not getattr(info, "_is_text_encoding", True):
            raise UnsupportedCharsetError(f"Not a text encoding: {charset_name}")

        return info

    def convert_to_unicode(self, charset_name: str, data: bytes) -> str:
        info = self.resolve(charset_name)
        try:
            text, _ = info.decode(data, "strict")
        except UnicodeDecodeError as e:
            raise InvalidByteSequenceError(f"Invalid {charset_name} data: {e}")
        except (ValueError, TypeError) as e:
            # codecs like unicode_escape raise plain ValueError/TypeError
            raise InvalidByteSequenceError(f"Cannot decode {charset_name} data: {e}")
        return text
