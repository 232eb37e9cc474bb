"""Decoding of display names inside address list headers."""

from typing import TYPE_CHECKING

from .unicode_utils import is_whitespace

if TYPE_CHECKING:
    from mimewords.services.decoding.header_decoder import HeaderDecoder

_CLOSING = {"<": ">", "(": ")"}


def decode_address_list(value: str, decoder: "HeaderDecoder") -> str:
    """
    Decode the phrases of an address header (From, To, Cc...).

    Phrases are decoded in phrase mode. Angle addresses are copied as they
    are, comments are decoded as text, and all other special characters are
    kept in place. Whitespace between pieces follows the source value.

    Args:
        value: Raw header value
        decoder: Decoder used for phrases and comments

    Returns:
        Header value with its display names decoded

    Examples:
        >>> decode_address_list("=?UTF-8?Q?J=C3=B6rg?= <j@example.com>", HeaderDecoder())
        'Jörg <j@example.com>'
    """
    if not value:
        return ""

    out = ""
    cursor = 0

    while cursor < len(value):
        spaced = is_whitespace(value[cursor])
        phrase, cursor = decoder.decode_phrase(value, cursor)
        if phrase:
            if out and not out.endswith(" ") and (spaced or out.endswith((">", ")", ","))):
                out += " "
            out += phrase

        if cursor >= len(value):
            break

        char = value[cursor]
        if char in _CLOSING:
            close = value.find(_CLOSING[char], cursor + 1)
            if close == -1:
                close = len(value)
            if out and not out.endswith(" "):
                out += " "
            if char == "(":
                out += "(" + decoder.decode_text(value[cursor + 1 : close]) + ")"
            else:
                out += value[cursor : close + 1]
            cursor = close + 1
        else:
            # unterminated quoted-strings land here as a bare quote as well
            out += char
            cursor += 1

    return out.strip()
