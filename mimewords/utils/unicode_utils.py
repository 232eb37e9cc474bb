"""Whitespace and control character helpers for decoded header text."""

import re

# Whitespace as understood in header values: ASCII \t\n\v\f\r and space plus
# the Unicode space separators. The C0 separators 0x1C-0x1F are not included.
WHITESPACE_CHARS = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_WHITESPACE_CLASS = "[" + re.escape(WHITESPACE_CHARS) + "]"
_EDGE_WHITESPACE_RE = re.compile(rf"^{_WHITESPACE_CLASS}+|{_WHITESPACE_CLASS}+\Z")
_WHITESPACE_RUN_RE = re.compile(rf"{_WHITESPACE_CLASS}+")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")


def is_whitespace(char: str) -> bool:
    """Return True if ``char`` is a single header whitespace character."""
    return len(char) == 1 and char in WHITESPACE_CHARS


def collapse_whitespace(text: str) -> str:
    """
    Trim the ends of ``text`` and collapse each internal whitespace run.

    Examples:
        >>> collapse_whitespace("  Hello \\t  World\\n")
        'Hello World'
    """
    text = _EDGE_WHITESPACE_RE.sub("", text)
    return _WHITESPACE_RUN_RE.sub(" ", text)


def strip_control_chars(text: str) -> str:
    """
    Remove ASCII control characters (0x00-0x1F, 0x7F).

    Examples:
        >>> strip_control_chars("Bad\\x00Header\\x7f")
        'BadHeader'
    """
    return _CONTROL_CHARS_RE.sub("", text)


def normalize_header_text(text: str) -> str:
    """Apply whitespace collapsing, then control character removal."""
    return strip_control_chars(collapse_whitespace(text))
