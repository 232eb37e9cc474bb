"""Exceptions for header extraction."""


class HeaderParseError(Exception):
    """Raised when a message file cannot be parsed."""

    pass
