"""Assembly of decoded fragments into the final header string."""

from typing import List

from mimewords.models.tokens import EncodedWord
from mimewords.utils.unicode_utils import normalize_header_text


class Normalizer:
    """
    Collect fragments in scan order and build the normalized result.

    Whitespace in front of a decoded encoded-word is dropped when the
    fragment right before it was also a decoded encoded-word.
    """

    def __init__(self):
        self._parts: List[str] = []
        self._after_encoded_word = False

    def add_plain(self, text: str) -> None:
        """Append literal text."""
        if text:
            self._parts.append(text)
            self._after_encoded_word = False

    def add_decoded(self, word: EncodedWord, text: str) -> None:
        """Append a successfully decoded encoded-word."""
        if not self._after_encoded_word:
            self._parts.append(word.leading_whitespace)
        self._parts.append(text)
        self._after_encoded_word = True

    def add_fallback(self, literal: str) -> None:
        """Append the source text of an encoded-word that failed to decode."""
        self._parts.append(literal)
        self._after_encoded_word = False

    def add_quoted(self, text: str) -> None:
        """Append the unquoted content of a quoted-string."""
        self._parts.append(text)
        self._after_encoded_word = False

    def result(self) -> str:
        """Return the trimmed, whitespace-collapsed, control-free string."""
        return normalize_header_text("".join(self._parts))
