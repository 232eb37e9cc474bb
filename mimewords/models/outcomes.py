"""Per-word decode outcomes."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Decoded:
    """An encoded-word converted to Unicode."""

    text: str


@dataclass(frozen=True)
class Fallback:
    """An encoded-word that could not be decoded, shown as its source text."""

    literal: str


DecodeOutcome = Union[Decoded, Fallback]
