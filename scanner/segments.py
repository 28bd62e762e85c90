from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class MatchRange:
    """Half-open byte interval of a match within the encoded line."""
    start: int
    end: int


@dataclass(frozen=True)
class TextSegment:
    """Unmatched text between (or around) keywords. Never highlighted."""
    text: str


@dataclass(frozen=True)
class KeywordSegment:
    """Matched text plus the 1-based character index of its first character."""
    text: str
    char_start: int


Segment = Union[TextSegment, KeywordSegment]
