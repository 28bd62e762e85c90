from typing import Iterable, List, Optional

from scanner.segments import KeywordSegment, MatchRange, Segment, TextSegment


def decompose(matches: Iterable[MatchRange], text: str, encoding="utf-8") -> Optional[List[Segment]]:
    """
    Splits text into alternating TextSegment / KeywordSegment items.

    matches are byte ranges into text encoded with `encoding`, ordered and
    non-overlapping, as produced by PatternMatcher.find_all. Each keyword's
    char_start is the 1-based character index of its first character.
    Returns None when there are no matches.
    """
    matches = list(matches)
    if not matches:
        return None

    data = text.encode(encoding)
    segments = []
    byte_cursor = 0
    char_cursor = 0

    for m in matches:
        if m.start > byte_cursor:
            gap = data[byte_cursor:m.start].decode(encoding)
            segments.append(TextSegment(gap))
            char_cursor += len(gap)

        keyword = data[m.start:m.end].decode(encoding)
        segments.append(KeywordSegment(keyword, char_cursor + 1))
        char_cursor += len(keyword)
        byte_cursor = m.end

    if byte_cursor < len(data):
        segments.append(TextSegment(data[byte_cursor:].decode(encoding)))

    return segments


def grep(matcher, text: str) -> Optional[List[Segment]]:
    """Matches text with matcher and decomposes the result."""
    return decompose(matcher.find_all(text), text, matcher.encoding)


def keyword_offsets(segments: Iterable[Segment]) -> List[int]:
    return [s.char_start for s in segments if isinstance(s, KeywordSegment)]


def reconstruct(segments: Iterable[Segment]) -> str:
    return "".join(s.text for s in segments)
