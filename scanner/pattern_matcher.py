import re
from typing import List

from scanner.segments import MatchRange


class PatternError(ValueError):
    """Raised when the search pattern cannot be compiled."""


class UnsupportedEncodingError(ValueError):
    """Raised for encodings whose byte offsets cannot be computed piecewise."""


def check_encoding(encoding):
    """
    Byte ranges are built by encoding chunks of a line separately and lines
    are split on b"\\n", so the encoding must add nothing for an empty string
    (no BOM, no state) and encode "\\n" as the single byte b"\\n".
    """
    try:
        empty = "".encode(encoding)
        newline = "\n".encode(encoding)
    except LookupError as e:
        raise UnsupportedEncodingError(f"Unknown encoding {encoding!r}") from e
    if empty != b"" or newline != b"\n":
        raise UnsupportedEncodingError(
            f"Encoding {encoding!r} is not supported: it adds a byte order mark "
            f"or is not ASCII-compatible"
        )


class PatternMatcher:
    def __init__(self, pattern, flags=0, encoding="utf-8"):
        check_encoding(encoding)
        self.encoding = encoding
        if isinstance(pattern, re.Pattern):
            if isinstance(pattern.pattern, bytes):
                raise PatternError(f"Pattern must be text, not bytes: {pattern.pattern!r}")
            self.pattern = pattern.pattern
            self.compiled_pattern = pattern
        else:
            self.pattern = pattern
            try:
                self.compiled_pattern = re.compile(pattern, flags)
            except re.error as e:
                raise PatternError(f"Invalid pattern {pattern!r}: {e}") from e

    def find_all(self, text: str) -> List[MatchRange]:
        """
        Returns every non-overlapping match in text, left to right, as byte
        ranges into text encoded with self.encoding.
        Empty matches are skipped, so each range has start < end.
        """
        ranges = []
        char_pos = 0
        byte_pos = 0
        for match in self.compiled_pattern.finditer(text):
            start, end = match.span()
            if start == end:
                continue
            byte_start = byte_pos + self._byte_len(text[char_pos:start])
            byte_end = byte_start + self._byte_len(text[start:end])
            ranges.append(MatchRange(byte_start, byte_end))
            char_pos, byte_pos = end, byte_end
        return ranges

    def _byte_len(self, chunk: str) -> int:
        return len(chunk.encode(self.encoding))
