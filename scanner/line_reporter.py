import logging
import sys

from termcolor import colored

from scanner.segmenter import grep, keyword_offsets
from scanner.segments import KeywordSegment, TextSegment


class LineReporter:
    def __init__(self, stream=None, color="red", use_color=True, force_color=None):
        self.stream = stream if stream is not None else sys.stdout
        self.color = color
        self.use_color = use_color
        # None lets termcolor decide from NO_COLOR, FORCE_COLOR and the tty
        self.force_color = force_color
        self.logger = logging.getLogger(__name__)

    def format(self, segments, line_number):
        """
        Renders a matching line as "<line>-<o1>,<o2>: <text>", with every
        keyword segment emphasized.
        """
        offsets = ",".join(str(o) for o in keyword_offsets(segments))
        parts = [f"{line_number}-{offsets}: "]
        for segment in segments:
            if isinstance(segment, TextSegment):
                parts.append(segment.text)
            elif isinstance(segment, KeywordSegment):
                parts.append(self._emphasize(segment.text))
            else:
                raise TypeError(f"Unknown segment type: {type(segment).__name__}")
        return "".join(parts)

    def report(self, matcher, line, line_number):
        """Prints line if it matches. Returns True when something was printed."""
        segments = grep(matcher, line)
        if segments is None:
            return False

        self.logger.debug(f"Line {line_number}: {len(keyword_offsets(segments))} match(es)")
        self.stream.write(self.format(segments, line_number) + "\n")
        return True

    def _emphasize(self, text):
        if not self.use_color:
            return text
        return colored(text, self.color, force_color=self.force_color)
