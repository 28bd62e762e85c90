import logging

from config import ENCODING
from scanner.line_reporter import LineReporter


def _strip_terminator(line):
    # Only "\n" and "\r\n" end a line; a lone "\r" is line content.
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class ScannerEngine:
    def __init__(self, matcher, reporter=None, encoding=ENCODING):
        self.logger = logging.getLogger(__name__)
        self.matcher = matcher
        self.reporter = reporter if reporter is not None else LineReporter()
        self.encoding = encoding

    def scan_text(self, text):
        """
        Reports every matching line of an in-memory string.
        Returns the number of matching lines.
        """
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return self._scan_lines(line + "\n" for line in lines)

    def scan_file(self, path):
        """
        Reports every matching line of the file at path.
        Lines are decoded one at a time, so everything before a malformed
        line is reported before its UnicodeDecodeError propagates.
        OSError and UnicodeDecodeError abort the scan.
        """
        self.logger.info(f"Scanning {path} for /{self.matcher.pattern}/ ({self.encoding})...")
        with open(path, 'rb') as f:
            matched = self._scan_lines(raw.decode(self.encoding) for raw in f)
        self.logger.info(f"Scan complete. {matched} matching line(s) in {path}")
        return matched

    def _scan_lines(self, lines):
        matched = 0
        for line_number, line in enumerate(lines, start=1):
            if self.reporter.report(self.matcher, _strip_terminator(line), line_number):
                matched += 1
        return matched
