import argparse
import sys

from config import ENCODING, HIGHLIGHT_COLOR, NO_COLOR, LOG_LEVEL, LOG_DIR, EXIT_OK, EXIT_ERROR
from utils.logger import setup_logger
from scanner.pattern_matcher import PatternMatcher, PatternError, UnsupportedEncodingError
from scanner.line_reporter import LineReporter
from scanner.scanner_engine import ScannerEngine


def build_parser():
    parser = argparse.ArgumentParser(
        prog="kwgrep",
        description="Print lines matching a pattern, with the character offset of every match",
    )
    parser.add_argument("pattern", help="Regular expression to search for")
    parser.add_argument("file", help="Path of the text file to search")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logger = setup_logger(level=LOG_LEVEL, log_dir=LOG_DIR)

    try:
        matcher = PatternMatcher(args.pattern, encoding=ENCODING)
    except (PatternError, UnsupportedEncodingError) as e:
        logger.error(str(e))
        return EXIT_ERROR

    reporter = LineReporter(sys.stdout, color=HIGHLIGHT_COLOR, use_color=not NO_COLOR)
    engine = ScannerEngine(matcher, reporter, encoding=ENCODING)

    try:
        matched = engine.scan_file(args.file)
    except UnicodeDecodeError as e:
        logger.error(f"Failed to decode {args.file} as {ENCODING}: {e}")
        return EXIT_ERROR
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        return EXIT_ERROR

    logger.debug(f"{matched} matching line(s)")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
