import logging
import os
import sys
from datetime import datetime

def setup_logger(name="kwgrep", level="WARNING", log_dir=None):
    # Configure Root Logger
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))

    # Remove existing handlers to avoid duplicates if called multiple times
    if logger.handlers:
        logger.handlers = []

    # File Handler (only when a log directory is configured)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"kwgrep_{timestamp}.log")
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    # Console Handler. stderr keeps diagnostics out of the match output.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    return logging.getLogger(name)
