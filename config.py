import os
from dotenv import load_dotenv

load_dotenv()

ENCODING = os.getenv("KWGREP_ENCODING", "utf-8")
HIGHLIGHT_COLOR = os.getenv("KWGREP_HIGHLIGHT_COLOR", "red").lower()
# NO_COLOR / FORCE_COLOR and tty detection are left to termcolor
NO_COLOR = bool(os.getenv("KWGREP_NO_COLOR"))
LOG_LEVEL = os.getenv("KWGREP_LOG_LEVEL", "WARNING").upper()
LOG_DIR = os.getenv("KWGREP_LOG_DIR")  # None = console only

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
