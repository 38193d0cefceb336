import os

# Prompt marker printed before each read
PROMPT = ": "

# Token replaced by the shell's own pid
PID_MARKER = "$$"

COMMENT_PREFIX = "#"
BACKGROUND_TOKEN = "&"
REDIRECT_IN = "<"
REDIRECT_OUT = ">"

DEV_NULL = os.devnull
OUTPUT_MODE = 0o644

INITIAL_STATUS = "exit status 0"

FG_ONLY_ON_MSG = "\nEntering foreground-only mode (& is now ignored)\n"
FG_ONLY_OFF_MSG = "\nExiting foreground-only mode\n"
