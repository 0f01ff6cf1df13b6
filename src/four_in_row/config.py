# src/four_in_row/config.py

from __future__ import annotations

ROWS = 8
COLS = 8
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # short pause so AI moves aren’t instant

# Look-ahead used by the interactive game; the search agent's own default is deeper
SEARCH_DEPTH = 5

# Files
MOVE_LOG_PATH = "inputs"
RESULTS_DIR = "data/results"
