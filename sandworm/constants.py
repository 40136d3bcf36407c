"""
constants.py — Shared constants for the sandworm interpreter.

Sentinel bytes, directional data, execution states, ANSI codes and
environment settings live here so every other module can import them
from a single authoritative source.
"""

import os

# ═══════════════════════════════════════════════════════════════════════════
#  GRID BYTES
# ═══════════════════════════════════════════════════════════════════════════

HEAD       = ord("@")   # always drawn in the cell under the worm's head
BLANK_FILL = ord(" ")   # excreted when the byte queue is empty
PAD        = 0          # right-pads short source lines

# ═══════════════════════════════════════════════════════════════════════════
#  DIRECTIONAL DATA
# ═══════════════════════════════════════════════════════════════════════════

DEFAULT_DIRECTION = "right"

# Column / row deltas for each compass direction.  Coordinates are
# (col, row) throughout the interpreter.
DIR_DELTA = {
    "up":    ( 0, -1),
    "down":  ( 0,  1),
    "left":  (-1,  0),
    "right": ( 1,  0),
}

# Arrow bytes that set the heading outright.
HEADING_BYTES = {
    ord("^"): "up",
    ord("v"): "down",
    ord("<"): "left",
    ord(">"): "right",
}

# Conditional turns taken by '\' and '/' when the popped value is non-zero.
TURN_BACKSLASH = {"up": "left", "left": "up", "down": "right", "right": "down"}
TURN_SLASH     = {"up": "right", "right": "up", "down": "left", "left": "down"}

HEAD_ARROWS = {"up": "^", "down": "v", "left": "<", "right": ">"}

# ═══════════════════════════════════════════════════════════════════════════
#  EXECUTION STATES
# ═══════════════════════════════════════════════════════════════════════════

RUNNING        = "running"
END_OF_PROGRAM = "end_of_program"

# ═══════════════════════════════════════════════════════════════════════════
#  ANSI ESCAPE CODES
# ═══════════════════════════════════════════════════════════════════════════

ANSI_RESET = "\033[0m"
ANSI_BOLD  = "\033[1m"
ANSI_DIM   = "\033[2m"

ANSI_COLORS = {
    "red":     "\033[91m",
    "green":   "\033[92m",
    "yellow":  "\033[93m",
    "black":   "\033[30m",
}

ANSI_BACKGROUNDS = {
    "red":    "\033[41m",
    "green":  "\033[42m",
    "yellow": "\033[43m",
}

# ═══════════════════════════════════════════════════════════════════════════
#  ENVIRONMENT
# ═══════════════════════════════════════════════════════════════════════════

# Log level for the interactive shell, e.g. SANDWORM_LOG=DEBUG.
LOG_LEVEL = os.environ.get("SANDWORM_LOG", "WARNING").upper()
