"""
sandworm.programs — Built-in demo programs.

Each sub-module exports a single PROGRAM_DATA dict:

    {
        "name":   str,    # human-readable title
        "source": str,    # program text, one grid row per line
        "input":  bytes,  # initial input feed (may be empty)
        "output": bytes,  # output after running to END_OF_PROGRAM
    }

This __init__ aggregates them into the PROGRAMS list, ordered by
program number.
"""

from sandworm.programs.program_01 import PROGRAM_DATA as _P01
from sandworm.programs.program_02 import PROGRAM_DATA as _P02
from sandworm.programs.program_03 import PROGRAM_DATA as _P03
from sandworm.programs.program_04 import PROGRAM_DATA as _P04

PROGRAMS = [
    _P01,
    _P02,
    _P03,
    _P04,
]
