"""
program_04.py — Program 4: "Corner"

The worm picks up a 7, turns down at 'v' and slides its single
segment around the corner.  '"' then prints the 7 from the row below.

      Col  0   1   2
 Row 0   [ @   7   v ]
 Row 1   [ .   .   " ]
"""

PROGRAM_DATA = {
    "name":   "Program 4 — Corner",
    "source": '@7v\n  "\n',
    "input":  b"",
    "output": b"7",
}
