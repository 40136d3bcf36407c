"""
program_02.py — Program 2: "Add"

'2' and '3' grow the worm to two segments.  '+' shrinks the neck (3),
swallows '+', shrinks the next segment (2) and grows again with their
sum.  '"' prints the neck as decimal text.

    @23+"   →   23+"@      output: 5
"""

PROGRAM_DATA = {
    "name":   "Program 2 — Add",
    "source": '@23+"\n',
    "input":  b"",
    "output": b"5",
}
