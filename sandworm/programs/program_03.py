"""
program_03.py — Program 3: "Echo"

'?' reads one input byte and grows with it; '!' prints it back.  The
second '?' runs past the end of the input and reads 0, which '"'
prints as decimal text.

    @?!?"        input: A      output: A0
"""

PROGRAM_DATA = {
    "name":   "Program 3 — Echo",
    "source": '@?!?"\n',
    "input":  b"A",
    "output": b"A0",
}
