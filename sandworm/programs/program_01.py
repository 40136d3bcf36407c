"""
program_01.py — Program 1: "Hi"

Each letter is literal data: the worm swallows it and grows by one
segment carrying its byte.  '!' shrinks the neck back off and prints
it as a raw byte.  The shrink excretes the letter's own byte into the
vacated cell, so the source reappears behind the worm:

    @H!i!   →   H!i!@      output: Hi
"""

PROGRAM_DATA = {
    "name":   "Program 1 — Hi",
    "source": "@H!i!\n",
    "input":  b"",
    "output": b"Hi",
}
