"""
loader.py — Source-text loader for sandworm programs.

load_program() turns line-oriented source into a padded Grid and the
worm's starting head coordinate.
"""

from sandworm.constants import HEAD, PAD
from sandworm.entities import Grid


class ProgramLoadError(ValueError):
    """Source text that cannot form a non-empty grid."""


def _split_lines(source: bytes) -> list:
    lines = source.split(b"\n")
    # A trailing newline terminates the last line rather than opening one.
    if lines and lines[-1] == b"":
        lines.pop()
    return [ln[:-1] if ln.endswith(b"\r") else ln for ln in lines]


def parse_source(source):
    """
    Split *source* into equal-width rows and find the starting head.

    Parameters
    ----------
    source : str | bytes
        Program text.  ``str`` input is UTF-8 encoded first, so widths
        and columns are counted in bytes.

    Parsing algorithm
    -----------------
    1) Split on '\\n', dropping one '\\r' at the end of each line.
    2) The grid width is the longest line; shorter lines are
       right-padded with NUL bytes.
    3) The head starts on the first '@' of the **last** row holding
       one (rows are scanned top to bottom and later rows overwrite
       the match).  Without any '@' the head starts at (0, 0).

    Returns
    -------
    (rows: list[bytearray], start: (col, row))
    """
    if isinstance(source, str):
        source = source.encode("utf-8")

    lines = _split_lines(source)
    width = max((len(ln) for ln in lines), default=0)
    start = (0, 0)
    rows  = []
    for r, line in enumerate(lines):
        c = line.find(HEAD)
        if c != -1:
            start = (c, r)
        rows.append(bytearray(line.ljust(width, bytes([PAD]))))
    return rows, start


def load_program(source):
    """
    Build the program grid from *source*.

    Returns
    -------
    (grid: Grid, start: (col, row))

    Raises
    ------
    ProgramLoadError
        When the source has no rows or every row is empty.
    """
    rows, start = parse_source(source)
    if not rows:
        raise ProgramLoadError("Program source is empty: no rows.")
    if not rows[0]:
        raise ProgramLoadError(
            f"Program source has {len(rows)} row(s) but zero width.")
    return Grid(rows), start


def load_program_file(path: str):
    with open(path, "rb") as f:
        return load_program(f.read())


def read_input_file(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()
