"""
entities.py — State-holding classes for the sandworm interpreter.
"""

from collections import deque

from sandworm.constants import BLANK_FILL, DEFAULT_DIRECTION


class Grid:
    """
    Mutable rectangular byte grid addressed by (col, row).

    Every row is a bytearray of exactly *width* bytes; the loader pads
    short source lines before the grid is built.
    """

    def __init__(self, rows):
        self.rows   = [bytearray(r) for r in rows]
        self.height = len(self.rows)
        self.width  = len(self.rows[0]) if self.rows else 0
        for r in self.rows:
            if len(r) != self.width:
                raise ValueError(
                    f"Grid rows must share one width ({self.width}), "
                    f"got a row of {len(r)} bytes.")

    def contains(self, pos) -> bool:
        col, row = pos
        return 0 <= col < self.width and 0 <= row < self.height

    def __getitem__(self, pos) -> int:
        col, row = pos
        return self.rows[row][col]

    def __setitem__(self, pos, value: int):
        col, row = pos
        self.rows[row][col] = value

    def row_bytes(self) -> tuple:
        """Immutable copy of every row, top to bottom."""
        return tuple(bytes(r) for r in self.rows)


class Worm:
    """
    The single worm crawling over a program grid.

    Attributes
    ----------
    head           : (col, row) – cell holding the '@' sentinel.
    body           : list       – [(col, row), ...] ordered **tail → neck**.
                                  body[-1] is the neck; the head is never
                                  part of the body.
    direction      : str        – 'up' | 'down' | 'left' | 'right'.
    pending_values : list       – stack of produced values waiting to be
                                  installed by a grow move.
    pending_bytes  : deque      – FIFO of swallowed instruction bytes,
                                  newest on the left, excreted from the
                                  right.
    """

    def __init__(self, head, direction: str = DEFAULT_DIRECTION):
        self.head           = head
        self.body           = []
        self.direction      = direction
        self.pending_values = []
        self.pending_bytes  = deque()

    @property
    def neck(self):
        """Body segment nearest the head, or None for a bodiless worm."""
        return self.body[-1] if self.body else None

    def __len__(self):
        return len(self.body)

    def swallow(self, byte: int):
        self.pending_bytes.appendleft(byte)

    def excrete(self) -> int:
        """Oldest swallowed byte, or a space once the gut is empty."""
        return self.pending_bytes.pop() if self.pending_bytes else BLANK_FILL

    def has_values(self) -> bool:
        return bool(self.pending_values)


class InputFeed:
    """Append-only input bytes with a read cursor that never rewinds."""

    def __init__(self, data: bytes = b""):
        self.data   = bytearray(data)
        self.cursor = 0

    def read(self) -> int:
        """Next input byte, or 0 past the end.  Always advances."""
        value = self.data[self.cursor] if self.cursor < len(self.data) else 0
        self.cursor += 1
        return value

    def feed(self, data: bytes):
        self.data.extend(data)

    @property
    def remaining(self) -> int:
        return max(0, len(self.data) - self.cursor)
