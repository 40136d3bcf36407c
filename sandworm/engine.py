"""
engine.py — Step engine for the sandworm interpreter.

Contains instruction dispatch, the grow / slide move and the shrink
operation.  No I/O or rendering happens here; a driver calls
step_once() / step() and reads the result back through inspect().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from sandworm import instructions as ins
from sandworm.constants import DIR_DELTA, END_OF_PROGRAM, HEAD, RUNNING
from sandworm.entities import Grid, InputFeed, Worm
from sandworm.loader import load_program

logger = logging.getLogger(__name__)

Pos = Tuple[int, int]


class HeadCorruptedError(RuntimeError):
    """The cell under the worm's head lost its '@' sentinel."""


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of an interpreter's full state between steps."""
    rows: Tuple[bytes, ...]
    width: int
    height: int
    head: Pos
    body: Tuple[Pos, ...]
    direction: str
    pending_values: Tuple[int, ...]
    pending_bytes: bytes
    input: bytes
    input_cursor: int
    output: bytes
    state: str
    steps: int

    def cell(self, pos: Pos) -> int:
        col, row = pos
        return self.rows[row][col]

    @property
    def body_values(self) -> Tuple[int, ...]:
        """Values carried by the body, tail first."""
        return tuple(self.cell(p) for p in self.body)


class Interpreter:
    """
    One running sandworm program.

    The instance owns its grid, worm, queues and I/O buffers; run
    independent programs in independent instances.
    """

    def __init__(self, source, input_data: bytes = b""):
        grid, start = load_program(source)
        self._setup(grid, start, input_data)

    @classmethod
    def from_grid(cls, grid: Grid, start: Pos, input_data: bytes = b"") -> Interpreter:
        self = cls.__new__(cls)
        self._setup(grid, start, input_data)
        return self

    def _setup(self, grid: Grid, start: Pos, input_data: bytes):
        self.grid   = grid
        self.worm   = Worm(start)
        self.input  = InputFeed(input_data)
        self.output = bytearray()
        self.state  = RUNNING
        self.steps  = 0
        self._handlers = {
            ins.DIGIT:        self._op_digit,
            ins.ADD:          self._op_add,
            ins.SUBTRACT:     self._op_subtract,
            ins.HEADING:      self._op_heading,
            ins.PRINT_NUMBER: self._op_print_number,
            ins.PRINT_BYTE:   self._op_print_byte,
            ins.READ:         self._op_read,
            ins.COPY:         self._op_copy,
            ins.TURN:         self._op_turn,
            ins.NOOP:         self._op_noop,
            ins.SPACE:        self._op_push_byte,
            ins.LITERAL:      self._op_push_byte,
        }

    # ── Driver surface ────────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self.state == RUNNING

    def feed(self, data: bytes):
        """Append bytes to the input feed; consumed bytes stay consumed."""
        self.input.feed(data)

    def step(self, n: int) -> int:
        """
        Call step_once() up to *n* times, stopping early at
        END_OF_PROGRAM.  Returns how many moves the worm made.
        """
        start = self.steps
        for _ in range(n):
            if not self.running:
                break
            self.step_once()
        return self.steps - start

    def run(self, max_steps: Optional[int] = None) -> int:
        """Step until END_OF_PROGRAM (or *max_steps* moves)."""
        start = self.steps
        while self.running and (max_steps is None or self.steps - start < max_steps):
            self.step_once()
        return self.steps - start

    def inspect(self) -> Snapshot:
        w = self.worm
        return Snapshot(
            rows=self.grid.row_bytes(),
            width=self.grid.width,
            height=self.grid.height,
            head=w.head,
            body=tuple(w.body),
            direction=w.direction,
            pending_values=tuple(w.pending_values),
            pending_bytes=bytes(w.pending_bytes),
            input=bytes(self.input.data),
            input_cursor=self.input.cursor,
            output=bytes(self.output),
            state=self.state,
            steps=self.steps,
        )

    def check_head(self):
        """
        Raise HeadCorruptedError if a worm that has already moved no
        longer has its sentinel under the head.  Before the first move
        the start cell holds whatever the source put there.
        """
        if self.steps and self.grid[self.worm.head] != HEAD:
            raise HeadCorruptedError(
                f"worm head corrupted at {self.worm.head}: "
                f"cell holds {self.grid[self.worm.head]!r}")

    # ── Single step ───────────────────────────────────────────────────

    def front(self) -> Pos:
        """Cell ahead of the head; may lie outside the grid."""
        dc, dr = DIR_DELTA[self.worm.direction]
        col, row = self.worm.head
        return col + dc, row + dr

    def step_once(self):
        if not self.running:
            return
        self.check_head()

        front = self.front()
        if not self.grid.contains(front):
            self.state = END_OF_PROGRAM
            logger.info("end of program after %d steps: %s leaves the grid",
                        self.steps, front)
            return

        instruction = ins.classify(self.grid[front])
        self._handlers[instruction.kind](instruction)
        if instruction.enqueues_byte:
            self.worm.swallow(instruction.byte)

        moved = self._move_to(front)
        self.steps += 1
        logger.debug("step %d: %r at %s, %s (length %d, output %d bytes)",
                     self.steps, instruction, front, moved,
                     len(self.worm), len(self.output))

    # ── Movement ──────────────────────────────────────────────────────

    def _pull_body(self, lead: Pos):
        """
        Shift every body value one segment toward *lead*, which becomes
        the new neck cell, and refill the vacated tail cell with the
        oldest swallowed byte.
        """
        grid, body = self.grid, self.worm.body
        vacated = lead
        for i in range(len(body) - 1, -1, -1):
            seg = body[i]
            grid[vacated] = grid[seg]
            body[i] = vacated
            vacated = seg
        grid[vacated] = self.worm.excrete()

    def _move_to(self, front: Pos) -> str:
        """Grow into the head cell or slide the body up behind it."""
        worm = self.worm
        if worm.has_values():
            self.grid[worm.head] = worm.pending_values.pop()
            worm.body.append(worm.head)
            move = "grow"
        else:
            self._pull_body(worm.head)
            move = "slide"
        worm.head = front
        self.grid[front] = HEAD
        return move

    def shrink(self) -> int:
        """
        Remove and return the neck's value without moving the head.
        A bodiless worm yields 0.
        """
        body = self.worm.body
        if not body:
            return 0
        neck = body.pop()
        value = self.grid[neck]
        self._pull_body(neck)
        return value

    # ── Instruction handlers ──────────────────────────────────────────

    def _push(self, value: int):
        self.worm.pending_values.append(value & 0xFF)

    def _op_digit(self, instruction):
        self._push(instruction.digit)

    def _op_add(self, instruction):
        a = self.shrink()
        self.worm.swallow(instruction.byte)
        b = self.shrink()
        self._push(a + b)

    def _op_subtract(self, instruction):
        a = self.shrink()
        self.worm.swallow(instruction.byte)
        b = self.shrink()
        self._push(a - b)

    def _op_heading(self, instruction):
        self.worm.direction = instruction.heading

    def _op_print_number(self, instruction):
        self.output.extend(str(self.shrink()).encode("ascii"))

    def _op_print_byte(self, instruction):
        self.output.append(self.shrink())

    def _op_read(self, instruction):
        self._push(self.input.read())

    def _op_copy(self, instruction):
        neck = self.worm.neck
        self._push(self.grid[neck] if neck is not None else 0)

    def _op_turn(self, instruction):
        if self.shrink() != 0:
            self.worm.direction = instruction.turns[self.worm.direction]

    def _op_noop(self, instruction):
        pass

    def _op_push_byte(self, instruction):
        # '_' carries a space; every other literal carries itself.
        self._push(ord(" ") if instruction.kind == ins.SPACE else instruction.byte)
