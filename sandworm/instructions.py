"""
instructions.py — Byte → instruction classification.

Every grid byte is an instruction.  classify() sorts it into one of a
fixed set of kinds, and each kind carries two flags the engine relies
on after dispatch:

  kind          │ bytes      │ produces_value │ enqueues_byte
  ──────────────┼────────────┼────────────────┼──────────────
  digit         │ 0-9        │ yes            │ yes
  add           │ +          │ yes            │ no  (mid-dispatch)
  subtract      │ -          │ yes            │ no  (mid-dispatch)
  heading       │ ^ v < >    │ no             │ yes
  print_number  │ "          │ no             │ yes
  print_byte    │ !          │ no             │ yes
  read          │ ?          │ yes            │ yes
  copy          │ =          │ yes            │ yes
  turn          │ \\ /        │ no             │ yes
  noop          │ space, NUL │ no             │ no
  space         │ _          │ yes            │ yes
  literal       │ anything   │ yes            │ yes

add / subtract swallow their own byte between their two shrinks, so
the engine must not enqueue it again afterwards.
"""

from sandworm.constants import HEADING_BYTES, TURN_BACKSLASH, TURN_SLASH

DIGIT        = "digit"
ADD          = "add"
SUBTRACT     = "subtract"
HEADING      = "heading"
PRINT_NUMBER = "print_number"
PRINT_BYTE   = "print_byte"
READ         = "read"
COPY         = "copy"
TURN         = "turn"
NOOP         = "noop"
SPACE        = "space"
LITERAL      = "literal"

_VALUE_KINDS = {DIGIT, ADD, SUBTRACT, READ, COPY, SPACE, LITERAL}
_SELF_ENQUEUING = {ADD, SUBTRACT}

_FIXED_KINDS = {
    ord("+"):  ADD,
    ord("-"):  SUBTRACT,
    ord('"'):  PRINT_NUMBER,
    ord("!"):  PRINT_BYTE,
    ord("?"):  READ,
    ord("="):  COPY,
    ord("\\"): TURN,
    ord("/"):  TURN,
    ord(" "):  NOOP,
    0:         NOOP,
    ord("_"):  SPACE,
}

_TURN_TABLES = {ord("\\"): TURN_BACKSLASH, ord("/"): TURN_SLASH}


class Instruction:
    """
    One classified grid byte.

    Attributes
    ----------
    byte      : int        – the raw byte read from the grid.
    kind      : str        – one of the kind constants above.
    heading   : str | None – target direction for 'heading'.
    turns     : dict|None  – rotation table for 'turn'.
    """

    __slots__ = ("byte", "kind", "heading", "turns")

    def __init__(self, byte: int, kind: str, heading=None, turns=None):
        self.byte    = byte
        self.kind    = kind
        self.heading = heading
        self.turns   = turns

    @property
    def produces_value(self) -> bool:
        return self.kind in _VALUE_KINDS

    @property
    def enqueues_byte(self) -> bool:
        """Whether the engine swallows this byte once dispatch is done."""
        return self.kind != NOOP and self.kind not in _SELF_ENQUEUING

    @property
    def digit(self) -> int:
        return self.byte - ord("0")

    def __repr__(self):
        return f"Instruction({chr(self.byte)!r}, {self.kind})"


def classify(byte: int) -> Instruction:
    """Sort a grid byte into its instruction kind."""
    if ord("0") <= byte <= ord("9"):
        return Instruction(byte, DIGIT)
    if byte in HEADING_BYTES:
        return Instruction(byte, HEADING, heading=HEADING_BYTES[byte])
    kind = _FIXED_KINDS.get(byte, LITERAL)
    return Instruction(byte, kind, turns=_TURN_TABLES.get(byte))
