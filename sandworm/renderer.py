"""
renderer.py — Terminal rendering for the sandworm interpreter.

Handles screen clearing and drawing an ANSI-colored view of an
interpreter Snapshot.
"""

import os

from sandworm.constants import (
    ANSI_BACKGROUNDS, ANSI_BOLD, ANSI_COLORS, ANSI_DIM, ANSI_RESET,
    END_OF_PROGRAM, HEAD, HEAD_ARROWS,
)
from sandworm.engine import HeadCorruptedError

_PRINTABLE = set(range(0x21, 0x7F))


def clear_screen():
    """Clear the terminal (cross-platform)."""
    os.system("cls" if os.name == "nt" else "clear")


def _paint(ch: str, fg: str = "", bg: str = "") -> str:
    return f"{ANSI_COLORS.get(fg, '')}{ANSI_BACKGROUNDS.get(bg, '')}{ch}{ANSI_RESET}"


def _cell(snapshot, pos, body: set) -> str:
    byte = snapshot.cell(pos)
    if pos in body:
        # Small carried values are shown as a hex digit, the rest as '*'.
        if byte < 10:
            return _paint(f"{byte:x}", fg="black", bg="green")
        return _paint("*", fg="green", bg="red")
    if pos == snapshot.head:
        if byte == HEAD:
            return _paint("@", fg="black", bg="yellow")
        if snapshot.steps:
            raise HeadCorruptedError(f"worm head corrupted at {pos}")
    if byte in (0, ord(" ")):
        return " "
    if byte in _PRINTABLE:
        return chr(byte)
    return _paint("*", fg="green")


def render_lines(snapshot) -> list:
    """Build every line of the board view for *snapshot*."""
    body = set(snapshot.body)
    arrow = HEAD_ARROWS[snapshot.direction]
    state = "ended" if snapshot.state == END_OF_PROGRAM else "running"

    lines = [
        "",
        f"  {ANSI_BOLD}========== SANDWORM =========={ANSI_RESET}",
        f"  Steps: {snapshot.steps}   Heading: {arrow} {snapshot.direction}"
        f"   State: {state}",
        f"  Length: {len(snapshot.body)}   Carrying: {list(snapshot.body_values)}",
        f"  {ANSI_DIM}Queued bytes: {snapshot.pending_bytes!r}{ANSI_RESET}",
        "",
    ]

    # ── Grid rows ──
    inner_width = snapshot.width
    lines.append(f"    +{'-' * inner_width}+")
    for r in range(snapshot.height):
        row_str = "".join(_cell(snapshot, (c, r), body)
                          for c in range(snapshot.width))
        lines.append(f"    |{row_str}|")
    lines.append(f"    +{'-' * inner_width}+")

    # ── I/O ──
    consumed = snapshot.input[:snapshot.input_cursor]
    pending = snapshot.input[snapshot.input_cursor:]
    lines.append("")
    lines.append(f"  output: {snapshot.output.decode('utf-8', 'replace')}")
    lines.append(
        f"  input:  {ANSI_DIM}{consumed.decode('utf-8', 'replace')}{ANSI_RESET}"
        f"{pending.decode('utf-8', 'replace')}")
    lines.append("")
    return lines


def render(snapshot):
    """Print the full board view."""
    for line in render_lines(snapshot):
        print(line)
