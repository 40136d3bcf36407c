#!/usr/bin/env python3
"""
main.py — Interactive shell for the sandworm interpreter.

Run from the repository root:
    python main.py program.worm            # load a source file
    python main.py program.worm input.bin  # ... with an input feed file
    python main.py 2                       # run built-in program 2

Commands  (type a command then press Enter)
-------------------------------------------
  <Enter> / step   – execute one step
  step N           – execute up to N steps
  run              – step until the worm leaves the grid
  input TEXT       – append TEXT to the input feed
  q / quit / exit  – leave the shell

Set SANDWORM_LOG=DEBUG to log every step to stderr.
"""

import logging
import os
import sys

from sandworm.constants import ANSI_COLORS, ANSI_RESET, LOG_LEVEL
from sandworm.engine import Interpreter
from sandworm.loader import ProgramLoadError, read_input_file
from sandworm.programs import PROGRAMS
from sandworm.renderer import clear_screen, render

USAGE = "usage: main.py source_file|program_number [input_file]"


def open_interpreter(argv):
    """
    Build an Interpreter from command-line arguments.

    Returns (interpreter, title).  Raises OSError for unreadable files
    and ProgramLoadError for degenerate sources.
    """
    target = argv[0]
    input_data = read_input_file(argv[1]) if len(argv) > 1 else b""

    if not os.path.exists(target) and target.isdigit():
        idx = int(target) - 1
        if not (0 <= idx < len(PROGRAMS)):
            raise ProgramLoadError(
                f"Program {idx + 1} not found.  Available: 1-{len(PROGRAMS)}")
        data = PROGRAMS[idx]
        return Interpreter(data["source"], input_data or data["input"]), data["name"]

    with open(target, "rb") as f:
        source = f.read()
    return Interpreter(source, input_data), target


def handle_command(interp, line: str) -> bool:
    """
    Apply one shell command to *interp*.

    Returns False when the shell should exit.
    """
    # 'input' keeps everything after the keyword verbatim, spaces included.
    if line.startswith("input "):
        interp.feed(line.rstrip("\n")[len("input "):].encode("utf-8"))
        return True

    action = line.split()
    if action in ([], ["step"]):
        interp.step_once()
    elif len(action) == 2 and action[0] == "step":
        try:
            interp.step(int(action[1]))
        except ValueError:
            pass
    elif action == ["run"]:
        interp.run()
    elif action[0] in ("q", "quit", "exit") and len(action) == 1:
        return False
    else:
        print(f"{ANSI_COLORS['red']}unrecognised command{ANSI_RESET}")
    return True


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=LOG_LEVEL,
                        format="%(levelname)s %(name)s: %(message)s")

    if not argv:
        print(USAGE)
        sys.exit(0)

    try:
        interp, title = open_interpreter(argv)
    except OSError as err:
        print(f"Error reading file: {err}")
        sys.exit(1)
    except ProgramLoadError as err:
        print(f"Error loading program: {err}")
        sys.exit(1)

    # ── Main input loop — runs until the user quits ──
    while True:
        clear_screen()
        print(f"  {title}")
        render(interp.inspect())
        try:
            line = input("  > ")
        except (EOFError, KeyboardInterrupt):
            print("\n  Goodbye!")
            break
        if not handle_command(interp, line):
            break


if __name__ == "__main__":
    main()
