"""
sandworm — An interpreter for a self-modifying 2D worm language.

A program is a rectangular grid of bytes.  A single worm crawls across
it, eating the cell in front of its head as an instruction, growing or
sliding its body, and excreting swallowed bytes behind itself so that
code regenerates after the worm passes.

  constants      – sentinel bytes, directional vectors, ANSI codes.
  entities       – Grid, Worm and InputFeed classes.
  instructions   – classify() byte → Instruction kind.
  loader         – load_program() source parser.
  engine         – Interpreter: step_once(), step(), run(), inspect().
  renderer       – clear_screen(), render().
  programs       – Built-in demo programs.
"""
