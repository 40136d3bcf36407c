"""
Shell tests — command handling and argument parsing of main.py.
"""

import pytest

import main
from sandworm.constants import END_OF_PROGRAM
from sandworm.engine import Interpreter
from sandworm.loader import ProgramLoadError


@pytest.fixture
def interp():
    return Interpreter("@123   ")


def test_blank_line_steps_once(interp):
    assert main.handle_command(interp, "")
    assert interp.steps == 1


def test_step_command(interp):
    main.handle_command(interp, "step")
    main.handle_command(interp, "step 3")
    assert interp.steps == 4


def test_bad_step_count_is_ignored(interp):
    assert main.handle_command(interp, "step many")
    assert interp.steps == 0


def test_run_command(interp):
    main.handle_command(interp, "run")
    assert interp.state == END_OF_PROGRAM


def test_input_keeps_spaces(interp):
    main.handle_command(interp, "input  a b\n")
    assert bytes(interp.input.data) == b" a b"


@pytest.mark.parametrize("cmd", ["q", "quit", "exit"])
def test_quit(interp, cmd):
    assert main.handle_command(interp, cmd) is False


def test_unknown_command(interp, capsys):
    assert main.handle_command(interp, "jump")
    assert "unrecognised command" in capsys.readouterr().out
    assert interp.steps == 0


def test_open_builtin_program():
    interp, title = main.open_interpreter(["3"])
    assert title == "Program 3 — Echo"
    interp.run()
    assert interp.output == b"A0"


def test_open_builtin_with_input_file(tmp_path):
    feed = tmp_path / "in.bin"
    feed.write_bytes(b"Z")
    interp, _ = main.open_interpreter(["3", str(feed)])
    interp.run()
    assert interp.output == b"Z0"


def test_open_unknown_builtin():
    with pytest.raises(ProgramLoadError):
        main.open_interpreter(["99"])


def test_open_source_file(tmp_path):
    src = tmp_path / "p.worm"
    src.write_bytes(b'@9"\n')
    interp, title = main.open_interpreter([str(src)])
    interp.run()
    assert interp.output == b"9"
    assert title == str(src)


def test_no_arguments_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        main.main([])
    assert exc.value.code == 0
    assert "usage" in capsys.readouterr().out


def test_missing_file_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main.main([str(tmp_path / "missing.worm")])
    assert exc.value.code == 1
    assert "Error reading file" in capsys.readouterr().out


def test_empty_source_exits_with_error(tmp_path, capsys):
    src = tmp_path / "empty.worm"
    src.write_bytes(b"")
    with pytest.raises(SystemExit) as exc:
        main.main([str(src)])
    assert exc.value.code == 1
    assert "Error loading program" in capsys.readouterr().out


def test_session_until_quit(monkeypatch, capsys):
    commands = iter(["run", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))
    monkeypatch.setattr(main, "clear_screen", lambda: None)
    main.main(["1"])
    assert "output: Hi" in capsys.readouterr().out
