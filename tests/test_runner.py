import io
import random
from unittest.mock import MagicMock, patch

import pytest

from src.core.config import USAGE, FortuneConfig, Command
from src.core.formatting import ColorChoice
from src.core.runner import main, run
from src.core.selection import SizeFilter


@pytest.fixture
def program(tmp_path):
    program = tmp_path / "main.py"
    program.write_text("", encoding="utf-8")
    (tmp_path / "fortunes").write_text("A\n%\nBBBB\n%\n" + "L" * 420, encoding="utf-8")
    return str(program)


def test_main_prints_quote(program, capsys):
    code = main([], program_path=program)

    out = capsys.readouterr().out.strip()
    assert code == 0
    assert out in ("A", "BBBB", "L" * 420)


def test_main_filters_and_colors(program, capsys):
    code = main(["-o", "long", "-c", "red"], program_path=program)

    assert code == 0
    assert capsys.readouterr().out == "\x1b[31m" + "L" * 420 + "\x1b[0m\n"


def test_main_empty_selection(program, capsys):
    code = main(["-size", "medium"], program_path=program)

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "No quotes available" in captured.err


def test_main_empty_database(tmp_path, capsys):
    program = tmp_path / "main.py"
    (tmp_path / "fortunes").write_text("", encoding="utf-8")

    assert main([], program_path=str(program)) == 1
    assert "database is empty" in capsys.readouterr().err


def test_main_missing_database(tmp_path, capsys):
    code = main([], program_path=str(tmp_path / "main.py"))

    assert code == 1
    assert "Error finding file: Path not found." in capsys.readouterr().err


def test_main_unreadable_database(tmp_path, capsys):
    (tmp_path / "fortunes").write_bytes(b"\xff\xfe")

    assert main([], program_path=str(tmp_path / "main.py")) == 1
    assert "Error reading file" in capsys.readouterr().err


def test_help_prints_usage_without_database(tmp_path, capsys):
    code = main(["-h"], program_path=str(tmp_path / "main.py"))

    assert code == 1
    assert USAGE in capsys.readouterr().out


def test_unknown_command(program, capsys):
    assert main(["-nope"], program_path=program) == 1
    assert "No such command." in capsys.readouterr().out


def test_run_uses_given_rng(program, capsys):
    config = FortuneConfig(size=SizeFilter.SHORT, program_path=program)
    rng = random.Random(3)

    with patch.object(rng, "randrange", return_value=1) as mock_randrange:
        assert run(config, rng=rng) == 0

    mock_randrange.assert_called_once_with(2)
    assert capsys.readouterr().out == "BBBB\n"


def test_write_appends_quote(program, capsys, tmp_path):
    config = FortuneConfig(command=Command.WRITE, program_path=program)

    code = run(config, stdin=io.StringIO("  New quote  \n"))

    out = capsys.readouterr().out
    assert code == 1
    assert "Write a quote:" in out
    assert "Written quote!" in out
    content = (tmp_path / "fortunes").read_text(encoding="utf-8")
    assert content.endswith("L" * 420 + "\n%\nNew quote\n%\n")


def test_write_whitespace_only_does_nothing(program, capsys, tmp_path):
    before = (tmp_path / "fortunes").read_text(encoding="utf-8")
    config = FortuneConfig(command=Command.WRITE, color=ColorChoice.RED, program_path=program)

    code = run(config, stdin=io.StringIO("   \n"))

    assert code == 1
    assert "No data to write." in capsys.readouterr().out
    assert (tmp_path / "fortunes").read_text(encoding="utf-8") == before


def test_write_end_of_input_does_nothing(program, capsys):
    config = FortuneConfig(command=Command.WRITE, program_path=program)

    assert run(config, stdin=io.StringIO("")) == 1
    assert "No data to write." in capsys.readouterr().out


def test_write_missing_database(tmp_path, capsys):
    config = FortuneConfig(command=Command.WRITE, program_path=str(tmp_path / "main.py"))

    assert run(config, stdin=io.StringIO("quote\n")) == 1
    assert "Error finding file" in capsys.readouterr().err


def test_write_failure_is_reported(program, capsys):
    config = FortuneConfig(command=Command.WRITE, program_path=program)

    with patch("src.storage.database.open", create=True, side_effect=PermissionError("denied")):
        code = run(config, stdin=io.StringIO("quote\n"))

    captured = capsys.readouterr()
    assert code == 1
    assert "Could not open file denied" in captured.err
    assert "Written quote!" not in captured.out


def test_write_interrupted_prompt_does_nothing(program, capsys, tmp_path):
    before = (tmp_path / "fortunes").read_text(encoding="utf-8")
    stdin = MagicMock()
    stdin.readline.side_effect = KeyboardInterrupt
    config = FortuneConfig(command=Command.WRITE, program_path=program)

    assert run(config, stdin=stdin) == 1
    assert "No data to write." in capsys.readouterr().out
    assert (tmp_path / "fortunes").read_text(encoding="utf-8") == before
