"""Tests for external command execution.

The child process is the running Python interpreter, so no external tools are
needed.
"""

from __future__ import annotations

import logging
import sys

from validator.shell import COMMAND_NOT_FOUND, run_command


async def test_captures_and_echoes_stdout(capsys):
    result = await run_command([sys.executable, "-c", "print('hello')"])

    assert result.ok
    assert result.stdout == "hello\n"
    assert result.stderr == ""
    assert "hello" in capsys.readouterr().out


async def test_non_zero_exit_and_stderr(capsys):
    script = "import sys; sys.stderr.write('broken\\n'); sys.exit(3)"
    result = await run_command([sys.executable, "-c", script])

    assert not result.ok
    assert result.returncode == 3
    assert result.stderr == "broken\n"
    assert "broken" in capsys.readouterr().err


async def test_quiet_does_not_echo(capsys):
    result = await run_command([sys.executable, "-c", "print('silent')"], quiet=True)

    assert result.stdout == "silent\n"
    assert capsys.readouterr().out == ""


async def test_missing_executable_is_a_failed_result():
    result = await run_command(["definitely-not-a-real-tool-xyz", "--flag"])

    assert result.returncode == COMMAND_NOT_FOUND
    assert "command not found" in result.stderr
    assert result.argv == ["definitely-not-a-real-tool-xyz", "--flag"]


async def test_very_long_line_is_captured_whole():
    script = "import sys; sys.stdout.write('x' * 200_000); sys.exit(1)"
    result = await run_command([sys.executable, "-c", script], quiet=True)

    assert result.returncode == 1
    assert len(result.stdout) == 200_000


async def test_multibyte_output_split_across_reads_is_decoded():
    script = "import sys; sys.stdout.buffer.write('\\u2705'.encode('utf-8') * 40_000)"
    result = await run_command([sys.executable, "-c", script], quiet=True)

    assert result.stdout == "✅" * 40_000


async def test_command_line_is_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="validator.shell")
    await run_command([sys.executable, "-c", "pass"], quiet=True)

    assert "Running shell command" in caplog.text
    assert sys.executable in caplog.text
