"""Unit tests for the subprocess command runner."""

from __future__ import annotations

import sys

import pytest

from ocr_tiff_converter.adapters.runners import SubprocessCommandRunner
from ocr_tiff_converter.errors import ConversionError, ToolExecutionError


def test_successful_command_returns_none() -> None:
    """Return quietly when the tool exits zero."""
    runner = SubprocessCommandRunner()
    assert runner.run([sys.executable, "-c", "print('ok')"]) is None


def test_non_zero_exit_raises_with_returncode() -> None:
    """Raise ToolExecutionError carrying the exit status and last stderr line."""
    runner = SubprocessCommandRunner()
    script = "import sys; sys.stderr.write('noise\\nunable to open image\\n'); sys.exit(3)"
    with pytest.raises(ToolExecutionError, match="status 3: unable to open image") as info:
        runner.run([sys.executable, "-c", script])
    assert info.value.returncode == 3
    assert isinstance(info.value, ConversionError)


def test_missing_executable_raises() -> None:
    """Report a tool that cannot be started as a per-file failure."""
    runner = SubprocessCommandRunner()
    with pytest.raises(ToolExecutionError, match="could not start"):
        runner.run(["definitely-not-a-real-binary-xyz", "in.pdf", "out.tiff"])


def test_timeout_raises() -> None:
    """Kill long-running tools and raise."""
    runner = SubprocessCommandRunner()
    with pytest.raises(ToolExecutionError, match="timed out"):
        runner.run([sys.executable, "-c", "import time; time.sleep(5)"], timeout=0.2)


def test_tool_output_is_captured(capfd: pytest.CaptureFixture[str]) -> None:
    """Keep tool stdout/stderr out of the terminal."""
    runner = SubprocessCommandRunner()
    runner.run(
        [sys.executable, "-c", "import sys; print('out'); sys.stderr.write('err')"]
    )
    captured = capfd.readouterr()
    assert captured.out == ""
    assert captured.err == ""
