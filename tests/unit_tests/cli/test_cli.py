"""Unit tests for CLI command behavior."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from ocr_tiff_converter.application import use_cases
from ocr_tiff_converter.application.results import RunSummary
from ocr_tiff_converter.cli import cli as cli_module
from ocr_tiff_converter.errors import MissingToolError

runner = CliRunner()


def _capture_run(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    called: dict[str, object] = {}

    def fake_run(**kwargs: object) -> RunSummary:
        called.update(kwargs)
        return RunSummary(input_dir=Path("in"), output_dir=Path("out"))

    monkeypatch.setattr(use_cases, "run_batch_conversion", fake_run)
    return called


def test_help_shows_commands() -> None:
    """Ensure top-level help lists expected subcommands."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    for command in ("convert", "pdf", "tiff", "doctor"):
        assert command in result.output


def test_pdf_invokes_use_case(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Forward PDF command arguments to the batch use-case."""
    called = _capture_run(monkeypatch)
    result = runner.invoke(
        cli_module.app, ["pdf", str(tmp_path), str(tmp_path / "out"), "--timeout", "30"]
    )

    assert result.exit_code == 0, result.output
    assert called["input_dir"] == tmp_path
    assert called["output_dir"] == tmp_path / "out"
    assert called["strategy"].name == "pdf"  # type: ignore[attr-defined]
    assert called["timeout"] == 30.0
    assert called["atomic_writes"] is True


def test_tiff_defaults_output_to_none(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Leave the default output root to the use-case."""
    called = _capture_run(monkeypatch)
    result = runner.invoke(cli_module.app, ["tiff", str(tmp_path), "--no-atomic"])

    assert result.exit_code == 0, result.output
    assert called["output_dir"] is None
    assert called["strategy"].name == "tiff"  # type: ignore[attr-defined]
    assert called["atomic_writes"] is False


def test_convert_uses_auto_by_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Dispatch on file extension unless a source format is given."""
    called = _capture_run(monkeypatch)
    result = runner.invoke(cli_module.app, ["convert", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert called["strategy"].name == "auto"  # type: ignore[attr-defined]


def test_magick_binary_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Read the ImageMagick executable from OCR_CONVERTER_MAGICK."""
    called = _capture_run(monkeypatch)
    result = runner.invoke(
        cli_module.app,
        ["tiff", str(tmp_path)],
        env={"OCR_CONVERTER_MAGICK": "/opt/magick"},
    )
    assert result.exit_code == 0, result.output
    assert called["strategy"].required_tools == ("/opt/magick",)  # type: ignore[attr-defined]


def test_missing_input_directory_exits_one(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Return exit code 1 and a readable message for a missing input root."""
    monkeypatch.setattr(
        "ocr_tiff_converter.infrastructure.tools.shutil.which", lambda name: f"/bin/{name}"
    )
    result = runner.invoke(cli_module.app, ["pdf", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "InvalidInputError" in result.output
    assert "does not exist" in result.output


def test_missing_tool_exits_one(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Surface missing external tools as a fatal configuration error."""

    def fake_run(**_: object) -> RunSummary:
        raise MissingToolError("gs", "brew install ghostscript")

    monkeypatch.setattr(use_cases, "run_batch_conversion", fake_run)
    result = runner.invoke(cli_module.app, ["pdf", str(tmp_path)])
    assert result.exit_code == 1
    assert "MissingToolError" in result.output
    assert "brew install ghostscript" in result.output


def test_unknown_source_format_exits_one(tmp_path: Path) -> None:
    """Reject unknown --source values with exit code 1."""
    result = runner.invoke(cli_module.app, ["convert", str(tmp_path), "--source", "png"])
    assert result.exit_code == 1
    assert "StrategyError" in result.output


def test_unexpected_error_is_reported_cleanly(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Print a one-line error without traceback unless --debug is set."""

    def fake_run(**_: object) -> RunSummary:
        raise RuntimeError("kaboom")

    monkeypatch.setattr(use_cases, "run_batch_conversion", fake_run)
    result = runner.invoke(cli_module.app, ["tiff", str(tmp_path)])
    assert result.exit_code == 1
    assert "RuntimeError: kaboom" in result.output
    assert "Traceback" not in result.output

    result = runner.invoke(cli_module.app, ["--debug", "tiff", str(tmp_path)])
    assert "Traceback" in result.output


def test_doctor_prints_tools_and_strategies(monkeypatch: pytest.MonkeyPatch) -> None:
    """Report located tools and the registered strategy names."""
    monkeypatch.setattr(
        "ocr_tiff_converter.infrastructure.tools.shutil.which",
        lambda name: None if name == "gs" else f"/usr/bin/{name}",
    )
    monkeypatch.setattr(
        "ocr_tiff_converter.infrastructure.tools.tool_version",
        lambda _path: "Version: ImageMagick 7.1.1",
    )
    result = runner.invoke(cli_module.app, ["doctor"])
    assert result.exit_code == 0
    assert "Python:" in result.output
    assert "magick: /usr/bin/magick (Version: ImageMagick 7.1.1)" in result.output
    assert "gs: <not installed>" in result.output
    assert "strategies: pdf, tiff, auto" in result.output


def test_entry_point_missing_argument_exits_one(capsys: pytest.CaptureFixture[str]) -> None:
    """Exit 1 with a usage message when INPUT_DIR is missing."""
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["pdf"])
    assert excinfo.value.code == 1
    assert "Missing argument" in capsys.readouterr().err


def test_entry_point_unknown_option_exits_one(capsys: pytest.CaptureFixture[str]) -> None:
    """Map Click usage errors for unknown options to exit 1."""
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["tiff", "scans", "--no-such-flag"])
    assert excinfo.value.code == 1
    assert "No such option" in capsys.readouterr().err


def test_entry_point_success_exits_zero(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Exit 0 when the command completes."""
    called = _capture_run(monkeypatch)
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["tiff", str(tmp_path)])
    assert excinfo.value.code == 0
    assert called["input_dir"] == tmp_path


def test_entry_point_configuration_error_exits_one(tmp_path: Path) -> None:
    """Keep exit 1 for configuration errors raised inside a command."""
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["convert", str(tmp_path), "--source", "bogus"])
    assert excinfo.value.code == 1
