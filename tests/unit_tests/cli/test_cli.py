"""Unit tests for CLI command behavior."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

import encode_base.api as api_module
from encode_base.application.results import ConversionResult
from encode_base.catalog import EncodingSelector
from encode_base.cli import cli as cli_module
from encode_base.errors import ReadError

runner = CliRunner()


def test_help_shows_commands() -> None:
    """Ensure top-level help lists the available subcommands."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    assert "convert" in result.output
    assert "encodings" in result.output


def test_encodings_lists_labels() -> None:
    """List every supported target with its label."""
    result = runner.invoke(cli_module.app, ["encodings"])
    assert result.exit_code == 0
    for label in ("UTF-8", "ISO8859-1", "EUC-KR", "SHIFT-JIS"):
        assert label in result.output


def test_convert_forwards_arguments_to_api(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Ensure the convert command forwards expected args to the API layer."""
    source = tmp_path / "notes.txt"
    out_dir = tmp_path / "out"
    called: dict[str, object] = {}

    def fake_convert(source_path: Path, **kwargs: object) -> ConversionResult:
        called["source_path"] = source_path
        called.update(kwargs)
        return ConversionResult(
            output_path=out_dir / "encoded_file.txt",
            source_path=source_path,
            target=EncodingSelector.EUC_KR,
            bytes_written=0,
        )

    monkeypatch.setattr(api_module, "convert_file_detailed", fake_convert)

    result = runner.invoke(
        cli_module.app,
        ["convert", str(source), "--to", "EUC-KR", "--output-dir", str(out_dir)],
    )

    assert result.exit_code == 0, result.output
    assert "Saved:" in result.output
    assert called == {
        "source_path": source,
        "target": "EUC-KR",
        "output_dir": out_dir,
        "overwrite": False,
        "unmappable": "replace",
    }


def test_convert_reads_defaults_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Target and substitution policy fall back to environment variables."""
    called: dict[str, object] = {}

    def fake_convert(source_path: Path, **kwargs: object) -> ConversionResult:
        called.update(kwargs)
        return ConversionResult(
            output_path=source_path,
            source_path=source_path,
            target=EncodingSelector.SHIFT_JIS,
            bytes_written=0,
        )

    monkeypatch.setattr(api_module, "convert_file_detailed", fake_convert)

    result = runner.invoke(
        cli_module.app,
        ["convert", str(tmp_path / "a.txt"), "--overwrite"],
        env={"ENCODE_BASE_TARGET": "sjis", "ENCODE_BASE_UNMAPPABLE": "xmlcharref"},
    )

    assert result.exit_code == 0, result.output
    assert called["target"] == "sjis"
    assert called["unmappable"] == "xmlcharref"
    assert called["overwrite"] is True


def test_convert_handles_read_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Return the error's exit code and print its kind when the API fails."""

    def fake_convert(source_path: Path, **_: object) -> ConversionResult:
        raise ReadError(source_path, "No such file or directory")

    monkeypatch.setattr(api_module, "convert_file_detailed", fake_convert)
    result = runner.invoke(
        cli_module.app,
        ["convert", str(tmp_path / "missing.txt"), "--output-dir", str(tmp_path)],
    )

    assert result.exit_code == 3
    assert "ReadError" in result.output


def test_convert_warns_on_lossy_result(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Lossy conversions still succeed but print a warning."""

    def fake_convert(source_path: Path, **_: object) -> ConversionResult:
        return ConversionResult(
            output_path=source_path,
            source_path=source_path,
            target=EncodingSelector.LATIN1,
            bytes_written=2,
            substituted=True,
        )

    monkeypatch.setattr(api_module, "convert_file_detailed", fake_convert)
    result = runner.invoke(
        cli_module.app,
        ["convert", str(tmp_path / "a.txt"), "--overwrite", "--to", "latin1"],
    )

    assert result.exit_code == 0
    assert "cannot be represented in ISO8859-1" in result.output
    assert "Saved:" in result.output


def test_convert_rejects_overwrite_with_output_dir(tmp_path: Path) -> None:
    """Overwrite and an output directory are mutually exclusive."""
    source = tmp_path / "a.txt"
    source.write_text("abc", encoding="utf-8")

    result = runner.invoke(
        cli_module.app,
        ["convert", str(source), "--overwrite", "--output-dir", str(tmp_path)],
    )

    assert result.exit_code == 2
    assert "InvalidRequestError" in result.output
    assert source.read_text(encoding="utf-8") == "abc"


def test_convert_rejects_unknown_encoding(tmp_path: Path) -> None:
    """Unknown target names fail with a validation exit code."""
    result = runner.invoke(
        cli_module.app,
        ["convert", str(tmp_path / "a.txt"), "--overwrite", "--to", "utf-16"],
    )

    assert result.exit_code == 2
    assert "UnknownEncodingError" in result.output
