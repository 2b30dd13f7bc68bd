from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from fakegen.cli import app


def test_unknown_language() -> None:
    result = CliRunner().invoke(app, ["sample", "cities", "--lang", "xx"])
    assert result.exit_code == 4
    assert "The language passed (xx) is not available" in result.output


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    result = CliRunner().invoke(app, ["sample", "cities", "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_missing_config_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.yml"
    result = CliRunner().invoke(app, ["generate", "phones", "--config", str(missing)])
    assert result.exit_code == 4


def test_unknown_category() -> None:
    result = CliRunner().invoke(app, ["generate", "nothing"])
    assert result.exit_code == 5


def test_undecodable_resource(tmp_path: Path) -> None:
    (tmp_path / "data" / "en").mkdir(parents=True)
    (tmp_path / "data" / "en" / "blob").write_bytes(b"\xff\xfe\xfa")
    result = CliRunner().invoke(app, ["sample", "blob", "--data-dir", str(tmp_path)])
    assert result.exit_code == 3


def test_verbose_logs_fallback() -> None:
    result = CliRunner().invoke(app, ["-v", "sample", "companies", "--lang", "fr"])
    assert result.exit_code == 0
    assert "falling back to en" in result.output
