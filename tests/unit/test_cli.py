"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dparse.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_local_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every command from a directory without a dparse.toml."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


def test_parse_prints_canonical_form(cli_runner: CliRunner, probes_dir: Path):
    result = cli_runner.invoke(app, ["parse", str(probes_dir / "entry.d")])
    assert result.exit_code == 0
    assert result.stdout == "syscall::open:entry\n\n"


def test_parse_stops_at_first_error(cli_runner: CliRunner, probes_dir: Path):
    result = cli_runner.invoke(
        app,
        ["parse", str(probes_dir / "bad.d"), str(probes_dir / "empty.d")],
    )
    assert result.exit_code == 1
    assert "Error parsing" in result.output
    assert "bad.d" in result.output
    assert "empty.d" not in result.output


def test_parse_keep_going(cli_runner: CliRunner, probes_dir: Path):
    result = cli_runner.invoke(
        app,
        ["parse", "--keep-going", str(probes_dir / "bad.d"), str(probes_dir / "empty.d")],
    )
    assert result.exit_code == 1
    assert ":::\n\n" in result.stdout
    assert "1 of 2 file(s) failed" in result.output


def test_parse_missing_file(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["parse", str(tmp_path / "missing.d")])
    assert result.exit_code == 1
    assert "I/O error" in result.output


def test_parse_lines_json(cli_runner: CliRunner, probes_dir: Path):
    result = cli_runner.invoke(
        app,
        ["parse", "--mode", "lines", "--format", "json", str(probes_dir / "list.txt")],
    )
    assert result.exit_code == 0
    records = [json.loads(line) for line in result.stdout.splitlines()]
    assert len(records) == 3
    assert records[1]["provider"] == "perl*"
    assert records[1]["module"] is None
    assert records[2]["file"].endswith("list.txt")


def test_parse_uses_config_file(cli_runner: CliRunner, probes_dir: Path):
    config = probes_dir / "dparse.toml"
    config.write_text('[parse]\nmode = "lines"\n')
    result = cli_runner.invoke(
        app, ["parse", "--config", str(config), str(probes_dir / "list.txt")]
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["syscall::open:entry", "perl*:::*-entry", "fbt:::"]


def test_parse_rejects_bad_config(cli_runner: CliRunner, probes_dir: Path):
    config = probes_dir / "dparse.toml"
    config.write_text('[output]\nformat = "xml"\n')
    result = cli_runner.invoke(
        app, ["parse", "--config", str(config), str(probes_dir / "entry.d")]
    )
    assert result.exit_code == 1
    assert "output.format" in result.output


def test_canon(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["canon", "perl*:::*-entry"])
    assert result.exit_code == 0
    assert result.stdout == "perl*:::*-entry\n"


def test_canon_incomplete(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["canon", "foo:bar"])
    assert result.exit_code == 1
    assert "Incomplete" in result.output


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "dparse version" in result.stdout


def test_parse_reports_non_table_config_section(cli_runner: CliRunner, probes_dir: Path):
    config = probes_dir / "dparse.toml"
    config.write_text("parse = 1\n")
    result = cli_runner.invoke(
        app, ["parse", "--config", str(config), str(probes_dir / "entry.d")]
    )
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "[parse] must be a table" in result.output


def test_version_matches_package(cli_runner: CliRunner):
    import dparse

    result = cli_runner.invoke(app, ["--version"])
    assert f"dparse version {dparse.__version__}" in result.stdout
