"""Integration tests for the lines, tree and compare commands"""

import json

import pytest
from typer.testing import CliRunner

from jsondelta.cli.cli import app


LEFT = {"a": 1, "b": {"c": 2}, "items": [1, 2]}
RIGHT = {"a": 1, "b": {"c": 3}, "items": [1, 2, 3], "d": 4}


@pytest.fixture(name="runner")
def runner_fixture():
    return CliRunner()


@pytest.fixture(name="files")
def files_fixture(tmp_path, monkeypatch):
    """Write LEFT/RIGHT as indented JSON in a clean working directory."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "left.json").write_text(json.dumps(LEFT, indent=2))
    (tmp_path / "right.json").write_text(json.dumps(RIGHT, indent=2))
    return "left.json", "right.json"


def test_lines_cmd(runner, files):
    result = runner.invoke(app, ["lines", *files])
    assert result.exit_code == 0, result.output
    assert "left.json:" in result.output
    assert "Line diff (lcs) -" in result.output


def test_lines_cmd_threshold_option(runner, files):
    result = runner.invoke(app, ["lines", *files, "--threshold", "2"])
    assert result.exit_code == 0, result.output
    assert "Line diff (positional)" in result.output


def test_tree_cmd(runner, files):
    result = runner.invoke(app, ["tree", *files])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "~ b.c: 2 -> 3" in lines
    assert "+ items[2]: 3" in lines
    assert "+ d: 4" in lines
    assert "~ b" not in lines
    assert lines[-1] == "3 difference(s)"


def test_tree_cmd_markers(runner, files):
    result = runner.invoke(app, ["tree", *files, "--markers"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "~ b" in lines
    assert "~ items" in lines


def test_tree_cmd_identical(runner, files):
    left, _ = files
    result = runner.invoke(app, ["tree", left, left])
    assert result.exit_code == 0, result.output
    assert "No structural differences." in result.output


def test_tree_cmd_base_path_from_config(runner, files, tmp_path):
    """config.yaml in the working directory supplies the base path."""
    (tmp_path / "config.yaml").write_text("base_path: doc\n")
    result = runner.invoke(app, ["tree", *files])
    assert result.exit_code == 0, result.output
    assert "+ doc.d: 4" in result.output.splitlines()


def test_compare_cmd_text(runner, files):
    result = runner.invoke(app, ["compare", *files])
    assert result.exit_code == 0, result.output
    assert "Structural changes:" in result.output
    assert "Nodes: 2 added, 0 removed, 1 changed" in result.output


def test_compare_cmd_json(runner, files):
    result = runner.invoke(app, ["compare", *files, "--format", "json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert [d["path"] for d in data["node_diffs"]] == ["b.c", "items[2]", "d"]


def test_compare_cmd_format_from_env(runner, files, monkeypatch):
    monkeypatch.setenv("JSONDELTA_OUTPUT_FORMAT", "yaml")
    result = runner.invoke(app, ["compare", *files])
    assert result.exit_code == 0, result.output
    assert "node_diffs:" in result.output


def test_compare_cmd_writes_report(runner, files, tmp_path):
    result = runner.invoke(app, ["compare", *files, "--format", "json", "--out", "out/report.json"])
    assert result.exit_code == 0, result.output
    assert "Report written to" in result.output
    data = json.loads((tmp_path / "out" / "report.json").read_text())
    assert data["summary"]["nodes_added"] == 2


def test_compare_cmd_invalid_json(runner, files, tmp_path):
    """Malformed input is reported on stderr with exit code 1."""
    (tmp_path / "bad.json").write_text('{"a": ')
    result = runner.invoke(app, ["compare", "bad.json", files[1]])
    assert result.exit_code == 1
    assert "Invalid JSON in bad.json" in result.output


def test_compare_cmd_bad_format_option(runner, files):
    result = runner.invoke(app, ["compare", *files, "--format", "xml"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_missing_file(runner, files):
    result = runner.invoke(app, ["lines", "missing.json", files[1]])
    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_unknown_log_level(runner, files):
    result = runner.invoke(app, ["--log-level", "LOUD", "lines", *files])
    assert result.exit_code == 1
    assert "Unknown log level" in result.output
