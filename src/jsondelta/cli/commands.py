"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from jsondelta.config import Settings, load_config
from jsondelta.core.export import format_node, render_report, write_report
from jsondelta.core.line_diff import summarize_line_diffs
from jsondelta.core.models import LineDiff
from jsondelta.core.parse import InputParseError
from jsondelta.core.pipeline import run_compare, run_line_diff, run_tree_diff


LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

LeftArg = Annotated[Path, typer.Argument(help="Original (left) file")]
RightArg = Annotated[Path, typer.Argument(help="Modified (right) file")]
MaxLinesOpt = Annotated[Optional[int], typer.Option("--max-lines", help="Compare only the first N lines; 0 = all")]
ThresholdOpt = Annotated[Optional[int], typer.Option("--threshold", help="Line count above which the positional diff is used")]
BasePathOpt = Annotated[Optional[str], typer.Option("--base-path", help="Path prefix for structural diff entries")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def configure_logging(level: Optional[str] = None) -> None:
    """Send jsondelta log records to stderr at the given (or configured) level name."""
    level = level or _settings().log_level
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        _fail(f"Unknown log level: {level}")
    logging.basicConfig(format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("jsondelta").setLevel(numeric)


def _echo_side(label: str, diffs: list[LineDiff]) -> None:
    typer.echo(f"{label}:")
    for d in diffs:
        typer.echo(f"  L{d.line_number} {d.type.value}")


def lines_cmd(
    left: LeftArg,
    right: RightArg,
    max_lines: MaxLinesOpt = None,
    threshold: ThresholdOpt = None,
    ):
    """Mark added, removed and changed lines on each side."""
    settings = _settings(overrides={"max_lines": max_lines, "large_file_threshold": threshold})
    try:
        result = run_line_diff(left, right, settings.max_lines, settings.large_file_threshold)
    except InputParseError as e:
        _fail(str(e))

    _echo_side(str(left), result.left)
    _echo_side(str(right), result.right)
    counts = summarize_line_diffs(result)
    typer.echo(
        f"Line diff ({result.strategy.value}) - "
        f"{counts['added']} added, "
        f"{counts['removed']} removed, "
        f"{counts['changed']} changed"
    )


def tree_cmd(
    left: LeftArg,
    right: RightArg,
    base_path: BasePathOpt = None,
    markers: Annotated[bool, typer.Option("--markers", help="Also list containers marked changed")] = False,
    ):
    """List structural differences between two JSON documents by path."""
    settings = _settings(overrides={"base_path": base_path})
    try:
        diffs = run_tree_diff(left, right, settings.base_path)
    except InputParseError as e:
        _fail(str(e))

    shown = [d for d in diffs.values() if markers or not d.is_marker]
    if not shown:
        typer.echo("No structural differences.")
        return
    for d in shown:
        typer.echo(format_node(d, settings.indent))
    typer.echo(f"{len(shown)} difference(s)")


def compare_cmd(
    left: LeftArg,
    right: RightArg,
    fmt: Annotated[Optional[str], typer.Option("--format", help="text, json or yaml")] = None,
    out: Annotated[Optional[Path], typer.Option("--out", help="Write the report to this file")] = None,
    max_lines: MaxLinesOpt = None,
    threshold: ThresholdOpt = None,
    base_path: BasePathOpt = None,
    ):
    """Run the line and structural diffs and print (or write) a report."""
    settings = _settings(overrides={
        "output_format": fmt, "max_lines": max_lines,
        "large_file_threshold": threshold, "base_path": base_path,
    })
    try:
        report = run_compare(left, right, settings)
    except InputParseError as e:
        _fail(str(e))

    if out:
        try:
            write_report(report, out, settings.output_format, settings.indent)
        except OSError as e:
            _fail("Writing report failed", e)
        typer.echo(f"Report written to {out}")
    else:
        typer.echo(render_report(report, settings.output_format, settings.indent), nl=False)
