"""Report rendering: text, JSON and YAML output of a DiffReport"""

import json
from pathlib import Path
from typing import Any

import yaml

from jsondelta.core.models import DiffReport, DiffType, LineDiff, NodeDiff


_NODE_PREFIX = {DiffType.added: "+", DiffType.removed: "-", DiffType.changed: "~"}


def format_value(value: Any, indent: int = 2) -> str:
    """Render a JSON value for display: quoted strings, indented containers, JSON literals otherwise."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, indent=indent or None, ensure_ascii=False)
    return json.dumps(value)


def _format_lines(label: str, diffs: list[LineDiff]) -> list[str]:
    lines = [f"{label}:"]
    lines.extend(f"  L{d.line_number} {d.type.value}" for d in diffs)
    if not diffs:
        lines.append("  (no changes)")
    return lines


def format_node(diff: NodeDiff, indent: int = 2) -> str:
    """One-line form of a NodeDiff: '+ path: new', '- path: old' or '~ path: old -> new'."""
    prefix = _NODE_PREFIX[diff.type]
    if diff.is_marker:
        return f"{prefix} {diff.path}"
    if diff.type == DiffType.added:
        return f"{prefix} {diff.path}: {format_value(diff.new_value, indent)}"
    if diff.type == DiffType.removed:
        return f"{prefix} {diff.path}: {format_value(diff.old_value, indent)}"
    return (
        f"{prefix} {diff.path}: "
        f"{format_value(diff.old_value, indent)} -> {format_value(diff.new_value, indent)}"
    )


def render_text(report: DiffReport, indent: int = 2) -> str:
    """Build the human-readable report: summary, per-side line markers, structural changes."""
    s = report.summary
    out = [
        f"{report.left} -> {report.right} ({report.line_diffs.strategy.value} line diff)",
        f"Lines: {s.get('lines_added', 0)} added, "
        f"{s.get('lines_removed', 0)} removed, "
        f"{s.get('lines_changed', 0)} changed",
        f"Nodes: {s.get('nodes_added', 0)} added, "
        f"{s.get('nodes_removed', 0)} removed, "
        f"{s.get('nodes_changed', 0)} changed",
        "",
    ]
    if not any(s.values()):
        out.insert(3, "Identical")
    out += _format_lines(report.left, report.line_diffs.left)
    out += _format_lines(report.right, report.line_diffs.right)
    out += ["", "Structural changes:"]
    if report.node_diffs:
        out += [f"  {format_node(d, indent)}" for d in report.node_diffs]
    else:
        out.append("  (none)")
    return "\n".join(out) + "\n"


def report_to_dict(report: DiffReport) -> dict:
    """JSON-compatible dict; NodeDiff values that were never set are omitted."""
    return report.model_dump(mode="json", exclude_unset=True)


def render_report(report: DiffReport, fmt: str = "text", indent: int = 2) -> str:
    """Render report as 'text', 'json' or 'yaml'."""
    if fmt == "text":
        return render_text(report, indent)
    if fmt == "json":
        return json.dumps(report_to_dict(report), indent=indent or None, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(report_to_dict(report), default_flow_style=False, allow_unicode=True, sort_keys=False)
    raise ValueError(f"Unknown report format: {fmt}")


def write_report(report: DiffReport, path: Path, fmt: str = "text", indent: int = 2) -> Path:
    """Write the rendered report to path, creating parent directories. Returns path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_report(report, fmt, indent), encoding="utf-8")
    return path
