"""Pipeline step functions: read inputs, run the diff engines, build reports"""

import logging
from pathlib import Path
from typing import Optional

from jsondelta.config import Settings
from jsondelta.core.line_diff import LARGE_FILE_THRESHOLD, compute_line_diffs, summarize_line_diffs
from jsondelta.core.models import DiffReport, LineDiffResult, NodeDiff
from jsondelta.core.parse import parse_json, read_input
from jsondelta.core.tree_diff import compute_deep_diff, leaf_changes, summarize_node_diffs


logger = logging.getLogger(__name__)


def run_line_diff(
    left_path: Path,
    right_path: Path,
    max_lines: Optional[int] = None,
    threshold: int = LARGE_FILE_THRESHOLD,
    ) -> LineDiffResult:
    """Line-diff two files as plain text; no JSON parsing is done."""
    logger.info("Line diff: %s -> %s", left_path, right_path)
    return compute_line_diffs(read_input(left_path), read_input(right_path), max_lines, threshold)


def run_tree_diff(left_path: Path, right_path: Path, base_path: str = "") -> dict[str, NodeDiff]:
    """Parse two JSON files and return their structural diff. Raises InputParseError."""
    logger.info("Structural diff: %s -> %s", left_path, right_path)
    left = parse_json(read_input(left_path), source=str(left_path))
    right = parse_json(read_input(right_path), source=str(right_path))
    return compute_deep_diff(left, right, base_path)


def build_summary(line_diffs: LineDiffResult, node_diffs: dict[str, NodeDiff]) -> dict[str, int]:
    """Merge line and node counts into one flat dict (lines_* and nodes_* keys)."""
    summary = {f"lines_{k}": v for k, v in summarize_line_diffs(line_diffs).items()}
    summary.update({f"nodes_{k}": v for k, v in summarize_node_diffs(node_diffs).items()})
    return summary


def run_compare(left_path: Path, right_path: Path, settings: Settings) -> DiffReport:
    """Run both diffs over two JSON files.

    Both inputs are parsed before any diffing, so malformed JSON raises
    InputParseError without producing a partial report.
    """
    left_text = read_input(left_path)
    right_text = read_input(right_path)
    left = parse_json(left_text, source=str(left_path))
    right = parse_json(right_text, source=str(right_path))
    logger.info("Compare: %s -> %s", left_path, right_path)

    line_diffs = compute_line_diffs(
        left_text, right_text, settings.max_lines, settings.large_file_threshold,
    )
    node_diffs = compute_deep_diff(left, right, settings.base_path)
    return DiffReport(
        left=str(left_path),
        right=str(right_path),
        summary=build_summary(line_diffs, node_diffs),
        line_diffs=line_diffs,
        node_diffs=leaf_changes(node_diffs),
    )
