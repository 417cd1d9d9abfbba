"""Line-level diff of two texts: LCS alignment with a positional fallback for large inputs"""

import logging
from typing import Optional

from jsondelta.core.lcs import compute_lcs
from jsondelta.core.models import DiffStrategy, DiffType, LineDiff, LineDiffResult


logger = logging.getLogger(__name__)

LARGE_FILE_THRESHOLD = 1000


def split_lines(text: str) -> list[str]:
    """Split on '\\n' only; an empty text is a single empty line."""
    return text.split("\n")


def _lcs_diff(left: list[str], right: list[str]) -> tuple[list[LineDiff], list[LineDiff]]:
    """Walk both sides against their LCS, pairing unmatched lines as changed where possible."""
    lcs = compute_lcs(left, right)
    left_diffs: list[LineDiff] = []
    right_diffs: list[LineDiff] = []
    li = ri = k = 0

    while li < len(left) or ri < len(right):
        anchor = lcs[k] if k < len(lcs) else None
        if anchor is not None and li < len(left) and left[li] == anchor:
            if ri < len(right) and right[ri] == anchor:
                li += 1
                ri += 1
                k += 1
            else:
                right_diffs.append(LineDiff(line_number=ri + 1, type=DiffType.added))
                ri += 1
        elif anchor is not None and ri < len(right) and right[ri] == anchor:
            left_diffs.append(LineDiff(line_number=li + 1, type=DiffType.removed))
            li += 1
        elif li < len(left) and ri < len(right):
            left_diffs.append(LineDiff(line_number=li + 1, type=DiffType.changed))
            right_diffs.append(LineDiff(line_number=ri + 1, type=DiffType.changed))
            li += 1
            ri += 1
        elif li < len(left):
            left_diffs.append(LineDiff(line_number=li + 1, type=DiffType.removed))
            li += 1
        else:
            right_diffs.append(LineDiff(line_number=ri + 1, type=DiffType.added))
            ri += 1

    return left_diffs, right_diffs


def _positional_diff(left: list[str], right: list[str]) -> tuple[list[LineDiff], list[LineDiff]]:
    """Compare index by index in O(n); no realignment after insertions or deletions."""
    left_diffs: list[LineDiff] = []
    right_diffs: list[LineDiff] = []

    for i in range(max(len(left), len(right))):
        if i >= len(left):
            right_diffs.append(LineDiff(line_number=i + 1, type=DiffType.added))
        elif i >= len(right):
            left_diffs.append(LineDiff(line_number=i + 1, type=DiffType.removed))
        elif left[i] != right[i]:
            left_diffs.append(LineDiff(line_number=i + 1, type=DiffType.changed))
            right_diffs.append(LineDiff(line_number=i + 1, type=DiffType.changed))

    return left_diffs, right_diffs


def compute_line_diffs(
    left: str,
    right: str,
    max_lines: Optional[int] = None,
    threshold: int = LARGE_FILE_THRESHOLD,
    ) -> LineDiffResult:
    """Classify each line of left and right as added, removed or changed.

    max_lines truncates both sides before comparing (None or 0 = no limit);
    content past the limit is ignored. If either side then has more than
    threshold lines the positional diff is used instead of the LCS alignment.
    """
    left_lines = split_lines(left)
    right_lines = split_lines(right)

    if max_lines:
        if len(left_lines) > max_lines or len(right_lines) > max_lines:
            logger.debug("Truncating line diff input to %d lines", max_lines)
        left_lines = left_lines[:max_lines]
        right_lines = right_lines[:max_lines]

    if len(left_lines) > threshold or len(right_lines) > threshold:
        strategy = DiffStrategy.positional
        left_diffs, right_diffs = _positional_diff(left_lines, right_lines)
    else:
        strategy = DiffStrategy.lcs
        left_diffs, right_diffs = _lcs_diff(left_lines, right_lines)

    logger.debug(
        "Line diff (%s): %d vs %d lines, %d left / %d right markers",
        strategy.value, len(left_lines), len(right_lines), len(left_diffs), len(right_diffs),
    )
    return LineDiffResult(left=left_diffs, right=right_diffs, strategy=strategy)


def summarize_line_diffs(result: LineDiffResult) -> dict[str, int]:
    """Return added (right side), removed and changed (left side) line counts."""
    return {
        "added": sum(1 for d in result.right if d.type == DiffType.added),
        "removed": sum(1 for d in result.left if d.type == DiffType.removed),
        "changed": sum(1 for d in result.left if d.type == DiffType.changed),
    }
