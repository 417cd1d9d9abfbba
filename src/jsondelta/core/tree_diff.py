"""Structural diff of two parsed JSON values, keyed by path"""

from typing import Any, Iterator

from jsondelta.core.models import DiffType, NodeDiff, ValueKind


ROOT_PATH = "(root)"

_Frame = Iterator[tuple[Any, Any, str]]


def classify(value: Any) -> ValueKind:
    """Return the ValueKind of a parsed JSON value; bool is checked before number."""
    if value is None:
        return ValueKind.null
    if isinstance(value, bool):
        return ValueKind.bool
    if isinstance(value, (int, float)):
        return ValueKind.number
    if isinstance(value, str):
        return ValueKind.string
    if isinstance(value, (list, tuple)):
        return ValueKind.array
    if isinstance(value, dict):
        return ValueKind.object
    raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")


def key_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else str(key)


def index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


class _DiffAccumulator:
    """Path-keyed diff entries for a single compute_deep_diff call."""

    def __init__(self):
        self.diffs: dict[str, NodeDiff] = {}
        # Counts every record() call; unescaped paths can collide, so len(diffs) may not grow.
        self.recorded = 0

    def record(self, path: str, diff_type: DiffType, **values: Any) -> None:
        key = path or ROOT_PATH
        self.diffs[key] = NodeDiff(path=key, type=diff_type, **values)
        self.recorded += 1

    def mark_changed(self, path: str) -> None:
        # The root of a root-level comparison is never marked.
        if path and path not in self.diffs:
            self.diffs[path] = NodeDiff(path=path, type=DiffType.changed)


def _compare(left: Any, right: Any, path: str, acc: _DiffAccumulator) -> _Frame:
    """Compare one pair of values, yielding (left, right, path) for each child pair to descend into.

    The caller resumes the generator only after a yielded child is fully
    compared, so a rise in acc.recorded across a yield means that subtree differs.
    """
    kind = classify(left)
    if kind is not classify(right):
        acc.record(path, DiffType.changed, old_value=left, new_value=right)
        return

    if kind is ValueKind.array:
        for i in range(max(len(left), len(right))):
            item_path = index_path(path, i)
            if i >= len(left):
                acc.record(item_path, DiffType.added, new_value=right[i])
                acc.mark_changed(path)
            elif i >= len(right):
                acc.record(item_path, DiffType.removed, old_value=left[i])
                acc.mark_changed(path)
            else:
                before = acc.recorded
                yield left[i], right[i], item_path
                if acc.recorded > before:
                    acc.mark_changed(path)

    elif kind is ValueKind.object:
        for key in dict.fromkeys([*left, *right]):
            child_path = key_path(path, key)
            if key not in left:
                acc.record(child_path, DiffType.added, new_value=right[key])
                acc.mark_changed(path)
            elif key not in right:
                acc.record(child_path, DiffType.removed, old_value=left[key])
                acc.mark_changed(path)
            else:
                before = acc.recorded
                yield left[key], right[key], child_path
                if acc.recorded > before:
                    acc.mark_changed(path)

    elif left != right:
        acc.record(path, DiffType.changed, old_value=left, new_value=right)


def compute_deep_diff(left: Any, right: Any, base_path: str = "") -> dict[str, NodeDiff]:
    """Diff two parsed JSON values into a mapping of path -> NodeDiff.

    Unchanged subtrees contribute nothing. Every container holding a
    difference gets a ``changed`` parent marker, except the comparison root
    when base_path is empty. A kind mismatch records the whole old and new
    values at that path and is not descended into. Entries recorded at the
    empty path are keyed by ROOT_PATH.

    Traversal keeps its own stack of generator frames, so deeply nested input
    does not hit the interpreter recursion limit.
    """
    acc = _DiffAccumulator()
    stack: list[_Frame] = [_compare(left, right, base_path, acc)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
        else:
            stack.append(_compare(*child, acc))
    return acc.diffs


def leaf_changes(diffs: dict[str, NodeDiff]) -> list[NodeDiff]:
    """Return concrete changes in path order of discovery, without parent markers."""
    return [d for d in diffs.values() if not d.is_marker]


def summarize_node_diffs(diffs: dict[str, NodeDiff]) -> dict[str, int]:
    """Return added/removed/changed counts over leaf changes."""
    counts = {t.value: 0 for t in DiffType}
    for d in leaf_changes(diffs):
        counts[d.type.value] += 1
    return counts
