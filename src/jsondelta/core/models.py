"""Result models shared by the line and structural diff engines"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DiffType(str, Enum):
    """Classification of a single line or tree node"""
    added = "added"
    removed = "removed"
    changed = "changed"


class DiffStrategy(str, Enum):
    """Which line algorithm produced a LineDiffResult"""
    lcs = "lcs"
    positional = "positional"


class ValueKind(str, Enum):
    """Closed set of JSON value shapes compared by the structural diff"""
    null = "null"
    bool = "bool"
    number = "number"
    string = "string"
    array = "array"
    object = "object"


class LineDiff(BaseModel):
    """A changed line; line_number is 1-based within its own side."""
    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=1)
    type: DiffType


class LineDiffResult(BaseModel):
    left: list[LineDiff] = []
    right: list[LineDiff] = []
    strategy: DiffStrategy


class NodeDiff(BaseModel):
    """A difference at one path of a JSON tree.

    old_value / new_value are only meaningful when explicitly set (see
    ``model_fields_set``), so a JSON null is distinguishable from an absent
    value. A changed entry with neither value is a parent marker.
    """
    path: str
    type: DiffType
    old_value: Any = None
    new_value: Any = None

    @property
    def has_old_value(self) -> bool:
        return "old_value" in self.model_fields_set

    @property
    def has_new_value(self) -> bool:
        return "new_value" in self.model_fields_set

    @property
    def is_marker(self) -> bool:
        return not (self.has_old_value or self.has_new_value)


class DiffReport(BaseModel):
    """Line and structural diff of two inputs, as rendered by export."""
    left: str
    right: str
    summary: dict[str, int]
    line_diffs: LineDiffResult
    node_diffs: list[NodeDiff]
