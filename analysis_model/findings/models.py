# Pydantic data models for normalized issues: Issue, LineRange, Severity.

from __future__ import annotations

import posixpath
import uuid
from enum import Enum
from functools import total_ordering
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, model_validator


@total_ordering
class Severity(Enum):
    """
    Severity of an issue, ordered ERROR > WARNING_HIGH > WARNING_NORMAL > WARNING_LOW.

    Sorting a list of severities ascending puts WARNING_LOW first.
    """

    ERROR = "Error"
    WARNING_HIGH = "High"
    WARNING_NORMAL = "Normal"
    WARNING_LOW = "Low"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def is_greater_or_equal(self, other: Severity) -> bool:
        return self.rank >= other.rank

    @classmethod
    def from_string(cls, value: Optional[str], default: Optional[Severity] = None) -> Optional[Severity]:
        """
        Resolve a severity from its member name or display value, ignoring case.

        Accepts e.g. "WARNING_HIGH", "high" or "High". Returns default when
        value does not name a severity.
        """
        if not value:
            return default
        key = value.strip().upper()
        for severity in cls:
            if key in (severity.name, severity.value.upper()):
                return severity
        return default


_SEVERITY_RANK = {
    Severity.WARNING_LOW: 0,
    Severity.WARNING_NORMAL: 1,
    Severity.WARNING_HIGH: 2,
    Severity.ERROR: 3,
}


class LineRange(BaseModel):
    """A range of lines (inclusive). A reversed pair is stored with start <= end."""

    start: int
    end: int

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _order_bounds(cls, data: Any) -> Any:
        if isinstance(data, dict):
            try:
                start, end = int(data.get("start", 0)), int(data.get("end", 0))
            except (TypeError, ValueError):
                return data
            if start > end:
                return {**data, "start": end, "end": start}
        return data

    def contains(self, line: int) -> bool:
        return self.start <= line <= self.end


class Issue(BaseModel):
    """
    A single normalized finding reported by a static analysis tool.

    Instances are created by IssueBuilder; file_name is already normalized
    when an Issue exists. Two issues with equal content still differ in id.
    """

    file_name: str = ""
    line_start: int = 0
    line_end: int = 0
    column_start: int = 0
    column_end: int = 0
    line_ranges: Tuple[LineRange, ...] = ()
    category: Optional[str] = None
    type: Optional[str] = None
    package_name: Optional[str] = None
    module_name: Optional[str] = None
    severity: Optional[Severity] = None
    message: Optional[str] = None
    description: Optional[str] = None
    origin: Optional[str] = None
    reference: Optional[str] = None
    fingerprint: Optional[str] = None
    additional_properties: Any = None
    id: uuid.UUID = Field(default_factory=uuid.uuid4)

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def base_name(self) -> str:
        """File name without its directory part."""
        return posixpath.basename(self.file_name)

    def has_file_name(self) -> bool:
        return bool(self.file_name)

    def affects_line(self, line: int) -> bool:
        """True if line lies between line_start and line_end or in one of the extra ranges."""
        end = self.line_end or self.line_start
        if self.line_start <= line <= end:
            return True
        return any(r.contains(line) for r in self.line_ranges)
