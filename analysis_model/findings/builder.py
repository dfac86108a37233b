# Fluent builder that normalizes raw parser output into immutable Issue values.

from __future__ import annotations

import re
import uuid
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple, Union

from analysis_model.findings.models import Issue, LineRange, Severity
from analysis_model.paths import create_absolute_path

IntLike = Union[int, str, None]
INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")
RangeLike = Union[LineRange, Tuple[int, int], Sequence[int]]


def parse_int(value: IntLike) -> int:
    """
    Leniently convert value to an int.

    None, blank strings and anything that is not a plain ASCII integer
    literal (no digit separators, no non-ASCII digits) yield 0;
    this never raises. Absent and invalid values are not distinguished.
    """
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    if not INTEGER_LITERAL.fullmatch(text):
        return 0
    return int(text)


def _to_line_range(value: RangeLike) -> LineRange:
    if isinstance(value, LineRange):
        return value
    start, end = value
    return LineRange(start=start, end=end)


class IssueBuilder:
    """
    Creates Issue instances. Fields that were never set keep safe defaults.

    Every setter returns the builder so calls can be chained::

        issue = (
            IssueBuilder()
            .set_file_name("affected.c")
            .set_line_start(12)
            .set_category("Design")
            .set_message("Missing check")
            .set_severity(Severity.WARNING_LOW)
            .build()
        )

    A builder may be reused for many issues: build() only replaces the
    pending id, all other fields stay as they are. Not safe for concurrent use.

    Note: set_directory() must be called before set_file_name() for the
    directory to take part in the path resolution.
    """

    def __init__(self, id_factory: Callable[[], uuid.UUID] = uuid.uuid4) -> None:
        self._id_factory = id_factory
        self._id = id_factory()
        self._directory: Optional[str] = None
        self._file_name = ""
        self._line_start = 0
        self._line_end = 0
        self._column_start = 0
        self._column_end = 0
        self._line_ranges: Tuple[LineRange, ...] = ()
        self._category: Optional[str] = None
        self._type: Optional[str] = None
        self._package_name: Optional[str] = None
        self._module_name: Optional[str] = None
        self._origin: Optional[str] = None
        self._reference: Optional[str] = None
        self._fingerprint: Optional[str] = None
        self._severity: Optional[Severity] = None
        self._message: Optional[str] = None
        self._description: Optional[str] = None
        self._additional_properties: Any = None

    def set_id(self, issue_id: uuid.UUID) -> IssueBuilder:
        """Use issue_id for the next build() instead of a generated one."""
        self._id = issue_id
        return self

    def set_directory(self, directory: Optional[str]) -> IssueBuilder:
        self._directory = directory
        return self

    def set_file_name(self, file_name: Optional[str]) -> IssueBuilder:
        """
        Store file_name resolved against the current directory.

        A None or blank file name is stored as the empty string.
        """
        if file_name is None or not file_name.strip():
            self._file_name = ""
        else:
            self._file_name = create_absolute_path(self._directory, file_name)
        return self

    def set_line_start(self, line_start: IntLike) -> IssueBuilder:
        self._line_start = parse_int(line_start)
        return self

    def set_line_end(self, line_end: IntLike) -> IssueBuilder:
        self._line_end = parse_int(line_end)
        return self

    def set_column_start(self, column_start: IntLike) -> IssueBuilder:
        self._column_start = parse_int(column_start)
        return self

    def set_column_end(self, column_end: IntLike) -> IssueBuilder:
        self._column_end = parse_int(column_end)
        return self

    def set_line_ranges(self, line_ranges: Optional[Iterable[RangeLike]]) -> IssueBuilder:
        """Store a copy of line_ranges; later changes to the argument are not seen."""
        self._line_ranges = tuple(_to_line_range(r) for r in line_ranges or ())
        return self

    def set_category(self, category: Optional[str]) -> IssueBuilder:
        self._category = category
        return self

    def set_type(self, issue_type: Optional[str]) -> IssueBuilder:
        self._type = issue_type
        return self

    def set_package_name(self, package_name: Optional[str]) -> IssueBuilder:
        self._package_name = package_name
        return self

    def set_module_name(self, module_name: Optional[str]) -> IssueBuilder:
        self._module_name = module_name
        return self

    def set_origin(self, origin: Optional[str]) -> IssueBuilder:
        self._origin = origin
        return self

    def set_reference(self, reference: Optional[str]) -> IssueBuilder:
        self._reference = reference
        return self

    def set_fingerprint(self, fingerprint: Optional[str]) -> IssueBuilder:
        self._fingerprint = fingerprint
        return self

    def set_severity(self, severity: Optional[Severity]) -> IssueBuilder:
        self._severity = severity
        return self

    def set_message(self, message: Optional[str]) -> IssueBuilder:
        self._message = message
        return self

    def set_description(self, description: Optional[str]) -> IssueBuilder:
        self._description = description
        return self

    def set_additional_properties(self, additional_properties: Any) -> IssueBuilder:
        self._additional_properties = additional_properties
        return self

    def copy(self, issue: Issue) -> IssueBuilder:
        """Take over every property of issue except its id."""
        self._file_name = issue.file_name
        self._line_start = issue.line_start
        self._line_end = issue.line_end
        self._column_start = issue.column_start
        self._column_end = issue.column_end
        self._line_ranges = tuple(issue.line_ranges)
        self._category = issue.category
        self._type = issue.type
        self._package_name = issue.package_name
        self._module_name = issue.module_name
        self._origin = issue.origin
        self._reference = issue.reference
        self._fingerprint = issue.fingerprint
        self._severity = issue.severity
        self._message = issue.message
        self._description = issue.description
        self._additional_properties = issue.additional_properties
        return self

    def build(self) -> Issue:
        """Create an Issue from the current properties and draw a fresh id for the next one."""
        issue = Issue(
            file_name=self._file_name,
            line_start=self._line_start,
            line_end=self._line_end,
            column_start=self._column_start,
            column_end=self._column_end,
            line_ranges=self._line_ranges,
            category=self._category,
            type=self._type,
            package_name=self._package_name,
            module_name=self._module_name,
            severity=self._severity,
            message=self._message,
            description=self._description,
            origin=self._origin,
            reference=self._reference,
            fingerprint=self._fingerprint,
            additional_properties=self._additional_properties,
            id=self._id,
        )
        self._id = self._id_factory()
        return issue

    def build_optional(self) -> Optional[Issue]:
        """
        Same as build(), typed as Optional.

        Lets create_issue() implementations that sometimes skip a record
        return the builder result directly.
        """
        return self.build()
