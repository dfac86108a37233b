# Report: ordered, append-only collection of the issues found by one parse.

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional

from analysis_model.findings.models import Issue, Severity


class Report:
    """
    Issues in discovery order. Duplicates are kept; there is no removal.

    A report is owned by the parse call that creates it and handed to the
    caller once the parse completes.
    """

    def __init__(self, issues: Optional[Iterable[Issue]] = None) -> None:
        self._issues: List[Issue] = list(issues or ())

    def add(self, issue: Issue) -> Report:
        self._issues.append(issue)
        return self

    def add_all(self, issues: Iterable[Issue]) -> Report:
        self._issues.extend(issues)
        return self

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    def __getitem__(self, index: int) -> Issue:
        return self._issues[index]

    def __repr__(self) -> str:
        return f"Report(size={len(self._issues)})"

    def is_empty(self) -> bool:
        return not self._issues

    def size_of(self, severity: Severity) -> int:
        """Number of issues with exactly the given severity."""
        return sum(1 for issue in self._issues if issue.severity is severity)

    def filter(self, predicate: Callable[[Issue], bool]) -> Report:
        """Return a new report with the issues matching predicate, order kept."""
        return Report(issue for issue in self._issues if predicate(issue))

    def get_files(self) -> List[str]:
        """Distinct file names, in order of first appearance."""
        return list(dict.fromkeys(issue.file_name for issue in self._issues))

    def get_categories(self) -> List[str]:
        """Distinct non-empty categories, in order of first appearance."""
        return list(dict.fromkeys(issue.category for issue in self._issues if issue.category))
