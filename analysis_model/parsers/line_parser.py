# Line scanning: match a regular expression against every interesting input line.

from __future__ import annotations

import logging
import re
from abc import abstractmethod
from typing import Optional

from analysis_model.findings.builder import IssueBuilder
from analysis_model.findings.models import Issue
from analysis_model.findings.report import Report
from analysis_model.parsers.base import CancelCheck, IssueParser
from analysis_model.reader import ReaderFactory

logger = logging.getLogger(__name__)


class RegexpLineParser(IssueParser):
    """
    Base class for parsers of line-oriented tool output.

    The input is read top to bottom. Lines rejected by is_line_interesting()
    are skipped without running the pattern, which keeps large logs cheap.
    For every line the pattern matches (search semantics), create_issue()
    decides whether an issue is reported.

    One IssueBuilder is shared by all lines of a parse, so fields that
    create_issue() does not set carry over from the previous issue.
    """

    def __init__(self, pattern: str, flags: int = 0) -> None:
        self.pattern = re.compile(pattern, flags)
        self.line_number = 0

    def is_line_interesting(self, line: str) -> bool:
        """Cheap pre-check before the pattern is applied. Default: every line."""
        return True

    @abstractmethod
    def create_issue(self, match: re.Match, builder: IssueBuilder) -> Optional[Issue]:
        """
        Turn a pattern match into an issue.

        Returns:
            The issue, or None if this match should not be reported.
        """
        ...

    def parse(
        self,
        reader_factory: ReaderFactory,
        *,
        is_canceled: Optional[CancelCheck] = None,
    ) -> Report:
        report = Report()
        builder = self.create_builder()
        self.line_number = 0
        for line in reader_factory.read_lines():
            self.line_number += 1
            self.check_canceled(is_canceled)
            if not self.is_line_interesting(line):
                continue
            match = self.pattern.search(line)
            if match is None:
                continue
            issue = self.create_issue(match, builder)
            if issue is not None:
                report.add(issue)
        logger.info(
            "%s: %d issue(s) in %d line(s) of %s",
            self.name,
            len(report),
            self.line_number,
            reader_factory.file_name,
        )
        return report
