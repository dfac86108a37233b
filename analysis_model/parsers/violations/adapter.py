# Adapter base: run an external violations parser and translate its records into issues.

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Optional

from analysis_model.errors import AnalysisModelError, ParsingException
from analysis_model.findings.builder import IssueBuilder
from analysis_model.findings.models import Issue, Severity
from analysis_model.findings.report import Report
from analysis_model.parsers.base import CancelCheck, IssueParser
from analysis_model.parsers.violations.model import Violation, ViolationSeverity, ViolationsParser
from analysis_model.reader import ReaderFactory

logger = logging.getLogger(__name__)

DEFAULT_SEVERITIES = {
    ViolationSeverity.ERROR: Severity.WARNING_HIGH,
    ViolationSeverity.WARN: Severity.WARNING_NORMAL,
    ViolationSeverity.INFO: Severity.WARNING_LOW,
}


def to_valid_int(value: Optional[int]) -> int:
    """Missing or negative positions (the external 'no line' markers) become 0."""
    if value is None or value < 0:
        return 0
    return value


class AbstractViolationAdapter(IssueParser):
    """
    Base class for parsers that delegate to an external violations parser.

    Subclasses fill in four hooks and nothing else:
    - create_parser() - the external parser to run
    - is_valid(violation) - whether a record becomes an issue (default: all)
    - convert_severity(severity, violation) - total mapping onto Severity
    - extract_additional_properties(builder, violation) - extra issue fields
    """

    @abstractmethod
    def create_parser(self) -> ViolationsParser:
        ...

    def is_valid(self, violation: Violation) -> bool:
        return True

    def convert_severity(self, severity: ViolationSeverity, violation: Violation) -> Severity:
        return DEFAULT_SEVERITIES.get(severity, Severity.WARNING_LOW)

    def extract_additional_properties(self, builder: IssueBuilder, violation: Violation) -> None:
        """Hook for tool-specific fields; the default adds nothing."""

    def parse(
        self,
        reader_factory: ReaderFactory,
        *,
        is_canceled: Optional[CancelCheck] = None,
    ) -> Report:
        parser = self.create_parser()
        content = reader_factory.read_bytes()
        try:
            violations = parser.parse_report_output(content)
        except AnalysisModelError:
            raise
        except Exception as e:
            logger.warning("%s could not parse %s: %s", self.name, reader_factory.file_name, e)
            raise ParsingException(f"{self.name} can't parse {reader_factory.file_name}: {e}") from e

        report = Report()
        builder = self.create_builder()
        for violation in violations:
            self.check_canceled(is_canceled)
            if self.is_valid(violation):
                report.add(self.convert_to_issue(violation, builder))
        logger.info(
            "%s: %d issue(s) from %d violation(s) in %s",
            self.name,
            len(report),
            len(violations),
            reader_factory.file_name,
        )
        return report

    def convert_to_issue(self, violation: Violation, builder: IssueBuilder) -> Issue:
        (
            builder.set_severity(self.convert_severity(violation.severity, violation))
            .set_file_name(violation.file)
            .set_message(violation.message)
            .set_line_start(to_valid_int(violation.start_line))
            .set_line_end(to_valid_int(violation.end_line))
            .set_column_start(to_valid_int(violation.column))
            .set_column_end(to_valid_int(violation.end_column))
            .set_type(violation.rule)
            .set_category(violation.category)
            .set_origin(violation.parser.lower())
        )
        self.extract_additional_properties(builder, violation)
        return builder.build()
