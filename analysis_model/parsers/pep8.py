# Pep8 (pycodestyle) warnings: file:line:column: CODE message

from __future__ import annotations

import re
from typing import Optional

from analysis_model.findings.builder import IssueBuilder
from analysis_model.findings.models import Issue, Severity
from analysis_model.parsers.categories import guess_category_if_empty
from analysis_model.parsers.line_parser import RegexpLineParser

PEP8_WARNING_PATTERN = r"(.*):(\d+):(\d+): (\D\d*) (.*)"


def map_priority(category: str) -> Severity:
    """E-codes (errors in pep8 terms) are normal warnings, everything else low."""
    if "E" in category:
        return Severity.WARNING_NORMAL
    return Severity.WARNING_LOW


class Pep8Parser(RegexpLineParser):
    id = "pep8"
    name = "Pep8"

    def __init__(self) -> None:
        super().__init__(PEP8_WARNING_PATTERN)

    def is_line_interesting(self, line: str) -> bool:
        return ":" in line

    def create_issue(self, match: re.Match, builder: IssueBuilder) -> Optional[Issue]:
        message = match.group(5)
        category = guess_category_if_empty(match.group(4), message)
        return (
            builder.set_file_name(match.group(1))
            .set_line_start(match.group(2))
            .set_column_start(match.group(3))
            .set_category(category)
            .set_message(message)
            .set_severity(map_priority(category))
            .build_optional()
        )
