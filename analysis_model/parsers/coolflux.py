# Coolflux DSP compiler (chesscc) warnings.

from __future__ import annotations

import re
from typing import Optional

from analysis_model.findings.builder import IssueBuilder
from analysis_model.findings.models import Issue, Severity
from analysis_model.parsers.line_parser import RegexpLineParser

CHESSCC_PATTERN = r'^.*?Warning in "([^"]+)", line (\d+),.*?:\s*(.*)$'


class CoolfluxChessccParser(RegexpLineParser):
    """Parses lines like: Warning in "a.c", line 10, foo: message"""

    id = "coolflux"
    name = "Coolflux DSP Compiler"

    def __init__(self) -> None:
        super().__init__(CHESSCC_PATTERN)

    def is_line_interesting(self, line: str) -> bool:
        return "Warning" in line

    def create_issue(self, match: re.Match, builder: IssueBuilder) -> Optional[Issue]:
        return (
            builder.set_file_name(match.group(1))
            .set_line_start(match.group(2))
            .set_message(match.group(3))
            .set_severity(Severity.WARNING_HIGH)
            .build_optional()
        )
