# PIT mutation testing results: surviving (undetected) mutations become issues.

from __future__ import annotations

from typing import Optional

from analysis_model.findings.builder import IssueBuilder
from analysis_model.findings.models import Severity
from analysis_model.parsers.violations.adapter import AbstractViolationAdapter
from analysis_model.parsers.violations.model import Violation, ViolationSeverity
from analysis_model.parsers.violations.pitest import PiTestParser

STATUS = "status"
DETECTED = "detected"


def _get_specifics(violation: Violation, key: str) -> Optional[str]:
    return violation.specifics.get(key)


class PitAdapter(AbstractViolationAdapter):
    id = "pit"
    name = "PIT"

    def create_parser(self) -> PiTestParser:
        return PiTestParser()

    def is_valid(self, violation: Violation) -> bool:
        return _get_specifics(violation, DETECTED) == "false"

    def convert_severity(self, severity: ViolationSeverity, violation: Violation) -> Severity:
        if _get_specifics(violation, STATUS) == "SURVIVED":
            return Severity.WARNING_HIGH
        return Severity.WARNING_NORMAL

    def extract_additional_properties(self, builder: IssueBuilder, violation: Violation) -> None:
        builder.set_category(_get_specifics(violation, STATUS))
