# PIT mutation testing reports (mutations.xml) read into Violation records.

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Optional

from analysis_model.parsers.violations.model import Violation, ViolationSeverity

PITEST = "PITEST"

# Element texts copied into Violation.specifics
SPECIFIC_ELEMENTS = ("mutatedMethod", "methodDescription", "index", "killingTest")


def _text(mutation: ET.Element, tag: str) -> str:
    child = mutation.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


def _int_or_none(value: str) -> Optional[int]:
    try:
        return int(value)
    except ValueError:
        return None


def source_file_path(mutated_class: str, source_file: str) -> str:
    """
    Derive the repository path of the mutated source file.

    The package of the mutated class becomes the directory, e.g.
    ("com.example.Foo", "Foo.java") -> "com/example/Foo.java".
    """
    package, _, _ = mutated_class.rpartition(".")
    if not package:
        return source_file
    return package.replace(".", "/") + "/" + source_file


class PiTestParser:
    """Reads <mutation> elements from a PIT XML report, in document order."""

    def parse_report_output(self, report_content: bytes) -> List[Violation]:
        root = ET.fromstring(report_content)
        violations: List[Violation] = []
        for mutation in root.iter("mutation"):
            specifics = {
                "detected": mutation.get("detected", ""),
                "status": mutation.get("status", ""),
            }
            for tag in SPECIFIC_ELEMENTS:
                specifics[tag] = _text(mutation, tag)
            mutated_class = _text(mutation, "mutatedClass")
            violations.append(
                Violation(
                    parser=PITEST,
                    file=source_file_path(mutated_class, _text(mutation, "sourceFile")),
                    start_line=_int_or_none(_text(mutation, "lineNumber")),
                    severity=ViolationSeverity.ERROR,
                    message=_text(mutation, "description"),
                    rule=_text(mutation, "mutator") or None,
                    source=mutated_class or None,
                    specifics=specifics,
                )
            )
        return violations
