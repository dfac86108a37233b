"""Tests for Rich console output."""

import io

from rich.console import Console

from analysis_model.findings.builder import IssueBuilder
from analysis_model.findings.models import Severity
from analysis_model.findings.report import Report
from analysis_model.reporting.console import print_report


def _render(report: Report, **kwargs) -> str:
    console = Console(file=io.StringIO(), width=140, color_system=None)
    print_report(report, console=console, **kwargs)
    return console.file.getvalue()


def test_empty_report():
    assert "No issues found." in _render(Report())


def test_issues_grouped_by_file_with_summary():
    builder = IssueBuilder()
    report = Report(
        [
            builder.set_file_name("src/b.py").set_line_start(3).set_category("W291")
            .set_severity(Severity.WARNING_LOW).set_message("trailing whitespace").build(),
            builder.set_file_name("src/a.py").set_line_start(1).set_category("E101")
            .set_severity(Severity.WARNING_NORMAL).set_message("bad indent").build(),
        ]
    )
    out = _render(report, title="Pep8")
    assert "src/a.py" in out
    assert "src/b.py" in out
    assert out.index("src/a.py") < out.index("src/b.py")
    assert "bad indent" in out
    assert "2 issues" in out
    assert "1 normal" in out
    assert "1 low" in out


def test_verbose_shows_descriptions():
    report = Report(
        [
            IssueBuilder().set_file_name("a.cs").set_type("CA1000").set_message("m")
            .set_description("Types should be disposable.").build()
        ]
    )
    assert "Types should be disposable." in _render(report, verbose=True)
    assert "Types should be disposable." not in _render(report)


def test_issue_without_file_or_severity():
    out = _render(Report([IssueBuilder().set_message("orphan").build()]))
    assert "(no file)" in out
    assert "orphan" in out
