# Rich console output: show a parsed report grouped by file, colored by severity.

from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from analysis_model.findings.models import Issue, Severity
from analysis_model.findings.report import Report

# Severity → Rich style
SEVERITY_STYLE = {
    Severity.ERROR: "bold red",
    Severity.WARNING_HIGH: "bold magenta",
    Severity.WARNING_NORMAL: "bold yellow",
    Severity.WARNING_LOW: "bold blue",
}

DEFAULT_SEVERITY_STYLE = "bold white"
NO_FILE = "(no file)"


def _severity_style(severity: Optional[Severity]) -> str:
    if severity is None:
        return DEFAULT_SEVERITY_STYLE
    return SEVERITY_STYLE.get(severity, DEFAULT_SEVERITY_STYLE)


def _severity_label(severity: Optional[Severity]) -> str:
    return severity.value.upper() if severity is not None else "-"


def _sort_key(issue: Issue) -> tuple[int, int]:
    return issue.line_start, issue.column_start


def print_report(
    report: Report,
    title: str = "Analysis",
    verbose: bool = False,
    console: Console | None = None,
) -> None:
    """
    Print report using Rich: one table per file, then a severity summary.
    If verbose, rule descriptions are printed below each table.
    """
    if console is None:
        console = Console()

    if report.is_empty():
        console.print(
            Panel(
                "[green]No issues found.[/green]",
                title=title,
                border_style="green",
                box=box.ROUNDED,
            )
        )
        return

    by_file: dict[str, list[Issue]] = {}
    for issue in report:
        by_file.setdefault(issue.file_name or NO_FILE, []).append(issue)

    for path in sorted(by_file.keys()):
        file_issues = sorted(by_file[path], key=_sort_key)

        console.print()
        console.print(Panel(
            f"[bold cyan]{path}[/bold cyan]",
            box=box.SIMPLE_HEAD,
            border_style="blue",
            padding=(0, 1),
        ))

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE,
            padding=(0, 1),
            expand=False,
        )
        table.add_column("Line", justify="right", style="dim", width=5)
        table.add_column("Col", justify="right", style="dim", width=4)
        table.add_column("Severity", width=8)
        table.add_column("Category", width=18)
        table.add_column("Message", style="white")

        for issue in file_issues:
            table.add_row(
                str(issue.line_start),
                str(issue.column_start),
                Text(_severity_label(issue.severity), style=_severity_style(issue.severity)),
                Text(issue.category or "-", style="dim"),
                issue.message or "",
            )

        console.print(table)

        if verbose:
            for issue in file_issues:
                if issue.description:
                    console.print(f"  [dim][{issue.type or issue.category}][/dim] {issue.description}")

    _print_summary(report, title, console)


def _print_summary(report: Report, title: str, console: Console) -> None:
    """Print a compact summary of the issue count per severity."""
    total = len(report)
    summary_parts = [f"[bold]{total} issue{'s' if total != 1 else ''}[/bold]"]
    for severity in sorted(Severity, reverse=True):
        count = report.size_of(severity)
        if count:
            summary_parts.append(
                f"[{_severity_style(severity)}]{count} {severity.value.lower()}[/]"
            )

    console.print()
    console.print(
        Panel(
            " | ".join(summary_parts),
            title=f"{title} Summary",
            border_style="yellow",
            box=box.ROUNDED,
        )
    )
