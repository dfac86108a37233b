from __future__ import annotations

"""
Typer CLI entry point: parse one tool report and print the normalized issues.

    analysis-model parsers
    analysis-model analyze pep8 build/pep8.log
    analysis-model analyze fxcop build/fxcop.xml --min-severity high --verbose
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from analysis_model.config import Config, create_parser, get_default_config, get_enabled_parsers
from analysis_model.errors import AnalysisModelError
from analysis_model.findings.models import Severity
from analysis_model.reader import FileReaderFactory
from analysis_model.reporting.console import print_report

logger = logging.getLogger(__name__)

app = typer.Typer(help="analysis-model - normalize static analysis reports into one issue model.")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


@app.command()
def parsers() -> None:
    """List the ids of all registered parsers."""
    for parser_id in get_enabled_parsers():
        typer.echo(parser_id)


@app.command()
def analyze(
    parser_id: str = typer.Argument(..., help="Parser id, see the 'parsers' command."),
    report_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        help="Tool output to parse.",
    ),
    encoding: Optional[str] = typer.Option(None, help="Encoding of text reports (default utf-8)."),
    min_severity: Optional[str] = typer.Option(
        None, "--min-severity", help="Only show issues at least this severe (error, high, normal, low)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and rule descriptions."),
) -> None:
    """
    Parse REPORT_FILE with the given parser and print the issues found.

    Exits with code 1 if the report cannot be parsed.
    """
    _configure_logging(verbose)
    config: Config = get_default_config()
    if encoding:
        config.encoding = encoding

    try:
        parser = create_parser(parser_id, config)
    except KeyError as e:
        raise typer.BadParameter(str(e.args[0]), param_hint="PARSER_ID") from e

    threshold = None
    if min_severity:
        threshold = Severity.from_string(min_severity)
        if threshold is None:
            raise typer.BadParameter(f"Unknown severity: {min_severity}", param_hint="--min-severity")

    try:
        report = parser.parse(FileReaderFactory(report_file, encoding=config.encoding))
    except AnalysisModelError as exc:
        logger.error("Parsing %s with %s failed: %s", report_file, parser_id, exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if threshold is not None:
        report = report.filter(lambda issue: issue.severity is not None and issue.severity >= threshold)

    print_report(report, title=parser.name, verbose=verbose)


def main() -> None:
    """Entry point for `python -m analysis_model.main`."""
    app()


if __name__ == "__main__":
    main()
