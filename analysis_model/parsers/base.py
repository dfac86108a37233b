# Parser interface (abstract base class): the contract every report parser implements.
# Concrete parsers (coolflux, pep8, fxcop, violation adapters) subclass IssueParser
# and implement parse().

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from analysis_model.errors import ParsingCanceledException
from analysis_model.findings.builder import IssueBuilder
from analysis_model.findings.report import Report
from analysis_model.reader import ReaderFactory

CancelCheck = Callable[[], bool]


class IssueParser(ABC):
    """
    Abstract base class for all report parsers.

    Subclasses must define:
    - id: str - registry key (e.g. "pep8")
    - name: str - human-readable tool name (e.g. "Pep8")
    - parse(reader_factory) -> Report - read one input and return its issues

    A parse is a single pass over one input. Per-parse state (report, rule
    index) is created when parse() starts, so an instance may be reused for
    consecutive parses but not for overlapping ones.
    """

    id: str
    name: str

    @abstractmethod
    def parse(
        self,
        reader_factory: ReaderFactory,
        *,
        is_canceled: Optional[CancelCheck] = None,
    ) -> Report:
        """
        Parse one input and return the issues found, in discovery order.

        Args:
            reader_factory: Source of the raw tool output.
            is_canceled: Optional callback; parsers that check it raise
                ParsingCanceledException once it returns True.

        Raises:
            ParsingException: the input cannot be interpreted.
            ParsingCanceledException: is_canceled returned True.
        """
        ...

    def create_builder(self) -> IssueBuilder:
        """Return the builder used for one parse."""
        return IssueBuilder()

    @staticmethod
    def check_canceled(is_canceled: Optional[CancelCheck]) -> None:
        if is_canceled is not None and is_canceled():
            raise ParsingCanceledException("Parsing has been canceled")
