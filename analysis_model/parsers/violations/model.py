# Violation records as produced by third-party report parsers, before translation to Issue.

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Protocol

from pydantic import BaseModel, Field


class ViolationSeverity(str, Enum):
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class Violation(BaseModel):
    """One finding in the external parser's own model."""

    parser: str
    file: str = ""
    start_line: Optional[int] = None
    end_line: Optional[int] = None
    column: Optional[int] = None
    end_column: Optional[int] = None
    severity: ViolationSeverity = ViolationSeverity.INFO
    message: str = ""
    rule: Optional[str] = None
    category: Optional[str] = None
    source: Optional[str] = None
    specifics: Dict[str, str] = Field(default_factory=dict, description="tool-specific key/value metadata")

    model_config = {"frozen": True}


class ViolationsParser(Protocol):
    """What an adapter needs from an external report parser."""

    def parse_report_output(self, report_content: bytes) -> List[Violation]:
        """Parse the raw report; decoding is up to the parser (e.g. an XML declaration)."""
        ...
