from __future__ import annotations

"""
Parser registry: which report formats are available and how parsers are created.

Parsers keep per-parse state, so the registry stores factories and hands out
a new instance for every lookup. Adding a format means adding one entry to
get_default_config().
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping

from analysis_model.parsers.base import IssueParser
from analysis_model.parsers.coolflux import CoolfluxChessccParser
from analysis_model.parsers.fxcop.parser import FxCopParser
from analysis_model.parsers.pep8 import Pep8Parser
from analysis_model.parsers.violations.pit import PitAdapter

ParserFactory = Callable[[], IssueParser]


@dataclass
class Config:
    """
    Analysis configuration.

    parsers maps a parser id (as used on the command line) to a factory;
    encoding is used to decode text reports.
    """

    parsers: Mapping[str, ParserFactory] = field(default_factory=dict)
    encoding: str = "utf-8"


def get_default_config() -> Config:
    """Return the configuration with every parser this package ships."""
    parsers: Dict[str, ParserFactory] = {
        CoolfluxChessccParser.id: CoolfluxChessccParser,
        Pep8Parser.id: Pep8Parser,
        FxCopParser.id: FxCopParser,
        PitAdapter.id: PitAdapter,
    }
    return Config(parsers=parsers)


def get_enabled_parsers(config: Config | None = None) -> List[str]:
    """Return the registered parser ids, sorted."""
    if config is None:
        config = get_default_config()
    return sorted(config.parsers)


def create_parser(parser_id: str, config: Config | None = None) -> IssueParser:
    """
    Return a new parser instance for parser_id.

    Raises:
        KeyError: parser_id is not registered.
    """
    if config is None:
        config = get_default_config()
    try:
        factory = config.parsers[parser_id]
    except KeyError:
        raise KeyError(
            f"Unknown parser '{parser_id}', available: {', '.join(get_enabled_parsers(config))}"
        ) from None
    return factory()
