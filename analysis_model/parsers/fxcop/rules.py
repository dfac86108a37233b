# FxCop rule index: rule metadata looked up by (category, check id).

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

RuleKey = Tuple[str, str]


@dataclass(frozen=True)
class FxCopRule:
    """Metadata of one FxCop rule as listed in the report's Rules section."""

    type_name: str
    category: str
    check_id: str
    name: str = ""
    description: str = ""
    url: str = ""


def _child_text(element: ET.Element, tag: str) -> str:
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


class FxCopRuleSet:
    """
    Rules keyed by (category, check_id).

    Filled once from the report's Rules section before any issue is read.
    """

    def __init__(self) -> None:
        self._rules: Dict[RuleKey, FxCopRule] = {}

    def add_rule(self, element: ET.Element) -> Optional[FxCopRule]:
        """Index a <Rule> element. Other elements are ignored and yield None."""
        if element.tag != "Rule":
            return None
        category = element.get("Category", "")
        check_id = element.get("CheckId", "")
        rule = FxCopRule(
            type_name=element.get("TypeName", ""),
            category=category,
            check_id=check_id,
            name=_child_text(element, "Name"),
            description=_child_text(element, "Description"),
            url=_child_text(element, "Url"),
        )
        self._rules[(category, check_id)] = rule
        return rule

    def has_rule(self, category: str, check_id: str) -> bool:
        return (category, check_id) in self._rules

    def get_rule(self, category: str, check_id: str) -> Optional[FxCopRule]:
        return self._rules.get((category, check_id))

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[FxCopRule]:
        return iter(self._rules.values())
