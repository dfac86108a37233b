# Category helpers shared by parsers whose tools report no or lower-case categories.

from __future__ import annotations

from typing import Optional

PROPRIETARY_API = "Proprietary API"
DEPRECATION = "Deprecation"


def guess_category(message: Optional[str]) -> str:
    """Guess a category from the warning message, or return "" if nothing fits."""
    if not message:
        return ""
    if "proprietary" in message:
        return PROPRIETARY_API
    if "deprecated" in message:
        return DEPRECATION
    return ""


def guess_category_if_empty(category: Optional[str], message: Optional[str]) -> str:
    """
    Return category with its first character upper-cased.

    A blank category is replaced by guess_category(message).
    """
    if not category or not category.strip():
        return guess_category(message)
    return category[:1].upper() + category[1:]
