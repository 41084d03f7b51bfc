"""Category classification and fact-mode detection for result trees.

A fetched result tree names its record kind in a ``context`` element
(``reactions``, ``substances`` ...).  The category decides how sibling data
sections of a record are combined:

- DUPLICATE: every sibling section becomes its own record, carrying a copy
  of the main section's fields (reactions with several condition sets).
- MERGE:     all sections fold into one record (a citation's fields).

Fact mode tells whether the originating query asked for multi-valued facts
(``NAME(first,last)`` specifiers).  The response echoes the request's
``select_item`` entries, so the flag is read off the result tree itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import StrEnum, auto

from reaxys_flatten.tree.nodes import ResultNode

logger = logging.getLogger(__name__)

__all__ = [
    "Category",
    "DuplicationMode",
    "find_facts",
    "find_result_category",
    "is_fact_request",
]


class DuplicationMode(StrEnum):
    """How sibling data sections combine with a record's main section."""

    DUPLICATE = auto()
    MERGE = auto()


class Category(StrEnum):
    """Record categories a result tree can contain.

    Member values are the singular record tags; ``plural`` is the context
    marker naming the category in the tree.
    """

    CITATION = auto()
    SUBSTANCE = auto()
    DPITEM = auto()
    REACTION = auto()
    TGITEM = auto()

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    @property
    def duplication(self) -> DuplicationMode:
        if self in (Category.CITATION, Category.DPITEM):
            return DuplicationMode.MERGE
        return DuplicationMode.DUPLICATE

    @classmethod
    def from_context(cls, context: str | None) -> Category | None:
        """Return the category whose plural equals ``context`` exactly.

        Matching is exact string equality: no case folding, no trimming,
        no prefix matching.
        """
        if context is None:
            return None
        for category in cls:
            if context == category.plural:
                return category
        return None


def find_result_category(tree: ResultNode) -> Category | None:
    """Read the tree's ``context`` marker and return its category.

    Returns:
        The matching Category, or None when the marker is missing or
        unrecognised (an empty result, not an error).
    """
    context = tree.find_text("context")
    category = Category.from_context(context)
    if category is None:
        logger.debug("No record category for context %r", context)
    return category


def is_fact_request(selection: Iterable[str | None]) -> bool:
    """Return True if any selection specifier has a parenthesized argument list.

    Facts are requested as ``CODE(first,last)``; plain fields carry no
    parentheses.  ``None`` entries are ignored.
    """
    return any(item is not None and "(" in item for item in selection)


def find_facts(tree: ResultNode) -> bool:
    """Return True if the request echoed in ``tree`` asked for facts."""
    return is_fact_request(
        item.text_content() for item in tree.iter_elements("select_item")
    )
