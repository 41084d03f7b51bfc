"""ResultSetMetadata dataclass describing one fetched hit set.

This module provides the immutable description parsed from a result tree
header: status, hit set name, database and declared size.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reaxys_flatten.tree.nodes import ResultNode

logger = logging.getLogger(__name__)

__all__ = ["ResultSetMetadata"]


def _result_status(tree: ResultNode) -> str:
    """Return the text of the first ``status`` element inside a ``result``."""
    for result in tree.iter_elements("result"):
        for child in result.element_children():
            if child.tag == "status":
                return child.text_content()
    return ""


def _result_size(tree: ResultNode) -> int:
    raw = tree.find_text("resultsize")
    try:
        return int(raw)
    except ValueError:
        logger.debug("Unparseable result size %r, using 0", raw)
        return 0


@dataclass(frozen=True, slots=True)
class ResultSetMetadata:
    """Description of a fetched hit set.

    Attributes:
        status: Status reported by the server; empty when missing.
        result_name: Name of the hit set subsequent pages are fetched from.
        dbname: Database the hit set belongs to.
        size: Declared number of hits; 0 when missing or unparseable.
        sd_v3: Output-format flag.  True selects V3000 structures, which
            retrieval queries express by omitting V2000.
    """

    status: str = ""
    result_name: str = ""
    dbname: str = ""
    size: int = 0
    sd_v3: bool = False

    @classmethod
    def from_tree(cls, tree: ResultNode, sd_v3: bool = False) -> ResultSetMetadata:
        """Parse the header of a fresh query response."""
        return cls(
            status=_result_status(tree),
            result_name=tree.find_text("resultname"),
            dbname=tree.find_text("dbname"),
            size=_result_size(tree),
            sd_v3=sd_v3,
        )

    @classmethod
    def from_previous(
        cls, previous: ResultSetMetadata, tree: ResultNode
    ) -> ResultSetMetadata:
        """Parse a page fetched from ``previous``'s hit set.

        The format flag is carried over.  Pages need not repeat the database
        name, so ``previous.dbname`` fills in when the page omits it.
        """
        return cls(
            status=_result_status(tree),
            result_name=tree.find_text("resultname"),
            dbname=tree.find_text("dbname") or previous.dbname,
            size=_result_size(tree),
            sd_v3=previous.sd_v3,
        )
