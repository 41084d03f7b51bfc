"""RetrievalQueryBuilder: builds the descriptor for a follow-up fetch.

A retrieval asks the server for one page (``first`` .. ``last``) of a hit
set, selecting a field or fact plus the field groups usually needed with it.

Selection rules:
- The requested value is split at its first ``(`` into a code and a count
  suffix (``DAT(1,50)`` -> ``DAT`` + ``(1,50)``).
- A top-level code (RX, IDE, DAT ...) is requested bare; other codes keep
  their suffix.
- Associated codes come from a TypeAssociationLookup.  Each regains the
  suffix unless it is itself a top-level code.

The options string names the structure format to *omit*: V3000 output is
requested with ``OMIT_V2000`` and vice versa.

No I/O happens here; the descriptor is handed to the transport layer.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from reaxys_flatten.algorithm.config import FlattenConfig

if TYPE_CHECKING:
    from reaxys_flatten.protocols import TypeAssociationLookup
    from reaxys_flatten.result import ResultSetMetadata

__all__ = [
    "OPTIONS_OMIT_V2000",
    "OPTIONS_OMIT_V3000",
    "AssociationTable",
    "FromClause",
    "QueryDescriptor",
    "RetrievalQueryBuilder",
]

OPTIONS_OMIT_V2000 = "OMIT_CIT,OMIT_V2000,ISSUE_RXN=true"
OPTIONS_OMIT_V3000 = "OMIT_CIT,OMIT_V3000,ISSUE_RXN=true"


class AssociationTable:
    """Mapping-backed TypeAssociationLookup.

    Args:
        associations: ``{database: {code: [associated codes]}}``.
    """

    def __init__(
        self, associations: Mapping[str, Mapping[str, list[str]]] | None = None
    ) -> None:
        self._associations = {
            database: {code: list(codes) for code, codes in table.items()}
            for database, table in (associations or {}).items()
        }

    def lookup(self, code: str, database: str) -> list[str] | None:
        codes = self._associations.get(database, {}).get(code)
        return list(codes) if codes is not None else None


@dataclass(frozen=True, slots=True)
class FromClause:
    """Target of a retrieval: the hit set and the page window.

    Indices are kept as decimal strings, the form they take on the wire.
    """

    result_name: str
    dbname: str
    first_item: str
    last_item: str


@dataclass(frozen=True, slots=True)
class QueryDescriptor:
    """A retrieval request ready for the transport layer.

    Attributes:
        select_items: Primary selection first, then associated selections.
        from_clause: Hit set and page window.
        options: Fixed options string selecting the structure format.
    """

    select_items: list[str]
    from_clause: FromClause
    options: str
    command: str = "select"

    @property
    def primary(self) -> str:
        return self.select_items[0]

    @property
    def associated(self) -> list[str]:
        return self.select_items[1:]

    def to_element(self) -> ET.Element:
        """Render the descriptor as an ``xf/request`` element tree."""
        root = ET.Element("xf")
        request = ET.SubElement(root, "request")
        ET.SubElement(request, "statement", command=self.command)
        select_list = ET.SubElement(request, "select_list")
        for item in self.select_items:
            ET.SubElement(select_list, "select_item").text = item
        ET.SubElement(
            request,
            "from_clause",
            resultname=self.from_clause.result_name,
            dbname=self.from_clause.dbname,
            first_item=self.from_clause.first_item,
            last_item=self.from_clause.last_item,
        )
        ET.SubElement(request, "options").text = self.options
        return root

    def to_xml(self) -> str:
        return ET.tostring(self.to_element(), encoding="unicode")


class RetrievalQueryBuilder:
    """Builds retrieval descriptors for one hit set.

    Example::

        builder = RetrievalQueryBuilder(metadata, lookup=AssociationTable(
            {"RX": {"DAT": ["IDE"]}}
        ))
        query = builder.build("DAT(1,50)", first=1, last=50, database="RX")
        query.select_items   # ["DAT", "IDE"]
    """

    def __init__(
        self,
        metadata: ResultSetMetadata,
        lookup: TypeAssociationLookup | None = None,
        config: FlattenConfig | None = None,
    ) -> None:
        self._metadata = metadata
        self._lookup = lookup
        self._config = config if config is not None else FlattenConfig()

    def build(
        self,
        value: str | None,
        first: int,
        last: int,
        database: str | None = None,
    ) -> QueryDescriptor:
        """Build the descriptor retrieving ``value`` for items first..last.

        Args:
            value:    Field or fact specifier (``IDE``, ``DAT(1,50)``), or
                      None to send a single empty selection.
            first:    Index of the first item to retrieve.
            last:     Index of the last item to retrieve.
            database: Database whose associations apply.  Defaults to the
                      hit set's database.

        Raises:
            ValueError: If ``last - first`` is not below ``max_window``.  This
                is a caller programming error.
        """
        if last - first >= self._config.max_window:
            msg = (
                f"Retrieval window last - first must be < "
                f"{self._config.max_window}, got {last - first}"
            )
            raise ValueError(msg)

        select_items = self._select_items(
            value, database if database is not None else self._metadata.dbname
        )

        return QueryDescriptor(
            select_items=select_items,
            from_clause=FromClause(
                result_name=self._metadata.result_name,
                dbname=self._metadata.dbname,
                first_item=str(first),
                last_item=str(last),
            ),
            options=OPTIONS_OMIT_V2000 if self._metadata.sd_v3 else OPTIONS_OMIT_V3000,
        )

    def _select_items(self, value: str | None, database: str) -> list[str]:
        if value is None:
            return [""]

        code, paren, args = value.partition("(")
        suffix = paren + args

        primary = code if suffix and self._config.is_top_level(code) else value
        items = [primary]

        associated = self._lookup.lookup(code, database) if self._lookup else None
        for extra in associated or []:
            if self._config.is_top_level(extra):
                items.append(extra)
            else:
                items.append(extra + suffix)
        return items
