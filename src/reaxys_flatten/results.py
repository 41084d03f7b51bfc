"""ResultSet: orchestrator that wires metadata, cache, flattener and query builder.

One ResultSet stands for one hit set on the server.  It owns:
- the ResultSetMetadata parsed from the first response,
- a CanonicalizationCache shared by every page flattened through it,
- a TreeFlattener and a RetrievalQueryBuilder bound to both.

Typical cycle (transport is the caller's)::

    results = ResultSet.from_response(first_response)
    for first in range(1, results.size + 1, 100):
        query = results.retrieve_values("IDE", first, min(first + 99, results.size))
        page = fetch(query.to_xml())
        rows.extend(results.get_results(page))

Flattening is synchronous and single-threaded.  A ResultSet must not be
shared between concurrent flatten calls without external locking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reaxys_flatten.algorithm.config import FlattenConfig
from reaxys_flatten.algorithm.flattener import FlatRecord, TreeFlattener
from reaxys_flatten.cache import CanonicalizationCache
from reaxys_flatten.categories import find_facts, find_result_category
from reaxys_flatten.query import QueryDescriptor, RetrievalQueryBuilder
from reaxys_flatten.result import ResultSetMetadata
from reaxys_flatten.tree.builder import TreeBuilder, TreeSource
from reaxys_flatten.tree.labels import FieldLabels

if TYPE_CHECKING:
    from reaxys_flatten.protocols import FieldLabelResolver, TypeAssociationLookup

__all__ = ["ResultSet"]


class ResultSet:
    """A fetched hit set and the state needed to flatten its pages.

    Two ResultSet instances never share a cache, including one built with
    ``from_previous``.

    Example::

        from reaxys_flatten.results import ResultSet

        results = ResultSet.from_response(xml_text)
        records = results.get_results(xml_text)
        print(results.size, len(records))
    """

    def __init__(
        self,
        metadata: ResultSetMetadata,
        labels: FieldLabelResolver | None = None,
        lookup: TypeAssociationLookup | None = None,
        config: FlattenConfig | None = None,
    ) -> None:
        """Initialise the result set.

        Args:
            metadata: Parsed hit set description.
            labels:   Field label resolver.  Defaults to ``FieldLabels()``.
            lookup:   Type association lookup for retrieval queries.  Without
                one, queries carry only the primary selection.
            config:   Flattening constants.  Defaults to ``FlattenConfig()``.
        """
        self._metadata = metadata
        self._labels: FieldLabelResolver = (
            labels if labels is not None else FieldLabels()
        )
        self._lookup = lookup
        self._config = config if config is not None else FlattenConfig()
        self._cache = CanonicalizationCache()
        self._builder = TreeBuilder()
        self._flattener = TreeFlattener(
            self._cache, labels=self._labels, config=self._config
        )
        self._query_builder = RetrievalQueryBuilder(
            metadata, lookup=lookup, config=self._config
        )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_response(
        cls,
        response: TreeSource,
        sd_v3: bool = False,
        labels: FieldLabelResolver | None = None,
        lookup: TypeAssociationLookup | None = None,
        config: FlattenConfig | None = None,
    ) -> ResultSet:
        """Create a result set from the response to a fresh query."""
        tree = TreeBuilder().build(response)
        metadata = ResultSetMetadata.from_tree(tree, sd_v3=sd_v3)
        return cls(metadata, labels=labels, lookup=lookup, config=config)

    @classmethod
    def from_previous(cls, previous: ResultSet, response: TreeSource) -> ResultSet:
        """Create a result set for a page of ``previous``'s hit set.

        The format flag, label resolver, lookup and config carry over; the
        cache starts empty.
        """
        tree = TreeBuilder().build(response)
        metadata = ResultSetMetadata.from_previous(previous.metadata, tree)
        return cls(
            metadata,
            labels=previous._labels,
            lookup=previous._lookup,
            config=previous._config,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def metadata(self) -> ResultSetMetadata:
        return self._metadata

    @property
    def size(self) -> int:
        """Declared number of hits."""
        return self._metadata.size

    @property
    def name(self) -> str:
        return self._metadata.result_name

    @property
    def status(self) -> str:
        return self._metadata.status

    @property
    def dbname(self) -> str:
        return self._metadata.dbname

    @property
    def sd_v3(self) -> bool:
        return self._metadata.sd_v3

    @property
    def cache(self) -> CanonicalizationCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_results(self, response: TreeSource) -> list[FlatRecord]:
        """Flatten one fetched page into flat records.

        Args:
            response: The page, as a ResultNode or anything TreeBuilder accepts.

        Returns:
            Flat records in document order; an empty list when the page has
            no recognisable category.
        """
        tree = self._builder.build(response)
        category = find_result_category(tree)
        if category is None:
            return []
        return self._flattener.flatten(tree, category, fact_mode=find_facts(tree))

    def retrieve_values(
        self,
        value: str | None,
        first: int,
        last: int,
        database: str | None = None,
    ) -> QueryDescriptor:
        """Build the query retrieving ``value`` for items first..last.

        Raises:
            ValueError: If the window is ``max_window`` items or wider.
        """
        return self._query_builder.build(value, first, last, database=database)
