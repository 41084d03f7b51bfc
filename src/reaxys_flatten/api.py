"""Public API functions for reaxys-flatten.

This module provides the two one-shot entry points: flatten_results and
build_retrieval_query.  Each call creates a fresh ResultSet (and therefore a
fresh canonicalization cache) to guarantee zero state carried between calls.
Use ``ResultSet`` directly to share one cache across the pages of a hit set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reaxys_flatten.results import ResultSet
from reaxys_flatten.tree.builder import TreeBuilder

if TYPE_CHECKING:
    from reaxys_flatten.algorithm.config import FlattenConfig
    from reaxys_flatten.algorithm.flattener import FlatRecord
    from reaxys_flatten.protocols import FieldLabelResolver, TypeAssociationLookup
    from reaxys_flatten.query import QueryDescriptor
    from reaxys_flatten.tree.builder import TreeSource

__all__ = ["build_retrieval_query", "flatten_results"]


def flatten_results(
    response: TreeSource,
    labels: FieldLabelResolver | None = None,
    config: FlattenConfig | None = None,
) -> list[FlatRecord]:
    """Flatten a single result tree into flat records.

    Args:
        response: The result tree (ResultNode, ElementTree element, or XML text).
        labels:   Field label resolver.  Defaults to ``FieldLabels()``.
        config:   Flattening constants.  Defaults to ``FlattenConfig()``.

    Returns:
        Flat ``label -> value`` records; empty when the tree has no
        recognisable category.
    """
    tree = TreeBuilder().build(response)
    results = ResultSet.from_response(tree, labels=labels, config=config)
    return results.get_results(tree)


def build_retrieval_query(
    response: TreeSource,
    value: str | None,
    first: int,
    last: int,
    sd_v3: bool = False,
    lookup: TypeAssociationLookup | None = None,
    database: str | None = None,
) -> QueryDescriptor:
    """Build the retrieval query for a page of the hit set ``response`` describes.

    Args:
        response: Response to the search that created the hit set.
        value:    Field or fact specifier, or None for an empty selection.
        first:    Index of the first item to retrieve.
        last:     Index of the last item to retrieve.
        sd_v3:    True to request V3000 structures.
        lookup:   Type association lookup for associated selections.
        database: Database whose associations apply.  Defaults to the hit
                  set's database.

    Raises:
        ValueError: If ``last - first`` is 100 or more.
    """
    results = ResultSet.from_response(response, sd_v3=sd_v3, lookup=lookup)
    return results.retrieve_values(value, first, last, database=database)
