"""FlattenConfig: constants governing record flattening and retrieval.

FlattenConfig is a frozen (immutable) dataclass.  The defaults reproduce the
exact separators, markers and tag set downstream consumers parse against;
change them only together with the consumer.
"""

from __future__ import annotations

from dataclasses import dataclass

TOP_LEVEL_TAGS: tuple[str, ...] = (
    "RX",
    "RY",
    "IDE",
    "CIT",
    "DAT",
    "TARGET",
    "SUPL",
    "DATIDS",
)


@dataclass(frozen=True, slots=True)
class FlattenConfig:
    """Immutable configuration for the flattener and query builder.

    Attributes:
        multi_value_separator: Joins repeated values of one field, existing
            value first.  Default ``"|"``.
        citation_separator: Separates journal citations.  Default ``"|"``.
        registry_marker: Fields whose label contains this text are never
            concatenated; the last write wins.
        top_level_tags: Root data-category tags.  The first child of a record
            carrying one of these is the record's main section, and these
            tags drop their count suffix in retrieval queries.
        max_window: Exclusive upper bound on ``last - first`` for one
            retrieval request.
    """

    multi_value_separator: str = "|"
    citation_separator: str = "|"
    registry_marker: str = "Reaxys Registry Number"
    top_level_tags: tuple[str, ...] = TOP_LEVEL_TAGS
    max_window: int = 100

    def __post_init__(self) -> None:
        if not self.multi_value_separator:
            msg = "multi_value_separator must be a non-empty string"
            raise ValueError(msg)
        if not self.citation_separator:
            msg = "citation_separator must be a non-empty string"
            raise ValueError(msg)
        if not self.registry_marker:
            msg = "registry_marker must be a non-empty string"
            raise ValueError(msg)
        if not self.top_level_tags:
            msg = "top_level_tags must name at least one tag"
            raise ValueError(msg)
        if self.max_window <= 0:
            msg = f"max_window must be > 0, got {self.max_window}"
            raise ValueError(msg)

    def is_top_level(self, tag: str) -> bool:
        return tag in self.top_level_tags
