"""TreeFlattener: turns category records of a result tree into flat records.

Architecture:
- Each element named after the category (``reaction``, ``citation`` ...)
  is one record.  Its first child carrying a top-level tag (RX, IDE, CIT
  ...) is the *main* section; records without one are skipped.
- The main section is parsed into a base record.  Every other child element
  is a sibling section, combined per the DuplicationMode:
    DUPLICATE -> parse into a copy of the base record and emit the copy.
    MERGE     -> parse into the base record itself.
  A main section tagged ``RY`` forces MERGE for that record.
- The base record is emitted when the mode is MERGE or no sibling section
  existed, except that a record with no sibling section is dropped when the
  query asked for facts.

Node parsing walks an element's children recursively.  Leaves become
``label -> value`` fields; citations and repeated sub-field groups (DAT01,
IDE02 ...) are expanded into the same record.  All keys and values pass
through the result set's CanonicalizationCache.

The critical invariant: the merge path writes every sibling into the same
dict object, the duplicate path never touches the base record after it is
built.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reaxys_flatten.algorithm.classify import TagKind, classify_tag, strip_trailing
from reaxys_flatten.algorithm.config import FlattenConfig
from reaxys_flatten.categories import Category, DuplicationMode
from reaxys_flatten.tree.labels import FieldLabels

if TYPE_CHECKING:
    from reaxys_flatten.cache import CanonicalizationCache
    from reaxys_flatten.protocols import FieldLabelResolver
    from reaxys_flatten.tree.nodes import ResultNode

logger = logging.getLogger(__name__)

__all__ = ["FlatRecord", "TreeFlattener"]

FlatRecord = dict[str, str]

# Main-section tag that always merges its siblings
_MERGING_MAIN_TAG = "RY"

# Label fragment of the reaction structure field and the tag whose label
# receives the structure's ``rn`` attribute
_RY_STRUCTURE = "RY.STR"
_REACTION_ID_TAG = "RX.ID"


class TreeFlattener:
    """Flattens classified result trees into lists of flat records.

    Example::

        from reaxys_flatten.algorithm.flattener import TreeFlattener
        from reaxys_flatten.cache import CanonicalizationCache
        from reaxys_flatten.categories import Category
        from reaxys_flatten.tree import TreeBuilder

        tree = TreeBuilder().build(xml_text)
        flattener = TreeFlattener(CanonicalizationCache())
        records = flattener.flatten(tree, Category.REACTION, fact_mode=False)
    """

    def __init__(
        self,
        cache: CanonicalizationCache,
        labels: FieldLabelResolver | None = None,
        config: FlattenConfig | None = None,
    ) -> None:
        """Initialise the flattener.

        Args:
            cache:  Canonicalization cache of the owning result set.  Shared
                by every flatten call against that result set.
            labels: Field label resolver.  Defaults to ``FieldLabels()``.
            config: Flattening constants.  Defaults to ``FlattenConfig()``.
        """
        self._cache = cache
        self._labels: FieldLabelResolver = (
            labels if labels is not None else FieldLabels()
        )
        self._config = config if config is not None else FlattenConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def flatten(
        self,
        tree: ResultNode,
        category: Category,
        fact_mode: bool = False,
    ) -> list[FlatRecord]:
        """Flatten every ``category`` record in ``tree``.

        Args:
            tree:      A fully materialised result tree.  Never mutated.
            category:  The tree's record category.
            fact_mode: True when the originating query asked for facts.

        Returns:
            Flat records in document order.  A DUPLICATE record yields one
            copy of its base per sibling section.
        """
        records: list[FlatRecord] = []
        for item in tree.iter_elements(category.value):
            records.extend(self._flatten_record(item, category.duplication, fact_mode))
        return records

    def parse_node(self, node: ResultNode, record: FlatRecord) -> FlatRecord:
        """Parse the children of ``node`` into ``record`` and return it.

        Child elements without content are skipped, except for reaction
        structures, whose ``rn`` attribute carries data on its own.

        Args:
            node:   Element whose children are parsed.
            record: Target record, augmented in place.

        Returns:
            ``record``, for chaining.
        """
        for child in node.children:
            if not child.is_element:
                continue

            label = self._labels.resolve(child.tag)
            if not child.has_child_nodes() and _RY_STRUCTURE not in label:
                continue

            if classify_tag(child.tag, label) != TagKind.LEAF_FIELD:
                self.parse_node(child, record)
                continue

            value = strip_trailing(child.text_content())
            self._record_field(child, label, value, record)

        return record

    # ------------------------------------------------------------------
    # Record assembly
    # ------------------------------------------------------------------

    def _flatten_record(
        self,
        item: ResultNode,
        mode: DuplicationMode,
        fact_mode: bool,
    ) -> list[FlatRecord]:
        main = self._find_main(item)
        if main is None:
            logger.debug("Skipping %r record without a main section", item.tag)
            return []

        if main.tag == _MERGING_MAIN_TAG:
            mode = DuplicationMode.MERGE

        base = self.parse_node(main, {})
        emitted: list[FlatRecord] = []
        added_more = False

        for child in item.children:
            if not child.is_element or child is main:
                continue
            if mode == DuplicationMode.DUPLICATE:
                emitted.append(self.parse_node(child, dict(base)))
            else:
                self.parse_node(child, base)
            added_more = True

        # No sibling sections while asking for facts: the bare main section
        # is not an answer.
        if (mode == DuplicationMode.MERGE or not added_more) and not (
            not added_more and fact_mode
        ):
            emitted.append(base)
        return emitted

    def _find_main(self, item: ResultNode) -> ResultNode | None:
        """Return the first child element carrying a top-level tag."""
        for child in item.element_children():
            if self._config.is_top_level(child.tag):
                return child
        return None

    def _record_field(
        self,
        element: ResultNode,
        label: str,
        value: str,
        record: FlatRecord,
    ) -> None:
        """Store one leaf field, concatenating repeats of non-registry fields."""
        existing = record.get(label)
        if (
            existing is not None
            and self._config.registry_marker not in label
            and existing != value
        ):
            value = f"{existing}{self._config.multi_value_separator}{value}"

        if _RY_STRUCTURE in label:
            rn = element.get_attribute("rn") or ""
            reaction_id = self._labels.resolve(_REACTION_ID_TAG)
            record[self._cache.canon(reaction_id)] = self._cache.canon(rn)

        record[self._cache.canon(label)] = self._cache.canon(value)
