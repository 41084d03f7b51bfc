"""algorithm subpackage: public API for record flattening.

Provides the tree flattener, its configuration, and the tag classification
it relies on.  Import from this module (not from sub-modules directly) to
stay on the stable public interface.

Example::

    from reaxys_flatten.algorithm import FlattenConfig, TreeFlattener
    from reaxys_flatten.cache import CanonicalizationCache

    flattener = TreeFlattener(CanonicalizationCache(), config=FlattenConfig())
"""

from __future__ import annotations

from reaxys_flatten.algorithm.classify import TagKind, classify_tag, strip_trailing
from reaxys_flatten.algorithm.config import TOP_LEVEL_TAGS, FlattenConfig
from reaxys_flatten.algorithm.flattener import FlatRecord, TreeFlattener

__all__ = [
    "TOP_LEVEL_TAGS",
    "FlatRecord",
    "FlattenConfig",
    "TagKind",
    "TreeFlattener",
    "classify_tag",
    "strip_trailing",
]
