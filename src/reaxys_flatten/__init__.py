"""Reaxys flatten - turns hierarchical Reaxys result trees into flat records."""

from __future__ import annotations

from reaxys_flatten.algorithm.config import FlattenConfig
from reaxys_flatten.algorithm.flattener import FlatRecord, TreeFlattener
from reaxys_flatten.api import build_retrieval_query, flatten_results
from reaxys_flatten.cache import CanonicalizationCache
from reaxys_flatten.categories import Category, DuplicationMode
from reaxys_flatten.query import QueryDescriptor, RetrievalQueryBuilder
from reaxys_flatten.result import ResultSetMetadata
from reaxys_flatten.results import ResultSet

__version__: str = "0.1.0"
__all__: list[str] = [
    "CanonicalizationCache",
    "Category",
    "DuplicationMode",
    "FlatRecord",
    "FlattenConfig",
    "QueryDescriptor",
    "ResultSet",
    "ResultSetMetadata",
    "RetrievalQueryBuilder",
    "TreeFlattener",
    "build_retrieval_query",
    "flatten_results",
]
