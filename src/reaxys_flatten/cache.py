"""CanonicalizationCache: collapses equal strings onto one shared instance.

Large result sets repeat the same field labels on every record and often
the same values too (author lists, journal titles, solvents).  Routing each
key and value through ``canon()`` makes every equal string in the output
refer to a single object, so memory grows with the number of distinct
strings rather than with the number of records.

The cache never evicts.  It is backed by a ``cachetools.Cache`` with an
unbounded ``maxsize``; its lifetime is that of the owning ``ResultSet``.
Each instance has its own storage, so two result sets never share entries.

Example::

    from reaxys_flatten.cache import CanonicalizationCache

    cache = CanonicalizationCache()
    a = cache.canon("".join(["Tetra", "hedron"]))
    b = cache.canon("".join(["Tetrahe", "dron"]))
    assert a is b
"""

from __future__ import annotations

import math

from cachetools import Cache


class CanonicalizationCache:
    """Maps string content to a single canonical instance.

    Not safe for concurrent mutation: one cache belongs to one result set and
    is used by one sequential flatten-then-consume cycle at a time.
    """

    def __init__(self) -> None:
        self._cache: Cache[str, str] = Cache(maxsize=math.inf)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def curr_size(self) -> int:
        """The number of distinct strings stored."""
        return len(self._cache)

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, value: object) -> bool:
        return value in self._cache

    # ------------------------------------------------------------------
    # Canonicalization
    # ------------------------------------------------------------------

    def canon(self, value: str) -> str:
        """Return the stored instance equal to ``value``, storing it if new.

        Args:
            value: Any string.

        Returns:
            ``value`` itself on first sight; afterwards the instance that was
            stored first for equal content.
        """
        cached = self._cache.get(value)
        if cached is not None:
            return cached
        self._cache[value] = value
        return value
