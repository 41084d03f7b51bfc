"""Collaborator Protocols for reaxys-flatten extension points.

Defines the structural interfaces of the two external collaborators the
core consumes.  Callers can plug in their own implementations without
inheriting from any base class.

Example::

    from reaxys_flatten.protocols import FieldLabelResolver

    class UpperLabels:
        def resolve(self, tag: str) -> str:
            return tag.upper()

    assert isinstance(UpperLabels(), FieldLabelResolver)  # True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FieldLabelResolver(Protocol):
    """Maps raw tag names to field labels.

    The ``resolve`` method must be deterministic and total: every tag maps
    to some label, unrecognised tags included.
    """

    def resolve(self, tag: str) -> str: ...


@runtime_checkable
class TypeAssociationLookup(Protocol):
    """Maps a field code to the database-specific codes retrieved with it.

    ``lookup`` returns ``None`` when the code is unknown for ``database``.
    """

    def lookup(self, code: str, database: str) -> list[str] | None: ...
