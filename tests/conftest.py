"""Shared fixtures: builders for Reaxys-style response documents.

Responses follow the shape the server returns for a retrieval: a ``result``
header (status, hit set name, size, database, context), the echoed request
``select_list``, and the category records.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from reaxys_flatten.tree.builder import TreeBuilder
from reaxys_flatten.tree.nodes import ResultNode

ResponseFactory = Callable[..., str]


def build_response(
    context: str | None,
    body: str = "",
    select_items: Sequence[str] = (),
    resultname: str = "H001",
    dbname: str = "RX",
    resultsize: str = "2",
    status: str = "OK",
) -> str:
    """Return a response document as XML text."""
    header = [f"<status>{status}</status>", f"<resultname>{resultname}</resultname>"]
    header.append(f"<resultsize>{resultsize}</resultsize>")
    if dbname:
        header.append(f"<dbname>{dbname}</dbname>")
    if context is not None:
        header.append(f"<context>{context}</context>")
    selects = "".join(f"<select_item>{item}</select_item>" for item in select_items)
    return (
        "<xf><response>"
        f"<request><select_list>{selects}</select_list></request>"
        f"<result>{''.join(header)}</result>"
        f"<{context or 'none'}>{body}</{context or 'none'}>"
        "</response></xf>"
    )


@pytest.fixture
def make_response() -> ResponseFactory:
    """Factory producing response XML text (see ``build_response``)."""
    return build_response


@pytest.fixture
def make_tree() -> Callable[..., ResultNode]:
    """Factory producing parsed response trees (same arguments as make_response)."""
    builder = TreeBuilder()

    def _make(*args: object, **kwargs: object) -> ResultNode:
        return builder.build(build_response(*args, **kwargs))  # type: ignore[arg-type]

    return _make
