"""Tests for category classification and fact-mode detection."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from reaxys_flatten.categories import (
    Category,
    DuplicationMode,
    find_facts,
    find_result_category,
    is_fact_request,
)
from reaxys_flatten.tree.nodes import ResultNode


class TestCategory:
    def test_has_five_members(self) -> None:
        assert [c.value for c in Category] == [
            "citation",
            "substance",
            "dpitem",
            "reaction",
            "tgitem",
        ]

    @pytest.mark.parametrize("category", list(Category))
    def test_plural_adds_trailing_s(self, category: Category) -> None:
        assert category.plural == category.value + "s"

    @pytest.mark.parametrize(
        ("category", "mode"),
        [
            (Category.CITATION, DuplicationMode.MERGE),
            (Category.DPITEM, DuplicationMode.MERGE),
            (Category.SUBSTANCE, DuplicationMode.DUPLICATE),
            (Category.REACTION, DuplicationMode.DUPLICATE),
            (Category.TGITEM, DuplicationMode.DUPLICATE),
        ],
    )
    def test_duplication_policy(
        self, category: Category, mode: DuplicationMode
    ) -> None:
        assert category.duplication is mode


class TestFromContext:
    @pytest.mark.parametrize(
        ("context", "expected"),
        [
            ("citations", Category.CITATION),
            ("substances", Category.SUBSTANCE),
            ("dpitems", Category.DPITEM),
            ("reactions", Category.REACTION),
            ("tgitems", Category.TGITEM),
        ],
    )
    def test_exact_plural_matches(self, context: str, expected: Category) -> None:
        assert Category.from_context(context) is expected

    @pytest.mark.parametrize(
        "context",
        ["reaction", "Reactions", " reactions", "reactions ", "reactionss", "", "s"],
    )
    def test_non_exact_values_do_not_match(self, context: str) -> None:
        assert Category.from_context(context) is None

    def test_none_context(self) -> None:
        assert Category.from_context(None) is None


class TestFindResultCategory:
    def test_reads_context_marker(self, make_tree: Callable[..., ResultNode]) -> None:
        assert find_result_category(make_tree("reactions")) is Category.REACTION

    def test_missing_context_is_no_category(
        self, make_tree: Callable[..., ResultNode]
    ) -> None:
        assert find_result_category(make_tree(None)) is None

    def test_unknown_context_is_no_category(
        self, make_tree: Callable[..., ResultNode]
    ) -> None:
        assert find_result_category(make_tree("patents")) is None


class TestFactMode:
    def test_parenthesized_specifier_is_fact(self) -> None:
        assert is_fact_request(["IDE", "DAT(1,50)"]) is True

    def test_plain_specifiers_are_not_facts(self) -> None:
        assert is_fact_request(["IDE", "RX", "CIT"]) is False

    def test_empty_selection(self) -> None:
        assert is_fact_request([]) is False

    def test_none_entries_ignored(self) -> None:
        assert is_fact_request([None, "RX"]) is False

    def test_find_facts_reads_select_items(
        self, make_tree: Callable[..., ResultNode]
    ) -> None:
        tree = make_tree("reactions", select_items=["RX", "RXD(1,10)"])
        assert find_facts(tree) is True

    def test_find_facts_without_facts(
        self, make_tree: Callable[..., ResultNode]
    ) -> None:
        tree = make_tree("reactions", select_items=["RX"])
        assert find_facts(tree) is False

    def test_find_facts_without_select_list(
        self, make_tree: Callable[..., ResultNode]
    ) -> None:
        assert find_facts(make_tree("reactions")) is False
