"""Literal case-insensitive matching and highlighting."""

from __future__ import annotations

from searchpro.domain.models import Item, Segment
from searchpro.services.matching import contains_ignore_case, filter_items, highlight


def test_contains_ignores_case():
    assert contains_ignore_case("TypeScript Basics", "typescript")
    assert contains_ignore_case("TypeScript Basics", "SCRIPT bas")
    assert not contains_ignore_case("TypeScript Basics", "Typescript Advanced")


def test_pattern_characters_are_literal():
    items = [Item(id=1, name="C++ (advanced)"), Item(id=2, name="Cats")]

    assert filter_items(items, "(") == [items[0]]
    assert filter_items(items, "c++") == [items[0]]
    assert filter_items(items, ".*") == []
    assert filter_items(items, "[") == []
    assert filter_items(items, "\\") == []


def test_filter_keeps_corpus_order():
    items = [Item(id=3, name="Redux Saga"), Item(id=1, name="React"), Item(id=2, name="Vue")]
    assert [item.id for item in filter_items(items, "re")] == [3, 1]


def test_filter_empty_query_returns_nothing():
    assert filter_items([Item(id=1, name="React")], "") == []


def test_highlight_marks_every_match():
    segments = highlight("React vs React Native", "react")

    assert segments == [
        Segment(text="React", matched=True),
        Segment(text=" vs "),
        Segment(text="React", matched=True),
        Segment(text=" Native"),
    ]


def test_highlight_with_special_characters():
    segments = highlight("Node.js (v20)", "(v20)")

    assert segments == [Segment(text="Node.js "), Segment(text="(v20)", matched=True)]


def test_highlight_without_query():
    assert highlight("React", "") == [Segment(text="React")]
    assert highlight("", "") == []
