"""Literal, case-insensitive substring matching."""

from __future__ import annotations

from typing import Iterable

from searchpro.domain.models import Item, Segment


def contains_ignore_case(text: str, query: str) -> bool:
    """Return True when ``query`` occurs in ``text`` ignoring case.

    The query is compared character by character, so ``(``, ``*`` or ``\\``
    carry no special meaning.
    """

    return query.lower() in text.lower()


def filter_items(items: Iterable[Item], query: str) -> list[Item]:
    """Keep corpus order, drop items whose name does not contain ``query``."""

    if not query:
        return []
    return [item for item in items if contains_ignore_case(item.name, query)]


def highlight(text: str, query: str) -> list[Segment]:
    """Split ``text`` into matched and unmatched segments for rendering."""

    if not query:
        return [Segment(text=text)] if text else []

    haystack = text.lower()
    needle = query.lower()
    # Lower-casing can change length for a few code points; fall back to a
    # single unmatched segment rather than slicing at wrong offsets.
    if len(haystack) != len(text) or len(needle) != len(query):
        return [Segment(text=text)] if text else []

    segments: list[Segment] = []
    position = 0
    while True:
        found = haystack.find(needle, position)
        if found < 0:
            break
        if found > position:
            segments.append(Segment(text=text[position:found]))
        end = found + len(needle)
        segments.append(Segment(text=text[found:end], matched=True))
        position = end

    if position < len(text):
        segments.append(Segment(text=text[position:]))
    return segments


__all__ = ["contains_ignore_case", "filter_items", "highlight"]
