"""Plain-text rendering of the suggestion dropdown."""

from __future__ import annotations

from typing import Sequence

from searchpro.domain.models import Item
from searchpro.services.matching import highlight


def render_name(name: str, query: str) -> str:
    """Wrap each literal match of ``query`` in square brackets."""

    return "".join(
        f"[{segment.text}]" if segment.matched else segment.text
        for segment in highlight(name, query)
    )


def render_dropdown(results: Sequence[Item], query: str, visible: bool) -> str:
    if not visible or not results:
        return "(no suggestions)"
    return "\n".join(f"  {render_name(item.name, query)}" for item in results)


__all__ = ["render_dropdown", "render_name"]
