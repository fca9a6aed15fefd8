"""Read-only item collection searched by the controller."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from pydantic import TypeAdapter, ValidationError

from searchpro.domain.models import Item
from searchpro.logging import logger
from searchpro.services.exceptions import CorpusError
from searchpro.services.seeds import default_items

_ITEM_LIST = TypeAdapter(list[Item])


class Corpus(Sequence[Item]):
    """Immutable ordered items with unique ids."""

    def __init__(self, items: Iterable[Item]) -> None:
        self._items = tuple(items)
        seen: set[int] = set()
        for item in self._items:
            if item.id in seen:
                raise CorpusError(f"Duplicate item id in corpus: {item.id}.")
            seen.add(item.id)

    @classmethod
    def default(cls) -> "Corpus":
        return cls(default_items())

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)


def load_corpus(path: Path | str | None = None) -> Corpus:
    """Load a corpus from a JSON list of ``{id, name}`` objects.

    Without a path the built-in catalogue is returned.
    """

    if path is None:
        return Corpus.default()

    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        items = _ITEM_LIST.validate_python(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise CorpusError(f"Cannot load corpus from {path}: {exc}") from exc

    corpus = Corpus(items)
    logger.info("corpus_loaded", path=str(path), items=len(corpus))
    return corpus


__all__ = ["Corpus", "load_corpus"]
