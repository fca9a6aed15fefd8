"""Shared pytest fixtures for cache and controller tests."""

from __future__ import annotations

from typing import Callable

import pytest

from searchpro.domain.models import Item
from searchpro.services.controller import DebouncedSearchController
from searchpro.services.corpus import Corpus
from searchpro.services.result_cache import ResultCache


class _ManualHandle:
    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual clock; callbacks run only when ``advance`` passes their due time."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: list[_ManualHandle] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> _ManualHandle:
        handle = _ManualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self) -> list[_ManualHandle]:
        return [h for h in self.handles if not h.cancelled and h.due > self.now]

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            ready = [h for h in self.handles if not h.cancelled and h.due <= target]
            if not ready:
                break
            handle = min(ready, key=lambda h: h.due)
            self.handles.remove(handle)
            self.now = handle.due
            handle.callback()
        self.now = target


class Recorder:
    def __init__(self) -> None:
        self.emitted: list[tuple[tuple[Item, ...], bool]] = []
        self.selected: list[Item] = []

    def results(self, results, visible) -> None:
        self.emitted.append((results, visible))

    def selection(self, item) -> None:
        self.selected.append(item)


@pytest.fixture
def corpus() -> Corpus:
    return Corpus.default()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def controller(corpus, scheduler, recorder) -> DebouncedSearchController:
    return DebouncedSearchController(
        corpus,
        cache=ResultCache(10),
        debounce_delay=0.3,
        scheduler=scheduler,
        on_results_changed=recorder.results,
        on_item_selected=recorder.selection,
    )
