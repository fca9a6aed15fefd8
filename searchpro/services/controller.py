"""Debounced search pipeline driving the suggestion dropdown."""

from __future__ import annotations

from typing import Callable, Sequence

from searchpro.config import SearchSettings, get_settings
from searchpro.domain.models import Item, ResolveStats, SuggestionState
from searchpro.logging import logger
from searchpro.services.corpus import load_corpus
from searchpro.services.matching import filter_items
from searchpro.services.result_cache import ResultCache
from searchpro.utils.timers import LoopScheduler, Scheduler, TimerHandle

ResultsListener = Callable[[tuple[Item, ...], bool], None]
SelectionListener = Callable[[Item], None]

DEFAULT_DEBOUNCE_DELAY = 0.3


class DebouncedSearchController:
    """Turns keystrokes into at most one filter run per settled burst.

    Every ``on_query_changed`` call cancels the pending timer (there is never
    more than one) and arms a new one for the latest text. When a timer
    expires the query it was armed with is resolved against the cache, or the
    corpus on a miss, and the listener receives the new results and whether
    the dropdown should be shown.
    """

    def __init__(
        self,
        corpus: Sequence[Item],
        *,
        cache: ResultCache | None = None,
        debounce_delay: float = DEFAULT_DEBOUNCE_DELAY,
        scheduler: Scheduler | None = None,
        on_results_changed: ResultsListener | None = None,
        on_item_selected: SelectionListener | None = None,
    ) -> None:
        if debounce_delay < 0:
            raise ValueError(f"Debounce delay cannot be negative, got {debounce_delay}.")
        self.corpus = corpus
        self.cache = cache if cache is not None else ResultCache()
        self.debounce_delay = debounce_delay
        self.scheduler: Scheduler = scheduler or LoopScheduler()
        self.on_results_changed = on_results_changed
        self.on_item_selected = on_item_selected
        self.stats = ResolveStats()

        self._input_value = ""
        self._results: tuple[Item, ...] = ()
        self._visible = False
        self._pending: TimerHandle | None = None
        self._pending_query: str | None = None
        self._generation = 0
        self._closed = False
        self._in_timer = False

    @classmethod
    def from_settings(
        cls,
        settings: SearchSettings | None = None,
        *,
        corpus: Sequence[Item] | None = None,
        **kwargs,
    ) -> "DebouncedSearchController":
        settings = settings or get_settings()
        if corpus is None:
            corpus = load_corpus(settings.corpus_path)
        return cls(
            corpus,
            cache=ResultCache(settings.cache_capacity),
            debounce_delay=settings.debounce_delay,
            **kwargs,
        )

    @property
    def input_value(self) -> str:
        return self._input_value

    @property
    def results(self) -> tuple[Item, ...]:
        return self._results

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> SuggestionState:
        return SuggestionState(
            query=self._input_value,
            results=self._results,
            visible=self._visible,
            pending=self.pending,
        )

    # ---------- input events ----------
    def on_query_changed(self, text: str) -> None:
        """Record the typed text and restart the debounce timer."""

        if self._closed:
            logger.warning("search_event_after_close", action="query_changed")
            return
        self._input_value = text
        self._arm(text)

    def select_item(self, item: Item) -> None:
        """Accept a suggestion; supersedes any search still waiting."""

        if self._closed:
            logger.warning("search_event_after_close", action="select_item")
            return
        self._cancel()
        self._input_value = item.name
        self._apply((), False)
        if self.on_item_selected is not None:
            self.on_item_selected(item)

    def on_focus(self) -> None:
        """Show the last results again without recomputing them."""

        if self._closed:
            return
        if self._results:
            self._apply(self._results, True)

    def dismiss(self) -> None:
        """Hide the dropdown and keep the results for the next focus."""

        if self._closed:
            return
        self._apply(self._results, False)

    def flush(self) -> bool:
        """Resolve the pending query now. Returns False if nothing was pending."""

        handle = self._pending
        query = self._pending_query
        if handle is None or query is None:
            return False
        handle.cancel()
        self._pending = None
        self._pending_query = None
        self.resolve(query)
        return True

    def close(self) -> None:
        """Cancel the pending timer and stop accepting events."""

        self._cancel()
        self._closed = True

    async def __aenter__(self) -> "DebouncedSearchController":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---------- resolution ----------
    def resolve(self, query: str) -> tuple[Item, ...]:
        """Compute results for ``query`` and publish them."""

        self.stats.resolutions += 1
        if not query:
            self._apply((), False)
            return ()

        results = self.cache.lookup(query)
        if results is not None:
            self.stats.cache_hits += 1
        else:
            self.stats.cache_misses += 1
            results = self.cache.insert(query, filter_items(self.corpus, query))

        logger.debug(
            "search_resolved",
            query=query,
            results=len(results),
            cache_size=len(self.cache),
        )
        self._apply(results, bool(results))
        return results

    # ---------- timer state ----------
    def _arm(self, query: str) -> None:
        self._cancel()
        self._generation += 1
        generation = self._generation
        self._pending = self.scheduler.call_later(
            self.debounce_delay, lambda: self._on_timer(generation, query)
        )
        self._pending_query = query

    def _cancel(self) -> bool:
        handle = self._pending
        self._pending = None
        self._pending_query = None
        if handle is None:
            return False
        handle.cancel()
        self.stats.cancelled_timers += 1
        return True

    def _on_timer(self, generation: int, query: str) -> None:
        if generation != self._generation or self._pending is None:
            # A cancelled handle fired anyway; its query is stale.
            logger.debug("search_stale_timer_ignored", query=query)
            return
        self._pending = None
        self._pending_query = None
        self._in_timer = True
        try:
            self.resolve(query)
        finally:
            self._in_timer = False

    def _apply(self, results: tuple[Item, ...], visible: bool) -> None:
        changed = results != self._results or visible != self._visible
        self._results = results
        self._visible = visible
        if not changed or self.on_results_changed is None:
            return
        if not self._in_timer:
            self.on_results_changed(results, visible)
            return
        # Nobody awaits a timer callback; a failing listener is reported here.
        try:
            self.on_results_changed(results, visible)
        except Exception:
            logger.exception("search_listener_failed", query=self._input_value)


__all__ = ["DEFAULT_DEBOUNCE_DELAY", "DebouncedSearchController"]
