"""Terminal demo: type queries into the widget and print the dropdown."""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from searchpro.config import get_settings
from searchpro.logging import configure_logging, logger
from searchpro.services.controller import DebouncedSearchController
from searchpro.ui.render import render_dropdown


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="searchpro",
        description="Simulate typing into the search box and show suggestions.",
    )
    parser.add_argument("queries", nargs="+", help="Text typed one character at a time.")
    parser.add_argument(
        "--interval-ms",
        type=int,
        default=50,
        help="Delay between simulated keystrokes (default: 50).",
    )
    return parser


async def type_query(
    controller: DebouncedSearchController, text: str, interval: float
) -> None:
    for end in range(1, len(text) + 1):
        controller.on_query_changed(text[:end])
        await asyncio.sleep(interval)
    # Let the debounce window close before reading the results.
    await asyncio.sleep(controller.debounce_delay + interval)


async def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    def show(results, visible) -> None:
        print(f"> {controller.input_value}")
        print(render_dropdown(results, controller.input_value, visible))

    controller = DebouncedSearchController.from_settings(settings, on_results_changed=show)
    logger.info(
        "searchpro_starting",
        environment=settings.environment,
        corpus=len(controller.corpus),
        debounce_ms=settings.debounce_delay_ms,
    )
    async with controller:
        for query in args.queries:
            await type_query(controller, query, args.interval_ms / 1000)

    logger.info("searchpro_finished", **controller.stats.model_dump())


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
