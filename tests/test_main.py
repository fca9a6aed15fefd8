"""Tests for logging configuration and the terminal demo."""

from __future__ import annotations

import pytest
import structlog

from searchpro import main as main_module
from searchpro.config import SearchSettings
from searchpro.logging import configure_logging
from searchpro.ui.render import render_dropdown, render_name
from searchpro.domain.models import Item


def test_configure_logging_outputs_json(capsys):
    configure_logging("INFO")
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    out = capsys.readouterr().out
    assert "unit-test" in out
    assert "foo" in out


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("LOUD")


def test_render_brackets_matches():
    assert render_name("TypeScript Basics", "script") == "Type[Script] Basics"


def test_render_dropdown_hidden():
    items = [Item(id=1, name="React")]
    assert render_dropdown(items, "re", visible=False) == "(no suggestions)"
    assert render_dropdown(items, "re", visible=True) == "  [Re]act"


@pytest.mark.asyncio
async def test_main_types_queries(monkeypatch, capsys):
    settings = SearchSettings(_env_file=None, debounce_delay_ms=20)
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "configure_logging", lambda level: None)

    await main_module.main(["deno", "--interval-ms", "1"])

    out = capsys.readouterr().out
    assert "> deno" in out
    assert "Node.js vs [Deno]" in out
