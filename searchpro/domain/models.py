"""Pydantic models shared by the cache, controller and presentation layers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class CacheEntry(BaseModel):
    """Results computed for one exact query string."""

    model_config = ConfigDict(frozen=True)

    query: str
    results: tuple[Item, ...] = ()


class SuggestionState(BaseModel):
    """Snapshot of what the dropdown should currently show."""

    model_config = ConfigDict(frozen=True)

    query: str = ""
    results: tuple[Item, ...] = ()
    visible: bool = False
    pending: bool = False


class Segment(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    matched: bool = False


class ResolveStats(BaseModel):
    resolutions: int = Field(default=0, ge=0)
    cache_hits: int = Field(default=0, ge=0)
    cache_misses: int = Field(default=0, ge=0)
    cancelled_timers: int = Field(default=0, ge=0)


__all__ = [
    "CacheEntry",
    "Item",
    "ResolveStats",
    "Segment",
    "SuggestionState",
]
