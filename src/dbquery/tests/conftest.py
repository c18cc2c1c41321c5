"""Shared fixtures for dbquery tests."""

from __future__ import annotations

import os
from typing import Any, Callable

import pytest

from dbquery import Query, clear_settings_cache
from dbquery.foundation.errors import Ok, Result
from dbquery.observability import NoOpRenderer, set_renderer


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate every test from DBQUERY_* environment and cached settings."""
    for key in list(os.environ):
        if key.startswith("DBQUERY_"):
            monkeypatch.delenv(key)
    clear_settings_cache()
    set_renderer(NoOpRenderer())
    yield
    clear_settings_cache()


@pytest.fixture
def db() -> dict[str, Any]:
    """A small normalized application state."""
    return {
        "users": {1: "Batman", 2: "Spiderman"},
        "heroes": ["Batman", "Spiderman"],
        "flags": {5: True, 2: True, 9: False},
        "scores": (10, 25, 7, 25),
    }


class Counter:
    """Query factory that records how many times its query was performed."""

    def __init__(self) -> None:
        self.calls = 0

    def query(self, value: Any = None, result: Result[Any, Any] | None = None) -> Query[Any, Any, Any]:
        def run(_db: Any) -> Result[Any, Any]:
            self.calls += 1
            return result if result is not None else Ok(value)
        return Query(run)


@pytest.fixture
def counter() -> Counter:
    return Counter()


@pytest.fixture
def order() -> Callable[[str, Any], Query[Any, Any, Any]]:
    """Query factory appending its name to a shared log when performed; the log is attached as .log."""
    log: list[str] = []

    def make(name: str, result: Result[Any, Any]) -> Query[Any, Any, Any]:
        def run(_db: Any) -> Result[Any, Any]:
            log.append(name)
            return result
        return Query(run)

    make.log = log  # type: ignore[attr-defined]
    return make
