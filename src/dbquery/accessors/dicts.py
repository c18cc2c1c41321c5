"""Accessors for keyed collections (mappings).

Scans run in ascending key order, whatever order the mapping was built in.
When several keys satisfy a predicate, the lowest one wins.

Example:
    >>> from dbquery import perform
    >>> heroes = lambda db: db["heroes"]
    >>> db = {"heroes": {5: "Flash", 2: "Batman", 9: "Robin"}}
    >>> perform(by_key("missing", heroes, 2), db)
    Ok('Batman')
    >>> perform(key_where("none", heroes, lambda name: len(name) == 5), db)
    Ok(5)
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, Callable, TypeVar

from dbquery.core.query import Query
from dbquery.core.shapes import KEYED

from . import base

DB = TypeVar("DB")
E = TypeVar("E")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def by_key(error: E, project: Callable[[DB], Mapping[K, V]], key: K) -> Query[DB, E, V]:
    """Value stored under key; fails with error if the key is absent."""
    return base.fetch(KEYED, error, project, key)


def key_where(error: E, project: Callable[[DB], Mapping[K, V]], predicate: Callable[[V], bool]) -> Query[DB, E, K]:
    """Lowest key whose value satisfies predicate; fails with error if none does."""
    return base.locate(KEYED, error, project, predicate)


def values_where(project: Callable[[DB], Mapping[K, V]], predicate: Callable[[V], bool]) -> Query[DB, Any, list[V]]:
    """Values satisfying predicate, in ascending key order. Never fails."""
    return base.select(KEYED, project, predicate)


__all__ = ["by_key", "key_where", "values_where"]
