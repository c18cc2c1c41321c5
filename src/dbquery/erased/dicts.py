"""Keyed-collection accessors without an error argument."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Callable, TypeVar

from dbquery.accessors import dicts as explicit
from dbquery.core.query import Query

DB = TypeVar("DB")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def by_key(project: Callable[[DB], Mapping[K, V]], key: K) -> Query[DB, None, V]:
    return explicit.by_key(None, project, key)


def key_where(project: Callable[[DB], Mapping[K, V]], predicate: Callable[[V], bool]) -> Query[DB, None, K]:
    """Lowest key whose value satisfies predicate."""
    return explicit.key_where(None, project, predicate)


values_where = explicit.values_where

__all__ = ["by_key", "key_where", "values_where"]
