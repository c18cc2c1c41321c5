"""Sequence accessors without an error argument."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Callable, TypeVar

from dbquery.accessors import lists as explicit
from dbquery.core.query import Query

DB = TypeVar("DB")
V = TypeVar("V")


def by_index(project: Callable[[DB], Iterable[V]], index: int) -> Query[DB, None, V]:
    return explicit.by_index(None, project, index)


def index_where(project: Callable[[DB], Iterable[V]], predicate: Callable[[V], bool]) -> Query[DB, None, int]:
    return explicit.index_where(None, project, predicate)


items_where = explicit.items_where

__all__ = ["by_index", "items_where", "index_where"]
