"""Accessors for linear sequences.

The projected collection only needs to be re-iterable: lists, deques, linked
structures implementing __iter__. Positional lookup walks from the head.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable, TypeVar

from dbquery.core.query import Query
from dbquery.core.shapes import LINEAR

from . import base

DB = TypeVar("DB")
E = TypeVar("E")
V = TypeVar("V")


def by_index(error: E, project: Callable[[DB], Iterable[V]], index: int) -> Query[DB, E, V]:
    """Element at a 0-based index, found by walking; fails with error when index < 0 or >= length."""
    return base.fetch(LINEAR, error, project, index)


def items_where(project: Callable[[DB], Iterable[V]], predicate: Callable[[V], bool]) -> Query[DB, Any, list[V]]:
    """Elements satisfying predicate, original order kept. Never fails."""
    return base.select(LINEAR, project, predicate)


def index_where(error: E, project: Callable[[DB], Iterable[V]], predicate: Callable[[V], bool]) -> Query[DB, E, int]:
    """First 0-based index whose element satisfies predicate; fails with error if none does."""
    return base.locate(LINEAR, error, project, predicate)


__all__ = ["by_index", "items_where", "index_where"]
