"""Accessors for random-access arrays.

Same behavior as the sequence accessors in dbquery.accessors.lists for the
same input, except that by_index is O(1) and filtered results are tuples.
Python's negative indexing is not honored: -1 is out of range.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, TypeVar

from dbquery.core.query import Query
from dbquery.core.shapes import INDEXED

from . import base

DB = TypeVar("DB")
E = TypeVar("E")
V = TypeVar("V")


def by_index(error: E, project: Callable[[DB], Sequence[V]], index: int) -> Query[DB, E, V]:
    """Element at a 0-based index; fails with error when index < 0 or >= length."""
    return base.fetch(INDEXED, error, project, index)


def items_where(project: Callable[[DB], Sequence[V]], predicate: Callable[[V], bool]) -> Query[DB, Any, tuple[V, ...]]:
    """Elements satisfying predicate as a tuple, index order kept. Never fails."""
    return base.select(INDEXED, project, predicate)


def index_where(error: E, project: Callable[[DB], Sequence[V]], predicate: Callable[[V], bool]) -> Query[DB, E, int]:
    """Lowest index whose element satisfies predicate; fails with error if none does."""
    return base.locate(INDEXED, error, project, predicate)


__all__ = ["by_index", "items_where", "index_where"]
