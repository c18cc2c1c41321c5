"""Generic accessor builders, shared by every collection shape.

Each builder takes a projection ``db -> collection`` and starts from
identity(), so the collection is only reached when the query is performed.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from dbquery.core.adapters import from_maybe
from dbquery.core.query import Query, identity
from dbquery.core.shapes import Shape, first_match

DB = TypeVar("DB")
E = TypeVar("E")
C = TypeVar("C")
I = TypeVar("I")  # noqa: E741
V = TypeVar("V")


def fetch(shape: Shape[C, I, V], error: E, project: Callable[[DB], C], ident: I) -> Query[DB, E, V]:
    """Element stored under ident. Fails with error on a lookup-miss."""
    return identity().and_then(lambda db: from_maybe(error, shape.lookup(project(db), ident)))


def select(shape: Shape[C, I, V], project: Callable[[DB], C], predicate: Callable[[V], bool]) -> Query[DB, Any, Any]:
    """Every element satisfying predicate, in canonical order. Never fails."""
    return identity().map(
        lambda db: shape.collect(value for _, value in shape.entries(project(db)) if predicate(value))
    )


def locate(shape: Shape[C, I, V], error: E, project: Callable[[DB], C],
           predicate: Callable[[V], bool]) -> Query[DB, E, I]:
    """Identifier of the first element satisfying predicate. Fails with error on a predicate-miss."""
    return identity().and_then(lambda db: from_maybe(error, first_match(shape, project(db), predicate)))
