"""Lift collections of queries into queries of collections.

combine_list, combine_array and combine_dict turn a collection of queries
into one query yielding the collection of their values. They share one
contract:

- Evaluation follows the collection's canonical order: position order for
  lists and arrays, ascending key order for dicts.
- The first failing query ends evaluation. Its error is the result, and no
  later query is invoked.
- On success the original order (and, for dicts, the original keys) is kept.

traverse_* is exactly combine_* applied to the mapped collection.

Queries are snapshotted when the combined query is built, so mutating the
input collection afterwards does not change the query. Evaluation is a loop,
so long collections do not deepen the call stack.

Example:
    >>> perform(combine_list([succeed(1), succeed(2), succeed(3)]), None)
    Ok([1, 2, 3])
    >>> perform(combine_list([succeed(1), fail("e"), succeed(3)]), None)
    Err('e')
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Callable, Hashable, TypeVar

from dbquery.foundation.errors import Err, Ok, Result

from .query import Query
from .shapes import INDEXED, KEYED, LINEAR, Shape

DB = TypeVar("DB")
E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K", bound=Hashable)


def _gather(shape: Shape[Any, Any, Query[DB, E, A]], queries: Any) -> Query[DB, E, Any]:
    """Build the combined query for one collection shape."""
    entries = tuple(shape.entries(queries))

    def run(db: DB) -> Result[Any, E]:
        done: list[tuple[Any, A]] = []
        for ident, query in entries:
            outcome = query._run(db)
            if outcome.is_err():
                return Err(outcome.unwrap_err())
            done.append((ident, outcome.unwrap()))
        return Ok(shape.rebuild(done))

    return Query(run)


# ─── Combine ─────────────────────────────────────────────────────────────


def combine_list(queries: Iterable[Query[DB, E, A]]) -> Query[DB, E, list[A]]:
    """[Query[A]] → Query[list[A]], evaluated head to tail."""
    return _gather(LINEAR, queries)


def combine_array(queries: Sequence[Query[DB, E, A]]) -> Query[DB, E, tuple[A, ...]]:
    """Array of queries → Query[tuple], evaluated by ascending index."""
    return _gather(INDEXED, queries)


def combine_dict(queries: Mapping[K, Query[DB, E, A]]) -> Query[DB, E, dict[K, A]]:
    """{k: Query[A]} → Query[{k: A}], evaluated by ascending key. Keys are kept as-is."""
    return _gather(KEYED, queries)


# ─── Traverse ────────────────────────────────────────────────────────────


def traverse_list(f: Callable[[A], Query[DB, E, B]], items: Iterable[A]) -> Query[DB, E, list[B]]:
    """combine_list of f mapped over items."""
    return combine_list([f(item) for item in items])


def traverse_array(f: Callable[[A], Query[DB, E, B]], items: Sequence[A]) -> Query[DB, E, tuple[B, ...]]:
    """combine_array of f mapped over items."""
    return combine_array(tuple(f(item) for item in items))


def traverse_dict(f: Callable[[K, A], Query[DB, E, B]], items: Mapping[K, A]) -> Query[DB, E, dict[K, B]]:
    """combine_dict of f(key, value) mapped over items."""
    return combine_dict({key: f(key, value) for key, value in items.items()})
