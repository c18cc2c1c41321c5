"""Error-erased facade: the same query surface with the error fixed to None.

For callers that only care whether a value was found. Queries built here are
ordinary Query objects whose error is always None; perform() projects the
Result to an Option at the boundary:

    Ok(a)    →  Some(a)
    Err(_)   →  Nothing

Accessors live in dbquery.erased.dicts / .lists / .arrays and drop the error
argument of their explicit-error counterparts. There is no map_error here, as
the error type is fixed.

Example:
    >>> from dbquery import erased
    >>> heroes = lambda db: db["heroes"]
    >>> erased.perform(erased.dicts.by_key(heroes, 1), {"heroes": {1: "Batman"}})
    Some('Batman')
    >>> erased.perform(erased.dicts.by_key(heroes, 3), {"heroes": {1: "Batman"}})
    Nothing
"""

from __future__ import annotations

from typing import Any, TypeVar

from dbquery.core import adapters
from dbquery.core.combine import (
    combine_array,
    combine_dict,
    combine_list,
    traverse_array,
    traverse_dict,
    traverse_list,
)
from dbquery.core.query import Query, and_map, and_then, fmap, identity, map2, map3, map4, map5, map6, map7, succeed
from dbquery.core.query import fail as _fail
from dbquery.core.query import perform as _perform
from dbquery.foundation.errors import Option, Result

from . import arrays, dicts, lists

DB = TypeVar("DB")
A = TypeVar("A")


def perform(query: Query[DB, Any, A], db: DB) -> Option[A]:
    """Run query against db, discarding failure detail."""
    return _perform(query, db).to_option()


def fail() -> Query[Any, None, Any]:
    """Constant failure."""
    return _fail(None)


def or_else(fallback: Query[DB, None, A], query: Query[DB, Any, A]) -> Query[DB, None, A]:
    """Run fallback against the same database if query fails."""
    return query.or_else(lambda _: fallback)


def from_maybe(opt: Option[A]) -> Query[Any, None, A]:
    return adapters.from_maybe(None, opt)


def from_optional(value: A | None) -> Query[Any, None, A]:
    return adapters.from_optional(None, value)


def from_result(result: Result[A, Any]) -> Query[Any, None, A]:
    """Lift a Result, dropping its error."""
    return adapters.from_result(result).map_error(lambda _: None)


__all__ = [
    "Query", "perform", "succeed", "fail", "identity",
    "fmap", "and_then", "or_else", "and_map",
    "map2", "map3", "map4", "map5", "map6", "map7",
    "from_maybe", "from_optional", "from_result",
    "combine_list", "combine_array", "combine_dict",
    "traverse_list", "traverse_array", "traverse_dict",
    "dicts", "lists", "arrays",
]
