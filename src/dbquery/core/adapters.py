"""Lift values that already exist outside a query into one."""

from __future__ import annotations

from typing import Any, TypeVar

from dbquery.foundation.errors import Option, Result

from .query import Query, fail, succeed

A = TypeVar("A")
E = TypeVar("E")


def from_maybe(error: E, opt: Option[A]) -> Query[Any, E, A]:
    """Some(a) → succeed(a); Nothing → fail(error)."""
    return succeed(opt.unwrap()) if opt.is_some() else fail(error)


def from_result(result: Result[A, E]) -> Query[Any, E, A]:
    """Ok(a) → succeed(a); Err(x) → fail(x). The error is the Result's own."""
    return succeed(result.unwrap()) if result.is_ok() else fail(result.unwrap_err())


def from_optional(error: E, value: A | None) -> Query[Any, E, A]:
    """Like from_maybe for plain Python optionals: None counts as absent."""
    return fail(error) if value is None else succeed(value)
