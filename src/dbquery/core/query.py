"""Query: a reusable, deferred read against a database value.

A Query wraps a single total function ``DB -> Result[A, E]``. Building and
composing queries never touches a database; perform() is the only place a
database is supplied and a Result materializes.

Instances:
- Functor: map (function form: fmap)
- Applicative: map2..map7, and_map
- Monad: and_then
- Error channel: map_error, or_else

map2 and and_then are the only primitives. Every other combinator is derived
from them, so evaluation order (left to right) and short-circuiting (the
first failure wins, later queries never run) hold uniformly.

Example:
    >>> users = identity().map(lambda db: db["users"])
    >>> count = users.map(len)
    >>> perform(count, {"users": {1: "Batman", 2: "Spiderman"}})
    Ok(2)
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Generic, TypeVar

from dbquery.foundation.errors import Err, Ok, Result

DB = TypeVar("DB")  # Database type
E = TypeVar("E")  # Error type
A = TypeVar("A")  # Value type
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
F = TypeVar("F")  # Mapped error type
G = TypeVar("G")
H = TypeVar("H")
R = TypeVar("R")  # Combined result type


class Query(Generic[DB, E, A]):
    """Deferred, read-only computation from a database to a Result.

    Queries are immutable and carry no state beyond their function, so one
    value can be performed any number of times, against any database, from
    any thread.

    Examples:
        >>> succeed(2).map(lambda x: x * 10).perform(db=None)
        Ok(20)
        >>> fail("gone").map(lambda x: x * 10).perform(db=None)
        Err('gone')
        >>> fail("gone").or_else(lambda e: succeed(f"recovered from {e}")).perform(None)
        Ok('recovered from gone')
    """

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[DB], Result[A, E]]) -> None:
        self._run = run

    def perform(self, db: DB) -> Result[A, E]:
        """Run against a concrete database."""
        return self._run(db)

    # ─── Functor ─────────────────────────────────────────────────────

    def map(self, f: Callable[[A], B]) -> Query[DB, E, B]:
        """Apply f to a successful value; failures pass through untouched."""
        run = self._run
        return Query(lambda db: run(db).map(f))

    # ─── Error Channel ───────────────────────────────────────────────

    def map_error(self, f: Callable[[E], F]) -> Query[DB, F, A]:
        """Rewrite the error of a failed query. Ok results are untouched."""
        run = self._run
        return Query(lambda db: run(db).map_err(f))

    def or_else(self, f: Callable[[E], Query[DB, F, A]]) -> Query[DB, F, A]:
        """Recover from failure. f sees the original error; its query runs on the same database."""
        run = self._run
        return Query(lambda db: run(db).or_else(lambda e: f(e)._run(db)))

    # ─── Monad ───────────────────────────────────────────────────────

    def and_then(self, f: Callable[[A], Query[DB, E, B]]) -> Query[DB, E, B]:
        """Monadic bind: the next query may depend on this query's value.

        Type signature: Query[DB,E,A] → (A → Query[DB,E,B]) → Query[DB,E,B]
        """
        run = self._run
        return Query(lambda db: run(db).and_then(lambda a: f(a)._run(db)))

    # ─── Applicative ─────────────────────────────────────────────────

    def and_map(self: Query[DB, E, Callable[[B], C]], qa: Query[DB, E, B]) -> Query[DB, E, C]:
        """Apply the function this query yields to qa's value.

        This query runs first, qa second, so pipelines of and_map evaluate
        their arguments left to right.
        """
        return map2(_apply, self, qa)

    def __repr__(self) -> str:
        return f"Query({getattr(self._run, '__qualname__', self._run)!r})"


# ═══════════════════════════════════════════════════════════════════════════════
# Builders
# ═══════════════════════════════════════════════════════════════════════════════


def perform(query: Query[DB, E, A], db: DB) -> Result[A, E]:
    """Run query against db. The single point where a Result is produced."""
    return query._run(db)


def succeed(value: A) -> Query[Any, Any, A]:
    """Constant success, ignoring the database."""
    result: Result[A, Any] = Ok(value)
    return Query(lambda _db: result)


def fail(error: E) -> Query[Any, E, Any]:
    """Constant failure, ignoring the database."""
    result: Result[Any, E] = Err(error)
    return Query(lambda _db: result)


def identity() -> Query[DB, Any, DB]:
    """The database itself. Every accessor starts here."""
    return Query(Ok)


# ═══════════════════════════════════════════════════════════════════════════════
# Function Forms
# ═══════════════════════════════════════════════════════════════════════════════


def fmap(f: Callable[[A], B], query: Query[DB, E, A]) -> Query[DB, E, B]:
    """Function form of Query.map, named so the builtin map stays usable."""
    return query.map(f)


def map_error(f: Callable[[E], F], query: Query[DB, E, A]) -> Query[DB, F, A]:
    """Function form of Query.map_error."""
    return query.map_error(f)


def and_then(f: Callable[[A], Query[DB, E, B]], query: Query[DB, E, A]) -> Query[DB, E, B]:
    """Function form of Query.and_then."""
    return query.and_then(f)


def or_else(f: Callable[[E], Query[DB, F, A]], query: Query[DB, E, A]) -> Query[DB, F, A]:
    """Function form of Query.or_else."""
    return query.or_else(f)


def and_map(qa: Query[DB, E, A], qf: Query[DB, E, Callable[[A], B]]) -> Query[DB, E, B]:
    """Applicative apply. qf is evaluated before qa."""
    return qf.and_map(qa)


# ═══════════════════════════════════════════════════════════════════════════════
# N-ary Mapping
# ═══════════════════════════════════════════════════════════════════════════════


def map2(f: Callable[[A, B], C], qa: Query[DB, E, A], qb: Query[DB, E, B]) -> Query[DB, E, C]:
    """Combine two queries. qa runs first; if it fails, qb is never invoked.

    Example:
        >>> perform(map2(lambda a, b: a + b, succeed(1), succeed(2)), None)
        Ok(3)
    """
    run_a, run_b = qa._run, qb._run

    def run(db: DB) -> Result[C, E]:
        ra = run_a(db)
        if ra.is_err():
            return Err(ra.unwrap_err())
        rb = run_b(db)
        if rb.is_err():
            return Err(rb.unwrap_err())
        return Ok(f(ra.unwrap(), rb.unwrap()))

    return Query(run)


def _apply(g: Callable[[A], B], a: A) -> B:
    return g(a)


def _lift(f: Callable[..., R], *queries: Query[DB, E, Any]) -> Query[DB, E, R]:
    """Thread queries left to right through map2, partially applying f."""
    acc: Query[DB, E, Callable[..., R]] = succeed(f)
    for q in queries:
        acc = map2(partial, acc, q)
    return acc.map(lambda g: g())


def map3(f: Callable[[A, B, C], R], qa: Query[DB, E, A], qb: Query[DB, E, B],
         qc: Query[DB, E, C]) -> Query[DB, E, R]:
    return _lift(f, qa, qb, qc)


def map4(f: Callable[[A, B, C, D], R], qa: Query[DB, E, A], qb: Query[DB, E, B],
         qc: Query[DB, E, C], qd: Query[DB, E, D]) -> Query[DB, E, R]:
    return _lift(f, qa, qb, qc, qd)


def map5(f: Callable[..., R], qa: Query[DB, E, Any], qb: Query[DB, E, Any], qc: Query[DB, E, Any],
         qd: Query[DB, E, Any], qe: Query[DB, E, Any]) -> Query[DB, E, R]:
    return _lift(f, qa, qb, qc, qd, qe)


def map6(f: Callable[..., R], qa: Query[DB, E, Any], qb: Query[DB, E, Any], qc: Query[DB, E, Any],
         qd: Query[DB, E, Any], qe: Query[DB, E, Any], qf: Query[DB, E, Any]) -> Query[DB, E, R]:
    return _lift(f, qa, qb, qc, qd, qe, qf)


def map7(f: Callable[..., R], qa: Query[DB, E, Any], qb: Query[DB, E, Any], qc: Query[DB, E, Any],
         qd: Query[DB, E, Any], qe: Query[DB, E, Any], qf: Query[DB, E, Any],
         qg: Query[DB, E, Any]) -> Query[DB, E, R]:
    """Combine seven queries; evaluated in argument order, stopping at the first failure."""
    return _lift(f, qa, qb, qc, qd, qe, qf, qg)
