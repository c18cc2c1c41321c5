"""Tests for the Query core and its combinators.

Validates:
- Functor and monad laws on performed results
- Builders (succeed, fail, identity) and perform/map_error
- Evaluation order and short-circuiting of map2..map7 and and_map
- Recovery via or_else
- Source adapters
"""

from __future__ import annotations

from typing import Any, Callable

from dbquery import (
    Err,
    Nothing,
    Ok,
    Query,
    Some,
    and_map,
    and_then,
    fail,
    fmap,
    from_maybe,
    from_optional,
    from_result,
    identity,
    map2,
    map3,
    map4,
    map5,
    map6,
    map7,
    map_error,
    or_else,
    perform,
    succeed,
)
from dbquery.accessors import dicts

DB = {"users": {1: "Batman", 2: "Spiderman"}}
users = lambda db: db["users"]  # noqa: E731
QUERIES: list[Query[Any, str, Any]] = [
    succeed(3),
    fail("nope"),
    identity().map(lambda db: len(db["users"])),
    dicts.by_key("missing", users, 1),
    dicts.by_key("missing", users, 9),
]


# ═════════════════════════════════════════════════════════════════════════════
# Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """perform(map(id, q)) == perform(q)"""
    for q in QUERIES:
        assert perform(q.map(lambda x: x), DB) == perform(q, DB)


def test_functor_composition() -> None:
    """map(g . f) == map(g) . map(f)"""
    f: Callable[[Any], Any] = lambda x: (x, "f")
    g: Callable[[Any], Any] = lambda x: [x, "g"]
    for q in QUERIES:
        assert perform(q.map(lambda x: g(f(x))), DB) == perform(q.map(f).map(g), DB)


def test_fmap_function_form() -> None:
    """fmap(f, q) == q.map(f), and f never runs on failure."""
    for q in QUERIES:
        assert perform(fmap(str, q), DB) == perform(q.map(str), DB)

    calls: list[Any] = []
    assert perform(fmap(calls.append, fail("nope")), DB) == Err("nope")
    assert calls == []


def test_monad_left_identity() -> None:
    """and_then(f, succeed(a)) == f(a)"""
    f = lambda key: dicts.by_key("missing", users, key)  # noqa: E731
    for a in (1, 2, 3):
        assert perform(and_then(f, succeed(a)), DB) == perform(f(a), DB)


def test_monad_right_identity() -> None:
    """and_then(succeed, q) == q"""
    for q in QUERIES:
        assert perform(and_then(succeed, q), DB) == perform(q, DB)


def test_monad_associativity() -> None:
    """(q >>= f) >>= g == q >>= (x -> f x >>= g)"""
    f = lambda x: succeed(x + 1) if x < 5 else fail("too big")  # noqa: E731
    g = lambda x: succeed(x * 2)  # noqa: E731
    for start in (1, 4, 5):
        q = succeed(start)
        assert perform(q.and_then(f).and_then(g), DB) == perform(q.and_then(lambda x: f(x).and_then(g)), DB)


# ═════════════════════════════════════════════════════════════════════════════
# Builders
# ═════════════════════════════════════════════════════════════════════════════


def test_succeed_and_fail_ignore_database() -> None:
    """Constant queries return the same result for any database."""
    for db in (None, DB, {"other": 1}):
        assert perform(succeed("x"), db) == Ok("x")
        assert perform(fail("e"), db) == Err("e")


def test_identity_returns_database() -> None:
    """identity() yields the database itself."""
    assert perform(identity(), DB).unwrap() is DB


def test_query_is_reusable() -> None:
    """Performing the same query twice gives identical results."""
    q = dicts.by_key("missing", users, 2)
    assert perform(q, DB) == perform(q, DB) == Ok("Spiderman")
    assert q.perform({"users": {2: "Robin"}}) == Ok("Robin")


def test_map_error() -> None:
    """map_error rewrites failures only."""
    assert perform(map_error(str.upper, fail("gone")), DB) == Err("GONE")
    assert perform(map_error(str.upper, succeed("kept")), DB) == Ok("kept")


def test_map_error_does_not_rerun(counter) -> None:
    """The inner query runs once per perform."""
    q = map_error(str.upper, counter.query(result=Err("x")))
    perform(q, DB)
    assert counter.calls == 1


# ═════════════════════════════════════════════════════════════════════════════
# Applicative Ordering
# ═════════════════════════════════════════════════════════════════════════════


def test_map2_success() -> None:
    """map2 combines both values."""
    q = map2(lambda a, b: f"{a} & {b}", dicts.by_key("m", users, 1), dicts.by_key("m", users, 2))
    assert perform(q, DB) == Ok("Batman & Spiderman")


def test_map2_short_circuits(counter) -> None:
    """When the first query fails, the second is never invoked."""
    q = map2(lambda a, b: (a, b), fail("first"), counter.query(1))

    assert perform(q, DB) == Err("first")
    assert counter.calls == 0


def test_map2_reports_second_failure(counter) -> None:
    """With a successful first query, the second's failure is returned."""
    q = map2(lambda a, b: (a, b), counter.query(1), fail("second"))

    assert perform(q, DB) == Err("second")
    assert counter.calls == 1


def test_map2_evaluates_left_to_right(order) -> None:
    """The first argument runs before the second."""
    perform(map2(lambda a, b: None, order("a", Ok(1)), order("b", Ok(2))), DB)
    assert order.log == ["a", "b"]


def test_map3_to_map7_results() -> None:
    """Every arity passes arguments in order."""
    qs = [succeed(n) for n in range(1, 8)]
    assert perform(map3(lambda *xs: xs, *qs[:3]), DB) == Ok((1, 2, 3))
    assert perform(map4(lambda *xs: xs, *qs[:4]), DB) == Ok((1, 2, 3, 4))
    assert perform(map5(lambda *xs: xs, *qs[:5]), DB) == Ok((1, 2, 3, 4, 5))
    assert perform(map6(lambda *xs: xs, *qs[:6]), DB) == Ok((1, 2, 3, 4, 5, 6))
    assert perform(map7(lambda *xs: xs, *qs), DB) == Ok((1, 2, 3, 4, 5, 6, 7))


def test_map7_stops_at_first_failure(order) -> None:
    """Arguments run in listed order and evaluation stops at the first failure."""
    qs = [order(name, Ok(name)) for name in "abcdefg"]
    qs[2] = order("c", Err("c failed"))
    qs[4] = order("e", Err("e failed"))

    assert perform(map7(lambda *xs: xs, *qs), DB) == Err("c failed")
    assert order.log == ["a", "b", "c"]


def test_map4_keeps_argument_positions() -> None:
    """Non-commutative combination sees arguments in position."""
    q = map4(lambda a, b, c, d: a - b - c - d, succeed(100), succeed(1), succeed(10), succeed(20))
    assert perform(q, DB) == Ok(69)


def test_and_map_pipeline(order) -> None:
    """and_map applies the function query to each argument, left to right."""
    q = (
        succeed(lambda a: lambda b: a + b)
        .and_map(order("a", Ok(2)))
        .and_map(order("b", Ok(3)))
    )
    assert perform(q, DB) == Ok(5)
    assert order.log == ["a", "b"]


def test_and_map_function_form(counter) -> None:
    """and_map(qa, qf) skips qa when qf fails."""
    q = and_map(counter.query(1), fail("no function"))

    assert perform(q, DB) == Err("no function")
    assert counter.calls == 0


# ═════════════════════════════════════════════════════════════════════════════
# Monad & Recovery
# ═════════════════════════════════════════════════════════════════════════════


def test_and_then_depends_on_previous_value() -> None:
    """Later lookups can use earlier results."""
    db = {"current": 2, "users": {1: "Batman", 2: "Spiderman"}}
    q = identity().map(lambda db: db["current"]).and_then(lambda uid: dicts.by_key("missing", users, uid))
    assert perform(q, db) == Ok("Spiderman")


def test_and_then_propagates_failure(counter) -> None:
    """A failed query never calls the continuation."""
    called: list[object] = []
    q = fail("first").and_then(lambda a: called.append(a) or counter.query(a))

    assert perform(q, DB) == Err("first")
    assert called == []
    assert counter.calls == 0


def test_or_else_sees_error_and_same_database() -> None:
    """Recovery receives the original error and runs against the same database."""
    seen: list[str] = []

    def recover(e: str) -> Query[Any, str, str]:
        seen.append(e)
        return dicts.by_key("still missing", users, 2)

    q = or_else(recover, dicts.by_key("no 9", users, 9))
    assert perform(q, DB) == Ok("Spiderman")
    assert seen == ["no 9"]


def test_or_else_passes_success_through(counter) -> None:
    """A successful query never runs the recovery."""
    q = succeed(1).or_else(lambda e: counter.query(2))
    assert perform(q, DB) == Ok(1)
    assert counter.calls == 0


# ═════════════════════════════════════════════════════════════════════════════
# Source Adapters
# ═════════════════════════════════════════════════════════════════════════════


def test_from_maybe() -> None:
    """Some → success, Nothing → caller's error."""
    assert perform(from_maybe("absent", Some(1)), DB) == Ok(1)
    assert perform(from_maybe("absent", Some(None)), DB) == Ok(None)
    assert perform(from_maybe("absent", Nothing), DB) == Err("absent")


def test_from_result() -> None:
    """The Result's own error is kept."""
    assert perform(from_result(Ok(1)), DB) == Ok(1)
    assert perform(from_result(Err("own")), DB) == Err("own")


def test_from_optional() -> None:
    """Plain None counts as absent."""
    assert perform(from_optional("absent", 0), DB) == Ok(0)
    assert perform(from_optional("absent", None), DB) == Err("absent")
