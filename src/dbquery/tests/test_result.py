"""Tests for the outcome types: Result and Option.

Validates:
- Functor laws
- Monad laws
- Option projection used by the erased facade
- Structured QueryError payloads
"""

from __future__ import annotations

from typing import Callable

import pytest
from pydantic import ValidationError

from dbquery.foundation.errors import (
    Err,
    ErrorCode,
    Nothing,
    Ok,
    Option,
    QueryError,
    Result,
    Some,
    no_match,
    not_found,
    out_of_range,
)


# ═════════════════════════════════════════════════════════════════════════════
# Result Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    result: Result[int, str] = Ok(42)
    assert result.map(lambda x: x) == result

    err_result: Result[int, str] = Err("fail")
    assert err_result.map(lambda x: x) == err_result


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    result: Result[int, str] = Ok(5)
    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)
    assert Ok(42).and_then(f) == f(42)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    m: Result[int, str] = Ok(42)
    assert m.and_then(Ok) == m


# ═════════════════════════════════════════════════════════════════════════════
# Result Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    """Test Ok variant construction and accessors."""
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 42
    assert result.ok() == 42
    assert result.err() is None


def test_err_construction() -> None:
    """Test Err variant construction and accessors."""
    result: Result[int, str] = Err("failed")

    assert result.is_err()
    assert result.unwrap_err() == "failed"
    assert result.ok() is None
    assert result.err() == "failed"


def test_unwrap_on_err_raises() -> None:
    """unwrap() on Err is a programming error."""
    with pytest.raises(RuntimeError, match="unwrap"):
        Err("boom").unwrap()
    with pytest.raises(RuntimeError, match="expected a user"):
        Err("boom").expect("expected a user")


def test_map_err_only_touches_err() -> None:
    """map_err rewrites Err and leaves Ok alone."""
    assert Err("fail").map_err(lambda e: f"Error: {e}") == Err("Error: fail")
    assert Ok(42).map_err(lambda e: f"Error: {e}") == Ok(42)


def test_or_else() -> None:
    """or_else recovers from Err only."""
    assert Err("fail").or_else(lambda _: Ok(42)) == Ok(42)
    assert Ok(5).or_else(lambda _: Ok(42)) == Ok(5)


def test_match() -> None:
    """Test pattern matching on both variants."""
    assert Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}") == "success: 42"
    assert Err("x").match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}") == "failed: x"


def test_equality_and_repr() -> None:
    """Test structural equality and debug representation."""
    assert Ok(42) == Ok(42)
    assert Ok(42) != Err(42)
    assert Err(None) == Err(None)
    assert repr(Ok("a")) == "Ok('a')"
    assert repr(Err(None)) == "Err(None)"


def test_result_is_a_plain_outcome() -> None:
    """Results compare by value but are neither hashable nor iterable."""
    with pytest.raises(TypeError):
        hash(Ok(1))
    with pytest.raises(TypeError):
        iter(Err("x"))


# ═════════════════════════════════════════════════════════════════════════════
# Option
# ═════════════════════════════════════════════════════════════════════════════


def test_to_option() -> None:
    """Ok projects to Some, any Err projects to Nothing."""
    assert Ok(3).to_option() == Some(3)
    assert Err("x").to_option() is Nothing
    assert Err(None).to_option() is Nothing


def test_some_none_is_not_nothing() -> None:
    """A present None value stays distinguishable from absence."""
    present: Option[None] = Some(None)

    assert present.is_some()
    assert present != Nothing
    assert Nothing.to_optional() is None


def test_option_operations() -> None:
    """map, and_then, unwrap_or and iteration."""
    assert Some(3).map(lambda x: x + 1) == Some(4)
    assert Nothing.map(lambda x: x + 1) is Nothing
    assert Some(3).and_then(lambda x: Nothing) is Nothing
    assert Nothing.unwrap_or(0) == 0
    assert list(Some(1)) == [1]
    assert list(Nothing) == []
    assert repr(Nothing) == "Nothing"

    with pytest.raises(RuntimeError):
        Nothing.unwrap()


# ═════════════════════════════════════════════════════════════════════════════
# QueryError
# ═════════════════════════════════════════════════════════════════════════════


def test_query_error_factories() -> None:
    """Factories set the matching error code."""
    assert not_found("users", 7).code is ErrorCode.NOT_FOUND
    assert out_of_range("heroes", 9).code is ErrorCode.OUT_OF_RANGE
    assert no_match("flags").code is ErrorCode.NO_MATCH
    assert "7" in not_found("users", 7).message


def test_query_error_context_stack() -> None:
    """with_operation pushes contexts without mutating the original."""
    base = QueryError.create("no user 7", ErrorCode.NOT_FOUND)
    wrapped = base.with_operation("load user").with_operation("render profile")

    assert base.contexts == ()
    assert wrapped.contexts == ("load user", "render profile")
    assert wrapped.render() == "[NOT_FOUND] no user 7 (via render profile > load user)"
    assert str(base) == "[NOT_FOUND] no user 7"


def test_query_error_is_frozen_and_validated() -> None:
    """QueryError is immutable and rejects empty messages."""
    err = QueryError.create("boom")
    with pytest.raises(ValidationError):
        err.message = "other"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        QueryError(message="")
