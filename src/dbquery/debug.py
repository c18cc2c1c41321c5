"""Debug tracing: observe a query's outcome without changing it.

debug(sink, tag, query) performs query, hands (tag, result) to sink once, and
returns the result exactly as the query produced it. Whatever the sink
returns is ignored. An exception raised by the sink is logged and the result
is still returned, so tracing never makes a query fail.

Set DBQUERY_DEBUG_ENABLED=false to make debug() return the query itself,
which removes tracing from hot paths without touching call sites.

Example:
    >>> from dbquery import debug, log_sink, perform, succeed
    >>> traced = debug(log_sink(), "answer", succeed(42))
    >>> perform(traced, db=None)  # logs: [debug] query performed tag="answer" outcome="ok" value="42"
    Ok(42)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeAlias, TypeVar

from dbquery.core.query import Query
from dbquery.foundation.config import get_settings
from dbquery.foundation.errors import Result
from dbquery.observability import BoundLogger, get_logger

DB = TypeVar("DB")
E = TypeVar("E")
A = TypeVar("A")

Sink: TypeAlias = Callable[[str, Result[Any, Any]], object]


def debug(sink: Sink, tag: str, query: Query[DB, E, A]) -> Query[DB, E, A]:
    """Wrap query so each perform reports its result to sink under tag."""
    if not get_settings().debug.enabled:
        return query
    run = query._run

    def traced(db: DB) -> Result[A, E]:
        result = run(db)
        try:
            sink(tag, result)
        except Exception:
            get_logger("dbquery.debug").exception("debug sink raised", tag=tag)
        return result

    return Query(traced)


def log_sink(
    log: BoundLogger | None = None,
    *,
    level: str | None = None,
    max_value_length: int | None = None,
) -> Sink:
    """Sink writing one structured log entry per traced perform.

    Entries go to the renderer installed by configure_logging or set_renderer.
    Worker threads without their own configuration use that same renderer.

    Args:
        log: Logger to write to (defaults to the "dbquery.debug" logger)
        level: Log level name (defaults to DBQUERY_DEBUG_LEVEL)
        max_value_length: Truncate the value's repr (defaults to DBQUERY_DEBUG_MAX_VALUE_LENGTH)
    """
    settings = get_settings().debug
    target = log or get_logger("dbquery.debug")
    levelno = getattr(logging, (level or settings.level).upper(), logging.DEBUG)
    limit = max_value_length or settings.max_value_length

    def sink(tag: str, result: Result[Any, Any]) -> None:
        value = result.match(ok=repr, err=repr)
        if len(value) > limit:
            value = value[:limit] + "..."
        target.log(levelno, "query performed", tag=tag, outcome="ok" if result.is_ok() else "err", value=value)

    return sink
