"""Structured error payloads for queries.

Queries accept any value as their error type. QueryError is the ready-made
choice: a frozen pydantic model carrying a machine-readable code, a message
and the stack of operations the failure propagated through.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(StrEnum):
    """Standard codes for query failures."""
    NOT_FOUND = "NOT_FOUND"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    NO_MATCH = "NO_MATCH"
    INVALID = "INVALID"
    UNKNOWN = "UNKNOWN"


class QueryError(BaseModel):
    """Structured failure for a query.

    Immutable: with_operation() returns a new error with the operation pushed
    onto the context stack, which pairs naturally with Query.map_error.

    Example:
        >>> err = QueryError.create("no user 7", ErrorCode.NOT_FOUND)
        >>> err.with_operation("load profile").render()
        '[NOT_FOUND] no user 7 (via load profile)'
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid")

    message: Annotated[str, Field(min_length=1)]
    code: ErrorCode = Field(default=ErrorCode.UNKNOWN, description="Machine-readable error code")
    contexts: tuple[str, ...] = Field(default=(), description="Operations the failure passed through, innermost first")
    details: str | None = Field(default=None, repr=False)

    @classmethod
    def create(cls, message: str, code: ErrorCode = ErrorCode.UNKNOWN, *, details: str | None = None) -> Self:
        """Factory method for cleaner construction."""
        return cls(message=message, code=code, details=details)

    def with_operation(self, operation: str) -> QueryError:
        """Push an operation name onto the context stack."""
        return self.model_copy(update={"contexts": (*self.contexts, operation)})

    def render(self) -> str:
        """Format as a single human-readable line."""
        via = f" (via {' > '.join(reversed(self.contexts))})" if self.contexts else ""
        return f"[{self.code}] {self.message}{via}"

    def __str__(self) -> str:
        return self.render()


# ─── Factories for the failures the accessors report ──────────────────────


def not_found(what: str, key: object) -> QueryError:
    """Lookup-miss on a keyed collection."""
    return QueryError.create(f"{what}: no entry for key {key!r}", ErrorCode.NOT_FOUND)


def out_of_range(what: str, index: int) -> QueryError:
    """Lookup-miss on a positional collection."""
    return QueryError.create(f"{what}: index {index} out of range", ErrorCode.OUT_OF_RANGE)


def no_match(what: str) -> QueryError:
    """Predicate-miss: nothing satisfied the scan."""
    return QueryError.create(f"{what}: no element matched", ErrorCode.NO_MATCH)
