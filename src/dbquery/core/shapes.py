"""Collection shapes: the capabilities the generic accessors need.

A shape tells the accessors how to look an identifier up, how to walk a
collection in its canonical order, and how to package results. Three shapes
cover the supported containers:

    KEYED    Mapping, walked in ascending key order; identifiers are keys
    LINEAR   re-iterable sequence, walked head to tail; lookup is O(i)
    INDEXED  random-access Sequence; lookup is O(1)

Keys of a KEYED collection must be mutually orderable. Iteration order of the
mapping itself is irrelevant; only the sorted order is observable.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from itertools import islice
from operator import itemgetter
from typing import Any, Callable, Generic, Protocol, TypeVar

from dbquery.foundation.errors import Nothing, Option, Some

C = TypeVar("C")  # Collection type
I = TypeVar("I")  # Identifier type (key or index)  # noqa: E741
V = TypeVar("V")  # Element type

_MISSING = object()
_by_key = itemgetter(0)


class Shape(Protocol[C, I, V]):
    """Capability interface over one collection shape."""

    def lookup(self, collection: C, ident: I) -> Option[V]:
        """Element stored under ident, or Nothing."""
        ...

    def entries(self, collection: C) -> Iterable[tuple[I, V]]:
        """(identifier, element) pairs in canonical order."""
        ...

    def collect(self, values: Iterable[V]) -> Any:
        """Package filtered elements."""
        ...

    def rebuild(self, entries: list[tuple[I, V]]) -> Any:
        """Package combined (identifier, value) pairs back into this shape."""
        ...


@dataclass(frozen=True, slots=True)
class KeyedShape(Generic[I, V]):
    """Mappings traversed by ascending key."""

    def lookup(self, collection: Mapping[I, V], ident: I) -> Option[V]:
        return Some(collection[ident]) if ident in collection else Nothing

    def entries(self, collection: Mapping[I, V]) -> Iterator[tuple[I, V]]:
        return iter(sorted(collection.items(), key=_by_key))

    def collect(self, values: Iterable[V]) -> list[V]:
        return list(values)

    def rebuild(self, entries: list[tuple[I, V]]) -> dict[I, V]:
        return dict(entries)


@dataclass(frozen=True, slots=True)
class LinearShape(Generic[V]):
    """Iterables walked from the head; index access costs O(i)."""

    def lookup(self, collection: Iterable[V], ident: int) -> Option[V]:
        if ident < 0:
            return Nothing
        found = next(islice(collection, ident, None), _MISSING)
        return Nothing if found is _MISSING else Some(found)  # type: ignore[arg-type]

    def entries(self, collection: Iterable[V]) -> Iterator[tuple[int, V]]:
        return enumerate(collection)

    def collect(self, values: Iterable[V]) -> list[V]:
        return list(values)

    def rebuild(self, entries: list[tuple[int, V]]) -> list[V]:
        return [value for _, value in entries]


@dataclass(frozen=True, slots=True)
class IndexedShape(Generic[V]):
    """Random-access sequences; index access is O(1). Negative indices are out of range."""

    def lookup(self, collection: Sequence[V], ident: int) -> Option[V]:
        return Some(collection[ident]) if 0 <= ident < len(collection) else Nothing

    def entries(self, collection: Sequence[V]) -> Iterator[tuple[int, V]]:
        # Same walk as LINEAR, so index_where agrees across both shapes
        return LINEAR.entries(collection)

    def collect(self, values: Iterable[V]) -> tuple[V, ...]:
        return tuple(values)

    def rebuild(self, entries: list[tuple[int, V]]) -> tuple[V, ...]:
        return tuple(value for _, value in entries)


KEYED: KeyedShape[Any, Any] = KeyedShape()
LINEAR: LinearShape[Any] = LinearShape()
INDEXED: IndexedShape[Any] = IndexedShape()


def first_match(shape: Shape[C, I, V], collection: C, predicate: Callable[[V], bool]) -> Option[I]:
    """Identifier of the first element, in canonical order, satisfying predicate."""
    for ident, value in shape.entries(collection):
        if predicate(value):
            return Some(ident)
    return Nothing
