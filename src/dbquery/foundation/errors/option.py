"""Option/Maybe type: presence or absence of a value.

Used where failure detail is irrelevant: collection lookups report absence
with it, and the error-erased facade returns it from perform. Unlike a plain
``T | None``, ``Some(None)`` is distinguishable from ``Nothing``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """Discriminated union: Some(value) or Nothing.

    Examples:
        >>> Some(3).map(lambda x: x + 1)
        Some(4)
        >>> Nothing.map(lambda x: x + 1)
        Nothing
        >>> Nothing.unwrap_or(0)
        0
    """

    __slots__ = ("_value", "_is_some")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, is_some: bool) -> None:
        self._value = value
        self._is_some = is_some

    def is_some(self) -> bool:
        return self._is_some

    def unwrap(self) -> T:
        """Extract the value. Raises RuntimeError on Nothing."""
        if self._is_some:
            return self._value  # type: ignore[return-value]
        raise RuntimeError("unwrap() on Nothing")

    def unwrap_or(self, default: T) -> T:
        return self._value if self._is_some else default  # type: ignore[return-value]

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Option(f(self._value), True) if self._is_some else Nothing  # type: ignore[arg-type,return-value]

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        return f(self._value) if self._is_some else Nothing  # type: ignore[arg-type,return-value]

    def to_optional(self) -> T | None:
        """Collapse to a plain ``T | None``."""
        return self._value if self._is_some else None

    __bool__ = lambda self: self._is_some  # noqa: E731
    __repr__ = lambda self: f"Some({self._value!r})" if self._is_some else "Nothing"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_some == other._is_some and self._value == other._value if isinstance(other, Option) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Some, nothing otherwise."""
        if self._is_some:
            yield self._value  # type: ignore[misc]


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct Some variant (present)."""
    return Option(value, True)


# Single shared absent value
Nothing: Option = Option(None, False)
