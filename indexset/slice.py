"""An immutable, ordered view of values taken from an index set."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import total_ordering
from typing import Any

from .ranges import simplify_range, try_simplify_range

__all__ = ["Slice"]


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@total_ordering
class Slice:
    """A sequence of values supporting indexed but not hashed lookups.

    Unlike a set, a slice compares by order: equality and ordering are
    lexicographic over the values, and it is hashable.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values = tuple(values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._values)

    def __getitem__(self, index):
        """Return the value at an index, or a sub-slice for a range.

        Raises ``IndexError`` when the index or range is out of bounds.
        """
        if isinstance(index, int):
            if not 0 <= index < len(self._values):
                raise IndexError(
                    f"index {index} out of bounds for slice of length {len(self._values)}"
                )
            return self._values[index]
        rng = simplify_range(index, len(self._values))
        return Slice(self._values[rng.start:rng.stop])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return self._values == other._values

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return self._values < other._values

    def __hash__(self) -> int:
        return hash((len(self._values), self._values))

    def __repr__(self) -> str:
        return f"Slice({list(self._values)!r})"

    def get_index(self, index: int) -> Any | None:
        """Return the value at ``index``, or ``None`` if out of bounds."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def get_range(self, rng) -> Slice | None:
        """Return the sub-slice for ``rng``, or ``None`` if it does not fit."""
        resolved = try_simplify_range(rng, len(self._values))
        if resolved is None:
            return None
        return Slice(self._values[resolved.start:resolved.stop])

    def first(self) -> Any | None:
        """Return the first value, or ``None`` if empty."""
        return self._values[0] if self._values else None

    def last(self) -> Any | None:
        """Return the last value, or ``None`` if empty."""
        return self._values[-1] if self._values else None

    def split_at(self, index: int) -> tuple[Slice, Slice]:
        """Divide into ``[0, index)`` and ``[index, len)``.

        Raises ``IndexError`` if ``index`` is greater than the length.
        """
        if not 0 <= index <= len(self._values):
            raise IndexError(
                f"split index {index} out of bounds for slice of length {len(self._values)}"
            )
        return Slice(self._values[:index]), Slice(self._values[index:])

    def split_first(self) -> tuple[Any, Slice] | None:
        """Return the first value and the rest, or ``None`` if empty."""
        if not self._values:
            return None
        return self._values[0], Slice(self._values[1:])

    def split_last(self) -> tuple[Any, Slice] | None:
        """Return the last value and the rest, or ``None`` if empty."""
        if not self._values:
            return None
        return self._values[-1], Slice(self._values[:-1])

    def binary_search(self, x: Any) -> tuple[bool, int]:
        """Search a sorted slice for ``x``.

        Returns ``(True, index)`` where it is found, otherwise
        ``(False, index)`` where it could be inserted to keep the order.
        """
        return self.binary_search_by(lambda value: _cmp(value, x))

    def binary_search_by(self, f: Callable[[Any], int]) -> tuple[bool, int]:
        """Search with ``f``, which returns a negative, zero or positive number
        as a value orders before, equal to or after the target."""
        lo, hi = 0, len(self._values)
        while lo < hi:
            mid = (lo + hi) // 2
            order = f(self._values[mid])
            if order < 0:
                lo = mid + 1
            elif order > 0:
                hi = mid
            else:
                return True, mid
        return False, lo

    def binary_search_by_key(self, b: Any, f: Callable[[Any], Any]) -> tuple[bool, int]:
        """Search for the key ``b`` among the keys ``f(value)``."""
        return self.binary_search_by(lambda value: _cmp(f(value), b))

    def partition_point(self, pred: Callable[[Any], bool]) -> int:
        """Return the index of the first value for which ``pred`` is false,
        assuming every value where it holds comes first."""
        lo, hi = 0, len(self._values)
        while lo < hi:
            mid = (lo + hi) // 2
            if pred(self._values[mid]):
                lo = mid + 1
            else:
                hi = mid
        return lo