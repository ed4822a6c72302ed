"""Set comparison and set algebra shared by ordered set types.

``SetOperations`` is a mixin. A class that uses it must provide
``__len__``, ``__iter__`` (in the set's order) and ``__contains__``, and
its constructor must accept a single iterable of values. The operators
build a new instance of the left-hand operand's type.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .iterators import difference, intersection, symmetric_difference, union

__all__ = ["SetOperations"]


class SetOperations:
    """Order-preserving set algebra and comparisons for ordered sets."""

    __slots__ = ()

    @classmethod
    def _from_iterable(cls, values: Iterable[Any]) -> SetOperations:
        return cls(values)  # type: ignore[call-arg]

    def difference(self, other) -> Iterator[Any]:
        """Yield the values in ``self`` but not in ``other``, in ``self``'s order."""
        return difference(self, other)

    def symmetric_difference(self, other) -> Iterator[Any]:
        """Yield the values in exactly one of the two sets.

        Values from ``self`` come first in their order, then values from
        ``other`` in theirs.
        """
        return symmetric_difference(self, other)

    def intersection(self, other) -> Iterator[Any]:
        """Yield the values in both sets, in ``self``'s order."""
        return intersection(self, other)

    def union(self, other) -> Iterator[Any]:
        """Yield the values in either set.

        All of ``self`` comes first in its order, then the values unique to
        ``other`` in their order.
        """
        return union(self, other)

    def is_disjoint(self, other) -> bool:
        """Return ``True`` if the sets have no value in common."""
        if len(self) <= len(other):  # type: ignore[arg-type]
            return all(value not in other for value in self)  # type: ignore[attr-defined]
        return all(value not in self for value in other)

    def is_subset(self, other) -> bool:
        """Return ``True`` if every value of ``self`` is in ``other``."""
        return len(self) <= len(other) and all(  # type: ignore[arg-type]
            value in other for value in self  # type: ignore[attr-defined]
        )

    def is_superset(self, other) -> bool:
        """Return ``True`` if every value of ``other`` is in ``self``."""
        return len(other) <= len(self) and all(  # type: ignore[arg-type]
            value in self for value in other  # type: ignore[operator]
        )

    def __eq__(self, other: object) -> bool:
        """Sets are equal when they hold the same values, in any order."""
        if not isinstance(other, SetOperations):
            return NotImplemented
        return len(self) == len(other) and self.is_subset(other)  # type: ignore[arg-type]

    __hash__ = None  # type: ignore[assignment]

    def __and__(self, other):
        """Return the intersection as a new set, in ``self``'s order."""
        if not isinstance(other, SetOperations):
            return NotImplemented
        return self._from_iterable(self.intersection(other))

    def __or__(self, other):
        """Return the union as a new set."""
        if not isinstance(other, SetOperations):
            return NotImplemented
        return self._from_iterable(self.union(other))

    def __xor__(self, other):
        """Return the symmetric difference as a new set."""
        if not isinstance(other, SetOperations):
            return NotImplemented
        return self._from_iterable(self.symmetric_difference(other))

    def __sub__(self, other):
        """Return the difference as a new set, in ``self``'s order."""
        if not isinstance(other, SetOperations):
            return NotImplemented
        return self._from_iterable(self.difference(other))