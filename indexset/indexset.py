"""A hash set that remembers the order of its values and allows indexed access."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Any

from .ranges import simplify_range, try_simplify_range
from .setops import SetOperations
from .slice import Slice

__all__ = ["IndexSet"]


class IndexSet(SetOperations):
    """A set whose iteration order is the order of insertion and removal calls.

    Values sit at compact indices ``0..len(self)``. Lookups by value are
    hashed; lookups by index are direct. Equality ignores order.
    """

    __slots__ = ("_values", "_index")

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values: list[Any] = []
        self._index: dict[Any, int] = {}
        self.extend(values)

    # -- internal helpers -------------------------------------------------

    def _reindex(self, start: int = 0, stop: int | None = None) -> None:
        for i, value in enumerate(self._values[start:stop], start):
            self._index[value] = i

    def _rebuild(self, values: list[Any]) -> None:
        self._values = values
        self._index = {value: i for i, value in enumerate(values)}

    def _check_index(self, index: int, what: str = "index") -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(
                f"{what} {index} out of bounds for set of length {len(self._values)}"
            )

    def _check_insert_index(self, index: int) -> None:
        if not 0 <= index <= len(self._values):
            raise IndexError(
                f"insertion index {index} out of bounds for set of length {len(self._values)}"
            )

    def _swap_remove_at(self, i: int) -> Any:
        values = self._values
        removed = values[i]
        del self._index[removed]
        last = values.pop()
        if i < len(values):
            values[i] = last
            self._index[last] = i
        return removed

    def _shift_remove_at(self, i: int) -> Any:
        removed = self._values.pop(i)
        del self._index[removed]
        self._reindex(i)
        return removed

    def _insert_at(self, index: int, value: Any) -> None:
        self._values.insert(index, value)
        self._reindex(index)

    # -- container protocol -----------------------------------------------

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __getitem__(self, index):
        """Return the value at an index, or a ``Slice`` for a range.

        Raises ``IndexError`` when the index or range is out of bounds.
        """
        if isinstance(index, int):
            if not 0 <= index < len(self._values):
                raise IndexError("IndexSet: index out of bounds")
            return self._values[index]
        rng = simplify_range(index, len(self._values))
        return Slice(self._values[rng.start:rng.stop])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def copy(self) -> IndexSet:
        """Return a shallow copy with the same order."""
        return type(self)(self._values)

    # -- bulk changes -----------------------------------------------------

    def clear(self) -> None:
        """Remove every value."""
        self._values.clear()
        self._index.clear()

    def truncate(self, length: int) -> None:
        """Keep the first ``length`` values and drop the rest."""
        if length < len(self._values):
            for value in self._values[length:]:
                del self._index[value]
            del self._values[length:]

    def drain(self, rng=None) -> list[Any]:
        """Remove the values in ``rng`` and return them in order.

        Raises ``IndexError`` if the range does not fit the set.
        """
        resolved = simplify_range(rng, len(self._values))
        removed = self._values[resolved.start:resolved.stop]
        del self._values[resolved.start:resolved.stop]
        for value in removed:
            del self._index[value]
        self._reindex(resolved.start)
        return removed

    def split_off(self, at: int) -> IndexSet:
        """Move the values ``[at, len)`` into a new set and return it.

        Raises ``IndexError`` if ``at`` is greater than the length.
        """
        self._check_insert_index(at)
        tail = self._values[at:]
        self.truncate(at)
        return type(self)(tail)

    # -- insertion --------------------------------------------------------

    def insert(self, value: Any) -> bool:
        """Add ``value`` at the end; return ``False`` if it was already present."""
        return self.insert_full(value)[1]

    def insert_full(self, value: Any) -> tuple[int, bool]:
        """Add ``value`` at the end if new; return its index and whether it was new."""
        existing = self._index.get(value)
        if existing is not None:
            return existing, False
        index = len(self._values)
        self._values.append(value)
        self._index[value] = index
        return index, True

    def insert_sorted(self, value: Any) -> tuple[int, bool]:
        """Insert ``value`` at its sorted position among sorted values.

        If found by binary search, returns its index and ``False`` with no
        change; otherwise the value is placed at the search position.
        """
        found, index = self.binary_search(value)
        if found:
            return index, False
        return self.insert_before(index, value)

    def insert_before(self, index: int, value: Any) -> tuple[int, bool]:
        """Insert ``value`` before the value at ``index``, or at the end.

        An existing value is moved there instead; its new index is
        ``index`` or one less. Valid indices are ``0..=len``.
        """
        self._check_insert_index(index)
        current = self._index.get(value)
        if current is None:
            self._insert_at(index, value)
            return index, True
        target = index - 1 if current < index else index
        self.move_index(current, target)
        return target, False

    def shift_insert(self, index: int, value: Any) -> bool:
        """Insert ``value`` at ``index``, shifting later values up.

        An existing value is moved to ``index``, which must then be below
        the length. Returns ``True`` if the value was new.
        """
        current = self._index.get(value)
        if current is None:
            self._check_insert_index(index)
            self._insert_at(index, value)
            return True
        self._check_index(index)
        self.move_index(current, index)
        return False

    def replace(self, value: Any) -> Any | None:
        """Store ``value``, replacing an equal one in place; return the replaced value."""
        return self.replace_full(value)[1]

    def replace_full(self, value: Any) -> tuple[int, Any | None]:
        """Like ``replace``, also returning the value's index."""
        current = self._index.get(value)
        if current is None:
            index = len(self._values)
            self._values.append(value)
            self._index[value] = index
            return index, None
        old = self._values[current]
        self._values[current] = value
        del self._index[old]
        self._index[value] = current
        return current, old

    def splice(self, rng, replace_with: Iterable[Any]) -> list[Any]:
        """Replace the values in ``rng`` with ``replace_with``; return the removed values.

        A replacement value already present outside the range stays where
        it is; new values fill the range in order.
        """
        resolved = simplify_range(rng, len(self._values))
        head = self._values[:resolved.start]
        removed = self._values[resolved.start:resolved.stop]
        tail = self._values[resolved.stop:]
        keep = {value: None for value in head}
        keep.update((value, None) for value in tail)
        added: dict[Any, None] = {}
        for value in replace_with:
            if value not in keep and value not in added:
                added[value] = None
        self._rebuild(head + list(added) + tail)
        return removed

    def append(self, other: IndexSet) -> None:
        """Insert every value of ``other`` in order, then empty ``other``."""
        self.extend(other)
        other.clear()

    def extend(self, values: Iterable[Any]) -> None:
        """Insert each value in order; existing values keep their place."""
        for value in values:
            self.insert(value)

    # -- lookup -----------------------------------------------------------

    def get(self, value: Any) -> Any | None:
        """Return the stored value equal to ``value``, or ``None``."""
        index = self._index.get(value)
        return None if index is None else self._values[index]

    def get_full(self, value: Any) -> tuple[int, Any] | None:
        """Return ``(index, stored value)``, or ``None``."""
        index = self._index.get(value)
        return None if index is None else (index, self._values[index])

    def get_index_of(self, value: Any) -> int | None:
        """Return the index of ``value``, or ``None``."""
        return self._index.get(value)

    # -- removal by value -------------------------------------------------

    def swap_remove(self, value: Any) -> bool:
        """Remove ``value`` by swapping the last value into its place."""
        return self.swap_remove_full(value) is not None

    def shift_remove(self, value: Any) -> bool:
        """Remove ``value`` by shifting the following values down."""
        return self.shift_remove_full(value) is not None

    def swap_take(self, value: Any) -> Any | None:
        """Swap-remove ``value`` and return the stored value, or ``None``."""
        full = self.swap_remove_full(value)
        return None if full is None else full[1]

    def shift_take(self, value: Any) -> Any | None:
        """Shift-remove ``value`` and return the stored value, or ``None``."""
        full = self.shift_remove_full(value)
        return None if full is None else full[1]

    def swap_remove_full(self, value: Any) -> tuple[int, Any] | None:
        """Swap-remove ``value``; return ``(index, stored value)`` or ``None``."""
        index = self._index.get(value)
        if index is None:
            return None
        return index, self._swap_remove_at(index)

    def shift_remove_full(self, value: Any) -> tuple[int, Any] | None:
        """Shift-remove ``value``; return ``(index, stored value)`` or ``None``."""
        index = self._index.get(value)
        if index is None:
            return None
        return index, self._shift_remove_at(index)

    def pop(self) -> Any | None:
        """Remove and return the last value, or ``None`` if empty."""
        if not self._values:
            return None
        value = self._values.pop()
        del self._index[value]
        return value

    def retain(self, keep: Callable[[Any], bool]) -> None:
        """Keep only the values for which ``keep`` is true, in order."""
        self._rebuild([value for value in self._values if keep(value)])

    # -- ordering ---------------------------------------------------------

    def sort(self) -> None:
        """Sort the values by their natural ordering."""
        self._values.sort()
        self._reindex()

    def sort_by(self, cmp: Callable[[Any, Any], int]) -> None:
        """Sort stably with ``cmp``, which returns a negative, zero or positive number."""
        self._values.sort(key=cmp_to_key(cmp))
        self._reindex()

    def sorted_by(self, cmp: Callable[[Any, Any], int]) -> Iterator[Any]:
        """Return an iterator over the values sorted stably with ``cmp``."""
        return iter(sorted(self._values, key=cmp_to_key(cmp)))

    def sort_by_cached_key(self, sort_key: Callable[[Any], Any]) -> None:
        """Sort stably by ``sort_key``, calling it once per value."""
        self._values.sort(key=sort_key)
        self._reindex()

    def binary_search(self, x: Any) -> tuple[bool, int]:
        """Search a sorted set; return ``(found, index)``."""
        return self.as_slice().binary_search(x)

    def binary_search_by(self, f: Callable[[Any], int]) -> tuple[bool, int]:
        """Search a sorted set with a comparator; return ``(found, index)``."""
        return self.as_slice().binary_search_by(f)

    def binary_search_by_key(self, b: Any, f: Callable[[Any], Any]) -> tuple[bool, int]:
        """Search a sorted set for the key ``b``; return ``(found, index)``."""
        return self.as_slice().binary_search_by_key(b, f)

    def partition_point(self, pred: Callable[[Any], bool]) -> int:
        """Return the index of the first value for which ``pred`` is false."""
        return self.as_slice().partition_point(pred)

    def reverse(self) -> None:
        """Reverse the order of the values in place."""
        self._values.reverse()
        self._reindex()

    # -- access by index --------------------------------------------------

    def as_slice(self) -> Slice:
        """Return all values as a ``Slice``."""
        return Slice(self._values)

    def get_index(self, index: int) -> Any | None:
        """Return the value at ``index``, or ``None`` if out of bounds."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def get_range(self, rng) -> Slice | None:
        """Return the values in ``rng`` as a ``Slice``, or ``None`` if it does not fit."""
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

    def swap_remove_index(self, index: int) -> Any | None:
        """Remove the value at ``index`` by swapping in the last value."""
        if not 0 <= index < len(self._values):
            return None
        return self._swap_remove_at(index)

    def shift_remove_index(self, index: int) -> Any | None:
        """Remove the value at ``index`` by shifting the following values down."""
        if not 0 <= index < len(self._values):
            return None
        return self._shift_remove_at(index)

    def move_index(self, from_index: int, to_index: int) -> None:
        """Move a value from one index to another, shifting those in between.

        Raises ``IndexError`` if either index is out of bounds.
        """
        self._check_index(from_index, "from index")
        self._check_index(to_index, "to index")
        value = self._values.pop(from_index)
        self._values.insert(to_index, value)
        self._reindex(min(from_index, to_index), max(from_index, to_index) + 1)

    def swap_indices(self, a: int, b: int) -> None:
        """Swap the values at two indices.

        Raises ``IndexError`` if either index is out of bounds.
        """
        self._check_index(a)
        self._check_index(b)
        values = self._values
        values[a], values[b] = values[b], values[a]
        self._index[values[a]] = a
        self._index[values[b]] = b