"""Lazy, order-preserving set algebra over ordered collections of values.

Every function takes ordered collections that also answer membership
tests with ``in`` (an ``IndexSet``, a ``dict``, a list, ...) and returns
a generator. Values are produced in the order described by each
function, and nothing is computed until the generator is consumed.
"""

from __future__ import annotations

from collections.abc import Collection, Container, Iterable, Iterator
from itertools import chain
from typing import Any

__all__ = ["difference", "intersection", "symmetric_difference", "union"]


def difference(values: Iterable[Any], other: Container[Any]) -> Iterator[Any]:
    """Yield the values of ``values`` that are not in ``other``.

    Values come in the order they appear in ``values``.
    """
    return (value for value in values if value not in other)


def intersection(values: Iterable[Any], other: Container[Any]) -> Iterator[Any]:
    """Yield the values of ``values`` that are also in ``other``.

    Values come in the order they appear in ``values``.
    """
    return (value for value in values if value in other)


def symmetric_difference(first: Collection[Any], second: Collection[Any]) -> Iterator[Any]:
    """Yield the values that are in ``first`` or ``second`` but not in both.

    Values unique to ``first`` come first in their order, followed by the
    values unique to ``second`` in their order.
    """
    return chain(difference(first, second), difference(second, first))


def union(first: Collection[Any], second: Collection[Any]) -> Iterator[Any]:
    """Yield every value that is in ``first`` or ``second``.

    All values of ``first`` come first in their order, followed by the
    values unique to ``second`` in their order.
    """
    return chain(iter(first), difference(second, first))