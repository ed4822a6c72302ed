"""Normalisation of index ranges against a sequence length.

A range is given as ``None`` (the whole sequence), a ``slice`` or a
``range``. The step must be absent or 1, and the bounds must not be
negative. The result is a ``range`` with step 1 that lies within
``0..length``.
"""

from __future__ import annotations

import operator

__all__ = ["simplify_range", "try_simplify_range"]

RangeLike = "slice | range | None"


def _bounds(rng) -> tuple[int | None, int | None]:
    """Return the ``(start, stop)`` bounds of ``rng``, ``None`` meaning unbounded."""
    if rng is None:
        return None, None
    if isinstance(rng, range):
        if rng.step != 1:
            raise ValueError(f"range step must be 1, not {rng.step}")
        return rng.start, rng.stop
    if isinstance(rng, slice):
        if rng.step is not None and operator.index(rng.step) != 1:
            raise ValueError(f"slice step must be 1, not {rng.step}")
        start = None if rng.start is None else operator.index(rng.start)
        stop = None if rng.stop is None else operator.index(rng.stop)
        return start, stop
    raise TypeError(f"expected a slice, range or None, not {type(rng).__name__}")


def simplify_range(rng, length: int) -> range:
    """Resolve ``rng`` against ``length``.

    Raises ``IndexError`` when a bound lies outside ``0..=length`` or when
    the start lies past the end.
    """
    start, stop = _bounds(rng)
    if start is None:
        start = 0
    elif not 0 <= start <= length:
        raise IndexError(f"range start {start} should be <= length {length}")
    if stop is None:
        stop = length
    elif not 0 <= stop <= length:
        raise IndexError(f"range end {stop} should be <= length {length}")
    if start > stop:
        raise IndexError(f"range start {start} should be <= range end {stop}")
    return range(start, stop)


def try_simplify_range(rng, length: int) -> range | None:
    """Resolve ``rng`` against ``length``, or return ``None`` if it does not fit."""
    try:
        return simplify_range(rng, length)
    except IndexError:
        return None