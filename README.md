# indexset

A hash set whose values keep a consistent order: the order in which they
were inserted, changed only by the calls you make. Every value also has an
index in the compact range `0..len(s)`, so the set serves both for fast
membership tests and for positional access. Values must be hashable.

## Installation

```
pip install indexset
```

## Usage

```python
from indexset.indexset import IndexSet

letters = IndexSet("a short treatise on fungi")
assert "s" in letters
assert "y" not in letters

s = IndexSet([0, 4, 2, 12])
s.insert(8)                   # True: added at the end
s.insert(4)                   # False: already present, order unchanged
s.get_index_of(2)             # 2
s[0]                          # 0
s.shift_insert(0, 8)          # False: 8 existed and is moved to the front
s.swap_remove(4)              # True: the last value takes its place
s.shift_remove(2)             # True: later values move down by one
```

Lookups that find nothing return `None` (`get`, `get_full`,
`get_index_of`, `get_index`, `first`, `last`, `pop`, ...). Indexing with
`s[i]` or with an out-of-range slice raises `IndexError`.

### Order-preserving removal and insertion

- `swap_remove`, `swap_take`, `swap_remove_full`, `swap_remove_index`
  remove by moving the last value into the gap.
- `shift_remove`, `shift_take`, `shift_remove_full`, `shift_remove_index`
  keep the relative order of the remaining values.
- `insert_before`, `shift_insert` and `insert_sorted` place new values,
  or move existing ones, to a chosen position.
- `replace` and `replace_full` store a new value in place of an equal one.
- `move_index` and `swap_indices` rearrange values by position.

### Set operations

`union`, `intersection`, `difference` and `symmetric_difference` return
lazy iterators. Their order is concatenated: values from the left operand
in their order, then values from the right operand in theirs.

```python
a = IndexSet(range(0, 3))
b = IndexSet(range(3, 6))

list(a.union(b))                  # [0, 1, 2, 3, 4, 5]
list(b.symmetric_difference(a))   # [3, 4, 5, 0, 1, 2]
a | b, a & b, a ^ b, a - b        # new IndexSet objects
a.is_disjoint(b)                  # True
```

`is_subset` and `is_superset` are also available. Equality between two
sets ignores order. The same generators are available as plain functions
in `indexset.iterators` for any ordered collection that supports `in`.

### Slices, sorting and searching

`indexset.slice.Slice` is an immutable, hashable sequence of values that
compares in order.

```python
s = IndexSet([9, 1, 4])
s.sort()
s.as_slice()                          # Slice([1, 4, 9])
s[1:]                                 # Slice([4, 9])
s.binary_search(4)                    # (True, 1)
s.binary_search(5)                    # (False, 2)
s.partition_point(lambda x: x < 5)    # 2
```

Comparator functions (`sort_by`, `sorted_by`, `binary_search_by`) return a
negative, zero or positive number. Ranges are given as a `slice`, a
`range` or `None` for the whole set, with step 1 and non-negative bounds.

`drain`, `splice`, `split_off`, `truncate`, `retain`, `reverse`,
`sort_by_cached_key`, `append`, `extend` and `copy` cover bulk changes.

## What it does not do

The package is an in-memory collection only: it offers no serialization,
no parallel iteration, and no control over reserved capacity.

## Running the tests

```
pip install -e .[test]
pytest
```