# gridsortlab

Small, readable versions of two classic algorithms, each with a sequential
form and a form that spreads the work over a thread pool:

- **ShearSort** on square integer matrices, in two variants.
- **Binary search** on sorted integer lists.

Every row and column sort is done with a stable top-down merge sort.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Command line

Installing the package provides the `gridsortlab` command. It makes random
data, runs one algorithm on it and prints the input, the result and the
elapsed time.

```
gridsortlab --help
```

Options and subcommands:

- `--seed N` (before the subcommand): seed for the random values, so a run can
  be repeated.
- `gridsortlab search [--length N] [--parallel]`: builds a list of `N`
  (default 20, at least 1) random integers from 1 to 100, sorts it, picks one of
  its values and searches for it. `--parallel` uses the thread-pool search.
- `gridsortlab shearsort [--size N] [--variant NAME]`: fills an `N` x `N`
  matrix with random integers from 0 to 99 and sorts it. `NAME` is one of
  `basic` (the default), `parallel`, `alternative` and `alternative-parallel`.
  Without `--size` the command asks for the size on standard input.

Example:

```
gridsortlab --seed 7 shearsort --size 4 --variant alternative
```

## Library

### `gridsortlab.mergesort`

- `merge(left, right)`: merges two sorted sequences into a new list; on ties
  the item from `left` comes first.
- `merge_sort(values)`: returns a new ascending list.

### `gridsortlab.binary_search`

- `random_list(length, rng=None)`: `length` random integers from 1 to 100.
  A negative length raises `ValueError`.
- `binary_search(values, target)`: index of `target` in an ascending sequence,
  or `None` if it is absent.
- `binary_search_parallel(values, target, workers=None)`: each of `workers`
  threads (default: the CPU count) runs the full search; returns an index one
  of them found, or `None`. `workers < 1` raises `ValueError`.

### `gridsortlab.shearsort`

All functions work on a list of lists in place; a non-square matrix raises
`ValueError`.

- `sort_row(matrix, index, ascending=True)`: sorts one row, ascending or
  descending.
- `sort_column(matrix, index)`: sorts one column, ascending top to bottom.
- `shearsort(matrix)`: runs `floor(log2(n)) + 1` phases; each phase sorts even
  rows ascending, odd rows descending, then every column ascending.
- `shearsort_parallel(matrix, workers=None)`: the same phases, with the row
  sorts and the column sorts of each phase run on a thread pool.

### `gridsortlab.alt_shearsort`

- `alternative_shearsort(matrix)`: runs `ceil(log2(n)) + 1` rounds; each round
  sorts rows in alternating directions, then sorts the columns by sorting the
  rows of the transpose and writing them back.
- `alternative_shearsort_parallel(matrix, workers=None)`: the same rounds, with
  row and column sorts run on a thread pool.

### `gridsortlab.matrix`

- `random_matrix(size, rng=None)`: a `size` x `size` matrix of random integers
  from 0 to 99.
- `transpose(matrix)`: a new transposed matrix; ragged rows raise `ValueError`.
- `format_matrix(matrix)`: one line per row, each value followed by a space and
  a tab, with a blank line at the end.
- `is_snake_sorted(matrix)`: `True` when the values, read left to right on even
  rows and right to left on odd rows, never decrease.

### `gridsortlab.cli`

- `Variant`: the ShearSort variants the command accepts.
- `run_search(length=20, parallel=False, rng=None, out=None)`: the `search`
  subcommand as a function; writes its report to `out` (default standard
  output) and returns the index found.
- `run_shearsort(size, variant="basic", rng=None, out=None)`: the `shearsort`
  subcommand as a function; returns the sorted matrix.
- `main(argv=None)`: the command line entry point; returns the exit status.

Every function that makes random data takes a `random.Random` as `rng`, so a
seeded generator gives the same data each time:

```python
import random

from gridsortlab.matrix import format_matrix, random_matrix
from gridsortlab.shearsort import shearsort

grid = random_matrix(4, random.Random(42))
shearsort(grid)
print(format_matrix(grid))
```

## Limits

- Each ShearSort phase ends with a column sort and no final row pass follows,
  so the result is not checked to be in snake order; use `is_snake_sorted` to
  test a result.
- The parallel forms use Python threads. They show how the work divides, but
  they are not expected to run faster than the sequential forms.

## Tests

```
pip install ".[test]"
pytest
```