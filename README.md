# plasmakit

Small building blocks for plasma simulation codes, written in plain Python
with no third-party dependencies.

## What is inside

- `plasmakit.tags`: enumerations for layout style and context kind (`Tag`:
  `LEFT`, `RIGHT`, `LOCAL`, `MPI`, `NCCL`), log levels (`Verbosity`), memory
  kinds (`MemoryType`) and equation kinds (`PdeType`). Each of the last three
  has a `label` property; `get_verbosity_name` and `get_memory_type_name`
  return the same names for a level or memory type.
- `plasmakit.errors`: `ErrorCode`, the `PlasmaError` exception (carrying
  `code` and `expression`), `get_error_message`, which returns
  `"Unknown error"` for codes it does not know, and `invoke`, which passes a
  success code through and logs and raises `PlasmaError` for any other.
- `plasmakit.log`: levelled, printf-style logging to standard error with
  `log`, `log_error`, `log_warning`, `log_info` and `log_debug`. A message is
  written only when its level does not exceed the threshold, which starts
  at `Verbosity.ERROR` and is changed with `set_verbosity` and read with
  `get_verbosity`.
- `plasmakit.context`: execution contexts. `acquire_context(Tag.LOCAL)`
  returns a `LocalContext` with `id` 0 and `size` 1; any other kind raises
  `PlasmaError`. Contexts are context managers and are released on exit, or
  with `release()`.
- `plasmakit.mathutil`: `sign` (1.0 for values `>= 0`, otherwise -1.0),
  `min3` and `max3`.
- `plasmakit.buffer`: `Buffer(size, alignment=0)`, a zero-filled block of
  bytes. `fetch_element(offset)` returns a writable `memoryview` starting at
  that byte offset; `release()` frees the content, after which it can no
  longer be used.
- `plasmakit.vector` and `plasmakit.matrix`: typed `Vector(typecode, length)`
  and `Matrix(typecode, row, column)` built on `Buffer`, using the `struct`
  type codes `bBhHiIlLqQfd`. `fetch_element` returns a one-element writable
  view; `as_memoryview` returns a typed view of all elements. Matrices are
  stored column-major. Both work as context managers.
- `plasmakit.ranges`: `Range(style, lower, upper)` over a box of integer
  indices with `lower <= index < upper`, in `Tag.LEFT` (first index fastest)
  or `Tag.RIGHT` (last index fastest) layout. It exposes `extent`, `stride`
  and `volume`, iterates over every index in layout order, and hands out a
  `RangeIterator` whose `advance(step)` and `reset()` move a linear offset
  and its matching `index`. `find_index(offset, stride)` turns a flat offset
  into per-dimension indices.
- `plasmakit.blas`: `scal(n, a, x, inc_x)` multiplies `n` elements of `x`,
  `inc_x` apart starting from the first, by `a` in place.

Invalid arguments and out-of-range accesses raise `PlasmaError` with the
matching `ErrorCode`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from plasmakit.blas import scal
from plasmakit.ranges import Range
from plasmakit.tags import Tag
from plasmakit.vector import Vector

x = [1.0, 2.0, 3.0, 4.0]
scal(2, 2.0, x, 2)             # x == [2.0, 2.0, 6.0, 4.0]

with Vector("i", 10) as v:
    v.as_memoryview()[0] = 3
    print(v.fetch_element(0)[0])   # 3

r = Range(Tag.RIGHT, [0, 0], [2, 3])
it = r.iterator()
it.advance(4)
print(it.index)                # (1, 1)
```

## What it does not do

- Only local, single-process contexts exist; asking for `Tag.MPI` or
  `Tag.NCCL` raises `PlasmaError`.
- `PdeType` names equation kinds, but there are no equation solvers,
  meshes, finite-difference operators or time integrators.
- A buffer's `alignment` is recorded, not enforced, and all memory is host
  memory (`MemoryType.CPU`).
- There is no command-line program; the package is used as a library.