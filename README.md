# gbdcheck

Building blocks for checking graphics display lists:

- `gbdcheck.vector.Vector` is a growable sequence. It tracks its capacity the way a
  doubling array does. It supports positional insert, delete, reserve,
  shrink-to-fit, release and clear.
- `gbdcheck.diagnostics` is the catalogue of every error and warning that a
  display-list checker can report. That covers vertex cache overflows, bad image
  alignment, combiner misuse, missing syncs and more. Each entry has a severity and
  a printf-style message template.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Vector

```python
from gbdcheck.vector import Vector

v = Vector([1, 2, 3])
v.push_back([4, 5])     # returns 3, the position of the first appended item
v.insert(0, [0])        # returns 0
v.delete(1, 2)          # removes two items starting at position 1
print(list(v), len(v), v.capacity)
v.reserve(10)           # True if the capacity grew, False if it already sufficed
v.shrink_to_fit()       # capacity becomes len(v)
items = v.release()     # hands over the items as a list; the vector is empty, capacity 0
```

Behaviour worth knowing:

- When an insertion needs more room, capacity doubles. If doubling is still not
  enough, it grows to exactly the size required. An empty vector with no capacity
  grows to the size of the first insertion.
- `at(pos)` raises `IndexError` for a position outside `0 <= pos < len(v)`.
  Indexing with `v[i]` follows ordinary list rules, so negative indices and slices
  work.
- `insert` raises `ValueError` when given nothing to insert, and `IndexError` for a
  position past the end.
- `delete` raises `IndexError` for a start position or count that is out of range,
  and `ValueError` for a negative count.
- `clear()` removes every element and keeps the capacity.
- Vectors iterate forwards and under `reversed()`. They compare equal when their
  items are equal.

## Diagnostics

```python
from gbdcheck.diagnostics import Diagnostic, DiagnosticError, Severity, errors, warnings

d = Diagnostic.VTX_CACHE_OVERFLOW
print(d.severity is Severity.ERROR)   # True
print(d.template)
print(d.format(40, 8))
# Loading 40 vertices at position 8 overflows the vertex cache

try:
    Diagnostic.TILEDESC_BAD.raise_error(9)
except DiagnosticError as exc:
    print(exc)                 # Bad tile index 9
    print(exc.diagnostic, exc.params, exc.severity)

print(len(errors()), len(warnings()))
```

- `Diagnostic.format(*args)` applies the arguments to the template with `%`. It
  raises `TypeError` when they do not fit.
- `DiagnosticError` keeps the diagnostic, the arguments (`params`) and the formatted
  `message`.
- `errors()` and `warnings()` return the diagnostics of each severity in the order
  in which they are defined.

## What this package does not do

The package has no display-list interpreter or checker, and no command-line tool.
It supplies the container and the diagnostic catalogue that such a checker would
use. It does not decode commands or report problems in display lists by itself.