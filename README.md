# marelles

Small generators of SVG figures about "marelles" (hopscotch lattices):
families of lines drawn in logarithmic coordinates, where the point
`(log m, log n)` sits on the diagonal `x + y = log(m·n)`.

Every command writes a complete SVG document to standard output. Redirect
the output to a file and open it in a browser or an image viewer.

## Installation

```
pip install .
```

## Commands

### `marelles-lattice [FIGURE]`

Figures of the points `(log m, log n)` for `1 ≤ m ≤ 46` and `1 ≤ n ≤ 20`,
crossed by anti-diagonals for every `k` from 1 to 920. `FIGURE` is one of:

- `divisors` (the default): the lattice points in white, and on each
  diagonal `x + y = log k` the points `(log m, log k − log m)` in blue and
  `(log k − log n, log n)` in red where `m` or `n` does not divide `k`;
- `products`: the lattice points labelled with `m·n`;
- `factors`: the lattice points labelled `m × n`, and the diagonals
  labelled with `k`;
- `table`: a multiplication table with labelled rows and columns.

```
marelles-lattice table > table.svg
```

The same figures are returned as strings by `render_divisors()`,
`render_products()`, `render_factors()` and `render_table()` in
`marelles.lattice`. The `Canvas` class holds the mapping from plane
coordinates to pixels (`convert`) and the visibility test (`contains`).

### `marelles-stairs`

For every step height `m` from 1 to 475, a staircase of unit-wide
rectangles of height `m` in white and a mirrored one in black, filling a
fixed view box.

```
marelles-stairs > stairs.svg
```

`marelles.stairs.rectangles()` yields the rectangles one by one;
`render()` returns the document.

### `marelles-arctan`

Circles placed by the angle `phi(k) = 2·atan(k / 3.141592)`: unit circles
centred at `(cos phi(m), sin phi(m))` in red and at
`(cos phi(n), −sin phi(n))` in blue, and white circles centred on the
horizontal axis at `cos phi(√k)` with that same radius. Strokes get
thinner as the index grows.

```
marelles-arctan > arctan.svg
```

### `marelles-orbit X Y ITERATIONS`

The orbit of the starting point `(X, Y)` under the square map
`(x, y) ↦ (x(x+y) − 1, y(x+y) − 1)`, drawn point by point and numbered,
over a grid together with the frontiers `x + y = ±2`.

```
marelles-orbit 0.3 0.5 20 > orbit.svg
```

## Using the library

The `render` functions return the SVG document as a string:

```python
from marelles import orbit, stairs

svg = orbit.render(0.3, 0.5, 20)
count = sum(1 for _ in stairs.rectangles())
```

`marelles.orbit` also offers the maps on `Point` values: `square`, `cube`,
`sqrt_positive` and `sqrt_negative` (the two square roots, which raise
`DomainError` when `x + y + 2` is not positive), `orbit_points` to iterate
the square map, and `point_to_pixel`.

## Tests

```
pip install .[test]
pytest
```