"""Multiplication lattices drawn on logarithmic axes, written as SVG."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

MAX_M = 46
MAX_N = 20

_XML_DECLARATION = '<?xml version="1.0" standalone="no"?>'
_DOCTYPE = (
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">'
)


@dataclass(frozen=True)
class Canvas:
    """A drawing area where logarithmic coordinates map linearly onto pixels."""

    width: float
    height: float
    margin: float
    coef: float

    def convert(self, x: float, y: float) -> tuple[float, float]:
        """Return the pixel position of the point (x, y)."""
        return self.margin + self.coef * x, self.height - (self.margin + self.coef * y)

    def contains(self, xx: float, yy: float) -> bool:
        """Tell whether a pixel position lies on the canvas, edges included."""
        return not (xx < 0.0 or xx > self.width or yy < 0.0 or yy > self.height)


WIDE_CANVAS = Canvas(width=1900.0, height=900.0, margin=10.0, coef=500.0)
NARROW_CANVAS = Canvas(width=910.0, height=900.0, margin=10.0, coef=380.0)


class _Drawing:
    """Accumulates the elements of one SVG document."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas
        self._parts = [
            _XML_DECLARATION,
            _DOCTYPE,
            f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
            f'width="{canvas.width:f}" height="{canvas.height:f}" background-color="black">',
            f'<rect fill="#000000" width="{canvas.width:f}" height="{canvas.height:f}" />',
        ]

    def circle(self, xx: float, yy: float, r: float, color: str) -> None:
        if self.canvas.contains(xx, yy):
            self._parts.append(
                f'<circle cx="{xx:f}" cy="{yy:f}" r="{r:f}" '
                f'style="fill:black;stroke:{color};stroke-width:2"/>'
            )

    def line(self, xx1: float, yy1: float, xx2: float, yy2: float, color: str) -> None:
        self._parts.append(
            f'<line x1="{xx1:f}" y1="{yy1:f}" x2="{xx2:f}" y2="{yy2:f}" '
            f'style="stroke:{color};stroke-width:1"/>'
        )

    def text(
        self,
        xx: float,
        yy: float,
        angle: int,
        color: str,
        body: str,
        font_size: int | None = None,
    ) -> None:
        if not self.canvas.contains(xx, yy):
            return
        head = f'<text x="{xx:f}" y="{yy:f}" transform="rotate({angle} {xx:f},{yy:f})" fill="{color}"'
        if font_size is not None:
            head += (
                ' text-anchor="middle" dominant-baseline="central"'
                f' font-size="{font_size}"'
            )
        self._parts.append(f"{head}>{body}</text>")

    def diagonal(self, lk: float, color: str) -> None:
        """Draw the anti-diagonal x + y = lk."""
        xx1, yy1 = self.canvas.convert(0.0, lk)
        xx2, yy2 = self.canvas.convert(lk, 0.0)
        self.line(xx1, yy1, xx2, yy2, color)

    def finish(self) -> str:
        return "\n".join([*self._parts, "</svg>"]) + "\n"


def _products() -> range:
    return range(1, MAX_M * MAX_N + 1)


def _scaled_label(drawing: _Drawing, xx: float, yy: float, k: int, color: str) -> None:
    drawing.text(xx, yy, 45, color, str(k), font_size=int(300.0 / k))


def render_divisors() -> str:
    """Lattice points together with the points missing on each diagonal."""
    canvas = WIDE_CANVAS
    drawing = _Drawing(canvas)
    for k in _products():
        drawing.diagonal(math.log(k), "rgb(32,32,32)")

    for k in _products():
        lk = math.log(k)
        for m in range(1, MAX_M + 1):
            if k % m:
                x = math.log(m)
                drawing.circle(*canvas.convert(x, lk - x), 4, "royalblue")
        for n in range(1, MAX_N + 1):
            if k % n:
                y = math.log(n)
                drawing.circle(*canvas.convert(lk - y, y), 4, "red")

    for m in range(1, MAX_M + 1):
        for n in range(1, MAX_N + 1):
            drawing.circle(*canvas.convert(math.log(m), math.log(n)), 4, "white")
    return drawing.finish()


def render_products() -> str:
    """Lattice points labelled with the product m * n."""
    canvas = NARROW_CANVAS
    drawing = _Drawing(canvas)
    for k in _products():
        drawing.diagonal(math.log(k), "rgb(64,64,64)")

    for m in range(1, MAX_M + 1):
        for n in range(1, MAX_N + 1):
            xx, yy = canvas.convert(math.log(m), math.log(n))
            drawing.circle(xx, yy, 2, "red")
            drawing.text(xx, yy, 45, "white", str(m * n))
    return drawing.finish()


def render_factors() -> str:
    """Lattice points labelled with their factors, diagonals labelled with k."""
    canvas = NARROW_CANVAS
    drawing = _Drawing(canvas)
    for k in _products():
        drawing.diagonal(math.log(k + 0.5), "rgb(64,64,64)")
        half = math.log(k) / 2.0
        xx, yy = canvas.convert(half, half)
        _scaled_label(drawing, xx, yy, k, "rgb(64,64,64)")

    for m in range(1, MAX_M + 1):
        for n in range(1, MAX_N + 1):
            xx, yy = canvas.convert(math.log(m), math.log(n))
            drawing.circle(xx, yy, 2, "red")
            drawing.text(xx, yy, 45, "white", f"{m} &#215; {n}", font_size=16)
    return drawing.finish()


def render_table() -> str:
    """A multiplication table on logarithmic axes, with labelled rows and columns."""
    canvas = NARROW_CANVAS
    drawing = _Drawing(canvas)
    for k in _products():
        drawing.diagonal(math.log(k), "rgb(64,64,64)")
        half = math.log(k) / 2.0
        xx, yy = canvas.convert(half, half)
        _scaled_label(drawing, xx, yy, k, "rgb(128,128,128)")

    columns = [canvas.convert(math.log(m), 0.0)[0] for m in range(1, MAX_M + 1)]
    rows = [canvas.convert(0.0, math.log(n))[1] for n in range(1, MAX_N + 1)]

    for xx in columns:
        drawing.line(xx, 0, xx, canvas.height, "rgb(128,0,0)")
    for yy in rows:
        drawing.line(0, yy, canvas.width, yy, "rgb(32,32,160)")
    for m, xx in enumerate(columns, start=1):
        drawing.text(
            xx, canvas.height - 2 * canvas.margin, 0, "rgb(255,127,127)", str(m), font_size=32
        )
    for n, yy in enumerate(rows, start=1):
        drawing.text(
            0 + 2 * canvas.margin, yy, 90, "rgb(127,127,255)", str(n), font_size=32
        )

    for m in range(2, MAX_M + 1):
        for n in range(2, MAX_N + 1):
            xx, yy = canvas.convert(math.log(m), math.log(n))
            _scaled_label(drawing, xx, yy, m * n, "rgb(255,255,255)")
    return drawing.finish()


FIGURES: dict[str, Callable[[], str]] = {
    "divisors": render_divisors,
    "products": render_products,
    "factors": render_factors,
    "table": render_table,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Write the chosen lattice figure to standard output."""
    parser = argparse.ArgumentParser(description="Draw a logarithmic multiplication lattice as SVG.")
    parser.add_argument("figure", nargs="?", default="divisors", choices=sorted(FIGURES))
    args = parser.parse_args(argv)
    sys.stdout.write(FIGURES[args.figure]())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())