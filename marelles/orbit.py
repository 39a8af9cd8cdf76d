"""Orbits of points under the squaring map of the hopscotch parameter plane, as SVG."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

MAX_PIXEL_X = 950.0
MAX_PIXEL_Y = 450.0

MIN_POINT_X = -9.5
MAX_POINT_X = 9.5
MIN_POINT_Y = -4.5
MAX_POINT_Y = 4.5

RADIUS_POINT = 0.03

COLOR_REACHABLE = "lightgreen"
COLOR_UNREACHABLE = "red"


class DomainError(ValueError):
    """Raised when a map is applied to a point outside its domain."""


@dataclass(frozen=True)
class Point:
    """A point (t, u) of the parameter plane."""

    x: float
    y: float


def sqrt_positive(p: Point) -> Point:
    """Return the square root of p whose coordinate sum is positive."""
    s = p.x + p.y + 2.0
    if s < 0.0:
        raise DomainError(f"no square root for {p}: x + y + 2 is negative")
    s = math.sqrt(s)
    if s == 0.0:
        raise DomainError(f"no square root for {p}: x + y + 2 is zero")
    t = (p.x - p.y) / s
    return Point(0.5 * (s + t), 0.5 * (s - t))


def sqrt_negative(p: Point) -> Point:
    """Return the square root of p whose coordinate sum is negative."""
    q = sqrt_positive(p)
    return Point(-q.x, -q.y)


def square(p: Point) -> Point:
    """Return the square of p."""
    x, y = p.x, p.y
    return Point(x * (x + y) - 1, y * (x + y) - 1)


def cube(p: Point) -> Point:
    """Return the cube of p."""
    x, y = p.x, p.y
    return Point(
        x * x * x + 2 * x * x * y + x * y * y - 2 * x - y,
        y * y * y + 2 * y * y * x + y * x * x - 2 * y - x,
    )


def point_to_pixel(p: Point) -> tuple[float, float]:
    """Return the pixel position of a point of the plane."""
    return (
        (p.x - MIN_POINT_X) / (MAX_POINT_X - MIN_POINT_X) * MAX_PIXEL_X,
        (p.y - MAX_POINT_Y) / (MIN_POINT_Y - MAX_POINT_Y) * MAX_PIXEL_Y,
    )


def orbit_points(p: Point, iterations: int) -> Iterator[Point]:
    """Yield p and its successive squares, iterations + 1 points in all."""
    q = p
    for _ in range(iterations + 1):
        yield q
        q = square(q)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class _Drawing:
    def __init__(self) -> None:
        self._parts = [
            f"<svg xmlns='http://www.w3.org/2000/svg' version='1.1' "
            f"width='{MAX_PIXEL_X:f}' height='{MAX_PIXEL_Y:f}' "
            f"xmlns:xlink='http://www.w3.org/1999/xlink'>",
            f"\t<rect fill='#000000' width='{MAX_PIXEL_X:f}' height='{MAX_PIXEL_Y:f}' />",
        ]

    def line(self, a: Point, b: Point, color: str, thickness: int) -> None:
        ax, ay = point_to_pixel(a)
        bx, by = point_to_pixel(b)
        self._parts.append(
            f"\t<line x1='{ax:f}' y1='{ay:f}' x2='{bx:f}' y2='{by:f}' "
            f"style='stroke:{color};stroke-width:{thickness}' />"
        )

    def circle(self, c: Point, r: float, color: str) -> None:
        cx, cy = point_to_pixel(c)
        rr = r * MAX_PIXEL_X / (MAX_POINT_X - MIN_POINT_X)
        self._parts.append(f"\t<circle cx='{cx:f}' cy='{cy:f}' r='{rr:f}' fill='{color}' />")

    def text(self, p: Point, font_size: int, color: str, msg: str) -> None:
        px, py = point_to_pixel(p)
        self._parts.append(
            f"\t<text font-size='{font_size}' x='{px:f}' y='{py:f}' fill='{color}'>{msg}</text>"
        )

    def grid(self) -> None:
        for i in range(_round_half_away(MIN_POINT_X), _round_half_away(MAX_POINT_X) + 1):
            self.text(Point(i, 0), 24, "gray", str(i))
            self.line(
                Point(i, MAX_POINT_Y),
                Point(i, MIN_POINT_Y),
                "white" if i == 0 else "gray",
                2 if i == 0 else 1,
            )
        for j in range(_round_half_away(MIN_POINT_Y), _round_half_away(MAX_POINT_Y) + 1):
            self.text(Point(0, j), 24, "gray", str(j))
            self.line(
                Point(MIN_POINT_X, j),
                Point(MAX_POINT_X, j),
                "white" if j == 0 else "gray",
                2 if j == 0 else 1,
            )

    def frontiers(self) -> None:
        self.line(Point(-10, 12), Point(12, -10), "pink", 1)  # x + y = +2
        self.line(Point(-12, 10), Point(10, -12), "pink", 1)  # x + y = -2

    def orbit(self, p: Point, iterations: int, labelled: int) -> None:
        q = p
        for i in range(iterations + 1):
            color = COLOR_REACHABLE
            try:
                following = square(q)
            except DomainError:
                following = None
                color = COLOR_UNREACHABLE
            if i <= labelled:
                self.text(Point(q.x + 0.0, q.y + 0.2), 12, "yellow", str(i))
            self.circle(q, RADIUS_POINT, color)
            if following is None:
                return
            q = following

    def finish(self) -> str:
        return "\n".join([*self._parts, "</svg>"]) + "\n"


def render(x: float, y: float, iterations: int) -> str:
    """Return the SVG figure of the orbit of (x, y) over the given number of iterations."""
    drawing = _Drawing()
    drawing.grid()
    drawing.frontiers()
    drawing.orbit(Point(x, y), iterations, iterations)
    return drawing.finish()


def main(argv: Sequence[str] | None = None) -> int:
    """Write the orbit figure for the point and iteration count given on the command line."""
    parser = argparse.ArgumentParser(description="Draw the orbit of a point under squaring as SVG.")
    parser.add_argument("x", type=float)
    parser.add_argument("y", type=float)
    parser.add_argument("iterations", type=int)
    args = parser.parse_args(argv)
    sys.stdout.write(render(args.x, args.y, args.iterations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())