"""Staircases of unit-wide rectangles whose heights grow with the step size."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

WIDTH = 1900.0
HEIGHT = 900.0

X_MIN = -475.0
X_MAX = 475.0
Y_MIN = 0.0
Y_MAX = 450.0
X_LEN = X_MAX - X_MIN
Y_LEN = Y_MAX - Y_MIN
GAP = 0.05


@dataclass(frozen=True)
class Rect:
    """One filled rectangle of the figure, in view-box coordinates."""

    x: float
    y: float
    width: float
    height: float
    color: str

    def to_svg(self) -> str:
        return (
            f'<rect x="{self.x:f}" y="{self.y:f}" width="{self.width:f}" '
            f'height="{self.height:f}" '
            f'style="fill:{self.color};stroke:{self.color};stroke-width:0"/>'
        )


def _inside(x: float, y: float) -> bool:
    return X_MIN <= x < X_MAX and Y_MIN <= y < Y_MAX


def _rising_x(m: float, i: int) -> float:
    return -m + i + GAP


def _falling_x(m: float, i: int) -> float:
    return m - i - 1 + GAP


def _staircase(m: float, place: Callable[[float, int], float], color: str) -> Iterator[Rect]:
    for i in itertools.count():
        x = place(m, i)
        y = m * i + GAP
        if not _inside(x, y):
            return
        yield Rect(x, y, 1.0 - 2.0 * GAP, m - 2.0 * GAP, color)


def rectangles() -> Iterator[Rect]:
    """Yield every rectangle: a white and a black staircase for each step height."""
    m = 1.0
    while m <= X_MAX:
        yield from _staircase(m, _rising_x, "white")
        yield from _staircase(m, _falling_x, "black")
        m += 1.0


def render() -> str:
    """Return the whole figure as an SVG document."""
    parts = [
        '<?xml version="1.0" standalone="no"?>',
        '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
        '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">',
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="{WIDTH:f}" '
        f'height="{HEIGHT:f}" style="background-color:gray" '
        f'viewBox="{X_MIN:f} {Y_MIN:f} {X_LEN:f} {Y_LEN:f}" >',
    ]
    parts.extend(rect.to_svg() for rect in rectangles())
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Write the staircase figure to standard output."""
    parser = argparse.ArgumentParser(description="Draw staircases of rectangles as SVG.")
    parser.parse_args(argv)
    sys.stdout.write(render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())