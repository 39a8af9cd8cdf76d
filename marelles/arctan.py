"""Circles placed on the unit circle at twice the arctangent of integers."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

X_MIN = 0.0
X_MAX = 900.0
Y_MIN = 0.0
Y_MAX = 900.0
WIDTH = X_MAX - X_MIN
HEIGHT = Y_MAX - Y_MIN
X_CENTER = (X_MIN + X_MAX) / 2.0
Y_CENTER = (Y_MIN + Y_MAX) / 2.0

VIEW_X_MIN = -2.01
VIEW_X_MAX = 2.01
VIEW_Y_MIN = -2.01
VIEW_Y_MAX = 2.01
VIEW_X_CENTER = (VIEW_X_MIN + VIEW_X_MAX) / 2.0
VIEW_Y_CENTER = (VIEW_Y_MIN + VIEW_Y_MAX) / 2.0

COEF = min(WIDTH / (VIEW_X_MAX - VIEW_X_MIN), HEIGHT / (VIEW_Y_MAX - VIEW_Y_MIN))

M = 1000
N = 1000
K = 10000

C = 3.141592


def phi(k: float) -> float:
    """Return the angle 2 * atan(k / C)."""
    return 2.0 * math.atan(k / C)


def convert_coords(x: float, y: float) -> tuple[float, float]:
    """Return the pixel position of the point (x, y)."""
    return (
        X_CENTER + COEF * (x - VIEW_X_CENTER),
        Y_CENTER - COEF * (y - VIEW_Y_CENTER),
    )


def convert_distance(d: float) -> float:
    """Return a length in pixels."""
    return COEF * d


def _circle(x: float, y: float, r: float, color: str, stroke_width: float) -> str:
    xx, yy = convert_coords(x, y)
    rr = convert_distance(r)
    return (
        f'<circle cx="{xx:f}" cy="{yy:f}" r="{rr:f}" stroke="{color}" '
        f'stroke-width="{stroke_width:f}" fill="none" />'
    )


def render() -> str:
    """Return the whole figure as an SVG document."""
    parts = [
        '<?xml version="1.0" standalone="no"?>',
        '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
        '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">',
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="{WIDTH:f}" '
        f'height="{HEIGHT:f}" background-color="black">',
        f'<rect fill="#000000" width="{WIDTH:f}" height="{HEIGHT:f}" />',
    ]
    for m in range(1, M + 1):
        p = phi(m)
        parts.append(_circle(math.cos(p), math.sin(p), 1.0, "#FF0000", 2.0 / math.log(m + 2.0)))
    for n in range(1, N + 1):
        p = phi(n)
        parts.append(_circle(math.cos(p), -math.sin(p), 1.0, "#0000FF", 2.0 / math.log(n + 2.0)))
    for k in range(K + 1):
        c = math.cos(phi(math.sqrt(k)))
        parts.append(_circle(c, 0.0, abs(c), "#FFFFFF", 2.0 / math.log(k + 2.0)))
    parts.append(_circle(-1.0, 0.0, 1.0, "#FFFFFF", 3.0))
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Write the arctangent figure to standard output."""
    parser = argparse.ArgumentParser(description="Draw arctangent circles as SVG.")
    parser.parse_args(argv)
    sys.stdout.write(render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())