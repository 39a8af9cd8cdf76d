"""SVG figures of hopscotch lattices: logarithmic grids, staircases, arctangent circles, orbits."""

__version__ = "0.1.0"
__all__ = ["arctan", "lattice", "orbit", "stairs"]