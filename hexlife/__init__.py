"""Life-like cellular automata on the H3 hexagonal tessellation of the sphere."""

__version__ = "0.1.0"
