"""grid-arbiter: layout engine for draggable, resizable dashboard grids."""

__version__ = "0.1.0"
