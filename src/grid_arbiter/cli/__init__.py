"""Command line interface for grid-arbiter."""
