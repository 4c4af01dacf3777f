"""I/O utilities for writing snapshot files."""

from . import writers

__all__ = ["writers"]
