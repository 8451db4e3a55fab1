"""Patrol test specification mapper.

This package scans Patrol test sources for ``patrolTest(...)`` descriptions,
groups them by their leading tag (``checkout: user can pay``) and reconciles
the tags against a markdown requirement table.  The resulting specification
map is printed to the console and can be stored as a markdown document.
"""

__all__ = ["cli"]
__version__ = "0.1.0"
