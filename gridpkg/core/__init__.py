"""
Core components for the gridpkg library.

This module provides the main functional components of gridpkg:
- TypeRegistry: For validating, registering and constructing grid classes
- BoundedGrid / UnboundedGrid: Baseline grid implementations
- GridObject: Base class for objects that live in a grid
"""

from gridpkg.core.factory import TypeRegistry
from gridpkg.core.grid import BoundedGrid, UnboundedGrid
from gridpkg.core.grid_object import GridObject

__all__ = [
    "TypeRegistry",
    "BoundedGrid",
    "UnboundedGrid",
    "GridObject",
]
