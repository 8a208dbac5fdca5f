"""
gridpkg - class factory and registry for grid-based simulations.

This package lets configuration files name the grid and grid-object classes
an application offers. Named classes are resolved, checked for the right
capability and constructor shape, kept in name-sorted registries, and
constructed on demand.
"""

# Version information
__version__ = "0.1.0"

from gridpkg.constants import Category
from gridpkg.core.color import Color
from gridpkg.core.factory import (
    PlacementStrategy,
    TypeRegistry,
    configure_registry,
    get_registry,
    set_global_registry,
)
from gridpkg.core.grid import BoundedGrid, UnboundedGrid
from gridpkg.core.grid_object import GridObject
from gridpkg.core.location import Direction, Location
from gridpkg.interfaces.grid import Grid

__all__ = [
    # Version info
    "__version__",

    # Factory
    "TypeRegistry",
    "PlacementStrategy",
    "Category",
    "configure_registry",
    "get_registry",
    "set_global_registry",

    # Grid model
    "Grid",
    "BoundedGrid",
    "UnboundedGrid",
    "GridObject",
    "Location",
    "Direction",
    "Color",
]
