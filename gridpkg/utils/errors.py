"""Custom exceptions for gridpkg.

This module defines all custom exception types used throughout the package,
so callers can tell a missing class apart from a class with the wrong shape
or a constructor that blew up.
"""

class GridPkgError(Exception):
    """Base class for all gridpkg-specific exceptions."""
    pass


class TypeNotFoundError(GridPkgError, LookupError):
    """A class name did not resolve to anything."""
    pass


class TypeMismatchError(GridPkgError, TypeError):
    """A resolved class is not assignable to the required capability."""
    pass


class NoConstructorFoundError(GridPkgError):
    """The required constructor signature is absent or inaccessible."""
    pass


class ConstructionFailedError(GridPkgError):
    """A constructor call failed."""
    pass


class InvalidArgumentError(GridPkgError, ValueError):
    """An argument is unsuitable for the requested operation."""
    pass


class GridError(GridPkgError):
    """Errors related to grids."""
    pass


class PlacementError(GridError):
    """An object could not be placed at or removed from a location."""
    pass


class ConfigError(GridPkgError):
    """Errors related to configuration."""
    pass
