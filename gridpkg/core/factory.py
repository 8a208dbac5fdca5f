"""Grid and grid-object factory for gridpkg.

Keeps track of which grid and grid-object classes are available to an
application, validates classes named in configuration before accepting
them, and constructs grids and grid objects with the calling conventions
the framework supports.
"""

import importlib
import inspect
import threading
import typing
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, Union

from gridpkg.constants import Category
from gridpkg.core.color import Color
from gridpkg.core.grid import BoundedGrid, UnboundedGrid
from gridpkg.core.grid_object import GridObject
from gridpkg.core.location import Direction, Location
from gridpkg.interfaces.grid import Grid
from gridpkg.interfaces.registry import TypeSet, qualified_name
from gridpkg.utils.config import Config, get_config
from gridpkg.utils.errors import (
    ConfigError,
    ConstructionFailedError,
    InvalidArgumentError,
    NoConstructorFoundError,
    TypeMismatchError,
    TypeNotFoundError,
)
from gridpkg.utils.logging import level_from_name, setup_logger

ParamTypes = Optional[Sequence[type]]
ClassOrName = Union[type, str]

# Parameter types for the constructors the factory knows how to call
TWO_ARG_TYPES: Tuple[type, ...] = (Grid, Location)
THREE_ARG_TYPES: Tuple[type, ...] = (Grid, Location, Direction)
FOUR_ARG_TYPES: Tuple[type, ...] = (Grid, Location, Direction, Color)
BOUNDED_ARGS: Tuple[type, ...] = (int, int)
UNBOUNDED_ARGS: ParamTypes = None

# Global registry instance
_global_registry = None


class PlacementStrategy(str, Enum):
    """How a grid object gets into its grid when built from (grid, location)."""

    DIRECT = "direct"
    CONSTRUCT_THEN_PLACE = "construct_then_place"


def _describe(param_types: ParamTypes) -> str:
    if not param_types:
        return "no parameters"
    return "(" + ", ".join(t.__name__ for t in param_types) + ")"


def _constructor_hints(cls: type) -> Dict[str, Any]:
    init = cls.__init__
    if init is object.__init__:
        return {}
    try:
        return typing.get_type_hints(init)
    except (AttributeError, NameError, TypeError):
        # Unresolvable annotations only disable the type check
        return {}


def has_constructor(cls: Any, param_types: ParamTypes) -> bool:
    """
    Check whether a class can be constructed with arguments of the given types.

    The constructor must accept exactly ``len(param_types)`` positional
    arguments (None means no arguments). Parameters annotated with a plain
    class must accept the requested type. Abstract classes never qualify.

    Args:
        cls: Candidate class
        param_types: Parameter types, or None for the no-argument constructor

    Returns:
        bool: True if a matching constructor is accessible
    """
    if not isinstance(cls, type) or inspect.isabstract(cls):
        return False
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        return False

    param_types = tuple(param_types or ())
    try:
        bound = signature.bind(*param_types)
    except TypeError:
        return False

    hints = _constructor_hints(cls)
    for name, value in bound.arguments.items():
        hint = hints.get(name)
        if not isinstance(hint, type) or hint is object:
            continue
        parameter = signature.parameters[name]
        requested = value if parameter.kind is inspect.Parameter.VAR_POSITIONAL else (value,)
        if not all(issubclass(t, hint) for t in requested):
            return False
    return True


def _import_by_name(name: str) -> Any:
    """Resolve a dotted ``package.module.Attr[.Nested]`` path."""
    parts = name.split(".")
    if not all(part.isidentifier() for part in parts):
        raise TypeNotFoundError(f"Malformed class name {name!r}")
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            obj = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            missing = e.name or ""
            if module_name == missing or module_name.startswith(missing + "."):
                continue
            raise TypeNotFoundError(f"{name}: importing {module_name} failed: {e}") from e
        except Exception as e:
            # Covers ImportError and anything raised while the module body runs
            raise TypeNotFoundError(f"{name}: importing {module_name} failed: {e!r}") from e
        for attr in parts[split:]:
            try:
                obj = getattr(obj, attr)
            except AttributeError:
                raise TypeNotFoundError(f"{name}: {module_name} has no attribute {attr!r}") from None
        return obj
    raise TypeNotFoundError(f"No class found with name {name!r}")


class TypeRegistry:
    """
    Factory and registry of grid and grid-object classes.

    The registry holds three name-ordered sets of accepted classes (grid
    objects, bounded grids, unbounded grids) plus the current default
    bounded and unbounded grid classes. Classes are named either by an
    alias from the known-type table or by their dotted import path.
    All mutations are serialized by a single lock.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize an empty registry.

        Args:
            config: Configuration (default: global config)
        """
        self.config = config or get_config()
        self.logger = setup_logger(
            f"{__name__}.{self.__class__.__name__}",
            level=level_from_name(self.config.get("logging", "level", "INFO")),
            log_file=self.config.get("logging", "log_file"),
            log_format=self.config.get("logging", "format")
        )

        self._lock = threading.RLock()
        self._sets: Dict[Category, TypeSet] = {
            Category.GRID_OBJECT: TypeSet(GridObject),
            Category.BOUNDED_GRID: TypeSet(Grid),
            Category.UNBOUNDED_GRID: TypeSet(Grid),
        }
        self._defaults: Dict[Category, Type[Grid]] = {
            Category.BOUNDED_GRID: BoundedGrid,
            Category.UNBOUNDED_GRID: UnboundedGrid,
        }
        self._known_types: Dict[str, type] = {}
        self._placement_strategies: Dict[type, PlacementStrategy] = {}

        for cls in (BoundedGrid, UnboundedGrid, GridObject):
            self.add_known_type(cls)

    def add_known_type(self, cls: type, *aliases: str) -> None:
        """
        Make a class resolvable by name without importing it.

        The class is always known by its bare and qualified names; extra
        aliases may be given.

        Raises:
            InvalidArgumentError: If cls is not a class
        """
        if not isinstance(cls, type):
            raise InvalidArgumentError(f"{cls!r} is not a class")
        with self._lock:
            for alias in (cls.__name__, qualified_name(cls)) + aliases:
                previous = self._known_types.get(alias)
                if previous is not None and previous is not cls:
                    self.logger.warning(
                        f"Name {alias!r} now refers to {qualified_name(cls)} "
                        f"instead of {qualified_name(previous)}"
                    )
                self._known_types[alias] = cls

    def known_types(self) -> Dict[str, type]:
        with self._lock:
            return dict(self._known_types)

    def resolve_type(self, name: ClassOrName) -> Any:
        """
        Resolve a class name to the object it names.

        Classes pass through unchanged. Strings are looked up in the
        known-type table first, then imported as a dotted path.

        Raises:
            TypeNotFoundError: If nothing is found under the name
        """
        if isinstance(name, type):
            return name
        if not isinstance(name, str) or not name.strip():
            raise TypeNotFoundError(f"Invalid class name: {name!r}")
        name = name.strip()
        with self._lock:
            known = self._known_types.get(name)
        if known is not None:
            return known
        return _import_by_name(name)

    def has_constructor(self, cls: Any, param_types: ParamTypes) -> bool:
        return has_constructor(cls, param_types)

    def is_valid_type(self, candidate: Any, required_base: type, param_types: ParamTypes) -> bool:
        """
        Verify that a class is assignable to a base and has the required constructor.

        Assignability is checked first, so a mismatch wins over a missing
        constructor when both apply.

        Args:
            candidate: Class to check
            required_base: Capability the class must derive from
            param_types: Constructor parameter types, or None for no arguments

        Returns:
            bool: True when both checks pass

        Raises:
            TypeMismatchError: If candidate is not a subclass of required_base
            NoConstructorFoundError: If the constructor is missing or inaccessible
        """
        if not isinstance(candidate, type) or not issubclass(candidate, required_base):
            raise TypeMismatchError(f"not compatible with {qualified_name(required_base)}.")
        if not has_constructor(candidate, param_types):
            raise NoConstructorFoundError(
                f"{qualified_name(candidate)} has no accessible constructor taking {_describe(param_types)}"
            )
        return True

    def is_valid_grid_type(self, cls: Any, param_types: ParamTypes) -> bool:
        """Validate a grid class: BOUNDED_ARGS for bounded, UNBOUNDED_ARGS for unbounded."""
        return self.is_valid_type(cls, Grid, param_types)

    def is_valid_grid_object_type(self, cls: Any, param_types: ParamTypes) -> bool:
        return self.is_valid_type(cls, GridObject, param_types)

    def has_four_arg_constructor(self, cls: Any) -> bool:
        """Report whether a grid-object class takes (grid, location, direction, color)."""
        try:
            return self.is_valid_grid_object_type(cls, FOUR_ARG_TYPES)
        except NoConstructorFoundError:
            return False

    def _validate_for(self, category: Category, cls: Any) -> None:
        if category is Category.BOUNDED_GRID:
            self.is_valid_grid_type(cls, BOUNDED_ARGS)
        elif category is Category.UNBOUNDED_GRID:
            self.is_valid_grid_type(cls, UNBOUNDED_ARGS)
        elif category is Category.GRID_OBJECT:
            # Constructor shape is never checked for grid objects
            if not isinstance(cls, type) or not issubclass(cls, GridObject):
                raise TypeMismatchError(f"not compatible with {qualified_name(GridObject)}.")
        else:
            raise InvalidArgumentError(f"Unknown class category: {category!r}")

    @staticmethod
    def _coerce_category(category: Union[Category, str]) -> Category:
        if isinstance(category, Category):
            return category
        try:
            return Category.from_string(category)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e

    def register_types(self, names: Sequence[ClassOrName], category: Union[Category, str]) -> List[type]:
        """
        Add classes, given by name, to the set for a category.

        Each name is checked on its own: a name that does not resolve, or
        names an unsuitable class, is reported as a warning and skipped
        without affecting the rest of the batch. Re-adding a present class
        is a no-op.

        Args:
            names: Class names (or classes)
            category: Category, or its label such as "bounded grid"

        Returns:
            List[type]: Classes accepted in this call, in input order

        Raises:
            InvalidArgumentError: If the category label is not recognised
        """
        category = self._coerce_category(category)
        if isinstance(names, (str, type)):
            names = [names]

        accepted: List[type] = []
        for name in names:
            label = qualified_name(name) if isinstance(name, type) else name
            err_start = f'Discarding {category} choice "{label}" because '
            try:
                cls = self.resolve_type(name)
                self._validate_for(category, cls)
            except TypeNotFoundError:
                self.logger.warning(err_start + "no class found with that name.")
                continue
            except TypeMismatchError as e:
                self.logger.warning(err_start + str(e))
                continue
            except NoConstructorFoundError:
                self.logger.warning(err_start + "it doesn't have the proper constructor.")
                continue

            with self._lock:
                added = self._sets[category].add(cls)
            if added:
                self.logger.debug(f"Registered {category} class {qualified_name(cls)}")
            accepted.append(cls)
        return accepted

    def add_grid_object_class_names(self, names: Sequence[ClassOrName]) -> List[type]:
        """Add grid-object classes; constructor shape is never checked."""
        return self.register_types(names, Category.GRID_OBJECT)

    def add_bounded_grid_class_names(self, names: Sequence[ClassOrName]) -> List[type]:
        """Add bounded grid classes, which need a (rows, cols) constructor."""
        return self.register_types(names, Category.BOUNDED_GRID)

    def add_unbounded_grid_class_names(self, names: Sequence[ClassOrName]) -> List[type]:
        """Add unbounded grid classes, which need a no-argument constructor."""
        return self.register_types(names, Category.UNBOUNDED_GRID)

    def get_default_bounded_type(self) -> Type[Grid]:
        with self._lock:
            return self._defaults[Category.BOUNDED_GRID]

    def get_default_unbounded_type(self) -> Type[Grid]:
        with self._lock:
            return self._defaults[Category.UNBOUNDED_GRID]

    def set_default_bounded_type(self, cls: ClassOrName) -> None:
        """
        Set the default bounded grid class.

        Raises:
            InvalidArgumentError: If cls lacks an (int, int) constructor; the
                previous default is kept
        """
        self._set_default(Category.BOUNDED_GRID, cls, BOUNDED_ARGS, "(int, int)")

    def set_default_unbounded_type(self, cls: ClassOrName) -> None:
        """
        Set the default unbounded grid class.

        Raises:
            InvalidArgumentError: If cls lacks a no-parameter constructor; the
                previous default is kept
        """
        self._set_default(Category.UNBOUNDED_GRID, cls, UNBOUNDED_ARGS, "no-parameter")

    def _set_default(self, category: Category, cls: ClassOrName,
                     param_types: ParamTypes, ctor_label: str) -> None:
        try:
            resolved = self.resolve_type(cls)
            self.is_valid_grid_type(resolved, param_types)
        except NoConstructorFoundError as e:
            raise InvalidArgumentError(f"{cls} doesn't have the proper {ctor_label} constructor.") from e
        except (TypeNotFoundError, TypeMismatchError) as e:
            raise InvalidArgumentError(f"{cls} cannot be the default {category}: {e}") from e

        with self._lock:
            self._defaults[category] = resolved
        self.logger.info(f"Default {category} class is now {qualified_name(resolved)}")

    def registered_classes(self, category: Union[Category, str]) -> Tuple[type, ...]:
        """Return the classes registered for a category, in name order."""
        category = self._coerce_category(category)
        with self._lock:
            return self._sets[category].list_registered()

    def grid_object_classes(self) -> Tuple[type, ...]:
        return self.registered_classes(Category.GRID_OBJECT)

    def bounded_grid_classes(self) -> Tuple[type, ...]:
        return self.registered_classes(Category.BOUNDED_GRID)

    def unbounded_grid_classes(self) -> Tuple[type, ...]:
        return self.registered_classes(Category.UNBOUNDED_GRID)

    def _resolve_for_construction(self, cls: ClassOrName) -> type:
        try:
            resolved = self.resolve_type(cls)
        except TypeNotFoundError as e:
            raise ConstructionFailedError(f"Cannot construct {cls} object due to {e}") from e
        if not isinstance(resolved, type):
            raise ConstructionFailedError(f"Cannot construct {cls} object: it is not a class")
        return resolved

    def construct_object(self, cls: ClassOrName, parameter_types: ParamTypes = None,
                         arguments: Optional[Sequence[Any]] = None) -> Any:
        """
        Create an object of the given class.

        Args:
            cls: Class (or class name) of the new object
            parameter_types: Parameter types expected by the constructor;
                None selects the no-argument constructor
            arguments: Actual arguments to pass to the constructor

        Returns:
            The newly created object

        Raises:
            ConstructionFailedError: If the object cannot be constructed with
                the given parameters; the cause is chained
        """
        cls = self._resolve_for_construction(cls)
        name = qualified_name(cls)

        if parameter_types is None or arguments is None:
            parameter_types, arguments = None, ()
        else:
            parameter_types, arguments = tuple(parameter_types), tuple(arguments)
            if len(parameter_types) != len(arguments):
                raise ConstructionFailedError(
                    f"Cannot construct {name} object: {len(arguments)} arguments "
                    f"given for {len(parameter_types)} parameters"
                )
            for param_type, argument in zip(parameter_types, arguments):
                if argument is not None and not isinstance(argument, param_type):
                    raise ConstructionFailedError(
                        f"Cannot construct {name} object: {argument!r} is not a {param_type.__name__}"
                    )

        if not has_constructor(cls, parameter_types):
            missing = NoConstructorFoundError(f"{name} has no accessible constructor taking {_describe(parameter_types)}")
            raise ConstructionFailedError(f"Cannot construct {name} object due to {missing}") from missing

        try:
            return cls(*arguments)
        except Exception as e:
            raise ConstructionFailedError(f"Cannot construct {name} object due to {e!r}") from e

    def set_placement_strategy(self, cls: type, strategy: PlacementStrategy) -> None:
        """Force how (grid, location) construction places objects of a class."""
        with self._lock:
            self._placement_strategies[cls] = PlacementStrategy(strategy)

    def select_placement_strategy(self, cls: type) -> PlacementStrategy:
        """
        Choose how to build a grid object from a grid and a location.

        Classes with a (grid, location) constructor place themselves; other
        classes are built with no arguments and placed by the grid.
        """
        with self._lock:
            strategy = self._placement_strategies.get(cls)
        if strategy is not None:
            return strategy
        if has_constructor(cls, TWO_ARG_TYPES):
            return PlacementStrategy.DIRECT
        return PlacementStrategy.CONSTRUCT_THEN_PLACE

    def construct_grid_object(self, cls: ClassOrName, grid: Grid, location: Location,
                              direction: Optional[Direction] = None,
                              color: Optional[Color] = None) -> GridObject:
        """
        Create a grid object in a grid.

        With only a grid and a location, classes that take (grid, location)
        are constructed directly; others are constructed with no arguments
        and then added to the grid. With a direction, and optionally a color,
        the three- or four-argument constructor is used with no fallback.

        Args:
            cls: Class (or class name) of the new grid object
            grid: Grid in which the object will reside
            location: Location the object will occupy
            direction: Direction the object will face
            color: Color of the object

        Returns:
            The newly created grid object

        Raises:
            ConstructionFailedError: If the constructor call fails
            PlacementError: If adding a no-argument object to the grid fails
            InvalidArgumentError: If a color is given without a direction
        """
        if location is not None and not isinstance(location, Location):
            location = Location(*location)

        if direction is None:
            if color is not None:
                raise InvalidArgumentError("A color requires a direction")
            return self._construct_placed(cls, grid, location)
        if color is None:
            return self.construct_object(cls, THREE_ARG_TYPES, (grid, location, direction))
        return self.construct_object(cls, FOUR_ARG_TYPES, (grid, location, direction, color))

    def _construct_placed(self, cls: ClassOrName, grid: Grid, location: Location) -> GridObject:
        cls = self._resolve_for_construction(cls)
        strategy = self.select_placement_strategy(cls)
        if strategy is PlacementStrategy.DIRECT:
            return self.construct_object(cls, TWO_ARG_TYPES, (grid, location))

        obj = self.construct_object(cls)
        grid.add(obj, location)
        return obj

    def construct_grid(self, cls: ClassOrName, num_rows: Optional[int] = None,
                       num_cols: Optional[int] = None) -> Grid:
        """
        Create a grid.

        Without dimensions the no-argument constructor is used (unbounded
        grids); with both dimensions the (rows, cols) constructor is used.

        Raises:
            ConstructionFailedError: If the grid cannot be constructed
            InvalidArgumentError: If only one dimension is given
            TypeMismatchError: If the constructed object is not a Grid
        """
        if num_rows is None and num_cols is None:
            grid = self.construct_object(cls, UNBOUNDED_ARGS, None)
        elif num_rows is None or num_cols is None:
            raise InvalidArgumentError("Both num_rows and num_cols are required for a bounded grid")
        else:
            grid = self.construct_object(cls, BOUNDED_ARGS, (num_rows, num_cols))

        if not isinstance(grid, Grid):
            raise TypeMismatchError(f"{qualified_name(type(grid))} is not compatible with {qualified_name(Grid)}.")
        return grid

    def construct_default_grid(self, num_rows: Optional[int] = None,
                               num_cols: Optional[int] = None) -> Grid:
        """Create the default bounded grid when dimensions are given, else the default unbounded grid."""
        if num_rows is None and num_cols is None:
            return self.construct_grid(self.get_default_unbounded_type())
        return self.construct_grid(self.get_default_bounded_type(), num_rows, num_cols)


def configure_registry(registry: TypeRegistry, config: Optional[Config] = None) -> Dict[str, List[str]]:
    """
    Register the classes named in the ``factory`` configuration section.

    Args:
        registry: Registry to populate
        config: Configuration (default: the registry's config)

    Returns:
        Dict[str, List[str]]: Accepted qualified names per category label

    Raises:
        ConfigError: If a class list is not a list of names
        InvalidArgumentError: If a configured default grid is unsuitable
    """
    config = config or registry.config
    section = config.get_component_config("factory")

    summary: Dict[str, List[str]] = {}
    for category, key in ((Category.BOUNDED_GRID, "bounded_grids"),
                          (Category.UNBOUNDED_GRID, "unbounded_grids"),
                          (Category.GRID_OBJECT, "grid_objects")):
        names = section.get(key) or []
        if isinstance(names, str):
            names = [names]
        if not isinstance(names, (list, tuple)) or not all(isinstance(n, str) for n in names):
            raise ConfigError(f"factory.{key} must be a list of class names")
        accepted = registry.register_types(names, category)
        summary[category.value] = [qualified_name(cls) for cls in accepted]

    default_bounded = section.get("default_bounded_grid")
    if default_bounded:
        registry.set_default_bounded_type(default_bounded)
    default_unbounded = section.get("default_unbounded_grid")
    if default_unbounded:
        registry.set_default_unbounded_type(default_unbounded)

    return summary


def get_registry() -> TypeRegistry:
    """
    Get the global registry instance.

    If no global instance exists, one is created from the global
    configuration and populated from its ``factory`` section.
    """
    global _global_registry
    if _global_registry is None:
        registry = TypeRegistry()
        configure_registry(registry)
        _global_registry = registry
    return _global_registry


def set_global_registry(registry: Optional[TypeRegistry]) -> None:
    """Set (or with None, reset) the global registry instance."""
    global _global_registry
    _global_registry = registry
