"""Name-sorted, base-type-checked sets of classes."""

from typing import Dict, Generic, Iterator, Tuple, Type, TypeVar

T = TypeVar('T')


def qualified_name(cls: type) -> str:
    """Return the fully-qualified name used to identify and order a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


class TypeSet(Generic[T]):
    """
    A set of classes sharing a base type.

    Entries are deduplicated by class identity and always iterate in
    qualified-name order, whatever order they were added in.
    """

    def __init__(self, base_type: Type[T]):
        """
        Initialize the set.

        Args:
            base_type: Base type every member must derive from
        """
        self._base_type = base_type
        self._members: Dict[type, str] = {}

    def add(self, cls: Type[T]) -> bool:
        """
        Add a class to the set.

        Args:
            cls: Class to add

        Returns:
            bool: True if the class was new, False if it was already present

        Raises:
            TypeError: If cls is not a subtype of base_type
        """
        if not isinstance(cls, type) or not issubclass(cls, self._base_type):
            raise TypeError(f"{cls!r} is not a subtype of {self._base_type.__name__}")
        if cls in self._members:
            return False
        self._members[cls] = qualified_name(cls)
        return True

    def list_registered(self) -> Tuple[Type[T], ...]:
        """
        Get all members.

        Returns:
            Immutable snapshot of the members in qualified-name order
        """
        return tuple(sorted(self._members, key=lambda cls: (self._members[cls], id(cls))))

    def __contains__(self, cls: object) -> bool:
        return cls in self._members

    def __iter__(self) -> Iterator[Type[T]]:
        return iter(self.list_registered())

    def __len__(self) -> int:
        return len(self._members)
