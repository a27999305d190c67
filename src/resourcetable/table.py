"""Resource tables and fallback-chain lookups.

A ResourceTable holds locale-specific resources: a mapping from string keys
to values of any type. Concrete subclasses define storage for a single level
(one locale) through two abstract hooks; this base class combines the levels
by walking the parent chain built by get_table().

Architecture:
    - _own_value / _own_keys: single-level storage, supplied by subclasses
    - lookup / keys: chain aggregates, supplied here for every table
    - Found: explicit present-value wrapper, so a stored None is a value

Thread Safety:
    A chain is immutable once get_table() returns it. Lookups do not mutate
    any table, so a chain can be shared between threads without locking.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from resourcetable.types import BaseName, LocaleCode, ResourceKey

__all__ = ["Found", "ResourceTable"]


@dataclass(frozen=True, slots=True)
class Found:
    """A value present in a resource table.

    Lookups return Found or None. Wrapping keeps "absent" distinct from a
    resource whose value is None.

    Attributes:
        value: The stored resource value (may be None)
    """

    value: object


class ResourceTable(ABC):
    """Abstract resource table, one level of a locale fallback chain.

    Subclasses declare ResourceTable as a direct base, take no constructor
    arguments and implement _own_value() and _own_keys() for the resources
    authored for their locale. They are discovered by qualified name, see
    resourcetable.discovery.get_table().

    The owner of a chain should keep a reference to its head: discovery scans
    all loaded classes on every call.

    Example:
        >>> class Messages_fr(ResourceTable):
        ...     locale = "fr"
        ...     def _own_value(self, key):
        ...         return Found("Bonjour") if key == "hello" else None
        ...     def _own_keys(self):
        ...         return ("hello",)

    Attributes:
        base_name: Name passed to get_table() when this table was created;
            None only for a table that get_table() never linked
        parent: Next less specific table, or None at the tail
    """

    _base_name: BaseName | None = None
    _parent: ResourceTable | None = None

    @property
    @abstractmethod
    def locale(self) -> LocaleCode:
        """Locale this table's resources were authored for ("" if neutral)."""

    @abstractmethod
    def _own_value(self, key: ResourceKey) -> Found | None:
        """Return the value defined in this table only, or None if absent.

        Must not consult the parent table.
        """

    @abstractmethod
    def _own_keys(self) -> Iterable[ResourceKey]:
        """Return the keys defined in this table only."""

    @property
    def base_name(self) -> BaseName | None:
        """Name passed to get_table() when creating this table.

        Every table in a chain returned by get_table() has it set. None only
        for a table constructed directly and never linked by get_table().
        """
        return self._base_name

    @property
    def parent(self) -> ResourceTable | None:
        """Next less specific table in the chain, or None."""
        return self._parent

    @property
    def depth(self) -> int:
        """Number of tables from this one to the tail, inclusive."""
        return sum(1 for _ in self.chain())

    def chain(self) -> Iterator[ResourceTable]:
        """Iterate from this table through its parents, most specific first."""
        current: ResourceTable | None = self
        while current is not None:
            yield current
            current = current._parent

    def lookup(self, key: ResourceKey) -> Found | None:
        """Find a value in this table or the nearest parent defining it.

        Args:
            key: Resource key

        Returns:
            Found wrapping the most specific value, or None if no table in the
            chain defines the key
        """
        for table in self.chain():
            found = table._own_value(key)
            if found is not None:
                return found
        return None

    def keys(self) -> frozenset[ResourceKey]:
        """Return the keys defined in this table and all its parents."""
        key_set: set[ResourceKey] = set()
        for table in self.chain():
            key_set.update(table._own_keys())
        return frozenset(key_set)

    def get(self, key: ResourceKey, default: object = None) -> object:
        """Return the value for key, or default if no table defines it."""
        found = self.lookup(key)
        return default if found is None else found.value

    def __getitem__(self, key: ResourceKey) -> object:
        found = self.lookup(key)
        if found is None:
            raise KeyError(key)
        return found.value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __repr__(self) -> str:
        return (
            f"<{type(self).__qualname__} locale={self.locale!r} "
            f"base_name={self._base_name!r} depth={self.depth}>"
        )

    def _bind(self, base_name: BaseName, parent: ResourceTable | None) -> None:
        """Attach this table to a chain. Called once, by the chain builder."""
        if self._base_name is not None:
            msg = f"{type(self).__qualname__} is already linked into a chain"
            raise RuntimeError(msg)
        self._base_name = base_name
        self._parent = parent
