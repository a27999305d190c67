"""Mapping-backed storage for resource tables.

MappingTable is a mixin, not a ResourceTable subclass: discovery only
considers direct subclasses of ResourceTable, so a concrete table lists both
bases itself.

Example:
    >>> class Messages_fr(MappingTable, ResourceTable):
    ...     locale = "fr"
    ...     entries = {"hello": "Bonjour"}

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import ClassVar

from resourcetable.table import Found
from resourcetable.types import ResourceKey

__all__ = ["MappingTable"]


class MappingTable:
    """Serve a table's own resources from the class attribute ``entries``.

    Keys stored with a None value are present resources.
    """

    __slots__ = ()

    entries: ClassVar[Mapping[ResourceKey, object]] = {}

    def _own_value(self, key: ResourceKey) -> Found | None:
        if key in self.entries:
            return Found(self.entries[key])
        return None

    def _own_keys(self) -> Iterable[ResourceKey]:
        return self.entries.keys()
