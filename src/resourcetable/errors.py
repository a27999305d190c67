"""Exception hierarchy for resource table discovery.

Hierarchy:
    ResourceTableError (base)
    └─ TableInstantiationError (matched class could not be constructed)

A lookup miss is not an error: lookups return None and only the mapping
protocol (``table[key]``) raises the builtin KeyError. Module import failures
during package preloading are logged and recovered, never raised.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import final

__all__ = [
    "ResourceTableError",
    "TableInstantiationError",
]


class ResourceTableError(Exception):
    """Base exception for all resourcetable errors."""


@final
class TableInstantiationError(ResourceTableError):
    """Raised when a discovered resource table class cannot be instantiated.

    A class matched by name must be constructible without arguments. A failing
    constructor indicates a malformed table and is never reported as
    "not found". The original exception is chained as ``__cause__``.

    Attributes:
        qualified_name: Conventional name the class was matched under
        table_type: The class that failed to construct
    """

    def __init__(self, qualified_name: str, table_type: type) -> None:
        """Initialize TableInstantiationError.

        Args:
            qualified_name: Conventional name the class was matched under
            table_type: The class that failed to construct
        """
        super().__init__(
            f"Cannot instantiate resource table '{qualified_name}' "
            f"({table_type.__module__}.{table_type.__qualname__})"
        )
        self.qualified_name = qualified_name
        self.table_type = table_type
