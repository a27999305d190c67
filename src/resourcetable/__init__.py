"""resourcetable - locale fallback chains of resource tables.

Resolves locale-specific resources by naming convention over loaded classes
and links the matches into a fallback chain, from the most specific locale
variant down to a locale-neutral table.

Public API:
    get_table - Discover and link the resource tables for a base name and locale
    ResourceTable - Abstract base class of all resource tables
    MappingTable - Mixin serving a table's resources from a class-level mapping
    Found - Explicit present-value result of a lookup
    active_locale - Context manager overriding the active locale

Exceptions:
    ResourceTableError - Base exception class
    TableInstantiationError - A matched table class could not be constructed

Submodules:
    resourcetable.discovery - Candidate names, class scan, package preloading
    resourcetable.locale_utils - Locale subtags and active-locale detection
"""

from .discovery import get_table
from .errors import ResourceTableError, TableInstantiationError
from .locale_utils import active_locale, get_active_locale
from .mapping import MappingTable
from .table import Found, ResourceTable

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("resourcetable")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Found",
    "MappingTable",
    "ResourceTable",
    "ResourceTableError",
    "TableInstantiationError",
    "__version__",
    "active_locale",
    "get_active_locale",
    "get_table",
]
