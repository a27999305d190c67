"""Chain builder: discover resource table classes by name and link them.

Resource tables are found by naming convention over the loaded classes. For
a caller in namespace ``greeter.ui``, base name ``Resources.Messages`` and
locale ``fr-FR`` the candidates are, least specific first:

    greeter.ui.Resources.Messages
    greeter.ui.Resources.Messages_fr
    greeter.ui.Resources.Messages_fr_FR

A candidate's qualified name is its module path plus ``__qualname__``, so the
neutral table above may be class ``Messages`` in module
``greeter.ui.Resources`` or class ``Messages`` nested in class ``Resources``
of module ``greeter.ui``. Only direct subclasses of ResourceTable are
candidates.

Every existing candidate is instantiated and linked to the previously found
one, so a missing level never breaks the chain. The most specific table is
returned as the chain head.

Discovery results are not cached: callers keep the returned head.

Python 3.13+.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import sys
from types import ModuleType

from babel import Locale

from resourcetable.constants import NAMESPACE_SEPARATOR, SUBTAG_NAME_SEPARATOR
from resourcetable.errors import TableInstantiationError
from resourcetable.locale_utils import get_active_locale, locale_subtags
from resourcetable.table import ResourceTable
from resourcetable.types import BaseName, LocaleCode, QualifiedName

__all__ = [
    "candidate_names",
    "get_table",
    "namespace_of",
    "preload_package",
]

logger = logging.getLogger(__name__)


def namespace_of(caller: object) -> str:
    """Return the namespace a search from caller starts in.

    Args:
        caller: A namespace string, a module, a class (its module) or any
            other object (the module of its class)

    Returns:
        Dotted namespace (e.g., "greeter.ui")
    """
    match caller:
        case str():
            return caller
        case ModuleType():
            return caller.__name__
        case type():
            return caller.__module__
        case _:
            return type(caller).__module__


def candidate_names(
    namespace: str, base_name: BaseName, locale: LocaleCode | Locale
) -> tuple[QualifiedName, ...]:
    """Compute the qualified names searched for, least specific first.

    Args:
        namespace: Dotted namespace of the caller
        base_name: Logical name of the resource family
        locale: Locale code or Babel Locale

    Returns:
        Neutral name followed by one name per locale subtag

    Example:
        >>> candidate_names("app", "Messages", "fr-FR")
        ('app.Messages', 'app.Messages_fr', 'app.Messages_fr_FR')
    """
    name = f"{namespace}{NAMESPACE_SEPARATOR}{base_name}" if namespace else base_name
    names = [name]
    for subtag in locale_subtags(locale):
        name = f"{name}{SUBTAG_NAME_SEPARATOR}{subtag}"
        names.append(name)
    return tuple(names)


def preload_package(namespace: str) -> tuple[str, ...]:
    """Import every module of the top-level package containing namespace.

    Classes are only discoverable once their module is imported. Modules that
    fail to import are logged and skipped; the rest stay imported.

    Args:
        namespace: Dotted namespace (e.g., "greeter.ui")

    Returns:
        Names of the modules that failed to import
    """
    top_level = namespace.split(NAMESPACE_SEPARATOR, 1)[0]
    try:
        package = importlib.import_module(top_level)
    except Exception as e:  # noqa: BLE001 - a broken package skips preloading, not the scan
        logger.warning("Cannot preload package '%s': %s: %s", top_level, type(e).__name__, e)
        return (top_level,)

    package_path = getattr(package, "__path__", None)
    if package_path is None:
        return ()

    failed: list[str] = []

    def _on_package_error(name: str) -> None:
        failed.append(name)
        logger.warning("Skipping package '%s': import failed", name)

    for info in pkgutil.walk_packages(
        package_path, prefix=f"{top_level}.", onerror=_on_package_error
    ):
        if info.name in sys.modules:
            continue
        try:
            importlib.import_module(info.name)
        except Exception as e:  # noqa: BLE001 - any module-level error skips that module only
            failed.append(info.name)
            logger.warning("Skipping module '%s': %s: %s", info.name, type(e).__name__, e)

    if failed:
        logger.info("Preloaded '%s' with %d module(s) skipped", top_level, len(failed))
    return tuple(failed)


def _collect_table_types() -> dict[QualifiedName, type[ResourceTable]]:
    """Map qualified names to the loaded direct subclasses of ResourceTable."""
    table_types: dict[QualifiedName, type[ResourceTable]] = {}
    for table_type in ResourceTable.__subclasses__():
        module = getattr(table_type, "__module__", None)
        qualname = getattr(table_type, "__qualname__", None)
        if not isinstance(module, str) or not isinstance(qualname, str):
            logger.debug("Skipping resource table class without a name: %r", table_type)
            continue
        name = f"{module}{NAMESPACE_SEPARATOR}{qualname}"
        if name in table_types:
            logger.warning("Duplicate resource table '%s': using latest definition", name)
        table_types[name] = table_type
    return table_types


def _instantiate(
    name: QualifiedName,
    table_type: type[ResourceTable],
    base_name: BaseName,
    parent: ResourceTable | None,
) -> ResourceTable:
    try:
        table = table_type()
    except Exception as e:
        raise TableInstantiationError(name, table_type) from e
    table._bind(base_name, parent)  # noqa: SLF001 - builder owns chain linking
    return table


def get_table(
    caller: object,
    base_name: BaseName,
    locale: LocaleCode | Locale | None = None,
    *,
    preload: bool = False,
) -> ResourceTable | None:
    """Build the fallback chain of resource tables for base_name and locale.

    The search starts in the namespace of caller. The neutral table
    ``{namespace}.{base_name}`` is instantiated if it exists. Then, for each
    locale subtag, ``_{subtag}`` is appended to the previous name and, if such
    a table exists, it is instantiated with the previously found table as its
    parent.

    Args:
        caller: Namespace context (class, module, dotted string or instance)
        base_name: Logical name of the resource family (e.g., "Resources.Messages")
        locale: Locale code or Babel Locale. None uses get_active_locale().
        preload: Import all modules of the caller's top-level package first

    Returns:
        The most specific table found (chain head), or None if no candidate
        exists at any level

    Raises:
        TypeError: If base_name is not a string
        ValueError: If base_name is empty
        TableInstantiationError: If a matched class cannot be constructed

    Example:
        >>> messages = get_table(MyView, "Resources.Messages", "fr-FR")
        >>> messages["hello"] if messages else None
        'Bonjour'
    """
    if not isinstance(base_name, str):
        msg = f"base_name must be a string, got {type(base_name).__name__}"
        raise TypeError(msg)
    if not base_name:
        msg = "base_name must not be empty"
        raise ValueError(msg)

    namespace = namespace_of(caller)
    if locale is None:
        locale = get_active_locale()
    if preload:
        preload_package(namespace)

    table_types = _collect_table_types()
    current: ResourceTable | None = None
    for name in candidate_names(namespace, base_name, locale):
        table_type = table_types.get(name)
        if table_type is None:
            logger.debug("No resource table '%s'", name)
            continue
        current = _instantiate(name, table_type, base_name, current)
        logger.debug("Linked resource table '%s' (depth %d)", name, current.depth)

    if current is None:
        logger.debug("No resource table found for '%s' in '%s'", base_name, namespace)
    return current
