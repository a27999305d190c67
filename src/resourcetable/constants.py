"""Shared constants for resourcetable.

Centralizes the naming-convention delimiters and locale sentinels used by
the chain builder and the locale utilities. Placing them here keeps a single
source of truth and avoids circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Naming convention
    "NAMESPACE_SEPARATOR",
    "SUBTAG_NAME_SEPARATOR",
    # Locale codes
    "BCP47_SEPARATOR",
    "POSIX_SEPARATOR",
    "INVARIANT_LOCALE",
    "PSEUDO_LOCALES",
    "LOCALE_ENV_VARS",
]

# ============================================================================
# NAMING CONVENTION
# ============================================================================

# Joins a namespace and a base name: "greeter.ui" + "Resources.Messages"
NAMESPACE_SEPARATOR: str = "."

# Joins a qualified name and one locale subtag: "Messages" + "fr" -> "Messages_fr"
SUBTAG_NAME_SEPARATOR: str = "_"

# ============================================================================
# LOCALE CODES
# ============================================================================

# Subtag delimiter of BCP-47 codes (fr-FR). Locale codes are normalized to it.
BCP47_SEPARATOR: str = "-"

# Subtag delimiter of POSIX/Babel codes (fr_FR).
POSIX_SEPARATOR: str = "_"

# Locale-neutral code. Resolving with it yields only the neutral table.
INVARIANT_LOCALE: str = ""

# Pseudo-locales reported by the C library that carry no language information.
PSEUDO_LOCALES: frozenset[str] = frozenset(("C", "POSIX"))

# Environment variables consulted for the process locale, in precedence order.
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")
