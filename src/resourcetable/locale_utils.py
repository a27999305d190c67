"""Locale utilities for subtag splitting and active-locale detection.

Centralizes locale code handling used by the chain builder:
    - normalize_locale: POSIX separators to BCP-47 hyphens
    - locale_subtags: canonical subtags in BCP-47 order (language, script,
      territory, variant) via Babel's syntactic parser
    - get_system_locale: OS and environment locale detection
    - active_locale / get_active_locale: context-scoped locale override

The active locale is stored in a ContextVar, so an override applies to the
current thread or asyncio task only.

Python 3.13+. Uses Babel for locale identifier parsing.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar

from babel import Locale
from babel.core import parse_locale

from resourcetable.constants import (
    BCP47_SEPARATOR,
    INVARIANT_LOCALE,
    LOCALE_ENV_VARS,
    POSIX_SEPARATOR,
    PSEUDO_LOCALES,
)
from resourcetable.types import LocaleCode

__all__ = [
    "active_locale",
    "get_active_locale",
    "get_system_locale",
    "locale_subtags",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# None means "no override": fall back to the system locale.
_active_locale: ContextVar[LocaleCode | None] = ContextVar(
    "resourcetable_active_locale", default=None
)


def normalize_locale(locale_code: str) -> str:
    """Convert a POSIX locale code to BCP-47 separators.

    Only separators change; casing is canonicalized by locale_subtags().

    Args:
        locale_code: Locale code (e.g., "fr_FR", "fr-FR")

    Returns:
        Locale code with hyphen separators (e.g., "fr-FR")

    Example:
        >>> normalize_locale("pt_BR")
        'pt-BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace(POSIX_SEPARATOR, BCP47_SEPARATOR)


def _babel_subtags(locale: Locale) -> tuple[str, ...]:
    parts = (locale.language, locale.script, locale.territory, locale.variant)
    return tuple(part for part in parts if part)


def locale_subtags(locale: LocaleCode | Locale) -> tuple[str, ...]:
    """Split a locale into its subtags, least specific first.

    Subtags follow BCP-47 order (language, script, territory, variant) with
    canonical casing, so "fr_fr" and "fr-FR" both give ("fr", "FR"). Encoding
    suffixes (".UTF-8") and "@modifier" parts are dropped. Codes that Babel's
    parser rejects are split on hyphens as given.

    Args:
        locale: Locale code or Babel Locale. The invariant locale ("") has
            no subtags.

    Returns:
        Tuple of subtags (e.g., ("zh", "Hans", "CN"))

    Example:
        >>> locale_subtags("fr-FR")
        ('fr', 'FR')
        >>> locale_subtags("zh_hans_cn")
        ('zh', 'Hans', 'CN')
        >>> locale_subtags("")
        ()
    """
    if isinstance(locale, Locale):
        return _babel_subtags(locale)

    code = normalize_locale(locale.strip())
    if code == INVARIANT_LOCALE:
        return ()

    try:
        language, territory, script, variant = parse_locale(code, sep=BCP47_SEPARATOR)[:4]
    except ValueError as e:
        logger.debug("Locale '%s' not parseable by Babel (%s); splitting as given", locale, e)
        return tuple(part for part in code.split(BCP47_SEPARATOR) if part)

    return tuple(part for part in (language, script, territory, variant) if part)


def _strip_locale_suffixes(value: str) -> str:
    """Drop ".encoding" and "@modifier" parts ("C.UTF-8" -> "C")."""
    return value.split(".", 1)[0].split("@", 1)[0]


def get_system_locale(*, raise_on_failure: bool = False) -> LocaleCode:
    """Detect the process locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding suffixes.

    Args:
        raise_on_failure: If True, raise RuntimeError when the locale cannot
            be determined. If False (default), return the invariant locale.

    Returns:
        Locale code with BCP-47 separators, or "" when not determinable.

    Raises:
        RuntimeError: If raise_on_failure is True and no locale is set.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        code = _strip_locale_suffixes(system_locale or "")
        if code and code not in PSEUDO_LOCALES:
            return normalize_locale(code)
    except (ValueError, AttributeError):
        pass

    for var in LOCALE_ENV_VARS:
        code = _strip_locale_suffixes(os.environ.get(var, ""))
        if code and code not in PSEUDO_LOCALES:
            return normalize_locale(code)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return INVARIANT_LOCALE


def get_active_locale() -> LocaleCode:
    """Return the locale used when get_table() is called without one.

    An override set with active_locale() takes precedence over the system
    locale.
    """
    override = _active_locale.get()
    if override is not None:
        return override
    return get_system_locale()


@contextmanager
def active_locale(locale: LocaleCode | Locale) -> Generator[LocaleCode]:
    """Set the active locale for the current context.

    Overrides nest; leaving the block restores the previous value.

    Args:
        locale: Locale code or Babel Locale

    Yields:
        The locale code in effect inside the block

    Example:
        >>> with active_locale("fr-FR"):
        ...     get_active_locale()
        'fr-FR'
    """
    code = str(locale) if isinstance(locale, Locale) else locale
    token = _active_locale.set(code)
    try:
        yield code
    finally:
        _active_locale.reset(token)
