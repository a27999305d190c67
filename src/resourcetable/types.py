"""Type aliases for the resource table domain.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "BaseName",
    "LocaleCode",
    "QualifiedName",
    "ResourceKey",
]

BaseName: TypeAlias = str
"""Logical, locale-neutral name of a resource family (e.g., 'Resources.Messages')."""

LocaleCode: TypeAlias = str
"""BCP-47 or POSIX locale code (e.g., 'fr-FR', 'fr_FR', 'zh-Hans-CN')."""

QualifiedName: TypeAlias = str
"""Module path plus class qualname (e.g., 'greeter.ui.Resources.Messages_fr')."""

ResourceKey: TypeAlias = str
"""Key of a single resource inside a table (e.g., 'hello')."""
