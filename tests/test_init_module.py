"""Tests for the package's public surface."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import pytest

import resourcetable


class TestPublicAPI:
    def test_all_exports_resolve(self) -> None:
        for name in resourcetable.__all__:
            assert hasattr(resourcetable, name), name

    def test_error_hierarchy(self) -> None:
        assert issubclass(resourcetable.TableInstantiationError, resourcetable.ResourceTableError)
        assert issubclass(resourcetable.ResourceTableError, Exception)

    def test_version_is_string(self) -> None:
        assert isinstance(resourcetable.__version__, str)
        assert resourcetable.__version__

    def test_version_fallback_when_not_installed(self) -> None:
        import importlib  # noqa: PLC0415

        with patch(
            "importlib.metadata.version", side_effect=PackageNotFoundError("resourcetable")
        ):
            module = importlib.reload(resourcetable)
            assert module.__version__ == "0.0.0+dev"
        importlib.reload(resourcetable)


@pytest.mark.parametrize(
    "name",
    ["get_table", "ResourceTable", "MappingTable", "Found", "active_locale"],
)
def test_core_names_exported(name: str) -> None:
    assert name in resourcetable.__all__
