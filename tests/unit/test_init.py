r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import pytest

import vaultclient


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(vaultclient.__version__, str)


def test_package_version_format() -> None:
    assert "." in vaultclient.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in vaultclient.__all__:
        assert hasattr(vaultclient, name), f"{name} is in __all__ but not defined in module"


@pytest.mark.parametrize(
    "name", ["BuildError", "TerminalError", "TransportError", "ValidationError"]
)
def test_exceptions_share_base_class(name: str) -> None:
    assert issubclass(getattr(vaultclient, name), vaultclient.VaultError)
