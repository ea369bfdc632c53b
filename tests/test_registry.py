"""
Tests for the directive registry.
"""

import pytest

from serverconf.config.directives import DEFAULT_MIDDLEWARE, default_registry, parse_root
from serverconf.config.registry import DirectiveRegistry


def test_default_registry() -> None:
    """Test the builtins and middleware of the default registry."""
    registry = default_registry()

    assert registry.lookup_builtin("root") is parse_root
    assert registry.lookup_builtin("tls") is not None
    assert registry.lookup_builtin("gzip") is None
    assert all(registry.is_middleware(name) for name in DEFAULT_MIDDLEWARE)
    assert not registry.is_middleware("root")
    assert not registry.is_middleware("bogus")


def test_default_registry_is_fresh() -> None:
    first = default_registry()
    first.register_middleware("cors")

    assert not default_registry().is_middleware("cors")


def test_duplicate_registration() -> None:
    """A name can be registered only once."""
    registry = DirectiveRegistry()
    registry.register_builtin("root", parse_root)
    registry.register_middleware("gzip")

    with pytest.raises(ValueError):
        registry.register_builtin("root", parse_root)
    with pytest.raises(ValueError):
        registry.register_middleware("root")
    with pytest.raises(ValueError):
        registry.register_builtin("gzip", parse_root)
