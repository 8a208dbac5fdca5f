"""Tests for configuration-driven registry setup."""

import json
import logging

import pytest

from gridpkg.core.factory import TypeRegistry, configure_registry, get_registry, set_global_registry
from gridpkg.core.grid import BoundedGrid, UnboundedGrid
from gridpkg.core.grid_object import GridObject
from gridpkg.utils.config import Config, load_config, set_global_config
from gridpkg.utils.errors import ConfigError, InvalidArgumentError


class TestConfigureRegistry:
    """Test configure_registry."""

    def test_registers_configured_classes(self, caplog):
        """Test registering the classes listed in the factory section."""
        config = Config()
        config.set("factory", "bounded_grids", ["gridpkg.core.grid.BoundedGrid", "no.such.Grid"])
        config.set("factory", "unbounded_grids", ["gridpkg.core.grid.UnboundedGrid"])
        config.set("factory", "grid_objects", ["gridpkg.core.grid_object.GridObject"])
        registry = TypeRegistry(config=config)
        caplog.set_level(logging.WARNING, logger="gridpkg.core.factory.TypeRegistry")

        summary = configure_registry(registry)

        assert summary == {
            "bounded grid": ["gridpkg.core.grid.BoundedGrid"],
            "unbounded grid": ["gridpkg.core.grid.UnboundedGrid"],
            "grid object": ["gridpkg.core.grid_object.GridObject"],
        }
        assert registry.bounded_grid_classes() == (BoundedGrid,)
        assert registry.unbounded_grid_classes() == (UnboundedGrid,)
        assert registry.grid_object_classes() == (GridObject,)
        assert '"no.such.Grid" because no class found with that name.' in caplog.text

    def test_loads_from_json_file(self, tmp_path):
        """Test configuring a registry from a JSON config file."""
        path = tmp_path / "grids.json"
        path.write_text(json.dumps({
            "factory": {
                "bounded_grids": ["BoundedGrid"],
                "default_unbounded_grid": "gridpkg.core.grid.UnboundedGrid"
            }
        }))
        config = load_config(path)
        registry = TypeRegistry(config=config)

        configure_registry(registry, config)

        assert registry.bounded_grid_classes() == (BoundedGrid,)
        assert registry.get_default_unbounded_type() is UnboundedGrid

    def test_bad_default_raises(self):
        """Test that an unsuitable configured default raises."""
        config = Config()
        config.set("factory", "default_bounded_grid", "UnboundedGrid")
        registry = TypeRegistry(config=config)

        with pytest.raises(InvalidArgumentError):
            configure_registry(registry)
        assert registry.get_default_bounded_type() is BoundedGrid

    def test_malformed_class_list(self):
        """Test that a class list that is not a list of names raises ConfigError."""
        config = Config()
        config.set("factory", "grid_objects", {"name": "Fish"})

        with pytest.raises(ConfigError):
            configure_registry(TypeRegistry(config=config))


class TestGlobalRegistry:
    """Test the process-wide registry."""

    def teardown_method(self):
        set_global_registry(None)
        set_global_config(None)

    def test_get_registry_uses_global_config(self):
        """Test that the global registry is populated from the global config."""
        config = Config()
        config.set("factory", "bounded_grids", ["BoundedGrid"])
        set_global_config(config)
        set_global_registry(None)

        registry = get_registry()

        assert registry is get_registry()
        assert registry.bounded_grid_classes() == (BoundedGrid,)

    def test_set_global_registry(self):
        """Test replacing and resetting the global registry."""
        registry = TypeRegistry(config=Config())
        set_global_registry(registry)
        assert get_registry() is registry
