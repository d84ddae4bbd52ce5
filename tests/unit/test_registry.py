"""Tests for module registry loading."""

import sys
import types

import pytest
from structlog.testing import capture_logs

from gui_modules.builtin import WINDOW_FRAME
from gui_modules.core import InvalidModuleProvider
from gui_modules.modules import ModuleDefinition, ModuleRegistry, resolve_provider


@pytest.fixture
def provider_module(monkeypatch):
    """A provider module with every supported provider shape."""
    module = types.ModuleType("fake_provider")
    module.MODULE = ModuleDefinition(module_type="plain", build_func=lambda n: n)
    module.as_dict = {"module_type": "from_dict", "build_func": lambda n: n}
    module.factory = lambda: ModuleDefinition(module_type="from_factory", build_func=lambda n: n)
    module.not_a_module = 42
    module.bad_dict = {"module_type": "broken"}
    monkeypatch.setitem(sys.modules, "fake_provider", module)
    return module


@pytest.mark.unit
def test_resolve_default_attribute(provider_module):
    assert resolve_provider("fake_provider").module_type == "plain"


@pytest.mark.unit
def test_resolve_named_attribute_shapes(provider_module):
    """Definitions, mappings and factories are all accepted."""
    assert resolve_provider("fake_provider:as_dict").module_type == "from_dict"
    assert resolve_provider("fake_provider:factory").module_type == "from_factory"


@pytest.mark.unit
def test_resolve_builtin_window_frame():
    assert resolve_provider("gui_modules.builtin.window_frame") is WINDOW_FRAME


@pytest.mark.unit
@pytest.mark.parametrize(
    "reference",
    [
        "fake_provider:missing",
        "fake_provider:not_a_module",
        "fake_provider:bad_dict",
        "no_such_package_for_gui_modules",
    ],
)
def test_invalid_providers(provider_module, reference):
    with pytest.raises(InvalidModuleProvider) as exc:
        resolve_provider(reference)
    assert exc.value.reference == reference


@pytest.mark.unit
def test_registry_lookup(module_registry, button_row):
    assert module_registry.get("button_row") is button_row
    assert module_registry.get("nope") is None
    assert "window_frame" in module_registry
    assert len(module_registry) == 2
    assert module_registry.module_types() == ["button_row", "window_frame"]


@pytest.mark.unit
def test_registry_duplicate_first_wins():
    first = ModuleDefinition(module_type="dup", build_func=lambda n: n)
    second = ModuleDefinition(module_type="dup", build_func=lambda n: {})

    with capture_logs() as logs:
        registry = ModuleRegistry([first, second])

    assert registry.get("dup") is first
    assert any(entry["event"] == "duplicate_module_type" for entry in logs)


@pytest.mark.unit
def test_registry_from_references(provider_module):
    registry = ModuleRegistry.from_references(
        ["fake_provider", "fake_provider:as_dict", "gui_modules.builtin.window_frame"]
    )
    assert registry.module_types() == ["from_dict", "plain", "window_frame"]
