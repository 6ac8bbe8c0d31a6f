"""Renderer registry tests."""

from __future__ import annotations

from dataclasses import replace

import pytest
from pomeloc.code_generation import (
    CSHARP_TARGET,
    CSharpRenderer,
    RendererRegistry,
    UnknownTargetError,
    default_registry,
)


def test_default_registry_contains_csharp() -> None:
    registry = default_registry()

    assert "csharp" in registry
    assert registry.targets() == [("csharp", "C#")]
    assert isinstance(registry.create("csharp"), CSharpRenderer)


def test_create_returns_fresh_renderer_each_time() -> None:
    registry = default_registry()

    assert registry.create("csharp") is not registry.create("csharp")


def test_unknown_target_lists_known_targets() -> None:
    with pytest.raises(UnknownTargetError, match=r"'lua' \(known: csharp\)"):
        default_registry().create("lua")


def test_empty_registry_reports_none_known() -> None:
    with pytest.raises(UnknownTargetError, match="known: none"):
        RendererRegistry().create("csharp")


def test_duplicate_registration_is_rejected() -> None:
    registry = RendererRegistry()
    registry.register("csharp", "C#", CSharpRenderer)

    with pytest.raises(ValueError, match="already registered"):
        registry.register("csharp", "C# again", CSharpRenderer)


def test_additional_target_can_reuse_renderer_with_new_descriptor() -> None:
    registry = default_registry()
    unity = replace(CSHARP_TARGET, target_id="unity", display_name="Unity C#")
    registry.register("unity", "Unity C#", lambda: CSharpRenderer(unity))

    renderer = registry.create("unity")

    assert renderer.descriptor.display_name == "Unity C#"
    assert registry.targets() == [("csharp", "C#"), ("unity", "Unity C#")]
