"""Built-in renderer registrations."""

from __future__ import annotations

from .csharp_renderer import CSharpRenderer
from .renderer_registry import RendererRegistry
from .target_descriptors import CSHARP_TARGET

DEFAULT_TARGET = CSHARP_TARGET.target_id


def default_registry() -> RendererRegistry:
    """Return a registry holding every built-in target."""
    registry = RendererRegistry()
    registry.register(CSHARP_TARGET.target_id, CSHARP_TARGET.display_name, CSharpRenderer)
    return registry
