"""Code generation exports."""

from .code_generator import (
    GeneratedUnit,
    GenerationContext,
    build_event_struct,
    generate,
    render_declarations,
    render_method,
)
from .csharp_renderer import CSharpRenderer
from .renderer_registry import CodeRenderer, RendererRegistry, UnknownTargetError
from .renderer_setup import DEFAULT_TARGET, default_registry
from .target_descriptors import CSHARP_TARGET, TargetDescriptor

__all__ = [
    "CSHARP_TARGET",
    "DEFAULT_TARGET",
    "CSharpRenderer",
    "CodeRenderer",
    "GeneratedUnit",
    "GenerationContext",
    "RendererRegistry",
    "TargetDescriptor",
    "UnknownTargetError",
    "build_event_struct",
    "default_registry",
    "generate",
    "render_declarations",
    "render_method",
]
