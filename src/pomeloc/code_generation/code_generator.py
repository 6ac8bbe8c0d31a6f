"""Client proxy generation service."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pomeloc.schema_linking import group_entries
from pomeloc.schema_model import RootEntry, Schema, Struct
from pomeloc.source_formatting import format_source

from .renderer_registry import CodeRenderer, RendererRegistry
from .renderer_setup import DEFAULT_TARGET, default_registry

_LOGGER = logging.getLogger(__name__)

EVENT_SUFFIX = "_event"


@dataclass(frozen=True)
class GenerationContext:
    """Everything one generation run depends on."""

    schema: Schema
    target: str = DEFAULT_TARGET
    custom_namespace: str = ""


@dataclass(frozen=True)
class GeneratedUnit:
    """Rendered text of one translation unit."""

    target: str
    file_extension: str
    text: str


def generate(context: GenerationContext, registry: RendererRegistry | None = None) -> GeneratedUnit:
    """Render and format the client proxy for the context's target.

    Raises:
      UnknownTargetError: If the target has no registered renderer.
      DuplicateDeclarationError: If two entries share namespace, class and method.
    """
    renderer = (registry or default_registry()).create(context.target)
    code = render_declarations(context.schema, renderer, context.custom_namespace)
    text = renderer.render_preamble() + format_source(code)
    _LOGGER.debug("Generated %d characters of %s", len(text), context.target)
    return GeneratedUnit(
        target=context.target,
        file_extension=renderer.descriptor.file_extension,
        text=text,
    )


def render_declarations(schema: Schema, renderer: CodeRenderer, custom_namespace: str = "") -> str:
    """Render every request class and the events class as unformatted text."""
    blocks: list[str] = []
    for namespace, classes in group_entries(schema.entries, schema.responses).items():
        class_blocks = [
            renderer.render_class(
                class_name,
                [render_method(entry, schema, renderer) for entry in methods.values()],
            )
            for class_name, methods in classes.items()
        ]
        body = "".join(class_blocks)
        blocks.append(renderer.render_namespace(namespace, body) if namespace else body)

    event_stubs = [
        renderer.render_event_stub(entry, build_event_struct(entry)) for entry in schema.events
    ]
    blocks.append(renderer.render_events_class(event_stubs))
    code = "".join(blocks)
    if custom_namespace:
        return renderer.render_namespace(custom_namespace, code)
    return code


def render_method(entry: RootEntry, schema: Schema, renderer: CodeRenderer) -> str:
    """Render hoisted nested structs, the response struct and the call stub."""
    response = schema.response_for(entry.router)
    parts = [renderer.render_struct(struct) for struct in entry.structs.values()]
    if response is not None:
        parts.append(renderer.render_struct(response))
    parts.append(renderer.render_call_stub(entry, response))
    return "".join(parts)


def build_event_struct(entry: RootEntry) -> Struct:
    """Wrap an event's payload fields as `<method>_event`."""
    return Struct(
        name=f"{entry.method}{EVENT_SUFFIX}",
        variables=entry.variables,
        structs=dict(entry.structs),
    )
