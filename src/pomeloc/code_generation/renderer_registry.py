"""Code renderer contract and target registry."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from pomeloc.schema_model import RootEntry, Struct

from .target_descriptors import TargetDescriptor


class UnknownTargetError(Exception):
    """Raised when no renderer is registered for a target id."""


class CodeRenderer(Protocol):
    """Renders schema constructs as unformatted source text of one language."""

    @property
    def descriptor(self) -> TargetDescriptor: ...

    def render_preamble(self) -> str: ...

    def render_struct(self, struct: Struct) -> str: ...

    def render_call_stub(self, entry: RootEntry, response: Struct | None) -> str: ...

    def render_event_stub(self, entry: RootEntry, event_struct: Struct) -> str: ...

    def render_class(self, class_name: str, members: Sequence[str]) -> str: ...

    def render_events_class(self, members: Sequence[str]) -> str: ...

    def render_namespace(self, namespace: str, body: str) -> str: ...


RendererFactory = Callable[[], CodeRenderer]


class RendererRegistry:
    """Mapping of target id to renderer factory."""

    def __init__(self) -> None:
        self._factories: dict[str, RendererFactory] = {}
        self._names: dict[str, str] = {}

    def register(self, target_id: str, display_name: str, factory: RendererFactory) -> None:
        if target_id in self._factories:
            raise ValueError(f"Renderer already registered for target: {target_id}")
        self._factories[target_id] = factory
        self._names[target_id] = display_name

    def create(self, target_id: str) -> CodeRenderer:
        factory = self._factories.get(target_id)
        if factory is None:
            known = ", ".join(sorted(self._factories)) or "none"
            raise UnknownTargetError(f"Unknown generation target '{target_id}' (known: {known}).")
        return factory()

    def targets(self) -> list[tuple[str, str]]:
        """Return `(target_id, display_name)` pairs in registration order."""
        return list(self._names.items())

    def __contains__(self, target_id: object) -> bool:
        return target_id in self._factories
