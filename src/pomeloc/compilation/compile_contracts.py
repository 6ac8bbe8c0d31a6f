"""Compilation entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pomeloc.configuration.runtime_settings import DEFAULT_TARGET_ID
from pomeloc.schema_model import Schema


@dataclass(frozen=True)
class CompileRequest:
    """Input contract for one compilation."""

    server_path: Path | None
    client_path: Path | None
    output_dir: Path
    target: str = DEFAULT_TARGET_ID
    custom_namespace: str = ""
    file_name: str | None = None


@dataclass(frozen=True)
class CompileOutcome:
    """Output contract for one completed compilation."""

    output_path: Path
    target: str
    method_count: int
    event_count: int


@dataclass(frozen=True)
class CompileArtifacts:
    """Loaded and linked schema together with the chosen output base name."""

    schema: Schema
    base_name: str
