"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_TARGET_ID = "csharp"


@dataclass(frozen=True)
class ProtoSources:
    """Server and client protocol description files."""

    server: Path | None
    client: Path | None


@dataclass(frozen=True)
class OutputSettings:
    """Where the generated unit is written."""

    directory: Path
    file_name: str | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    protos: ProtoSources
    target: str
    namespace: str
    output: OutputSettings
