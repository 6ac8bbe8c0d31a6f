"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import DEFAULT_TARGET_ID, Configuration, OutputSettings, ProtoSources


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Unable to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    protos = _parse_protos_section(parsed.get("protos"), base_path)
    target = _parse_target(parsed.get("target", DEFAULT_TARGET_ID))
    namespace = _optional_string(parsed.get("namespace"), "namespace") or ""
    output = _parse_output_section(parsed.get("output"), base_path)

    return Configuration(
        path=path,
        protos=protos,
        target=target,
        namespace=namespace,
        output=output,
    )


def _parse_protos_section(value: Any, base_path: Path) -> ProtoSources:
    section = _require_mapping(value, "protos")
    server = _optional_string(section.get("server"), "protos.server")
    client = _optional_string(section.get("client"), "protos.client")
    if server is None and client is None:
        raise ConfigurationError("At least one of protos.server or protos.client is required.")
    return ProtoSources(
        server=_resolve_path(base_path, server) if server else None,
        client=_resolve_path(base_path, client) if client else None,
    )


def _parse_target(value: Any) -> str:
    return _require_non_empty_string(value, "target")


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    if value is None:
        return OutputSettings(directory=base_path, file_name=None)
    if not isinstance(value, Mapping):
        raise ConfigurationError("output must be a mapping.")
    directory = _optional_string(value.get("directory"), "output.directory")
    file_name = _optional_string(value.get("file_name"), "output.file_name")
    return OutputSettings(
        directory=_resolve_path(base_path, directory) if directory else base_path,
        file_name=file_name,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
