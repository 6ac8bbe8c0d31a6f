"""Compilation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from pomeloc.code_generation import (
    GenerationContext,
    RendererRegistry,
    UnknownTargetError,
    generate,
)
from pomeloc.configuration import Configuration
from pomeloc.schema_linking import DuplicateDeclarationError, link_schemas
from pomeloc.schema_model import Schema
from pomeloc.schema_parsing import SchemaParseError, parse_schema, unwrap_schema

from .compile_contracts import CompileArtifacts, CompileOutcome, CompileRequest

_LOGGER = logging.getLogger(__name__)

SERVER_PROTOS = "serverProtos.json"
CLIENT_PROTOS = "clientProtos.json"


class CompilationError(Exception):
    """Raised when a compilation cannot be completed."""


def execute_compilation(
    request: CompileRequest, *, registry: RendererRegistry | None = None
) -> CompileOutcome:
    """Parse, link, generate and write one client proxy and return the outcome.

    Nothing is written unless generation completed.
    """
    artifacts = _load_compile_artifacts(request)
    try:
        unit = generate(
            GenerationContext(
                schema=artifacts.schema,
                target=request.target,
                custom_namespace=request.custom_namespace,
            ),
            registry=registry,
        )
    except (DuplicateDeclarationError, UnknownTargetError) as exc:
        raise CompilationError(str(exc)) from exc

    output_path = request.output_dir / f"{artifacts.base_name}{unit.file_extension}"
    try:
        request.output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_text(unit.text, encoding="utf-8")
    except OSError as exc:
        raise CompilationError(f"unable to write file: {output_path}: {exc}") from exc
    _LOGGER.info("Wrote %s", output_path)

    return CompileOutcome(
        output_path=output_path.resolve(),
        target=unit.target,
        method_count=len(artifacts.schema.entries),
        event_count=len(artifacts.schema.events),
    )


def request_from_configuration(configuration: Configuration) -> CompileRequest:
    """Translate a loaded configuration into a compile request."""
    return CompileRequest(
        server_path=configuration.protos.server,
        client_path=configuration.protos.client,
        output_dir=configuration.output.directory,
        target=configuration.target,
        custom_namespace=configuration.namespace,
        file_name=configuration.output.file_name,
    )


def classify_proto_files(
    request: CompileRequest, proto_files: Sequence[Path | str]
) -> CompileRequest:
    """Assign positional documents to the server or client side by file name."""
    if len(proto_files) > 2:
        raise CompilationError("too many input files")
    for raw_path in proto_files:
        path = Path(raw_path)
        if SERVER_PROTOS in path.name:
            request = replace(request, server_path=path)
        elif CLIENT_PROTOS in path.name:
            request = replace(request, client_path=path)
        else:
            raise CompilationError(
                f"cannot tell whether {path} is the server or client document; "
                f"name it {SERVER_PROTOS}/{CLIENT_PROTOS} or use --server/--client"
            )
    return request


def _load_compile_artifacts(request: CompileRequest) -> CompileArtifacts:
    if request.server_path is None and request.client_path is None:
        raise CompilationError("missing input files")
    try:
        server = _parse_file(request.server_path) if request.server_path else None
        client = _parse_file(request.client_path) if request.client_path else None
    except SchemaParseError as exc:
        raise CompilationError(exc.error_log.rstrip("\n")) from exc

    schema = link_schemas(client, server)
    _LOGGER.debug(
        "Linked schema: %d methods, %d responses, %d events",
        len(schema.entries),
        len(schema.responses),
        len(schema.events),
    )
    return CompileArtifacts(schema=schema, base_name=_resolve_base_name(request))


def _parse_file(path: Path) -> Schema:
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CompilationError(f"unable to load file: {path}") from exc
    if "\x00" in contents:
        raise CompilationError(f"input file appears to be binary: {path}")
    _LOGGER.debug("Parsing %s", path)
    return unwrap_schema(parse_schema(contents, str(path)))


def _resolve_base_name(request: CompileRequest) -> str:
    if request.file_name:
        return request.file_name
    source = request.client_path or request.server_path
    assert source is not None
    return source.stem
