"""Compilation domain exports."""

from .compile_contracts import CompileArtifacts, CompileOutcome, CompileRequest
from .compile_use_case import (
    CLIENT_PROTOS,
    SERVER_PROTOS,
    CompilationError,
    classify_proto_files,
    execute_compilation,
    request_from_configuration,
)

__all__ = [
    "CLIENT_PROTOS",
    "SERVER_PROTOS",
    "CompileRequest",
    "CompileOutcome",
    "CompileArtifacts",
    "CompilationError",
    "classify_proto_files",
    "execute_compilation",
    "request_from_configuration",
]
