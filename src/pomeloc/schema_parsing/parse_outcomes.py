"""Parse result contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from pomeloc.schema_model import Schema


class SchemaParseError(Exception):
    """Raised when a parse failure is unwrapped."""

    def __init__(self, source_name: str, error_log: str) -> None:
        super().__init__(error_log.rstrip("\n"))
        self.source_name = source_name
        self.error_log = error_log


@dataclass(frozen=True)
class ParsedSchema:
    """Successful parse of one document."""

    source_name: str
    schema: Schema


@dataclass(frozen=True)
class ParseFailure:
    """Failed parse of one document with its accumulated error log."""

    source_name: str
    error_log: str

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(line for line in self.error_log.splitlines() if line)


ParseOutcome: TypeAlias = ParsedSchema | ParseFailure


def unwrap_schema(outcome: ParseOutcome) -> Schema:
    """Return the parsed schema or raise the failure as `SchemaParseError`."""
    if isinstance(outcome, ParseFailure):
        raise SchemaParseError(outcome.source_name, outcome.error_log)
    return outcome.schema
