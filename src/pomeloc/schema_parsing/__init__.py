"""Schema parsing exports."""

from .parse_outcomes import (
    ParsedSchema,
    ParseFailure,
    ParseOutcome,
    SchemaParseError,
    unwrap_schema,
)
from .schema_parser import parse_schema

__all__ = [
    "ParsedSchema",
    "ParseFailure",
    "ParseOutcome",
    "SchemaParseError",
    "parse_schema",
    "unwrap_schema",
]
