"""Protocol description parsing service."""

from __future__ import annotations

import json
import logging
from collections import ChainMap
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from pomeloc.schema_model import FieldType, RootEntry, Schema, Struct, Variable

from .grammar import (
    QUALIFIER_KEYWORDS,
    ROUTER_SEPARATOR,
    SCALAR_KEYWORDS,
    STRUCT_KEYWORD,
    STRUCT_TOKEN_COUNT,
    VARIABLE_TOKEN_COUNT,
    is_method_router,
    split_tokens,
)
from .parse_outcomes import ParsedSchema, ParseFailure, ParseOutcome

_LOGGER = logging.getLogger(__name__)

StructScope = ChainMap[str, Struct]


@dataclass(frozen=True)
class _JsonObject:
    """JSON object kept as ordered key/value pairs, duplicates included."""

    pairs: tuple[tuple[str, Any], ...]


class _GrammarViolation(Exception):
    """Internal parse failure collecting one log line per level it crosses."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.lines = [message]

    def annotate(self, message: str) -> _GrammarViolation:
        self.lines.append(message)
        return self

    @property
    def error_log(self) -> str:
        return "".join(f"error: {line}\n" for line in self.lines)


def parse_schema(source_text: str, source_name: str = "<string>") -> ParseOutcome:
    """Parse one protocol description document.

    Args:
      source_text: Raw JSON text of the document.
      source_name: File name or label used in error messages.

    Returns:
      `ParsedSchema` holding every root entry in document order, or
      `ParseFailure` holding the error log of the first violation.
    """
    try:
        entries = _parse_document(source_text, source_name)
    except _GrammarViolation as exc:
        _LOGGER.debug("Parsing %s failed:\n%s", source_name, exc.error_log)
        return ParseFailure(source_name=source_name, error_log=exc.error_log)

    _LOGGER.debug("Parsed %d root entries from %s", len(entries), source_name)
    return ParsedSchema(source_name=source_name, schema=Schema(entries=entries))


def _parse_document(source_text: str, source_name: str) -> tuple[RootEntry, ...]:
    try:
        root = json.loads(source_text, object_pairs_hook=_to_json_object)
    except json.JSONDecodeError as exc:
        raise _GrammarViolation(f"parse error. {source_name}: {exc}") from exc

    if not isinstance(root, _JsonObject):
        raise _GrammarViolation(f"the root data must be object type. {source_name}")

    entries: list[RootEntry] = []
    seen_routers: set[str] = set()
    for key, value in root.pairs:
        if not isinstance(value, _JsonObject):
            raise _GrammarViolation(f"message data should be object type. {source_name}")
        if key in seen_routers:
            raise _GrammarViolation(f"duplicate router {key}. {source_name}")
        try:
            entry = _parse_root(key, value)
        except _GrammarViolation as exc:
            raise exc.annotate(f"parse failed. {key}")
        seen_routers.add(key)
        entries.append(entry)
    return tuple(entries)


def _to_json_object(pairs: list[tuple[str, Any]]) -> _JsonObject:
    return _JsonObject(pairs=tuple(pairs))


def _parse_root(key: str, value: _JsonObject) -> RootEntry:
    variables, structs = _parse_body(value, ChainMap())
    if is_method_router(key):
        namespace, class_name, method = key.split(ROUTER_SEPARATOR)
        return RootEntry(
            router=key,
            method=method,
            namespace=namespace,
            class_name=class_name,
            variables=variables,
            structs=structs,
        )
    return RootEntry(router=key, method=key, variables=variables, structs=structs, is_event=True)


def _parse_body(
    body: _JsonObject, outer_scope: StructScope
) -> tuple[tuple[Variable, ...], dict[str, Struct]]:
    structs: dict[str, Struct] = {}
    scope = outer_scope.new_child(structs)
    variables: list[Variable] = []
    for key, value in body.pairs:
        tokens = split_tokens(key)
        if len(tokens) == STRUCT_TOKEN_COUNT:
            struct = _parse_struct(key, tokens, value, scope)
            structs[struct.name] = struct
        elif len(tokens) == VARIABLE_TOKEN_COUNT:
            variables.append(_parse_variable(key, tokens, value, scope))
        else:
            raise _GrammarViolation(f"error key {key}")
    # Stable: equal indices keep declaration order.
    variables.sort(key=attrgetter("index"))
    return tuple(variables), structs


def _parse_struct(key: str, tokens: list[str], value: Any, scope: StructScope) -> Struct:
    if not isinstance(value, _JsonObject):
        raise _GrammarViolation(f"error grammar {key}")
    keyword, name = tokens
    if keyword != STRUCT_KEYWORD:
        raise _GrammarViolation(
            "unknown declare key type, "
            f"struct declare must be [{STRUCT_KEYWORD}] key word {keyword}"
        )
    if name in scope.maps[0]:
        raise _GrammarViolation(f"duplicate message name at same namespace {name}")
    variables, structs = _parse_body(value, scope)
    return Struct(name=name, variables=variables, structs=structs)


def _parse_variable(key: str, tokens: list[str], value: Any, scope: StructScope) -> Variable:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _GrammarViolation(f"error grammar {key}")
    qualifier_token, type_token, name = tokens
    qualifier = QUALIFIER_KEYWORDS.get(qualifier_token)
    if qualifier is None:
        raise _GrammarViolation(f"error type opt {qualifier_token}")

    scalar = SCALAR_KEYWORDS.get(type_token)
    if scalar is not None:
        return Variable(index=value, qualifier=qualifier, type=scalar, name=name)
    if type_token not in scope:
        raise _GrammarViolation(f"error type {type_token}")
    return Variable(
        index=value,
        qualifier=qualifier,
        type=FieldType.MESSAGE,
        name=name,
        type_name=type_token,
    )
