"""Server/client schema linking and method grouping service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace

from pomeloc.schema_model import RootEntry, Schema, Struct, Variable

from .linking_models import ClassGroup, NamespaceGroup

_LOGGER = logging.getLogger(__name__)

RESPONSE_SUFFIX = "_result"


class DuplicateDeclarationError(Exception):
    """Raised when two RPC declarations share namespace, class and method."""


def link_schemas(client: Schema | None, server: Schema | None = None) -> Schema:
    """Cross-link the client schema with the paired server schema.

    Server events become client events and every other server entry becomes
    the response struct of its router. Event entries declared in the client
    document are kept as events as well; when a router is declared as an
    event more than once the first declaration wins, server before client.
    """
    client_entries = client.entries if client else ()
    server_entries = server.entries if server else ()

    responses: dict[str, Struct] = dict(client.responses) if client else {}
    events: dict[str, RootEntry] = {}
    candidates = [
        *(client.events if client else ()),
        *(entry for entry in server_entries if entry.is_event),
        *(entry for entry in client_entries if entry.is_event),
    ]
    for entry in candidates:
        if entry.router in events:
            _LOGGER.debug("Skipping repeated event declaration %s", entry.router)
            continue
        events[entry.router] = entry
    for entry in server_entries:
        if not entry.is_event:
            responses[entry.router] = build_response_struct(entry)

    _LOGGER.debug("Linked %d responses and %d events", len(responses), len(events))
    return Schema(
        entries=tuple(entry for entry in client_entries if not entry.is_event),
        responses=responses,
        events=tuple(events.values()),
    )


def build_response_struct(entry: RootEntry) -> Struct:
    """Build `<last router segment>_result` from a server declaration."""
    base_name = entry.router.rsplit(".", 1)[-1]
    return Struct(
        name=f"{base_name}{RESPONSE_SUFFIX}",
        variables=entry.variables,
        structs=dict(entry.structs),
    )


def group_entries(
    entries: tuple[RootEntry, ...], responses: Mapping[str, Struct] | None = None
) -> dict[str, NamespaceGroup]:
    """Group request entries by namespace, class and method.

    Nested structs of every entry are renamed to `<method>_<name>` so that
    hoisted declarations stay unique within a class.

    Raises:
      DuplicateDeclarationError: If a namespace/class/method triple repeats, or
        if two types hoisted into one class end up with the same name.
    """
    responses = responses or {}
    grouped: dict[str, NamespaceGroup] = {}
    hoisted: dict[tuple[str, str], set[str]] = {}
    for entry in entries:
        classes = grouped.setdefault(entry.namespace, {})
        methods: ClassGroup = classes.setdefault(entry.class_name, {})
        if entry.method in methods:
            raise DuplicateDeclarationError(
                "duplicate rpc declaration "
                f"{entry.namespace}.{entry.class_name}.{entry.method}"
            )
        qualified = qualify_nested_structs(entry)
        type_names = list(qualified.structs)
        response = responses.get(entry.router)
        if response is not None:
            type_names.append(response.name)
        declared = hoisted.setdefault((entry.namespace, entry.class_name), set())
        for type_name in type_names:
            if type_name in declared:
                raise DuplicateDeclarationError(
                    f"duplicate type declaration {type_name} "
                    f"in {entry.namespace}.{entry.class_name}"
                )
            declared.add(type_name)
        methods[entry.method] = qualified
    return grouped


def qualify_nested_structs(entry: RootEntry) -> RootEntry:
    """Prefix the entry's directly nested struct names with its method name."""
    renames = {name: f"{entry.method}_{name}" for name in entry.structs}
    if not renames:
        return entry
    structs = {
        renames[name]: replace(_rewrite_struct(struct, renames), name=renames[name])
        for name, struct in entry.structs.items()
    }
    return replace(
        entry,
        variables=_rewrite_variables(entry.variables, renames),
        structs=structs,
    )


def _rewrite_struct(struct: Struct, renames: Mapping[str, str]) -> Struct:
    # Names declared in this struct shadow the renamed outer ones.
    visible = {old: new for old, new in renames.items() if old not in struct.structs}
    if not visible:
        return struct
    return replace(
        struct,
        variables=_rewrite_variables(struct.variables, visible),
        structs={name: _rewrite_struct(child, visible) for name, child in struct.structs.items()},
    )


def _rewrite_variables(
    variables: tuple[Variable, ...], renames: Mapping[str, str]
) -> tuple[Variable, ...]:
    return tuple(
        replace(variable, type_name=renames[variable.type_name])
        if variable.is_message and variable.type_name in renames
        else variable
        for variable in variables
    )
