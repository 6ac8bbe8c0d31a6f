"""Keywords and key splitting rules of the protocol description grammar."""

from __future__ import annotations

from pomeloc.schema_model import FieldType, Qualifier

STRUCT_KEYWORD = "message"
ROUTER_SEPARATOR = "."
TOKEN_SEPARATOR = " "

STRUCT_TOKEN_COUNT = 2
VARIABLE_TOKEN_COUNT = 3
METHOD_ROUTER_DOT_COUNT = 2

QUALIFIER_KEYWORDS: dict[str, Qualifier] = {qualifier.value: qualifier for qualifier in Qualifier}
SCALAR_KEYWORDS: dict[str, FieldType] = {
    field_type.value: field_type for field_type in FieldType if field_type.is_scalar
}


def split_tokens(key: str) -> list[str]:
    """Split a declaration key into its space separated tokens."""
    return [token for token in key.split(TOKEN_SEPARATOR) if token]


def is_method_router(key: str) -> bool:
    """Only the exact `namespace.class.method` shape declares a request method."""
    return key.count(ROUTER_SEPARATOR) == METHOD_ROUTER_DOT_COUNT
