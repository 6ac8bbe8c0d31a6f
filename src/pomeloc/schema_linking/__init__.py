"""Schema linking exports."""

from .linking_models import ClassGroup, NamespaceGroup
from .schema_organizer import (
    DuplicateDeclarationError,
    build_response_struct,
    group_entries,
    link_schemas,
    qualify_nested_structs,
)

__all__ = [
    "ClassGroup",
    "NamespaceGroup",
    "DuplicateDeclarationError",
    "build_response_struct",
    "group_entries",
    "link_schemas",
    "qualify_nested_structs",
]
