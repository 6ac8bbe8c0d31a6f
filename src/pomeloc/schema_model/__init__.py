"""Schema model exports."""

from .schema_models import FieldType, Qualifier, RootEntry, Schema, Struct, Variable

__all__ = [
    "FieldType",
    "Qualifier",
    "RootEntry",
    "Schema",
    "Struct",
    "Variable",
]
