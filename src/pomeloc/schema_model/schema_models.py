"""Schema model entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class Qualifier(str, Enum):
    """Field cardinality keyword."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    REPEATED = "repeated"


class FieldType(str, Enum):
    """Scalar type keywords plus the message marker."""

    INT32 = "int32"
    UINT32 = "uInt32"
    SINT32 = "sInt32"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    MESSAGE = "message"

    @property
    def is_scalar(self) -> bool:
        return self is not FieldType.MESSAGE


@dataclass(frozen=True)
class Variable:
    """One declared field."""

    index: int
    qualifier: Qualifier
    type: FieldType
    name: str
    type_name: str = ""

    @property
    def is_message(self) -> bool:
        return self.type is FieldType.MESSAGE

    @property
    def is_repeated(self) -> bool:
        return self.qualifier is Qualifier.REPEATED


@dataclass(frozen=True)
class Struct:
    """A named nested message type and its own nested declarations."""

    name: str
    variables: tuple[Variable, ...] = ()
    structs: Mapping[str, Struct] = field(default_factory=dict)
    namespace: str = ""


@dataclass(frozen=True)
class RootEntry:  # pylint: disable=too-many-instance-attributes
    """One RPC method or server-pushed event declaration."""

    router: str
    method: str
    namespace: str = ""
    class_name: str = ""
    variables: tuple[Variable, ...] = ()
    structs: Mapping[str, Struct] = field(default_factory=dict)
    is_event: bool = False


@dataclass(frozen=True)
class Schema:
    """Parsed and linked schema consumed by code generation."""

    entries: tuple[RootEntry, ...] = ()
    responses: Mapping[str, Struct] = field(default_factory=dict)
    events: tuple[RootEntry, ...] = ()

    def response_for(self, router: str) -> Struct | None:
        """Return the registered response struct for a router, if any."""
        return self.responses.get(router)
