"""Per-target spelling tables used by the code renderers."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from pomeloc.schema_model import FieldType, Variable

_NON_IDENTIFIER = re.compile(r"[^0-9A-Za-z_]")


@dataclass(frozen=True)
class TargetDescriptor:  # pylint: disable=too-many-instance-attributes
    """Pure data describing how one output language spells things."""

    target_id: str
    display_name: str
    file_extension: str
    scalar_types: Mapping[FieldType, str]
    default_values: Mapping[FieldType, str]
    json_casts: Mapping[FieldType, str]
    null_literal: str
    line_comment: str
    namespace_open: str
    namespace_close: str
    imports: tuple[str, ...]
    client_type: str
    events_class_name: str
    string_escapes: Mapping[str, str]
    reserved_words: frozenset[str] = frozenset()
    reserved_word_prefix: str = "_"

    def type_spelling(self, variable: Variable) -> str:
        """Return the element type of a field, without array decoration."""
        if variable.is_message:
            return self.identifier(variable.type_name)
        return self.scalar_types[variable.type]

    def default_for(self, variable: Variable) -> str:
        if variable.is_message:
            return self.null_literal
        return self.default_values[variable.type]

    def cast(self, variable: Variable, expression: str) -> str:
        return self.json_casts[variable.type].format(value=expression)

    def identifier(self, name: str) -> str:
        """Turn a schema name into a valid identifier of the target language."""
        text = _NON_IDENTIFIER.sub("_", name) or "_"
        if text[0].isdigit():
            text = f"_{text}"
        if text in self.reserved_words:
            text = f"{self.reserved_word_prefix}{text}"
        return text

    def qualified_name(self, name: str) -> str:
        """Sanitize every dot-separated segment of a namespace name."""
        return ".".join(self.identifier(segment) for segment in name.split("."))

    def string_literal(self, text: str) -> str:
        escaped = "".join(self.string_escapes.get(char, char) for char in text)
        return f'"{escaped}"'


# fmt: off
_CSHARP_RESERVED_WORDS = frozenset({
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch", "char", "checked",
    "class", "const", "continue", "decimal", "default", "delegate", "do", "double", "else",
    "enum", "event", "explicit", "extern", "false", "finally", "fixed", "float", "for",
    "foreach", "goto", "if", "implicit", "in", "int", "interface", "internal", "is", "lock",
    "long", "namespace", "new", "null", "object", "operator", "out", "override", "params",
    "private", "protected", "public", "readonly", "ref", "return", "sbyte", "sealed",
    "short", "sizeof", "stackalloc", "static", "string", "struct", "switch", "this",
    "throw", "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort",
    "using", "virtual", "void", "volatile", "while",
})
# fmt: on

CSHARP_TARGET = TargetDescriptor(
    target_id="csharp",
    display_name="C#",
    file_extension=".cs",
    scalar_types={
        FieldType.INT32: "int",
        FieldType.UINT32: "int",
        FieldType.SINT32: "int",
        FieldType.FLOAT: "float",
        FieldType.DOUBLE: "double",
        FieldType.STRING: "string",
    },
    default_values={
        FieldType.INT32: "0",
        FieldType.UINT32: "0",
        FieldType.SINT32: "0",
        FieldType.FLOAT: "0.0f",
        FieldType.DOUBLE: "0.0",
        FieldType.STRING: '""',
    },
    json_casts={
        FieldType.INT32: "(int){value}",
        FieldType.UINT32: "(int){value}",
        FieldType.SINT32: "(int){value}",
        FieldType.FLOAT: "(float)(double){value}",
        FieldType.DOUBLE: "(double){value}",
        FieldType.STRING: "(string){value}",
    },
    null_literal="null",
    line_comment="//",
    namespace_open="namespace {name}{{",
    namespace_close="}",
    imports=("using System;", "using LitJson;", "using Pomelo.DotNetClient;"),
    client_type="PomeloClient",
    events_class_name="ServerEvent",
    string_escapes={
        "\\": "\\\\",
        '"': '\\"',
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\0": "\\0",
    },
    reserved_words=_CSHARP_RESERVED_WORDS,
    reserved_word_prefix="@",
)
