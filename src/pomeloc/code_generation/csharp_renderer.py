"""C# client proxy renderer over LitJson and the Pomelo .NET client."""

from __future__ import annotations

from collections.abc import Sequence

from pomeloc.schema_model import Qualifier, RootEntry, Struct, Variable

from .target_descriptors import CSHARP_TARGET, TargetDescriptor

_CLIENT_FIELD = "pc"
_CALLBACK_ARGUMENT = "cb"


class CSharpRenderer:
    """Emits single-line C# text; line breaks are left to the formatter."""

    def __init__(self, descriptor: TargetDescriptor = CSHARP_TARGET) -> None:
        self._descriptor = descriptor

    @property
    def descriptor(self) -> TargetDescriptor:
        return self._descriptor

    def render_preamble(self) -> str:
        comment = self._descriptor.line_comment
        lines = [f"{comment} automatically generated by pomeloc, do not modify"]
        lines.extend(self._descriptor.imports)
        return "\n".join(lines) + "\n"

    def render_struct(self, struct: Struct) -> str:
        nested = "".join(self.render_struct(child) for child in struct.structs.values())
        fields = "".join(self.render_field(variable) for variable in struct.variables)
        return (
            f"public class {self._name(struct.name)}{{"
            f"{nested}{fields}{self.render_to_json(struct)}{self.render_from_json(struct)}}}"
        )

    def render_field(self, variable: Variable) -> str:
        return f"public {self._field_type(variable)} {self._name(variable.name)};"

    def render_to_json(self, struct: Struct) -> str:
        return (
            "public JsonData ToJson(){JsonData data = new JsonData();"
            "data.SetJsonType(JsonType.Object);"
            f"{self.render_serialize_fields(struct.variables)}return data;}}"
        )

    def render_from_json(self, struct: Struct) -> str:
        body = "".join(self._deserialize_field(variable, "this") for variable in struct.variables)
        return f"public void FromJson(JsonData ret){{{body}}}"

    def render_serialize_fields(self, variables: Sequence[Variable]) -> str:
        """Assign every variable into the `data` JSON object."""
        return "".join(self._serialize_field(variable) for variable in variables)

    def render_call_stub(self, entry: RootEntry, response: Struct | None) -> str:
        arguments = self._arguments(entry.variables)
        if response is not None:
            arguments.append(f"System.Action<{self._name(response.name)}> {_CALLBACK_ARGUMENT}")
            dispatch = (
                f"{_CLIENT_FIELD}.request({self._literal(entry.router)}, data, "
                f"delegate (JsonData ret){{{self._deliver(response.name)}}});"
            )
        else:
            dispatch = f"{_CLIENT_FIELD}.notify({self._literal(entry.router)}, data);"
        return (
            f"public static bool {self._name(entry.method)}({','.join(arguments)}){{"
            "JsonData data = new JsonData();data.SetJsonType(JsonType.Object);"
            f"{self.render_serialize_fields(entry.variables)}{dispatch}return true;}}"
        )

    def render_event_stub(self, entry: RootEntry, event_struct: Struct) -> str:
        return (
            f"{self.render_struct(event_struct)}"
            f"public static bool {self._name(entry.method)}"
            f"(System.Action<{self._name(event_struct.name)}> {_CALLBACK_ARGUMENT}){{"
            f"{_CLIENT_FIELD}.on({self._literal(entry.router)}, delegate (JsonData ret){{"
            f"{self._deliver(event_struct.name)}}});return true;}}"
        )

    def render_class(self, class_name: str, members: Sequence[str]) -> str:
        return (
            f"public class {self._name(class_name)}{{"
            f"public static {self._descriptor.client_type} {_CLIENT_FIELD} = null;"
            f"{''.join(members)}}}"
        )

    def render_events_class(self, members: Sequence[str]) -> str:
        return self.render_class(self._descriptor.events_class_name, members)

    def render_namespace(self, namespace: str, body: str) -> str:
        opening = self._descriptor.namespace_open.format(
            name=self._descriptor.qualified_name(namespace)
        )
        return f"{opening}{body}{self._descriptor.namespace_close}"

    def _name(self, name: str) -> str:
        return self._descriptor.identifier(name)

    def _literal(self, text: str) -> str:
        return self._descriptor.string_literal(text)

    def _field_type(self, variable: Variable) -> str:
        element = self._descriptor.type_spelling(variable)
        return f"{element}[]" if variable.is_repeated else element

    def _arguments(self, variables: Sequence[Variable]) -> list[str]:
        leading: list[str] = []
        trailing: list[str] = []
        for variable in variables:
            declaration = f"{self._field_type(variable)} {self._name(variable.name)}"
            if variable.qualifier is Qualifier.OPTIONAL:
                trailing.append(f"{declaration}={self._descriptor.default_for(variable)}")
            else:
                leading.append(declaration)
        return leading + trailing

    def _deliver(self, type_name: str) -> str:
        name = self._name(type_name)
        return f"{name} result = new {name}();result.FromJson(ret);{_CALLBACK_ARGUMENT}(result);"

    def _serialize_field(self, variable: Variable) -> str:
        key = f"data[{self._literal(variable.name)}]"
        source = self._name(variable.name)
        if variable.is_repeated:
            element = f"{source}[i].ToJson()" if variable.is_message else f"{source}[i]"
            return (
                f"{key} = new JsonData();{key}.SetJsonType(JsonType.Array);"
                f"for(int i=0;i<{source}.Length;++i){{{key}.Add({element});}}"
            )
        if not variable.is_message:
            return f"{key} = {source};"
        if variable.qualifier is Qualifier.OPTIONAL:
            return f"if({source} != null){{{key}={source}.ToJson();}}"
        return f"{key}={source}.ToJson();"

    def _deserialize_field(self, variable: Variable, target: str) -> str:
        literal = self._literal(variable.name)
        value = f"ret[{literal}]"
        present = f"ret.ContainsKey({literal})"
        destination = f"{target}.{self._name(variable.name)}"
        element_type = self._descriptor.type_spelling(variable)
        if variable.is_repeated:
            if variable.is_message:
                assign = (
                    f"{destination}[i] = new {element_type}();"
                    f"{destination}[i].FromJson({value}[i]);"
                )
            else:
                assign = f"{destination}[i]={self._descriptor.cast(variable, f'{value}[i]')};"
            return (
                f"if({present} && {value}.IsArray && {value}.Count > 0){{"
                f"{destination} = new {element_type}[{value}.Count];"
                f"for(int i=0;i<{value}.Count;++i){{{assign}}}}}"
            )
        if variable.is_message:
            return (
                f"if({present}){{{destination} = new {element_type}();"
                f"{destination}.FromJson({value});}}"
            )
        return (
            f"{destination}= {present}?{self._descriptor.cast(variable, value)}"
            f":{self._descriptor.default_for(variable)};"
        )
