"""Code generation service tests."""

from __future__ import annotations

import json

import pytest
from pomeloc.code_generation import (
    CSharpRenderer,
    GenerationContext,
    UnknownTargetError,
    generate,
    render_declarations,
)
from pomeloc.schema_linking import DuplicateDeclarationError, link_schemas
from pomeloc.schema_model import RootEntry, Schema
from pomeloc.schema_parsing import parse_schema, unwrap_schema


def _linked(server: dict | None, client: dict | None) -> Schema:
    def parse(document: dict | None) -> Schema | None:
        if document is None:
            return None
        return unwrap_schema(parse_schema(json.dumps(document), "test.json"))

    return link_schemas(parse(client), parse(server))


def test_ping_end_to_end_produces_result_type_and_callback_stub() -> None:
    schema = _linked(
        server={"ns.Cls.ping": {"required int32 v": 0}},
        client={"ns.Cls.ping": {"required int32 v": 0}},
    )

    code = render_declarations(schema, CSharpRenderer())

    assert code.startswith("namespace ns{public class Cls{public static PomeloClient pc = null;")
    assert "public class ping_result{public int v;" in code
    assert "public static bool ping(int v,System.Action<ping_result> cb){" in code
    assert 'pc.request("ns.Cls.ping", data, ' in code
    assert code.endswith("}}public class ServerEvent{public static PomeloClient pc = null;}")


def test_router_without_response_emits_notify_stub() -> None:
    schema = _linked(server=None, client={"ns.Cls.leave": {"optional string why": 1}})

    code = render_declarations(schema, CSharpRenderer())

    assert 'public static bool leave(string why=""){' in code
    assert 'pc.notify("ns.Cls.leave", data);' in code
    assert "System.Action" not in code


def test_events_are_collected_in_server_event_class() -> None:
    schema = _linked(
        server={"onChat": {"required string msg": 1}, "onKick": {}},
        client=None,
    )

    code = render_declarations(schema, CSharpRenderer())

    assert code.startswith("public class ServerEvent{public static PomeloClient pc = null;")
    assert "public class onChat_event{" in code
    assert "public static bool onChat(System.Action<onChat_event> cb)" in code
    assert "public static bool onKick(System.Action<onKick_event> cb)" in code


def test_custom_namespace_wraps_everything() -> None:
    schema = _linked(server={"onChat": {}}, client={"ns.Cls.ping": {}})

    code = render_declarations(schema, CSharpRenderer(), custom_namespace="Game.Proto")

    assert code.startswith("namespace Game.Proto{namespace ns{")
    assert code.count("namespace Game.Proto{") == 1
    assert code.index("namespace ns{") < code.index("public class ServerEvent{")
    assert code.endswith("cb(result);});return true;}}}")


def test_nested_structs_are_hoisted_with_method_prefix() -> None:
    schema = _linked(
        server=None,
        client={
            "ns.Shop.buy": {
                "message Item": {"required int32 id": 1},
                "repeated Item items": 1,
            }
        },
    )

    code = render_declarations(schema, CSharpRenderer())

    assert "public class buy_Item{public int id;" in code
    assert "public static bool buy(buy_Item[] items){" in code


def test_classes_group_methods_per_namespace() -> None:
    schema = _linked(
        server=None,
        client={
            "area.player.move": {},
            "connector.entry.enter": {},
            "area.player.attack": {},
        },
    )

    code = render_declarations(schema, CSharpRenderer())

    assert code.count("namespace area{") == 1
    assert code.count("public class player{") == 1
    assert code.index("bool move(") < code.index("bool attack(")
    assert code.index("bool attack(") < code.index("namespace connector{")


def test_duplicate_declaration_surfaces_from_generation() -> None:
    entry = RootEntry(router="ns.Cls.m", method="m", namespace="ns", class_name="Cls")
    schema = Schema(entries=(entry, entry))

    with pytest.raises(DuplicateDeclarationError):
        generate(GenerationContext(schema=schema))


def test_generate_formats_and_prefixes_preamble() -> None:
    schema = _linked(
        server={"ns.Cls.ping": {"required int32 v": 0}},
        client={"ns.Cls.ping": {"required int32 v": 0}},
    )

    unit = generate(GenerationContext(schema=schema, custom_namespace="Game"))

    assert unit.target == "csharp"
    assert unit.file_extension == ".cs"
    lines = unit.text.splitlines()
    assert lines[:4] == [
        "// automatically generated by pomeloc, do not modify",
        "using System;",
        "using LitJson;",
        "using Pomelo.DotNetClient;",
    ]
    assert "namespace Game" in lines
    assert "public static bool ping(int v,System.Action<ping_result> cb)" in [
        line.strip() for line in lines
    ]
    assert unit.text.count("{") == unit.text.count("}")
    assert unit.text.rstrip().endswith("}")


def test_generate_is_deterministic() -> None:
    schema = _linked(
        server={"a.B.c": {"message M": {"required int32 x": 1}, "optional M m": 1}, "onE": {}},
        client={"a.B.c": {"required string s": 1}, "a.B.d": {}},
    )

    first = generate(GenerationContext(schema=schema)).text
    second = generate(GenerationContext(schema=schema)).text

    assert first == second


def test_unknown_target_is_rejected() -> None:
    with pytest.raises(UnknownTargetError, match="java"):
        generate(GenerationContext(schema=Schema(), target="java"))


def test_routers_with_braces_semicolons_and_quotes_generate_balanced_code() -> None:
    schema = _linked(
        server={
            "on{Chat": {"required string x}": 1},
            "on;Kick": {},
            'on"Move': {},
            "on}Leave": {},
        },
        client={"ns.Cls.say{": {"optional string text;": 1}},
    )

    unit = generate(GenerationContext(schema=schema))

    stripped = [line.strip() for line in unit.text.splitlines()]
    assert 'pc.on("on{Chat", delegate (JsonData ret)' in stripped
    assert 'pc.on("on;Kick", delegate (JsonData ret)' in stripped
    assert 'pc.on("on\\"Move", delegate (JsonData ret)' in stripped
    assert 'pc.on("on}Leave", delegate (JsonData ret)' in stripped
    assert 'data["x}"] = x_;' in stripped
    assert 'data["text;"] = text_;' in stripped
    assert 'pc.notify("ns.Cls.say{", data);' in stripped


def test_nested_struct_colliding_with_response_type_is_rejected() -> None:
    schema = _linked(
        server={"ns.Cls.ping": {"required int32 v": 1}},
        client={
            "ns.Cls.ping": {
                "message result": {"required int32 code": 1},
                "required result r": 1,
            }
        },
    )

    with pytest.raises(DuplicateDeclarationError, match="ping_result in ns.Cls"):
        generate(GenerationContext(schema=schema))
