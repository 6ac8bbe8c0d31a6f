"""Brace formatter tests."""

from __future__ import annotations

import pytest
from pomeloc.source_formatting import BraceBalanceError, format_source


def test_formats_nested_blocks_by_depth() -> None:
    formatted = format_source("class A{int a;void f(){x();}}")

    assert formatted == (
        "class A\n"
        "{\n"
        "    int a;\n"
        "    void f()\n"
        "    {\n"
        "        x();\n"
        "    }\n"
        "}\n"
    )


def test_statement_before_closing_brace_uses_shallower_indent() -> None:
    formatted = format_source("a{b;}")

    assert formatted == "a\n{\n    b;\n}\n"


def test_custom_indent_width() -> None:
    formatted = format_source("a{b;}", indent_width=2)

    assert formatted == "a\n{\n  b;\n}\n"


def test_text_without_braces_only_breaks_statements() -> None:
    assert format_source("a;b;") == "a;\nb;\n"


@pytest.mark.parametrize("code", ["a{b;", "a{b;}}", "{{}"])
def test_unbalanced_braces_raise(code: str) -> None:
    with pytest.raises(BraceBalanceError):
        format_source(code)


def test_brace_balance_error_is_a_runtime_error() -> None:
    assert issubclass(BraceBalanceError, RuntimeError)


def test_string_literal_contents_are_copied_verbatim() -> None:
    formatted = format_source('a{f("x{y;z}");}')

    assert formatted == 'a\n{\n    f("x{y;z}");\n}\n'


def test_escaped_quote_does_not_end_string_literal() -> None:
    formatted = format_source('f("a\\"{;\\\\");g();')

    assert formatted == 'f("a\\"{;\\\\");\ng();\n'
