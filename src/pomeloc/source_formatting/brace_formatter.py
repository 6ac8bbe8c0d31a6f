"""Brace-depth re-indentation of generated source text."""

from __future__ import annotations

DEFAULT_INDENT_WIDTH = 4


class BraceBalanceError(RuntimeError):
    """Raised when generated text leaves braces unbalanced."""


def format_source(code: str, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """Break generated code into lines and indent it by brace depth.

    Every `{` starts on its own line and opens a deeper level, every `;` and
    `}` ends a line. A line that starts with `}` uses the shallower indent.
    Characters inside double-quoted string literals are copied unchanged.

    Raises:
      BraceBalanceError: If the braces in `code` do not balance.
    """
    pieces: list[str] = []
    depth = 0
    in_string = False
    escaped = False

    def indent(level: int) -> str:
        return " " * (indent_width * max(level, 0))

    for position, char in enumerate(code):
        if in_string:
            pieces.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
            pieces.append(char)
            continue
        closes_next = code[position + 1 : position + 2] == "}"
        if char == "{":
            pieces.append(f"\n{indent(depth)}{{")
            depth += 1
            pieces.append(f"\n{indent(depth)}")
            continue
        pieces.append(char)
        if char == ";":
            pieces.append(f"\n{indent(depth - 1 if closes_next else depth)}")
        elif char == "}":
            depth -= 1
            pieces.append(f"\n{indent(depth - 1 if closes_next else depth)}")

    if depth != 0:
        raise BraceBalanceError(f"mismatched braces in generated code (depth {depth})")
    return "".join(pieces)
