"""Source formatting exports."""

from .brace_formatter import DEFAULT_INDENT_WIDTH, BraceBalanceError, format_source

__all__ = ["DEFAULT_INDENT_WIDTH", "BraceBalanceError", "format_source"]
