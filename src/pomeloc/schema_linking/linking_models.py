"""Grouped schema views used by code generation."""

from __future__ import annotations

from typing import TypeAlias

from pomeloc.schema_model import RootEntry

ClassGroup: TypeAlias = dict[str, RootEntry]
NamespaceGroup: TypeAlias = dict[str, ClassGroup]
