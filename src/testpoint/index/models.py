"""Symbol index data model.

An index collection is a plain ``list[SymbolEntry]`` scoped to one source
buffer. It is rebuilt for every query and never persisted.
"""

from __future__ import annotations

from typing import NamedTuple


class SymbolEntry(NamedTuple):
    """A (qualified name, character offset) pair emitted by an indexer.

    Qualified names are either a bare container name (``Foo``,
    ``Outer::Foo``), an instance method (``Foo#test_bar``) or a singleton
    method (``Foo.build``).
    """

    name: str
    offset: int


class QualifiedMethodName(NamedTuple):
    """A ``Class#test_method`` name split into its two parts."""

    class_name: str
    method_name: str

    def __str__(self) -> str:
        return f"{self.class_name}#{self.method_name}"
