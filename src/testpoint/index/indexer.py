"""Tree-sitter symbol indexer for Ruby sources.

Walks the syntax tree in document order and emits imenu-style qualified
names:

- ``class``/``module`` -> ``Outer::Inner``
- ``def m`` inside a container -> ``Outer::Inner#m``
- ``def self.m`` or ``def m`` inside ``class << self`` -> ``Outer::Inner.m``
- ``test "adds numbers" do`` inside a container -> ``Outer::Inner#test_adds_numbers``

Offsets are character offsets of the defining keyword, in the same
coordinate space as `SourceBuffer` offsets.
"""

from __future__ import annotations

import importlib
import re
from dataclasses import dataclass, field
from typing import Any

import tree_sitter

from testpoint.config.constants import (
    METHOD_NAME_SEPARATOR,
    NAMESPACE_SEPARATOR,
    SINGLETON_NAME_SEPARATOR,
    TEST_METHOD_PREFIX,
)
from testpoint.core.errors import IndexingError
from testpoint.core.logging import get_logger
from testpoint.index.buffer import SourceBuffer
from testpoint.index.models import SymbolEntry

log = get_logger("testpoint.index")

GRAMMAR_PACKAGE = "tree-sitter-ruby"
GRAMMAR_MODULE = "tree_sitter_ruby"

_CONTAINER_TYPES = frozenset({"class", "module"})
_BLOCK_TEST_METHOD = "test"
_WHITESPACE_RE = re.compile(r"\s+")


def _text(node: Any) -> str:
    return str(node.text.decode("utf-8"))


@dataclass
class RubyIndexer:
    """Builds an index collection for one Ruby buffer.

    Usage::

        indexer = RubyIndexer()
        entries = indexer.build_index(SourceBuffer(text))
    """

    _parser: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        try:
            grammar = importlib.import_module(GRAMMAR_MODULE)
        except ImportError as err:
            raise IndexingError.grammar_unavailable(GRAMMAR_PACKAGE) from err
        self._parser = tree_sitter.Parser()
        self._parser.language = tree_sitter.Language(grammar.language())

    def build_index(self, buffer: SourceBuffer) -> list[SymbolEntry]:
        source = buffer.text.encode("utf-8")
        tree = self._parser.parse(source)
        to_char = _offset_converter(buffer.text, source)

        entries: list[SymbolEntry] = []
        self._walk(tree.root_node, [], False, entries, to_char)
        log.debug(
            "index_built",
            path=str(buffer.path) if buffer.path else None,
            entries=len(entries),
        )
        return entries

    def _walk(
        self,
        node: Any,
        scope: list[str],
        singleton: bool,
        entries: list[SymbolEntry],
        to_char: Any,
    ) -> None:
        kind = node.type
        if kind in _CONTAINER_TYPES:
            name_node = node.child_by_field_name("name")
            if name_node is not None:
                inner = [*scope, _text(name_node)]
                entries.append(
                    SymbolEntry(NAMESPACE_SEPARATOR.join(inner), to_char(node.start_byte))
                )
                for child in node.children:
                    self._walk(child, inner, False, entries, to_char)
                return
        elif kind == "singleton_class":
            for child in node.children:
                self._walk(child, scope, True, entries, to_char)
            return
        elif kind in ("method", "singleton_method"):
            name_node = node.child_by_field_name("name")
            if name_node is not None:
                sep = (
                    SINGLETON_NAME_SEPARATOR
                    if singleton or kind == "singleton_method"
                    else METHOD_NAME_SEPARATOR
                )
                entries.append(
                    SymbolEntry(_qualify(scope, sep, _text(name_node)), to_char(node.start_byte))
                )
        elif kind == "call" and scope:
            test_name = _block_test_name(node)
            if test_name is not None:
                entries.append(
                    SymbolEntry(
                        _qualify(scope, METHOD_NAME_SEPARATOR, test_name),
                        to_char(node.start_byte),
                    )
                )

        for child in node.children:
            self._walk(child, scope, singleton, entries, to_char)


def _qualify(scope: list[str], separator: str, name: str) -> str:
    if not scope:
        return name
    return f"{NAMESPACE_SEPARATOR.join(scope)}{separator}{name}"


def _block_test_name(node: Any) -> str | None:
    """``test "does a thing" do`` -> ``test_does_a_thing``, else None."""
    if node.child_by_field_name("receiver") is not None:
        return None
    method = node.child_by_field_name("method")
    if method is None or _text(method) != _BLOCK_TEST_METHOD:
        return None
    if node.child_by_field_name("block") is None:
        return None
    arguments = node.child_by_field_name("arguments")
    if arguments is None or arguments.named_child_count == 0:
        return None
    first = arguments.named_children[0]
    if first.type != "string":
        return None
    content = "".join(_text(c) for c in first.named_children if c.type == "string_content")
    if not content:
        return None
    return TEST_METHOD_PREFIX + _WHITESPACE_RE.sub("_", content)


def _offset_converter(text: str, source: bytes) -> Any:
    """Map tree-sitter byte offsets to character offsets."""
    if len(text) == len(source):
        return lambda byte_offset: byte_offset

    def to_char(byte_offset: int) -> int:
        return len(source[:byte_offset].decode("utf-8", errors="ignore"))

    return to_char


def build_index(buffer: SourceBuffer) -> list[SymbolEntry]:
    """Index ``buffer`` with a fresh `RubyIndexer`."""
    return RubyIndexer().build_index(buffer)
