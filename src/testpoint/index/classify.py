"""Nearest-enclosing test construct resolution over a symbol index.

Given the flat ``(name, offset)`` entries an indexer emits for one buffer,
this module decides which entries are test methods and which are test
classes, and finds the one governing a cursor offset.

Nothing here raises, logs or touches shared state. "Not found" is ``None``
(or an empty list); turning that into a diagnostic is the caller's job.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from testpoint.config.constants import (
    CLASS_DECLARATION_RE,
    METHOD_NAME_SEPARATOR,
    QUALIFIED_METHOD_RE,
    SINGLETON_NAME_SEPARATOR,
)
from testpoint.index.models import QualifiedMethodName, SymbolEntry

LineTextAt = Callable[[int], str]
"""Returns the text of the line containing an offset."""


def split_qualified_method_name(name: str) -> QualifiedMethodName | None:
    """Split ``Class#test_method`` into its parts, or None for any other name."""
    match = QUALIFIED_METHOD_RE.fullmatch(name)
    if match is None:
        return None
    return QualifiedMethodName(match.group(1), match.group(2))


def classify_methods(entries: Iterable[SymbolEntry]) -> list[SymbolEntry]:
    """Entries named ``<class>#test_<...>``, in index order."""
    return [entry for entry in entries if split_qualified_method_name(entry.name) is not None]


def is_class_declaration(line_text: str) -> bool:
    """True for ``class Foo < ...TestCase`` lines."""
    return CLASS_DECLARATION_RE.match(line_text) is not None


def classify_classes(
    entries: Sequence[SymbolEntry],
    line_text_at: LineTextAt,
) -> list[SymbolEntry]:
    """Entries that name a test class, in index order.

    An entry qualifies when its name is the class part of some test method
    entry, or when it is a plain name whose declaration line subclasses a
    ``...TestCase`` base. Same-named entries at different offsets are all
    kept.
    """
    class_parts: set[str] = set()
    for entry in classify_methods(entries):
        parts = split_qualified_method_name(entry.name)
        if parts is not None:
            class_parts.add(parts.class_name)

    def _is_test_class(entry: SymbolEntry) -> bool:
        if entry.name in class_parts:
            return True
        if METHOD_NAME_SEPARATOR in entry.name or SINGLETON_NAME_SEPARATOR in entry.name:
            return False
        return is_class_declaration(line_text_at(entry.offset))

    return [entry for entry in entries if _is_test_class(entry)]


def find_nearest(cursor_offset: int, entries: Iterable[SymbolEntry]) -> SymbolEntry | None:
    """Last entry, in sequence order, whose offset does not exceed the cursor.

    This is deliberately not the maximum offset: on an index that is out of
    offset order the answer follows the sequence.
    """
    nearest: SymbolEntry | None = None
    for entry in entries:
        if entry.offset <= cursor_offset:
            nearest = entry
    return nearest


def nearest_test_method(
    cursor_offset: int,
    index: Sequence[SymbolEntry],
) -> QualifiedMethodName | None:
    entry = find_nearest(cursor_offset, classify_methods(index))
    if entry is None:
        return None
    return split_qualified_method_name(entry.name)


def nearest_test_class(
    cursor_offset: int,
    index: Sequence[SymbolEntry],
    line_text_at: LineTextAt,
) -> str | None:
    entry = find_nearest(cursor_offset, classify_classes(index, line_text_at))
    return entry.name if entry is not None else None
