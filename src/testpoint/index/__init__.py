"""Symbol index: source buffers, indexer and the test construct locator."""

from testpoint.index.buffer import SourceBuffer
from testpoint.index.classify import (
    classify_classes,
    classify_methods,
    find_nearest,
    nearest_test_class,
    nearest_test_method,
    split_qualified_method_name,
)
from testpoint.index.markers import first_test_marker, has_test_marker
from testpoint.index.models import QualifiedMethodName, SymbolEntry

__all__ = [
    "SourceBuffer",
    "SymbolEntry",
    "QualifiedMethodName",
    "classify_methods",
    "classify_classes",
    "find_nearest",
    "split_qualified_method_name",
    "nearest_test_method",
    "nearest_test_class",
    "has_test_marker",
    "first_test_marker",
]
