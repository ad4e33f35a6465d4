"""Locator constants.

These are behavioral contracts of the locator, not user settings. Changing
them changes which constructs count as tests.
"""

import re

# =============================================================================
# Naming
# =============================================================================

TEST_METHOD_PREFIX = "test_"
"""Method names that start with this prefix are test methods."""

TEST_BASE_CLASS_TOKEN = "TestCase"
"""Base class names ending in this token mark a test class (case-sensitive)."""

METHOD_NAME_SEPARATOR = "#"
SINGLETON_NAME_SEPARATOR = "."
NAMESPACE_SEPARATOR = "::"

# =============================================================================
# Structural patterns
# =============================================================================

QUALIFIED_METHOD_RE = re.compile(rf"(.+){METHOD_NAME_SEPARATOR}({TEST_METHOD_PREFIX}.+)")
"""Composite `Class#test_method` name. Group 1 is greedy."""

_CLASS_DECLARATION = (
    rf"class[ \t]+[A-Z][\w:]*[ \t]*<[ \t]*(?:::)?(?:\w+::)*\w*{TEST_BASE_CLASS_TOKEN}\b"
)

CLASS_DECLARATION_RE = re.compile(rf"^[ \t]*{_CLASS_DECLARATION}")
"""`class Foo < Test::Unit::TestCase` and other `...TestCase` subclasses."""

TEST_MARKER_PATTERNS: tuple[re.Pattern[str], ...] = (
    # def test_something
    re.compile(rf"^[ \t]*def[ \t]+{TEST_METHOD_PREFIX}\w*", re.MULTILINE),
    # test "does something" do
    re.compile(r"""^[ \t]*test[ \t]*\(?[ \t]*(["']).*?\1[ \t]*\)?[ \t]*(?:do\b|\{)""", re.MULTILINE),
    # class FooTest < ActiveSupport::TestCase
    re.compile(rf"^[ \t]*{_CLASS_DECLARATION}", re.MULTILINE),
    # require 'test/unit'
    re.compile(
        r"""^[ \t]*require(?:_relative)?[ \t]*\(?[ \t]*["'][^"']*"""
        r"""(?:test/unit|minitest|test_helper)[^"']*["']""",
        re.MULTILINE,
    ),
)
"""Test-code markers in priority order."""

# =============================================================================
# Workspace detection
# =============================================================================

WORKSPACE_MARKERS = ("Gemfile", "Rakefile", ".git")
"""Files or directories that mark a Ruby workspace root."""

REPO_CONFIG_FILENAME = ".testpoint.yaml"
