"""Test-code presence detection.

Every run command is gated on this check: a buffer with no test marker
gets a diagnostic, never a command.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from testpoint.config.constants import TEST_MARKER_PATTERNS
from testpoint.index.buffer import SourceBuffer


def first_test_marker(
    buffer: SourceBuffer,
    patterns: Sequence[re.Pattern[str]] = TEST_MARKER_PATTERNS,
) -> tuple[re.Pattern[str], int] | None:
    """The first pattern (in priority order) found in the buffer, with its offset."""
    for pattern in patterns:
        offset = buffer.find_first_match(pattern)
        if offset is not None:
            return pattern, offset
    return None


def has_test_marker(
    buffer: SourceBuffer,
    patterns: Sequence[re.Pattern[str]] = TEST_MARKER_PATTERNS,
) -> bool:
    return first_test_marker(buffer, patterns) is not None
