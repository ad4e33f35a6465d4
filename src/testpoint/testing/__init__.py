"""Test targeting module - resolve and build test commands."""

from testpoint.testing.models import CommandLine, TargetKind, TestTarget
from testpoint.testing.ops import TestPointOps, find_workspace_root

__all__ = [
    "TestPointOps",
    "TestTarget",
    "TargetKind",
    "CommandLine",
    "find_workspace_root",
]
