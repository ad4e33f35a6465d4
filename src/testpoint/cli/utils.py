"""CLI utilities."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TypeVar

import click

from testpoint.config.loader import load_config
from testpoint.config.models import TestPointConfig
from testpoint.core.errors import TestPointError
from testpoint.core.logging import configure_logging
from testpoint.index.buffer import SourceBuffer
from testpoint.testing.ops import find_workspace_root

F = TypeVar("F", bound=Callable[..., Any])


def position_options(func: F) -> F:
    """Attach --offset / --line / --column to a command."""
    func = click.option(
        "--column",
        type=click.IntRange(min=0),
        default=None,
        help="0-based column on --line (default: end of line)",
    )(func)
    func = click.option(
        "--line",
        type=click.IntRange(min=1),
        default=None,
        help="1-based cursor line",
    )(func)
    func = click.option(
        "--offset",
        type=click.IntRange(min=0),
        default=None,
        help="0-based character offset of the cursor",
    )(func)
    return func


def resolve_offset(
    buffer: SourceBuffer,
    offset: int | None,
    line: int | None,
    column: int | None,
) -> int:
    """Cursor offset from either --offset or --line/--column.

    Raises:
        click.UsageError: When both or neither position form is given.
    """
    if offset is not None and line is not None:
        raise click.UsageError("Use either --offset or --line, not both.")
    if column is not None and line is None:
        raise click.UsageError("--column requires --line.")
    if offset is not None:
        return offset
    if line is not None:
        return buffer.offset_at(line, column)
    raise click.UsageError("A cursor position is required: pass --offset or --line.")


def load_workspace(path: Path) -> tuple[SourceBuffer, Path, TestPointConfig]:
    """Read the file, find its workspace root and load the workspace config.

    A `tpt --config FILE` given on the group replaces the repo config file.
    """
    buffer = SourceBuffer.from_path(path)
    root = find_workspace_root(path)
    obj = click.get_current_context().find_root().obj or {}
    return buffer, root, load_config(root, config_file=obj.get("config_file"))


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn TestPointError into a click error with the diagnostic message."""
    try:
        yield
    except TestPointError as e:
        raise click.ClickException(e.message) from e


def apply_logging_config(config: TestPointConfig) -> None:
    """Use the workspace logging config unless -v already forced DEBUG."""
    obj = click.get_current_context().find_root().obj or {}
    if not obj.get("verbose"):
        configure_logging(config=config.logging)
