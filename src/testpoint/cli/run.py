"""tpt method / class / file commands - print the command that runs a test."""

from __future__ import annotations

import json
from pathlib import Path

import click

from testpoint.cli.utils import (
    apply_logging_config,
    cli_errors,
    load_workspace,
    position_options,
    resolve_offset,
)
from testpoint.core.logging import get_logger
from testpoint.testing.models import CommandLine, TargetKind, TestTarget
from testpoint.testing.ops import TestPointOps

log = get_logger("testpoint.cli")


def _emit(target: TestTarget, command: CommandLine, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps({"target": target.to_dict(), **command.to_dict()}))
    else:
        click.echo(command.render())


def _run(path: Path, kind: TargetKind, as_json: bool, position: dict[str, int | None]) -> None:
    with cli_errors():
        buffer, root, config = load_workspace(path)
        apply_logging_config(config)
        offset = None
        if kind != "file":
            offset = resolve_offset(buffer, **position)
        ops = TestPointOps(config)
        target, command = ops.command_for(buffer, kind, offset, workspace_root=root)
    log.debug("command_ready", kind=kind, selector=target.selector)
    _emit(target, command, as_json)


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@position_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def method_command(
    path: Path, offset: int | None, line: int | None, column: int | None, as_json: bool
) -> None:
    """Print the command running the test method nearest before the cursor."""
    _run(path, "method", as_json, {"offset": offset, "line": line, "column": column})


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@position_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def class_command(
    path: Path, offset: int | None, line: int | None, column: int | None, as_json: bool
) -> None:
    """Print the command running the test class nearest before the cursor."""
    _run(path, "class", as_json, {"offset": offset, "line": line, "column": column})


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def file_command(path: Path, as_json: bool) -> None:
    """Print the command running every test in PATH."""
    _run(path, "file", as_json, {})
