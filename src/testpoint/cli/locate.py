"""tpt locate command - show the test method and class governing a cursor."""

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
from testpoint.index.markers import has_test_marker
from testpoint.testing.ops import TestPointOps


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@position_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def locate_command(
    path: Path, offset: int | None, line: int | None, column: int | None, as_json: bool
) -> None:
    """Show the nearest test method and test class before the cursor.

    Prints '-' for a construct that does not exist. Unlike the run commands
    this never fails on a missing test; it reports what the index holds.
    """
    with cli_errors():
        buffer, _root, config = load_workspace(path)
        apply_logging_config(config)
        cursor = resolve_offset(buffer, offset, line, column)
        method, class_name = TestPointOps(config).locate(buffer, cursor)
        marker = has_test_marker(buffer)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "offset": cursor,
                    "line": buffer.line_number_at(cursor),
                    "has_test_marker": marker,
                    "method": (
                        {"class": method.class_name, "method": method.method_name}
                        if method
                        else None
                    ),
                    "class": class_name,
                }
            )
        )
        return

    click.echo(f"Method: {method if method else '-'}")
    click.echo(f"Class:  {class_name or '-'}")
    if not marker:
        click.echo("No test code found in this file.")
