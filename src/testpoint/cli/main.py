"""TestPoint CLI - tpt command."""

from pathlib import Path

import click

from testpoint.cli.locate import locate_command
from testpoint.cli.run import class_command, file_command, method_command
from testpoint.core.logging import configure_logging, set_request_id


@click.group()
@click.version_option(version="0.1.0", prog_name="tpt")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of <workspace>/.testpoint.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_file: Path | None) -> None:
    """TestPoint - build the command that runs the Ruby test at the cursor."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_file"] = config_file
    configure_logging(level="DEBUG" if verbose else "WARNING")
    set_request_id()


cli.add_command(method_command, name="method")
cli.add_command(class_command, name="class")
cli.add_command(file_command, name="file")
cli.add_command(locate_command, name="locate")


if __name__ == "__main__":
    cli()
