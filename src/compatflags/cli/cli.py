import logging
import os

import click

from compatflags.cli.commands.config import config_group
from compatflags.cli.commands.menu import menu_cmd
from compatflags.cli.commands.status import status_cmd
from compatflags.cli.commands.toggle import apply_cmd, remove_cmd
from compatflags.cli.ensure import Ensure
from compatflags.core.context import create_context
from compatflags.core.types import SearchStrategy

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "COMPATFLAGS_DEBUG"


def _configure_logging(debug: bool) -> None:
    if debug or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="compatflags")
@click.option("--target", help="DisplayName of the application's uninstall entry.")
@click.option(
    "--strategy",
    type=click.Choice([strategy.value for strategy in SearchStrategy], case_sensitive=False),
    help="How uninstall entries are searched.",
)
@click.option("--dry-run", is_flag=True, help="Print registry changes instead of making them.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context, target: str | None, strategy: str | None, dry_run: bool, debug: bool
) -> None:
    """Run an installed application without elevation by toggling its RunAsInvoker flag."""
    _configure_logging(debug)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            Ensure.fail(str(e))

    ctx.obj = ctx.obj.with_overrides(
        target=target,
        strategy=SearchStrategy.parse(strategy) if strategy is not None else None,
        dry_run=dry_run,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu_cmd)


cli.add_command(menu_cmd)
cli.add_command(status_cmd)
cli.add_command(apply_cmd)
cli.add_command(remove_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `compatflags` console script."""
    cli()
