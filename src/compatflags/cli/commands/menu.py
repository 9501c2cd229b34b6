"""Menu command - the interactive privilege manager."""

import click

from compatflags.cli.menu import MenuController
from compatflags.core.context import CompatContext


@click.command("menu")
@click.pass_obj
def menu_cmd(ctx: CompatContext) -> None:
    """Open the interactive menu (default when no command is given)."""
    MenuController(ctx).run()
