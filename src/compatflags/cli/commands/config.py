"""Config commands - inspect and create the configuration file."""

import click

from compatflags.cli.ensure import Ensure
from compatflags.cli.output import user_output
from compatflags.core.config import CompatConfig, save_config
from compatflags.core.context import CompatContext


@click.group("config")
def config_group() -> None:
    """Manage compatflags configuration."""


@config_group.command("show")
@click.pass_obj
def show_cmd(ctx: CompatContext) -> None:
    """Print the effective configuration."""
    source = str(ctx.config_path)
    if not ctx.config_path.exists():
        source += " (not found, using defaults)"
    user_output(f"config_path = {source}")
    user_output(f"target_display_name = {ctx.config.target_display_name}")
    user_output(f"search_strategy = {ctx.config.search_strategy.value}")
    user_output(f"invalid_choice_delay = {ctx.config.invalid_choice_delay}")


@config_group.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_obj
def init_cmd(ctx: CompatContext, force: bool) -> None:
    """Write a config file with default values."""
    path = ctx.config_path
    Ensure.invariant(
        force or not path.exists(),
        f"Config already exists at {path}. Use --force to overwrite.",
    )
    save_config(CompatConfig.default(), path)
    user_output(click.style("✓ ", fg="green") + f"Wrote {path}")
