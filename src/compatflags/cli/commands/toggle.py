"""Apply and remove commands - non-interactive flag toggles."""

import click

from compatflags.cli.ensure import Ensure
from compatflags.cli.output import user_output
from compatflags.core.context import CompatContext
from compatflags.core.registry.types import RegistryWriteError


def _resolve_executable_path(ctx: CompatContext) -> str:
    target = ctx.config.target_display_name
    record = ctx.locator.locate(target)
    Ensure.invariant(record.installed, f'"{target}" could not be found.')
    return Ensure.not_none(
        record.executable_path,
        f'"{target}" is installed but its uninstall entry has no DisplayIcon path.',
    )


@click.command("apply")
@click.pass_obj
def apply_cmd(ctx: CompatContext) -> None:
    """Make the application run without elevation (skip the UAC prompt)."""
    path = _resolve_executable_path(ctx)
    try:
        ctx.flags.apply(path)
    except RegistryWriteError as e:
        Ensure.fail(f"Failed to apply setting: {e}")
    user_output(click.style("✨ Run-as-invoker setting applied: ", fg="green") + path)


@click.command("remove")
@click.pass_obj
def remove_cmd(ctx: CompatContext) -> None:
    """Remove the run-as-invoker setting (restore default behaviour)."""
    path = _resolve_executable_path(ctx)
    try:
        ctx.flags.remove(path)
    except RegistryWriteError as e:
        Ensure.fail(f"Failed to remove setting: {e}")
    user_output(click.style("✨ Run-as-invoker setting removed: ", fg="green") + path)
