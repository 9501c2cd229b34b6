"""Status command - one-shot installation and flag report."""

import click

from compatflags.cli.json_output import emit_json
from compatflags.cli.json_schemas import StatusResponse
from compatflags.cli.output import user_output
from compatflags.cli.rendering import format_status_lines
from compatflags.core.context import CompatContext


@click.command("status")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
@click.pass_obj
def status_cmd(ctx: CompatContext, output_json: bool) -> None:
    """Show whether the application is installed and the flag is set."""
    target = ctx.config.target_display_name
    record = ctx.locator.locate(target)
    is_set = ctx.flags.is_set(record.executable_path)

    if output_json:
        response = StatusResponse(
            target_display_name=target,
            search_strategy=ctx.config.search_strategy.value,
            installed=record.installed,
            executable_path=record.executable_path,
            run_as_invoker=is_set,
        )
        emit_json(response.model_dump(mode="json"))
        return

    for line in format_status_lines(target, record, is_set):
        user_output(line)
