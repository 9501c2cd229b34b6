"""Text and rich rendering shared by the menu and the status command."""

from rich.panel import Panel
from rich.text import Text

from compatflags.core.types import InstallationRecord


def render_header(target_display_name: str) -> Panel:
    """Banner shown at the top of every menu iteration."""
    return Panel(
        Text(f"{target_display_name} privilege manager", justify="center", style="bold"),
        border_style="cyan",
    )


def format_installed_line(record: InstallationRecord) -> str:
    return f"- Installed: {'✅ yes' if record.installed else '❌ no'}"


def format_executable_line(record: InstallationRecord) -> str:
    if record.executable_path is None:
        return "- Executable: unknown (uninstall entry has no DisplayIcon)"
    return f"- Executable: {record.executable_path}"


def format_flag_line(is_set: bool) -> str:
    return f"- Run as invoker: {'✅ set' if is_set else '❌ not set'}"


def format_status_lines(
    target_display_name: str, record: InstallationRecord, is_set: bool
) -> list[str]:
    """Plain-text status report used by ``compatflags status``."""
    lines = [f"Target: {target_display_name}", format_installed_line(record)]
    if record.installed:
        lines.append(format_executable_line(record))
        lines.append(format_flag_line(is_set))
    return lines
