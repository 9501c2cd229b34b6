"""Interactive menu: check state, present actions, dispatch, repeat.

Each pass through the loop re-reads the registry from scratch, so changes made
outside the tool between iterations are always picked up.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

import click

from compatflags.cli.rendering import (
    format_executable_line,
    format_flag_line,
    format_installed_line,
    render_header,
)
from compatflags.core.context import CompatContext
from compatflags.core.registry.types import RegistryWriteError
from compatflags.core.types import InstallationRecord

logger = logging.getLogger(__name__)

APPLY_LABEL = "Run without elevation (skip UAC prompt)"
REMOVE_LABEL = "Remove setting (restore default)"
EXIT_LABEL = "Exit"


class MenuResult(Enum):
    """Control token returned by every menu action."""

    CONTINUE = "continue"
    EXIT = "exit"


@dataclass(frozen=True)
class MenuOption:
    label: str
    action: Callable[[], MenuResult]


def select_option(options: Sequence[MenuOption], raw: str) -> MenuOption | None:
    """Interpret operator input as a 1-based index into ``options``.

    Returns None for non-numeric input and for indexes out of range (including 0).
    """
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    index = int(text) - 1
    if index < 0 or index >= len(options):
        return None
    return options[index]


class MenuController:
    """Drives the Checking -> Presenting -> Dispatching loop until the operator exits.

    The console handle belongs to the controller for the lifetime of run() and
    is released exactly once when the loop ends.
    """

    def __init__(self, ctx: CompatContext) -> None:
        self._ctx = ctx
        self._console = ctx.console

    def run(self) -> None:
        with self._console:
            while self.run_once() is not MenuResult.EXIT:
                pass
        logger.debug("Menu exited")

    def run_once(self) -> MenuResult:
        """One full iteration: check state, show the menu, handle one selection."""
        target = self._ctx.config.target_display_name
        self._console.clear()
        self._console.render(render_header(target))

        record = self._ctx.locator.locate(target)
        is_set = self._check(record)
        options = self.build_options(record, is_set)
        return self._dispatch(options)

    def _check(self, record: InstallationRecord) -> bool:
        target = self._ctx.config.target_display_name
        self._console.echo(format_installed_line(record))
        if not record.installed:
            self._console.echo(f'\n"{target}" could not be found.')
            return False
        if record.executable_path is None:
            self._console.echo(format_executable_line(record))
            return False
        is_set = self._ctx.flags.is_set(record.executable_path)
        self._console.echo(format_flag_line(is_set))
        return is_set

    def build_options(self, record: InstallationRecord, is_set: bool) -> list[MenuOption]:
        """Menu for the current state. Exit is always offered, always last."""
        options: list[MenuOption] = []
        path = record.executable_path
        if record.installed and path is not None:
            if is_set:
                options.append(MenuOption(REMOVE_LABEL, lambda: self._remove(path)))
            else:
                options.append(MenuOption(APPLY_LABEL, lambda: self._apply(path)))
        options.append(MenuOption(EXIT_LABEL, lambda: MenuResult.EXIT))
        return options

    def _dispatch(self, options: Sequence[MenuOption]) -> MenuResult:
        self._console.echo("\n[ Menu ]")
        for number, option in enumerate(options, start=1):
            self._console.echo(f"{number}. {option.label}")

        answer = self._console.prompt("\nSelect: ")
        option = select_option(options, answer)
        if option is None:
            logger.debug("Invalid selection: %r", answer)
            self._console.echo("Invalid selection.")
            self._ctx.time.sleep(self._ctx.config.invalid_choice_delay)
            return MenuResult.CONTINUE
        return option.action()

    def _apply(self, path: str) -> MenuResult:
        try:
            self._ctx.flags.apply(path)
        except RegistryWriteError as e:
            self._console.echo(click.style(f"\n❌ Failed to apply setting: {e}", fg="red"))
        else:
            self._console.echo(click.style("\n✨ Run-as-invoker setting applied.", fg="green"))
        self._await_acknowledgment()
        return MenuResult.CONTINUE

    def _remove(self, path: str) -> MenuResult:
        try:
            self._ctx.flags.remove(path)
        except RegistryWriteError as e:
            self._console.echo(click.style(f"\n❌ Failed to remove setting: {e}", fg="red"))
        else:
            self._console.echo(click.style("\n✨ Run-as-invoker setting removed.", fg="green"))
        self._await_acknowledgment()
        return MenuResult.CONTINUE

    def _await_acknowledgment(self) -> None:
        self._console.prompt("\nPress Enter to return to the main screen...")
