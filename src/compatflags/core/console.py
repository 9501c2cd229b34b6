"""Interactive console handle owned by the menu.

The console is acquired once when the menu starts and released exactly once
when it exits; use it as a context manager.
"""

import logging
from abc import ABC, abstractmethod
from types import TracebackType

import click
from rich.console import Console as RichConsole
from rich.console import RenderableType

logger = logging.getLogger(__name__)


class Console(ABC):
    """Abstract line-oriented console for the interactive menu."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the screen."""
        ...

    @abstractmethod
    def echo(self, message: str = "") -> None:
        """Print one line of text."""
        ...

    @abstractmethod
    def render(self, renderable: RenderableType) -> None:
        """Print a rich renderable (panels, styled text)."""
        ...

    @abstractmethod
    def prompt(self, text: str) -> str:
        """Show ``text`` and return one line of operator input."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the console. Called exactly once, on exit."""
        ...

    def __enter__(self) -> "Console":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class ClickConsole(Console):
    """Console backed by click for input and rich for rendering."""

    def __init__(self, rich_console: RichConsole | None = None) -> None:
        self._rich = rich_console
        self._closed = False

    def _get_rich(self) -> RichConsole:
        # Created lazily so that output lands on whatever sys.stdout is current
        # when the menu runs (CliRunner swaps it per invocation).
        if self._rich is None:
            self._rich = RichConsole(highlight=False)
        return self._rich

    def clear(self) -> None:
        click.clear()

    def echo(self, message: str = "") -> None:
        click.echo(message)

    def render(self, renderable: RenderableType) -> None:
        self._get_rich().print(renderable)

    def prompt(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False, prompt_suffix="")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.debug("Console released")
