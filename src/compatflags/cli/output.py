"""Output utilities for CLI commands with clear intent.

- user_output: human-readable messages, routed to stderr so that stdout stays
  clean for data.
- machine_output: data meant for scripts (JSON), routed to stdout.
"""

import click


def user_output(message: str = "") -> None:
    """Print a message for the operator (stderr)."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Print machine-readable data (stdout)."""
    click.echo(message)
