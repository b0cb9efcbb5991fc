"""Output helpers with clear intent.

user_output goes to stderr (progress, errors), machine_output goes to stdout
(results meant to be captured by scripts).
"""

import click


def user_output(message: str = "") -> None:
    """Print a message meant for the person running the command."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Print a result meant for scripts."""
    click.echo(message)
