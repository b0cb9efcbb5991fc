"""Base class for wrappers that print operations before delegating."""

from typing import Generic, TypeVar

import click

from github_cherry_pick.output import user_output

T = TypeVar("T")


class PrintingBase(Generic[T]):
    """Shared plumbing for Printing* wrappers.

    Subclasses print a styled command line for each mutating operation and
    then delegate to the wrapped implementation (Real or DryRun).
    """

    def __init__(self, wrapped: T, *, dry_run: bool = False) -> None:
        """Create a printing wrapper.

        Args:
            wrapped: Implementation to delegate to
            dry_run: If True, prefix printed commands with a dry-run marker
        """
        self._wrapped = wrapped
        self._dry_run = dry_run

    def _emit(self, message: str) -> None:
        user_output(message)

    def _format_command(self, command: str) -> str:
        prefix = click.style("[dry-run] ", fg="yellow") if self._dry_run else ""
        return prefix + click.style(f"$ {command}", dim=True)
