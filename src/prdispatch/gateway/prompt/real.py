"""Terminal prompt using rich for rendering and click for input."""

import click
from rich.console import Console
from rich.table import Table

from prdispatch.core.errors import UserCancelled
from prdispatch.gateway.prompt.abc import Prompter


class RealPrompter(Prompter):
    """Production implementation rendering a numbered menu on stderr."""

    def __init__(self) -> None:
        self._console = Console(stderr=True)

    def select(self, prompt: str, options: list[str], *, default: int) -> int:
        table = Table(show_header=False, box=None)
        table.add_column("#", style="dim", no_wrap=True)
        table.add_column("option", style="cyan")
        for i, option in enumerate(options, 1):
            table.add_row(str(i), option)

        self._console.print(f"[bold]{prompt}[/bold]")
        self._console.print(table)

        try:
            selection = click.prompt(
                "Enter number",
                type=click.IntRange(1, len(options)),
                default=default + 1,
                err=True,
            )
        except (KeyboardInterrupt, click.Abort):
            raise UserCancelled() from None
        return selection - 1
