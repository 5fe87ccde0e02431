"""Output routing for user-facing messages.

Diagnostic and progress messages go to stderr so stdout stays free for
anything a caller may want to capture.
"""

import click


def user_output(message: str = "", nl: bool = True, color: bool | None = None) -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, nl=nl, err=True, color=color)
