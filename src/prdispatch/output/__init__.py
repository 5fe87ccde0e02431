"""User-facing output helpers."""

from prdispatch.output.output import user_output

__all__ = ["user_output"]
