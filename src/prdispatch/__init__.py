"""prdispatch CLI entry point.

Dispatches a GitHub Actions workflow run for one of your open pull requests
against a chosen deployment environment. See `prdispatch --help` for details.
"""
