import logging
import os
from typing import NoReturn

import click
from dotenv import find_dotenv, load_dotenv

from prdispatch.core.config import load_config
from prdispatch.core.context import DispatchContext, create_context
from prdispatch.core.errors import DispatchError, NoCandidates, UserCancelled
from prdispatch.core.payload import MAX_ENVIRONMENT, MIN_ENVIRONMENT
from prdispatch.core.pipeline import run_dispatch
from prdispatch.gateway.http.real import RealHttpClient
from prdispatch.output.output import user_output

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _fail(error: DispatchError) -> NoReturn:
    user_output(click.style("Error: ", fg="red") + error.message)
    if error.hint is not None:
        user_output(error.hint)
    raise SystemExit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="prdispatch")
@click.argument(
    "environment",
    type=click.IntRange(MIN_ENVIRONMENT, MAX_ENVIRONMENT),
    required=False,
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print the dispatch request instead of sending it")
@click.pass_context
def cli(ctx: click.Context, environment: int | None, debug: bool, dry_run: bool) -> None:
    """Trigger a deploy workflow for one of your open pull requests.

    ENVIRONMENT is the experimental environment number to deploy to. When
    omitted, you are asked to pick one while your pull requests load.

    Reads GITHUB_TOKEN, GITHUB_ORG and GITHUB_REPO from the environment (or a
    .env file). Set DEPLOY_EXPERIMENTAL_WORKFLOW_ID to skip the workflow menu.

    Examples:

        # Pick environment, pull request and workflow interactively
        prdispatch

        # Deploy to experimental3
        prdispatch 3
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        load_dotenv(find_dotenv(usecwd=True))
        try:
            config = load_config(os.environ)
        except DispatchError as e:
            _fail(e)
        http_client = RealHttpClient(token=config.token, base_url=config.api_url)
        ctx.call_on_close(http_client.close)
        ctx.obj = create_context(config, http_client=http_client, dry_run=dry_run)

    dispatch_ctx: DispatchContext = ctx.obj
    try:
        result = run_dispatch(dispatch_ctx, environment=environment)
    except UserCancelled:
        user_output("\nCancelled.")
        raise SystemExit(1) from None
    except DispatchError as e:
        _fail(e)

    if isinstance(result, NoCandidates):
        user_output(result.message)
        return

    if dispatch_ctx.dry_run:
        user_output(click.style("[DRY RUN] ", fg="yellow") + "No workflow was triggered")
    else:
        user_output(click.style("✓", fg="green") + " Successfully triggered GitHub Action:")
    user_output(f"Branch: {result.branch}")
    user_output(f"Commit: {result.commit.short_sha}")
    user_output(f"Environment: {result.environment}")


def main() -> None:
    """CLI entry point used by the `prdispatch` console script."""
    cli()
