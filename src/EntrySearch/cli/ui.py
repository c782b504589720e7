"""Click CLI interface definitions.

Defines the command-line interface and routes it to the command runner.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import click
from dotenv import load_dotenv

from EntrySearch.cli.runner import CommandRunner
from EntrySearch.config import OutputConfig, load_config
from EntrySearch.config.output import ALLOWED_FORMATS
from EntrySearch.core.errors import ConfigurationError
from EntrySearch.core.models import DEFAULT_LOCALE, SearchTerm


@click.command(
    "search",
    help="Find entries whose fields contain TERM exactly (case-sensitive).",
)
@click.argument("term", required=False)
@click.argument("locale", required=False, default=DEFAULT_LOCALE)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to YAML config file.",
)
@click.option("--debug", is_flag=True, default=False, help="Log step-by-step matching diagnostics.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(ALLOWED_FORMATS),
    default=None,
    help="Output format (overrides output.format).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    term: str | None,
    locale: str,
    config_path: Path | None,
    debug: bool,
    output_format: str | None,
) -> None:
    """CLI entry command.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        term: Exact text to find.
        locale: Locale for localized fields.
        config_path: Optional path to YAML config file.
        debug: Enable debug diagnostics.
        output_format: Optional output format override.

    Raises:
        click.UsageError: When the term or configuration is missing.
        click.Abort: When the search fails.
    """
    # Load environment variables from .env file
    load_dotenv()

    try:
        search_term = SearchTerm(term or "")
        cfg = load_config(config_path, debug=debug)
    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    if output_format:
        cfg = dataclasses.replace(cfg, output=OutputConfig(format=output_format))

    runner = CommandRunner(cfg)
    runner.run_search(term=search_term, locale=locale or DEFAULT_LOCALE, action=ctx.command.name)
