"""Command runner for coordinating CLI execution.

Manages component lifecycle, resource cleanup, logging configuration,
and error handling for command execution.
"""

from __future__ import annotations

import click

from EntrySearch.cli.commands import SearchCommand
from EntrySearch.config import AppConfig
from EntrySearch.core.models import SearchTerm
from EntrySearch.renderers import create_output_writer
from EntrySearch.services import create_search_service
from EntrySearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management.

    Handles logging configuration, component creation, HTTP session
    cleanup, and error handling for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_search(self, *, term: SearchTerm, locale: str, action: str = "search") -> None:
        """Execute search command with full resource management.

        Args:
            term: Validated search term.
            locale: Locale used to resolve localized fields.
            action: The CLI command name, used for log file paths.

        Raises:
            click.Abort: When the search fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        search_service = None
        try:
            search_service = create_search_service(self.config)
            output_writer = create_output_writer(self.config.output.format)

            command = SearchCommand(
                search_service=search_service,
                output_writer=output_writer,
                term=term,
                locale=locale,
            )
            command.execute()

        except Exception as e:  # noqa: BLE001 - cli boundary
            cause = e.__cause__
            if cause is not None:
                log.error("Search failed: %s (caused by %s: %s)", e, type(cause).__name__, cause)
            else:
                log.error("Search failed: %s", e)
            raise click.Abort from e
        finally:
            if search_service is not None:
                search_service.close()
