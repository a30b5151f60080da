"""Migrate command orchestration for CLI.

This module provides the MigrateCommand class that drives a whole migration
run: load the Scrapbox export, convert every page and publish it to esa, one
page at a time.

Reading the export is all-or-nothing; publishing is per page. A page that
fails to publish is logged and skipped, and the run moves on to the next one.
"""

import logging
from typing import Optional

from src.cli.models import ExitCode, MigrationSummary
from src.cli.output import OutputHandler
from src.content_converter.scrapbox_converter import PageAssembler
from src.esa_client.api_wrapper import APIWrapper
from src.esa_client.auth import Authenticator
from src.esa_client.errors import (
    APIUnreachableError,
    EsaError,
    InvalidCredentialsError,
)
from src.models.scrapbox_page import ScrapboxPage
from src.scrapbox_export.errors import ExportReadError
from src.scrapbox_export.loader import ExportLoader

logger = logging.getLogger(__name__)


class MigrateCommand:
    """Orchestrates the Scrapbox to esa migration workflow.

    The workflow:
        1. Load and validate the export (fatal on failure)
        2. Check that an access token is available (fatal on failure)
        3. For each page: convert to Markdown and create an esa post
        4. Print a summary and return an exit code

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> migrate_cmd = MigrateCommand(output_handler=output)
        >>> exit_code = migrate_cmd.run(team="docs", export_path="export.json")
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        output_handler: Optional[OutputHandler] = None,
        authenticator: Optional[Authenticator] = None,
        api_wrapper: Optional[APIWrapper] = None,
        page_assembler: Optional[PageAssembler] = None,
    ):
        """Initialize migrate command with dependencies.

        Args:
            output_handler: OutputHandler for terminal output (optional)
            authenticator: Authenticator for the esa API (optional)
            api_wrapper: APIWrapper used to create posts (optional, built
                         from the team name when omitted)
            page_assembler: PageAssembler used to convert pages (optional)
        """
        self.output_handler = output_handler or OutputHandler()
        self.authenticator = authenticator
        self.api_wrapper = api_wrapper
        self.page_assembler = page_assembler or PageAssembler()

    def run(self, team: str, export_path: str) -> ExitCode:
        """Migrate every page of an export to an esa team.

        Args:
            team: esa team name
            export_path: Path to the Scrapbox export JSON file

        Returns:
            ExitCode indicating success or specific failure type
        """
        try:
            logger.info(f"Loading Scrapbox export from {export_path}")
            export = ExportLoader.load(export_path)
        except ExportReadError as e:
            logger.error(f"Export read failed: {e}")
            self.output_handler.error(str(e))
            return ExitCode.INPUT_ERROR

        if not self.authenticator:
            self.authenticator = Authenticator()

        try:
            self.authenticator.get_credentials(team=team)
        except InvalidCredentialsError as e:
            logger.error(f"Authentication failed: {e}")
            self.output_handler.error(f"Authentication failed: {e}")
            self.output_handler.info("Set the ESA_ACCESS_TOKEN environment variable")
            return ExitCode.AUTH_ERROR

        if not self.api_wrapper:
            self.api_wrapper = APIWrapper(self.authenticator, team)

        summary = MigrationSummary()
        total = len(export.pages)
        for index, page in enumerate(export.pages, start=1):
            self.output_handler.print(page.title)
            logger.debug(f"Publishing page {index}/{total}: {page.title}")
            self._publish_page(page, summary)

        self.output_handler.print_summary(summary)
        logger.info(
            f"Migration finished: {summary.published_count} published, "
            f"{summary.failed_count} failed"
        )
        return self._exit_code(summary)

    def _publish_page(self, page: ScrapboxPage, summary: MigrationSummary) -> None:
        """Convert and publish one page, recording the outcome in summary.

        Publishing errors are logged and recorded, never raised.
        """
        post = self.page_assembler.build_post(page)
        try:
            created = self.api_wrapper.create_post(post)
        except EsaError as e:
            logger.error(f"Failed to publish page '{page.title}': {e}")
            self.output_handler.error(f"Failed to publish '{page.title}': {e}")
            summary.failed.append(page.title)
            if isinstance(e, APIUnreachableError):
                summary.unreachable_count += 1
            return

        logger.debug(f"esa response for '{page.title}': {created}")
        url = created.get('url')
        if url:
            self.output_handler.success(f"Published '{page.title}' -> {url}")
        else:
            self.output_handler.success(f"Published '{page.title}'")
        summary.published.append(page.title)

    @staticmethod
    def _exit_code(summary: MigrationSummary) -> ExitCode:
        if summary.failed_count == 0:
            return ExitCode.SUCCESS
        if summary.unreachable_count == summary.total_count:
            return ExitCode.NETWORK_ERROR
        return ExitCode.PUBLISH_ERROR
