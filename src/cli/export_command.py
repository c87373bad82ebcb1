"""Export command orchestration for CLI.

This module provides the ExportCommand class that runs the whole export:
authenticate, discover databases, pick one, pick a filename, convert all
pages to markdown and write the document. It is the only place where
exceptions are mapped to exit codes.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from src.content_converter import MarkdownConverter
from src.models import Database, ExportDocument, Page
from src.notion_api.api_wrapper import APIWrapper
from src.notion_api.auth import Authenticator
from src.notion_api.errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
    ObjectNotFoundError,
)
from .config import CredentialStore
from .errors import CLIError, OutputWriteError
from .filesafe_converter import FilesafeConverter
from .models import ExitCode, ExportSummary
from .output import OutputHandler
from .prompts import prompt_for_api_key, prompt_for_database, prompt_for_output_filename

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = './output'
TOTAL_STEPS = 5


def _normalize_id(object_id: str) -> str:
    return object_id.replace('-', '').strip().lower()


class ExportCommand:
    """Orchestrates the export workflow for the CLI.

    The export workflow:
        1. Authentication: explicit key, NOTION_API_KEY, or stored/prompted key
        2. Discover databases shared with the integration
        3. Select a database (prompt or --database-id)
        4. Choose the output filename (prompt or --output)
        5. Convert every page and write the document once

    Example:
        >>> export_cmd = ExportCommand(output_handler=OutputHandler(verbosity=1))
        >>> exit_code = export_cmd.run()
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        output_handler: Optional[OutputHandler] = None,
        credential_store: Optional[CredentialStore] = None,
        api_wrapper_factory: Optional[Callable[[Authenticator], APIWrapper]] = None,
    ):
        """Initialize export command with dependencies.

        Args:
            output_handler: OutputHandler for terminal output (optional)
            credential_store: Store for the saved API key (optional)
            api_wrapper_factory: Builds the data source from an Authenticator
                (optional, defaults to APIWrapper)
        """
        self.output_handler = output_handler or OutputHandler()
        self.credential_store = credential_store or CredentialStore()
        self.api_wrapper_factory = api_wrapper_factory or APIWrapper
        self._key_is_stored = False

    def run(
        self,
        database_id: Optional[str] = None,
        filename: Optional[str] = None,
        output_dir: str = DEFAULT_OUTPUT_DIR,
        api_key: Optional[str] = None,
        reset_key: bool = False,
    ) -> ExitCode:
        """Execute the export.

        Args:
            database_id: Export this database without prompting
            filename: Output filename without prompting
            output_dir: Directory the markdown file is written to
            api_key: Explicit API key (not stored)
            reset_key: Forget the stored API key before authenticating

        Returns:
            ExitCode indicating success or specific failure type
        """
        output = self.output_handler
        output.banner("Notion to NotebookLM Sync Tool")

        try:
            if filename is not None:
                problem = FilesafeConverter.validate_filename(filename)
                if problem:
                    output.error(problem)
                    return ExitCode.GENERAL_ERROR

            output.step(1, TOTAL_STEPS, "Authentication")
            if reset_key:
                self.credential_store.clear_api_key()
                output.info("Cleared saved API key")
            api = self.api_wrapper_factory(self._authenticate(api_key))

            output.step(2, TOTAL_STEPS, "Fetching your databases...")
            try:
                with output.spinner("Searching workspace..."):
                    databases = api.list_databases()
            except InvalidCredentialsError as e:
                logger.error(f"Authentication failed: {e}")
                output.error("Authentication failed! Your API key may be invalid.")
                if self._key_is_stored:
                    output.print("   Clearing saved key. Please try again.")
                    self.credential_store.clear_api_key()
                return ExitCode.AUTH_ERROR

            if not databases:
                output.error("No databases found!")
                output.print("   Make sure you have shared at least one database with your integration.")
                output.print("   To share: Open database in Notion > ... menu > Connections > Add your integration")
                return ExitCode.GENERAL_ERROR
            output.success(f"Found {len(databases)} database(s)")

            output.step(3, TOTAL_STEPS, "Database Selection")
            database = self._select_database(api, databases, database_id)
            output.debug(f"Selected database {database.id}")

            output.step(4, TOTAL_STEPS, "Output Filename")
            if filename is None:
                default_name = FilesafeConverter.title_to_filename(database.title)
                filename = prompt_for_output_filename(output.console, default_name)
            else:
                filename = FilesafeConverter.ensure_md_extension(filename)
            output.print(f"   Saving as {filename}")

            output.step(5, TOTAL_STEPS, f'Syncing "{database.title}"...')
            with output.spinner("Querying database entries..."):
                pages = api.query_database_pages(database.id)
            output.print(f"   Found {len(pages)} entries")

            if not pages:
                output.print("   No entries found in this database.")
                return ExitCode.SUCCESS

            document = self._convert(api, database, pages)
            summary = self._write(document, Path(output_dir) / filename)
            output.print_export_summary(summary)
            return ExitCode.SUCCESS

        except InvalidCredentialsError as e:
            logger.error(f"Authentication failed: {e}")
            output.error(f"Authentication failed! Check your Notion API key. ({e})")
            return ExitCode.AUTH_ERROR

        except ObjectNotFoundError as e:
            logger.error(f"Not found: {e}")
            output.error("Database not found!")
            output.print("   Make sure you have shared the database with your integration.")
            return ExitCode.NOT_FOUND

        except (APIUnreachableError, APIAccessError) as e:
            logger.error(f"API error: {e}")
            output.error(f"API error: {e}")
            output.info("Check your internet connection and try again")
            return ExitCode.NETWORK_ERROR

        except CLIError as e:
            logger.error(f"CLI error: {e}")
            output.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during export")
            output.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR

    def _authenticate(self, api_key: Optional[str]) -> Authenticator:
        """Resolve the API key, prompting and storing it when needed.

        Sets ``_key_is_stored`` when the key in use came from the credential
        store or the prompt.
        """
        authenticator = Authenticator(api_key=api_key)
        if authenticator.has_credentials:
            logger.info("Using API key from command line or environment")
            self._key_is_stored = False
            return authenticator

        stored_key = self.credential_store.get_api_key()
        entered_key = prompt_for_api_key(self.output_handler.console, stored_key)
        if entered_key != stored_key:
            self.credential_store.store_api_key(entered_key)
            self.output_handler.print("   API key saved for future runs.")
        self._key_is_stored = True
        return Authenticator(api_key=entered_key)

    def _select_database(
        self,
        api: APIWrapper,
        databases: Sequence[Database],
        database_id: Optional[str],
    ) -> Database:
        """Pick the database to export.

        Raises:
            ObjectNotFoundError: If ``database_id`` cannot be retrieved
        """
        if database_id is None:
            return prompt_for_database(self.output_handler.console, databases)

        wanted = _normalize_id(database_id)
        for database in databases:
            if _normalize_id(database.id) == wanted:
                return database

        logger.info(f"Database {database_id} not in search results, retrieving directly")
        return api.retrieve_database(database_id)

    def _convert(self, api: APIWrapper, database: Database, pages: Sequence[Page]) -> ExportDocument:
        converter = MarkdownConverter(api)
        with self.output_handler.progress_bar() as progress:
            task = progress.add_task("Converting pages", total=len(pages))

            def on_progress(index: int, total: int, title: str) -> None:
                progress.update(task, completed=index, description=f"{index + 1}/{total} {title[:40]}")

            document = converter.build_document(database, pages, on_progress=on_progress)
            progress.update(task, completed=len(pages), description="Converted pages")
        return document

    def _write(self, document: ExportDocument, file_path: Path) -> ExportSummary:
        """Write the document in a single call.

        Raises:
            OutputWriteError: If the directory or file cannot be written
        """
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(document.to_markdown(), encoding='utf-8')
        except OSError as e:
            raise OutputWriteError(str(file_path), str(e)) from e

        logger.info(f"Wrote {file_path}")
        return ExportSummary(
            database_title=document.title,
            entry_count=document.entry_count,
            file_path=file_path.resolve(),
            size_bytes=file_path.stat().st_size,
        )
