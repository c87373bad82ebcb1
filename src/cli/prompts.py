"""Interactive prompts for the export workflow.

Built on Rich prompts: API key entry, database selection from a numbered
table, and output filename entry. Each prompt re-asks until it gets a
valid answer.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from src.models import Database
from src.notion_api.auth import mask_api_key, validate_api_key_format
from .filesafe_converter import FilesafeConverter


def prompt_for_api_key(console: Console, existing_key: Optional[str] = None) -> str:
    """Ask for a Notion API key, offering to reuse ``existing_key``.

    Returns:
        The key to use; the caller decides whether to store it
    """
    if existing_key:
        use_existing = Confirm.ask(
            f"Use saved API key ({mask_api_key(existing_key)})?",
            console=console,
            default=True,
        )
        if use_existing:
            return existing_key

    while True:
        api_key = Prompt.ask("Enter your Notion API key", console=console, password=True)
        problem = validate_api_key_format(api_key)
        if problem is None:
            return api_key.strip()
        console.print(f"[red]{problem}[/red]")


def prompt_for_database(console: Console, databases: Sequence[Database]) -> Database:
    """Show accessible databases as a numbered table and return the chosen one."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Database")
    for number, database in enumerate(databases, start=1):
        table.add_row(str(number), database.display_name)
    console.print(table)

    while True:
        choice = IntPrompt.ask("Select a database to sync", console=console, default=1)
        if 1 <= choice <= len(databases):
            return databases[choice - 1]
        console.print(f"[red]Enter a number between 1 and {len(databases)}[/red]")


def prompt_for_output_filename(console: Console, default_name: str) -> str:
    """Ask for the output filename, appending ``.md`` when missing."""
    console.print("   Enter a filename or press Enter to use the default.\n")
    while True:
        filename = Prompt.ask("Save as", console=console, default=default_name)
        problem = FilesafeConverter.validate_filename(filename)
        if problem is None:
            return FilesafeConverter.ensure_md_extension(filename)
        console.print(f"[red]{problem}[/red]")
