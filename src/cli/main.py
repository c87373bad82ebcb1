"""Main CLI entry point for the notion-sync command.

This module provides the Typer application that serves as the entry point
for the notion-sync command-line tool. Without options it runs the fully
interactive export; options allow skipping individual prompts.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.export_command import DEFAULT_OUTPUT_DIR, ExportCommand
from src.cli.output import OutputHandler

__version__ = "0.1.0"

app = typer.Typer(
    name="notion-sync",
    help="""Export a Notion database to a single markdown file for NotebookLM.

QUICK START:
  notion-sync                                   # Interactive export
  notion-sync --database-id <id> -o notes.md    # Export without prompts
  notion-sync --reset-key                       # Forget the saved API key""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger so that the notion-client
    and httpx loggers keep their defaults.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"notion-sync_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(file_format, datefmt=date_format))
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


@app.command()
def main_command(
    database_id: Optional[str] = typer.Option(
        None,
        "--database-id",
        "--databaseId",
        help="Database to export (skips the selection prompt)",
        metavar="ID",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output filename (skips the filename prompt, .md is appended if missing)",
        metavar="FILE",
    ),
    output_dir: str = typer.Option(
        DEFAULT_OUTPUT_DIR,
        "--output-dir",
        help="Directory the markdown file is written to",
        metavar="DIR",
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="Notion API key for this run only (defaults to NOTION_API_KEY or the saved key)",
        metavar="KEY",
    ),
    reset_key: bool = typer.Option(
        False,
        "--reset-key",
        help="Forget the saved API key before authenticating",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Export a Notion database to a single markdown file for NotebookLM.

    \b
    QUICK START:
      notion-sync                                   # Interactive export
      notion-sync --database-id <id> -o notes.md    # Export without prompts
      notion-sync --reset-key                       # Forget the saved API key

    \b
    AUTHENTICATION:
      The API key is taken from --api-key, then NOTION_API_KEY (a .env file
      is read), then the saved key. A key entered at the prompt is saved.
    """
    if version:
        typer.echo(f"notion-sync version {__version__}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)

    output_handler = OutputHandler(verbosity=verbosity, no_color=no_color)
    export_cmd = ExportCommand(output_handler=output_handler)

    exit_code = export_cmd.run(
        database_id=database_id,
        filename=output,
        output_dir=output_dir,
        api_key=api_key,
        reset_key=reset_key,
    )
    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
