"""CLI entry point for Podnote."""

import asyncio
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from podnote.config.logging import setup_logging
from podnote.config.manager import ConfigManager
from podnote.config.schema import PodnoteConfig
from podnote.output.sinks import ActiveDocument, CursorInsertSink, NoteFileSink
from podnote.pipeline import ExtractionOrchestrator, TriggerContext
from podnote.services.fetcher import PageFetcher
from podnote.templates.engine import PLACEHOLDERS
from podnote.utils.errors import ConfigError, PodnoteError

app = typer.Typer(
    name="podnote",
    help="Turn podcast episode pages into Markdown notes",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Show and change Podnote settings", no_args_is_help=True)
app.add_typer(config_app, name="config")

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """Podnote - capture podcast episodes as Markdown notes."""
    setup_logging(verbose=verbose, log_file=log_file)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podnote import __version__

    console.print(f"[bold cyan]Podnote[/bold cyan] v{__version__}")


@app.command("note")
def note_command(
    url: str = typer.Argument(..., help="Apple Podcasts or Spotify episode URL"),
    at_cursor: bool | None = typer.Option(
        None,
        "--at-cursor/--new-note",
        help="Insert into --document at the cursor, or create a new note (default: from config)",
    ),
    document: Path | None = typer.Option(
        None, "--document", "-d", help="Active document for --at-cursor"
    ),
    line: int = typer.Option(0, "--line", min=0, help="Cursor line (zero-based)"),
    column: int = typer.Option(0, "--column", min=0, help="Cursor column (zero-based)"),
    config_dir: Path | None = typer.Option(
        None, "--config-dir", help="Use a custom configuration directory"
    ),
) -> None:
    """Create a podcast note from an episode URL.

    Examples:
        podnote note https://open.spotify.com/episode/abc123 --new-note

        podnote note https://podcasts.apple.com/us/podcast/x/id1?i=2 -d today.md --line 4
    """
    try:
        manager = ConfigManager(config_dir=config_dir)
        config = manager.load_config()
    except ConfigError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)

    if at_cursor is not None:
        # Per-invocation override, not persisted
        config.at_cursor = at_cursor

    active = None
    if document is not None:
        active = ActiveDocument(path=document, line=line, column=column)

    orchestrator = ExtractionOrchestrator(
        config=config,
        fetcher=PageFetcher(),
        cursor_sink=CursorInsertSink(active),
        note_sink=NoteFileSink(config.vault_path),
        notify=lambda message: console.print(f"[cyan]→[/cyan] {message}"),
        save_config=lambda updated: _save_service(manager, updated),
    )

    trigger = TriggerContext()
    try:
        result = asyncio.run(orchestrator.run(url, trigger))
    finally:
        trigger.dispose()

    if not result.succeeded:
        sys.exit(1)

    console.print(
        f"[green]✓[/green] '[bold]{escape(result.note.suggested_title)}[/bold]' "
        f"written to [dim]{escape(str(result.output_path))}[/dim]"
    )


def _save_service(manager: ConfigManager, updated: PodnoteConfig) -> None:
    """Persist only the resolved service so CLI overrides stay transient."""
    try:
        stored = manager.load_config()
    except ConfigError:
        return
    stored.podcast_service = updated.podcast_service
    manager.save_config(stored)


@config_app.command("show")
def config_show(
    config_dir: Path | None = typer.Option(
        None, "--config-dir", help="Use a custom configuration directory"
    ),
) -> None:
    """Display current configuration."""
    try:
        manager = ConfigManager(config_dir=config_dir)
        config = manager.load_config()
    except PodnoteError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)

    console.print("\n[bold]Podnote Configuration[/bold]\n")

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Config file", escape(str(manager.config_file)))
    table.add_row("", "")
    table.add_row("Podcast service", config.podcast_service.value)
    table.add_row("Insert at cursor", "✓" if config.at_cursor else "✗")
    table.add_row("Vault", escape(str(config.vault_dir)))
    table.add_row("Folder", escape(config.folder) or "—")
    table.add_row("Filename template", escape(config.file_name) or "—")

    console.print(table)
    console.print("\n[bold]Template[/bold]")
    console.print(config.podcast_template, markup=False, highlight=False)


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Config key"),
    value: str = typer.Argument(..., help="New value"),
    config_dir: Path | None = typer.Option(
        None, "--config-dir", help="Use a custom configuration directory"
    ),
) -> None:
    """Set a configuration value.

    Examples:
        podnote config set at_cursor false

        podnote config set folder "Podcasts/"
    """
    try:
        manager = ConfigManager(config_dir=config_dir)
        manager.set_value(key, value)
    except ConfigError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        console.print("\nAvailable keys:")
        for field_name in PodnoteConfig.model_fields.keys():
            console.print(f"  • {field_name}")
        sys.exit(1)

    console.print(
        f"[green]✓[/green] Set [cyan]{escape(key)}[/cyan] = [yellow]{escape(value)}[/yellow]"
    )


@config_app.command("template")
def config_template() -> None:
    """List the placeholders available in templates."""
    console.print("Note template placeholders: " + ", ".join(PLACEHOLDERS), markup=False)
    console.print("Filename template placeholders: {{Title}}, {{Date}}", markup=False)


if __name__ == "__main__":
    app()
