"""Command line tools for bookmark storage documents.

Commands:
- mucmarks show <file>          Decode a bookmark storage IQ result
- mucmarks export <file> <out>  Write the decoded rooms to a JSON file
- mucmarks encode <file>        Build the full-replace IQ set from JSON records
"""

import json
from pathlib import Path
from typing import List, Optional
from xml.etree import ElementTree as ET

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from mucmarks import __logo__, __version__
from mucmarks.config.loader import load_config
from mucmarks.errors import MucmarksError
from mucmarks.models.bookmark import Bookmark
from mucmarks.utils.logging import configure_logging
from mucmarks.xmpp import stanza as st
from mucmarks.xmpp.codec import decode_fetch_result, decoded_bookmarks, encode_full_replace
from mucmarks.xmpp.iq import create_stanza_id

app = typer.Typer(name="mucmarks", help=f"{__logo__} XMPP room bookmark tools")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.json"),
):
    """Configure logging from the config file before any command runs."""
    cfg = load_config(config)
    configure_logging(cfg.logging, verbose=verbose)


@app.command("version")
def version():
    """Show the mucmarks version."""
    console.print(f"{__logo__} mucmarks v{__version__}")


def _read_stanza(path: Path) -> ET.Element:
    try:
        return st.from_string(path.read_text())
    except (OSError, MucmarksError) as e:
        console.print(f"[red]❌ Could not read {path}: {e}[/red]")
        raise typer.Exit(1)


def _bookmark_table(bookmarks: List[Bookmark]) -> Table:
    """Create a rich table for bookmarks."""
    table = Table(title="Bookmarks")
    table.add_column("Room", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Nick", style="yellow")
    table.add_column("Autojoin", style="magenta")
    table.add_column("Password", style="dim")
    table.add_column("Minimize", style="dim")

    for bookmark in bookmarks:
        table.add_row(
            bookmark.jid,
            bookmark.name or "",
            bookmark.nick or "",
            "yes" if bookmark.autojoin else "no",
            "set" if bookmark.password else "",
            bookmark.minimize.value if bookmark.minimize.is_set else "",
        )
    return table


@app.command("show")
def show(
    path: Path = typer.Argument(..., help="File holding a bookmark storage IQ result"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Print records as JSON"),
):
    """Decode a bookmark storage result and list its rooms."""
    results = decode_fetch_result(_read_stanza(path))
    bookmarks = decoded_bookmarks(results)

    if as_json:
        typer.echo(json.dumps([b.to_dict() for b in bookmarks], indent=2))
        return

    if not bookmarks:
        console.print("[yellow]⚠️ No bookmarks found[/yellow]")
        return

    console.print(_bookmark_table(bookmarks))
    skipped = [r.skipped for r in results if not r.ok]
    if skipped:
        console.print(f"[dim]Skipped {len(skipped)} entries: {'; '.join(skipped)}[/dim]")


@app.command("export")
def export(
    path: Path = typer.Argument(..., help="File holding a bookmark storage IQ result"),
    output: Path = typer.Argument(..., help="JSON file to write the records to"),
):
    """Save the rooms of a storage result as JSON records for `encode`."""
    bookmarks = decoded_bookmarks(decode_fetch_result(_read_stanza(path)))

    try:
        output.write_text(json.dumps([b.to_dict() for b in bookmarks], indent=2))
    except OSError as e:
        console.print(f"[red]❌ Could not write {output}: {e}[/red]")
        raise typer.Exit(1)

    logger.info(f"Exported {len(bookmarks)} bookmarks to {output}")
    console.print(f"[green]✓[/green] Exported {len(bookmarks)} bookmarks to {output}")


@app.command("encode")
def encode(
    path: Path = typer.Argument(..., help="JSON file with a list of bookmark records"),
    stanza_id: Optional[str] = typer.Option(None, "--id", help="Stanza id (default: random)"),
):
    """Print the IQ set that replaces the server's bookmark document."""
    try:
        records = json.loads(path.read_text())
        bookmarks = [Bookmark.from_dict(record) for record in records]
    except (OSError, ValueError, KeyError, TypeError) as e:
        console.print(f"[red]❌ Could not read bookmarks from {path}: {e}[/red]")
        raise typer.Exit(1)

    iq = encode_full_replace(bookmarks, stanza_id or create_stanza_id())
    logger.debug(f"Encoded {len(bookmarks)} bookmarks")
    typer.echo(st.to_string(iq))


if __name__ == "__main__":
    app()
