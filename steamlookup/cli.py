"""Command-line interface for steamlookup."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from steamlookup import ProfileLookup, AppConfig, save_json, to_json, __version__
from steamlookup.models.snapshot import FetchFailed, ProfileSnapshot, is_success

app = typer.Typer(
    name="steamlookup",
    help="Steam Community profile lookup",
    add_completion=False,
)
console = Console()

ERROR_MESSAGE = "Failed to fetch profile data.\nCheck that the identifier is correct."

# Field captions, in display order
CAPTIONS = [
    ("display_name", "Name"),
    ("friends_count", "Friends"),
    ("level", "Level"),
    ("games_count", "Games"),
    ("groups_count", "Groups"),
    ("badges_count", "Badges"),
    ("avatar_url", "Avatar"),
]


def version_callback(value: bool):
    if value:
        console.print(f"steamlookup version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """steamlookup - Steam Community profile lookup."""
    pass


@app.command()
def lookup(
    identifier: str = typer.Argument(..., help="SteamID of the profile"),
    remember: Optional[bool] = typer.Option(
        None,
        "--remember/--no-remember",
        help="Remember a new identifier without asking",
    ),
    open_profile: bool = typer.Option(
        False, "--open", help="Open the profile in a browser"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Save the snapshot as JSON"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the snapshot as JSON"),
):
    """Look up a profile, offering to remember new identifiers."""
    if not identifier.strip():
        console.print("[red]Identifier is empty[/red]")
        raise typer.Exit(2)

    def confirm(new_id: str) -> bool:
        if remember is not None:
            return remember
        return typer.confirm(
            f"{new_id} has not been looked up before.\n"
            "Remember it? It will be offered for autocomplete.",
            default=False,
        )

    async def run():
        async with ProfileLookup(AppConfig()) as profile_lookup:
            return await profile_lookup.lookup(identifier, confirm)

    outcome = asyncio.run(run())
    snapshot = outcome.snapshot

    if output:
        save_json(snapshot, output)
        console.print(f"[dim]Saved to {output}[/dim]")

    if as_json:
        console.print_json(to_json(snapshot))
    elif is_success(snapshot):
        _print_snapshot(snapshot)
    else:
        _print_error(snapshot)

    if not is_success(snapshot):
        raise typer.Exit(1)

    if open_profile:
        typer.launch(snapshot.source_url)


@app.command()
def ids(
    prefix: str = typer.Option("", "--prefix", "-p", help="Only identifiers starting with this"),
):
    """List remembered identifiers."""

    async def run():
        async with ProfileLookup(AppConfig()) as profile_lookup:
            return profile_lookup.suggest(prefix)

    suggestions = asyncio.run(run())
    if not suggestions:
        console.print("[dim]No remembered identifiers[/dim]")
        return
    for identifier in suggestions:
        console.print(identifier)


@app.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Forget every remembered identifier."""
    if not yes and not typer.confirm("Delete all remembered identifiers?", default=False):
        console.print("Cancelled")
        return

    async def run():
        async with ProfileLookup(AppConfig()) as profile_lookup:
            await profile_lookup.forget_all()

    asyncio.run(run())
    console.print("[green]✓[/green] Cleared remembered identifiers")


def _print_snapshot(snapshot: ProfileSnapshot):
    """Print snapshot fields as a table."""
    table = Table(title=snapshot.identifier, show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    for field, caption in CAPTIONS:
        table.add_row(caption, getattr(snapshot, field) or "-")
    table.add_row("Profile", snapshot.source_url)

    console.print(table)


def _print_error(snapshot: FetchFailed):
    console.print(f"[red]{ERROR_MESSAGE}[/red]")
    console.print(f"[dim]{snapshot.source_url}[/dim]")


if __name__ == "__main__":
    app()
