"""CLI interface for the HOI4 radio mod generator."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from hoi4_radio import __version__
from hoi4_radio.config import Settings, get_settings
from hoi4_radio.core.generator import ModGenerator
from hoi4_radio.core.layout import ModPaths
from hoi4_radio.core.tracker import StepTracker
from hoi4_radio.script.schemas import TrackReference
from hoi4_radio.script.validators import DiagnosticResult, check_package, extract_asset_entries

app = typer.Typer(
    name="hoi4-radio",
    help="Build Hearts of Iron IV radio station mods from audio tracks",
    no_args_is_help=True,
)

console = Console()

_STATUS_STYLE = {
    "pass": "[green]PASS[/]",
    "warn": "[yellow]WARN[/]",
    "fail": "[red]FAIL[/]",
}


def version_callback(value: bool):
    if value:
        console.print(f"hoi4-radio version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Show debug logging")] = False,
):
    """HOI4 Radio - Package audio tracks as a playable radio station mod."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# --- Shared helpers ---


def _apply_overrides(output: Path | None, downloads: Path | None) -> Settings:
    settings = get_settings()
    if output:
        settings.output_dir = output
    if downloads:
        settings.downloads_dir = downloads
    return settings


def _print_diagnostics(result: DiagnosticResult) -> None:
    table = Table(title="Package checks")
    table.add_column("Check", style="cyan")
    table.add_column("Status")
    table.add_column("Details")
    for check in result.checks:
        table.add_row(check.name, _STATUS_STYLE.get(check.status, check.status), escape(check.message))
    console.print(table)

    if result.ok:
        console.print("\n[bold green]All checks passed![/]")
    else:
        console.print("\n[bold red]Some checks failed[/]")


# --- Commands ---


@app.command()
def generate(
    name: Annotated[str, typer.Argument(help="Mod name (used for folders, files and keys)")],
    tracks: Annotated[Optional[list[str]], typer.Argument(help="Audio files, in playback order")] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output directory")] = None,
    downloads: Annotated[Optional[Path], typer.Option("--downloads", "-d", help="Directory holding the audio files")] = None,
    clean: Annotated[bool, typer.Option("--clean", help="Delete a previous package with this name first")] = False,
    check: Annotated[bool, typer.Option("--check", help="Inspect the package after generating")] = False,
):
    """Generate a radio station mod.

    Only the filename of each track is used; files are read from the
    downloads directory.

    Examples:
        hoi4-radio generate jazz_radio "Take Five.ogg" "So What.ogg"
        hoi4-radio generate jazz_radio downloads/*.ogg --clean --check
    """
    settings = _apply_overrides(output, downloads)
    track_files = tracks or []

    console.print(Panel(f"[bold]Generating mod:[/] {escape(name)}", title="HOI4 Radio"))
    if not track_files:
        console.print("[yellow]No tracks given; the station will be empty[/]")

    tracker = StepTracker(on_step=lambda step: console.print(f"[bold blue]{step}[/]"))
    generator = ModGenerator(settings, tracker=tracker, console=console)

    try:
        mod_root = asyncio.run(generator.generate(name, track_files, clean=clean))
    except Exception as e:
        console.print(f"[red]Error during {tracker.current_step or 'startup'}: {escape(str(e))}[/]")
        raise typer.Exit(1)

    console.print(f"\n[green]Mod written to[/] {escape(str(mod_root))}")

    if check:
        result = check_package(settings.output_dir, name)
        _print_diagnostics(result)
        if not result.ok:
            raise typer.Exit(1)


@app.command()
def inspect(
    name: Annotated[str, typer.Argument(help="Mod name")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output directory")] = None,
):
    """Check a generated package for missing files and mismatched track ids.

    Example: hoi4-radio inspect jazz_radio
    """
    settings = _apply_overrides(output, None)
    mod_dir = settings.mod_root(name)

    if not mod_dir.exists():
        console.print(f"[red]Mod not found: {escape(str(mod_dir))}[/]")
        raise typer.Exit(1)

    console.print(f"[bold]Inspecting:[/] {escape(name)}\n")
    result = check_package(settings.output_dir, name)
    _print_diagnostics(result)

    if not result.ok:
        raise typer.Exit(1)


@app.command("tracks")
def show_tracks(
    tracks: Annotated[list[str], typer.Argument(help="Audio files, in playback order")],
):
    """Show the filename and song id each track will get.

    Example: hoi4-radio tracks "downloads/My Song.ogg"
    """
    table = Table(title="Tracks")
    table.add_column("#", justify="right")
    table.add_column("File", style="cyan")
    table.add_column("Song id")

    try:
        refs = [TrackReference(source=t) for t in tracks]
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)

    for i, ref in enumerate(refs, 1):
        table.add_row(str(i), escape(ref.base_filename), escape(ref.track_id))
    console.print(table)


@app.command("list")
def list_mods(
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output directory")] = None,
):
    """List generated mods in the output directory."""
    settings = _apply_overrides(output, None)
    mods_dir = settings.output_dir

    if not mods_dir.exists():
        console.print(f"[yellow]Output directory not found: {escape(str(mods_dir))}[/]")
        return

    descriptors = sorted(mods_dir.glob("*.mod"))
    if not descriptors:
        console.print("[yellow]No mods found. Generate one with:[/]")
        console.print('  hoi4-radio generate my_radio "track.ogg"')
        return

    console.print(f"[bold]Generated mods ({escape(str(mods_dir))}):[/]")
    for descriptor in descriptors:
        asset = ModPaths(mods_dir, descriptor.stem).music_asset
        count = 0
        if asset.is_file():
            count = len(extract_asset_entries(asset.read_text(encoding="utf-8")))
        console.print(f"  {escape(descriptor.stem)} [dim]({count} tracks)[/]")


@app.command()
def info():
    """Show configuration."""
    settings = get_settings()

    table = Table(title="HOI4 Radio Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Status")

    out_status = "[green]Exists[/]" if settings.output_dir.exists() else "[yellow]Will be created[/]"
    table.add_row("Output Directory", str(settings.output_dir), out_status)

    dl_status = "[green]Found[/]" if settings.downloads_dir.exists() else "[red]Not found[/]"
    table.add_row("Downloads Directory", str(settings.downloads_dir), dl_status)

    table.add_row("Supported Version", settings.supported_version, "")
    table.add_row("Generator Version", __version__, "")

    console.print(table)


if __name__ == "__main__":
    app()
