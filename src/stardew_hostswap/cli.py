"""CLI for stardew-hostswap (list players, migrate the host, repair and dump saves)."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from stardew_hostswap.config import resolve_saves_directory
from stardew_hostswap.core.codec.nil_repair import repair_nil_fields
from stardew_hostswap.core.codec.xml_codec import flatten, parse
from stardew_hostswap.core.players.extractor import PlayerSummary, extract_players
from stardew_hostswap.errors import SaveEditError
from stardew_hostswap.logging_config import configure_logging
from stardew_hostswap.pipeline import read_document, run_migration
from stardew_hostswap.save_files import SaveFileStore, SaveFolder, list_save_folders

app = typer.Typer(help="Hand the host role of a Stardew Valley save to a farmhand.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _open_folder(save_dir: Path) -> SaveFolder:
    try:
        return SaveFolder.from_directory(save_dir)
    except SaveEditError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e


def _describe(player: PlayerSummary) -> str:
    label = "[host]" if player.index is None else f"[{player.index}]"
    return (
        f"  {label} {player.name}  farm={player.farm_name}  id={player.unique_id}  "
        f"money={player.money}  {player.save_date}"
    )


@app.command()
def players(
    save_dir: Path = typer.Argument(..., help="Save folder (contains the save and SaveGameInfo)"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List the host and the farmhands of a save."""
    folder = _open_folder(save_dir)
    store = SaveFileStore()
    try:
        roster = extract_players(read_document(store, folder.save_path), require_farmhands=False)
    except (SaveEditError, OSError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    if output_json:
        data = {
            "host": roster.host.to_dict(),
            "farmhands": [p.to_dict() for p in roster.farmhands],
        }
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"Save {folder.name}:\n")
    typer.echo(_describe(roster.host))
    if not roster.farmhands:
        typer.echo("\nNo farmhands.")
        return
    typer.echo("\nFarmhands:")
    for player in roster.farmhands:
        typer.echo(_describe(player))


@app.command()
def migrate(
    save_dir: Path = typer.Argument(..., help="Save folder (contains the save and SaveGameInfo)"),
    farmhand: int = typer.Option(..., "--farmhand", "-f", help="Farmhand index (see 'players')"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
) -> None:
    """Make a farmhand the host. Both files are backed up to *.backup first."""
    folder = _open_folder(save_dir)
    store = SaveFileStore(dry_run=dry_run)
    try:
        result = run_migration(store, folder, farmhand)
    except (SaveEditError, OSError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    prefix = "dry-run: " if dry_run else ""
    typer.echo(
        f"{prefix}New host: {result.new_host} (was {result.old_host}), "
        f"{result.references_replaced} farmhand reference(s) updated"
    )


@app.command()
def repair(
    file: Path = typer.Argument(..., help="Save or SaveGameInfo file"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
) -> None:
    """Add missing xsi:nil markers to empty nullable fields of a file."""
    store = SaveFileStore(dry_run=dry_run)
    try:
        text = store.read_text(file)
        repaired = repair_nil_fields(text)
        if repaired == text:
            typer.echo("Nothing to repair.")
            return
        store.write_with_backup([(file, repaired)])
    except (SaveEditError, OSError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    typer.echo(f"{'dry-run: ' if dry_run else ''}Repaired {file.name}")


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Save or SaveGameInfo file"),
) -> None:
    """Print a save file as JSON (attributes prefixed with '@_', text under '#text')."""
    try:
        document = parse(SaveFileStore().read_text(file))
    except (SaveEditError, OSError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    typer.echo(json.dumps(flatten(document.root), indent=2, ensure_ascii=False))


@app.command()
def saves(
    saves_dir: Annotated[
        Path | None,
        typer.Option("--saves-dir", "-s", help="Game save root (default: detected)"),
    ] = None,
) -> None:
    """List the save folders of the game."""
    root = saves_dir or resolve_saves_directory()
    folders = list_save_folders(root)
    typer.echo(f"{len(folders)} save(s) in {root}:\n")
    for folder in folders:
        companion = "" if folder.companion_path else "  (no SaveGameInfo)"
        typer.echo(f"  {folder.name}{companion}")
