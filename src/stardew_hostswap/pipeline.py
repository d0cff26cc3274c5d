"""End-to-end host migration of a save folder."""

from pathlib import Path

from loguru import logger

from stardew_hostswap.core.codec.nil_repair import repair_nil_fields
from stardew_hostswap.core.codec.xml_codec import parse, serialize
from stardew_hostswap.core.migration.companion import update_companion
from stardew_hostswap.core.migration.engine import MigrationResult, migrate_host
from stardew_hostswap.core.players.extractor import extract_players
from stardew_hostswap.errors import CodecError, IndexOutOfRangeError
from stardew_hostswap.models.document import Document
from stardew_hostswap.protocols import SaveStoreProtocol
from stardew_hostswap.save_files import SaveFolder, looks_like_save, looks_like_save_info


def render(document: Document) -> str:
    """Serialize a document and restore the nil markers the game expects."""
    return repair_nil_fields(serialize(document))


def read_document(store: SaveStoreProtocol, path: Path, *, companion: bool = False) -> Document:
    """Read and parse a save file, rejecting text that is obviously not a save.

    Raises:
        CodecError: The file is not a save (or SaveGameInfo) document.
    """
    text = store.read_text(path)
    looks_right = looks_like_save_info(text) if companion else looks_like_save(text)
    if not looks_right:
        kind = "SaveGameInfo" if companion else "save"
        msg = f"{path.name!r} does not look like a {kind} file"
        raise CodecError(msg, operation="read save")
    logger.debug("Read {} ({:.2f} KB)", path.name, len(text) / 1024)
    return parse(text)


def run_migration(
    store: SaveStoreProtocol,
    folder: SaveFolder,
    target_index: int,
) -> MigrationResult:
    """Migrate the host of a save folder to the farmhand at target_index.

    Both documents are read, transformed and rendered before anything is written, so
    any error leaves the folder untouched.

    Args:
        store: File store for reading and for backed-up writing.
        folder: The save folder.
        target_index: Farmhand slot index, as reported by extract_players.

    Raises:
        NoSecondaryPlayersError: The save has no farmhands.
        IndexOutOfRangeError: target_index is not a farmhand in use.
    """
    document = read_document(store, folder.save_path)
    roster = extract_players(document)
    if target_index not in {p.index for p in roster.farmhands}:
        available = ", ".join(f"{p.index} ({p.name})" for p in roster.farmhands)
        msg = f"Farmhand slot {target_index} is not in use; choose one of: {available}"
        raise IndexOutOfRangeError(msg, operation="migrate host")

    result = migrate_host(document, target_index)
    writes: list[tuple[Path, str]] = [(folder.save_path, render(result.document))]

    if folder.companion_path is not None:
        companion = read_document(store, folder.companion_path, companion=True)
        updated = update_companion(companion, result.new_host_record)
        writes.append((folder.companion_path, render(updated)))
    else:
        logger.warning("No SaveGameInfo in {}, only the main save is updated", folder.path)

    store.write_with_backup(writes)
    return result
