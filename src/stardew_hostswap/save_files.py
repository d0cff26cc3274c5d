"""Locate, read and safely rewrite the files of a save folder."""

import os
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from stardew_hostswap.config import BACKUP_SUFFIX, COMPANION_FILENAME
from stardew_hostswap.errors import MissingDataError


@dataclass(frozen=True)
class SaveFolder:
    """A game save folder: the main save file (named like the folder) plus SaveGameInfo."""

    path: Path
    save_path: Path
    companion_path: Path | None

    @property
    def name(self) -> str:
        return self.path.name

    @classmethod
    def from_directory(cls, directory: str | Path) -> "SaveFolder":
        """Find the save files inside directory.

        Raises:
            MissingDataError: The directory or its main save file does not exist.
        """
        path = Path(directory).expanduser().resolve()
        if not path.is_dir():
            msg = f"Save folder {str(path)!r} not found"
            raise MissingDataError(msg, operation="open save folder")

        save_path = path / path.name
        if not save_path.exists():
            msg = f"No save file named {path.name!r} in {str(path)!r}"
            raise MissingDataError(msg, operation="open save folder")
        if not save_path.is_file():
            msg = f"{str(save_path)!r} is not a file"
            raise MissingDataError(msg, operation="open save folder")

        companion_path = path / COMPANION_FILENAME
        if not companion_path.is_file():
            logger.debug("No {} in {}", COMPANION_FILENAME, path)
            return cls(path=path, save_path=save_path, companion_path=None)
        return cls(path=path, save_path=save_path, companion_path=companion_path)


def list_save_folders(saves_dir: str | Path) -> list[SaveFolder]:
    """Save folders directly below saves_dir, sorted by name. Other directories are skipped."""
    root = Path(saves_dir).expanduser()
    if not root.is_dir():
        return []
    folders: list[SaveFolder] = []
    for entry in sorted(root.iterdir()):
        if not entry.is_dir():
            continue
        try:
            folders.append(SaveFolder.from_directory(entry))
        except MissingDataError:
            logger.debug("Skipping {}: not a save folder", entry)
    return folders


def looks_like_save(text: str) -> bool:
    """Cheap check that text is markup at all."""
    trimmed = text.strip().removeprefix("\ufeff")
    if not trimmed:
        return False
    return trimmed.startswith("<?xml") or trimmed.startswith("<")


def looks_like_save_info(text: str) -> bool:
    """Cheap check for a SaveGameInfo document (a single named Farmer record)."""
    return "<Farmer" in text and "<name>" in text


def backup_path(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


class SaveFileStore:
    """Read save files and write them back, never without a backup.

    ``write_with_backup`` is all-or-nothing as far as the file system allows: every
    backup is made and every new text is staged in a temporary file before the first
    target is replaced. A failed replace restores the targets already replaced from
    their backups.
    """

    def __init__(self, *, dry_run: bool = False) -> None:
        self.dry_run = dry_run
        logger.debug("Save store ready, dry_run {!r}", dry_run)

    def read_text(self, path: Path) -> str:
        # utf-8-sig drops the BOM the game may write
        return Path(path).read_text(encoding="utf-8-sig")

    def write_with_backup(self, writes: Sequence[tuple[Path, str]]) -> None:
        """Back up, then overwrite, every (path, text) pair.

        Raises:
            MissingDataError: A target does not exist (nothing is written).
            OSError: Backing up, staging or replacing failed (targets keep their old text).
        """
        targets = [(Path(p), contents) for p, contents in writes]
        for path, _contents in targets:
            if not path.is_file():
                msg = f"Cannot back up {str(path)!r}: not a file"
                raise MissingDataError(msg, operation="write save")

        if self.dry_run:
            for path, contents in targets:
                logger.info(
                    "dry-run: would back up {} to {} and write {} characters",
                    path, backup_path(path).name, len(contents),
                )
            return

        for path, _contents in targets:
            shutil.copy2(path, backup_path(path))
            logger.info("Backed up {} to {}", path.name, backup_path(path))

        staged: list[tuple[Path, Path]] = []
        try:
            for path, contents in targets:
                tmp = path.with_name(path.name + ".tmp")
                staged.append((tmp, path))
                with open(tmp, "w", encoding="utf-8", newline="") as f:
                    f.write(contents)
        except OSError:
            for tmp, _path in staged:
                tmp.unlink(missing_ok=True)
            raise

        replaced: list[Path] = []
        try:
            for tmp, path in staged:
                os.replace(tmp, path)
                replaced.append(path)
                logger.info("Wrote {}", path)
        except OSError:
            for path in replaced:
                shutil.copy2(backup_path(path), path)
                logger.warning("Restored {} from {}", path, backup_path(path).name)
            for tmp, _path in staged:
                tmp.unlink(missing_ok=True)
            raise
