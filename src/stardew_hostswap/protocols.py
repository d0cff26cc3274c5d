"""Protocols for dependency injection in the migration pipeline."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class SaveStoreProtocol(Protocol):
    """Protocol for the file store the pipeline reads from and writes to."""

    dry_run: bool

    def read_text(self, path: Path) -> str:
        """Read a save file as text."""
        ...

    def write_with_backup(self, writes: Sequence[tuple[Path, str]]) -> None:
        """Back up every target, then replace every target with its new text."""
        ...
