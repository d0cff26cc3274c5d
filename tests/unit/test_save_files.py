"""Tests for save folder discovery and backed-up writing."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from stardew_hostswap.errors import MissingDataError
from stardew_hostswap.save_files import (
    SaveFileStore,
    SaveFolder,
    list_save_folders,
    looks_like_save,
    looks_like_save_info,
)
from tests.unit.samples import SAVE_INFO_XML, SAVE_NAME, SAVE_XML


def test_from_directory_finds_both_files(save_dir: Path) -> None:
    folder = SaveFolder.from_directory(save_dir)

    assert folder.name == SAVE_NAME
    assert folder.save_path == save_dir.resolve() / SAVE_NAME
    assert folder.companion_path == save_dir.resolve() / "SaveGameInfo"


def test_from_directory_without_companion(save_dir: Path) -> None:
    (save_dir / "SaveGameInfo").unlink()

    folder = SaveFolder.from_directory(save_dir)

    assert folder.companion_path is None


def test_from_directory_raises_for_missing_folder(tmp_path: Path) -> None:
    with pytest.raises(MissingDataError, match="not found"):
        SaveFolder.from_directory(tmp_path / "nope")


def test_from_directory_raises_without_main_save(tmp_path: Path) -> None:
    (tmp_path / "Farm_1").mkdir()

    with pytest.raises(MissingDataError, match="No save file named 'Farm_1'"):
        SaveFolder.from_directory(tmp_path / "Farm_1")


def test_from_directory_raises_when_main_save_is_a_directory(tmp_path: Path) -> None:
    (tmp_path / "Farm_1" / "Farm_1").mkdir(parents=True)

    with pytest.raises(MissingDataError, match="is not a file"):
        SaveFolder.from_directory(tmp_path / "Farm_1")


def test_list_save_folders_skips_other_entries(save_dir: Path) -> None:
    (save_dir.parent / "not_a_save").mkdir()
    (save_dir.parent / "stray.txt").write_text("x")

    folders = list_save_folders(save_dir.parent)

    assert [f.name for f in folders] == [SAVE_NAME]
    assert list_save_folders(save_dir.parent / "missing") == []


def test_looks_like_save() -> None:
    assert looks_like_save(SAVE_XML) is True
    assert looks_like_save("\ufeff<SaveGame />") is True
    assert looks_like_save("   ") is False
    assert looks_like_save("hello") is False


def test_looks_like_save_info() -> None:
    assert looks_like_save_info(SAVE_INFO_XML) is True
    assert looks_like_save_info("<SaveGame><name>x</name></SaveGame>") is False


def test_read_text_drops_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "f"
    path.write_bytes("\ufeff<a />".encode())

    assert SaveFileStore().read_text(path) == "<a />"


def test_write_with_backup_backs_up_then_writes(tmp_path: Path) -> None:
    a, b = tmp_path / "a", tmp_path / "b"
    a.write_text("old a")
    b.write_text("old b")

    SaveFileStore().write_with_backup([(a, "new a"), (b, "new b")])

    assert a.read_text() == "new a"
    assert b.read_text() == "new b"
    assert (tmp_path / "a.backup").read_text() == "old a"
    assert (tmp_path / "b.backup").read_text() == "old b"
    assert not list(tmp_path.glob("*.tmp"))


def test_write_with_backup_dry_run_writes_nothing(tmp_path: Path) -> None:
    a = tmp_path / "a"
    a.write_text("old a")

    SaveFileStore(dry_run=True).write_with_backup([(a, "new a")])

    assert a.read_text() == "old a"
    assert not (tmp_path / "a.backup").exists()


def test_write_with_backup_refuses_missing_target(tmp_path: Path) -> None:
    a = tmp_path / "a"
    a.write_text("old a")

    with pytest.raises(MissingDataError, match="Cannot back up"):
        SaveFileStore().write_with_backup([(a, "new a"), (tmp_path / "missing", "x")])

    assert a.read_text() == "old a"
    assert not (tmp_path / "a.backup").exists()


def test_write_with_backup_failed_staging_replaces_nothing(tmp_path: Path) -> None:
    a, b = tmp_path / "a", tmp_path / "b"
    a.write_text("old a")
    b.write_text("old b")
    real_open = open

    def failing_open(file, *args, **kwargs):  # type: ignore[no-untyped-def]
        if str(file).endswith("b.tmp"):
            raise OSError("disk full")
        return real_open(file, *args, **kwargs)

    with patch("builtins.open", failing_open), pytest.raises(OSError, match="disk full"):
        SaveFileStore().write_with_backup([(a, "new a"), (b, "new b")])

    assert a.read_text() == "old a"
    assert b.read_text() == "old b"
    assert not list(tmp_path.glob("*.tmp"))


def test_write_with_backup_failed_replace_restores_written_targets(tmp_path: Path) -> None:
    a, b = tmp_path / "a", tmp_path / "b"
    a.write_text("old a")
    b.write_text("old b")
    real_replace = os.replace
    calls: list[str] = []

    def failing_replace(src, dst):  # type: ignore[no-untyped-def]
        calls.append(str(dst))
        if len(calls) == 2:
            raise OSError("device busy")
        real_replace(src, dst)

    with patch("os.replace", failing_replace), pytest.raises(OSError, match="device busy"):
        SaveFileStore().write_with_backup([(a, "new a"), (b, "new b")])

    assert a.read_text() == "old a"
    assert b.read_text() == "old b"
    assert not list(tmp_path.glob("*.tmp"))
