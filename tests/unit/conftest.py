"""Shared test fixtures."""

from pathlib import Path

import pytest

from stardew_hostswap.core.codec.xml_codec import parse
from stardew_hostswap.models.document import Document
from tests.unit.samples import SAVE_INFO_XML, SAVE_NAME, SAVE_XML


@pytest.fixture
def save_document() -> Document:
    """The sample save, parsed."""
    return parse(SAVE_XML)


@pytest.fixture
def save_info_document() -> Document:
    return parse(SAVE_INFO_XML)


@pytest.fixture
def save_dir(tmp_path: Path) -> Path:
    """A save folder on disk holding the sample save and its SaveGameInfo."""
    folder = tmp_path / SAVE_NAME
    folder.mkdir()
    (folder / SAVE_NAME).write_text(SAVE_XML, encoding="utf-8")
    (folder / "SaveGameInfo").write_text(SAVE_INFO_XML, encoding="utf-8")
    return folder
