"""Stardew Valley save editing: hand the host role to a farmhand."""

from stardew_hostswap.core.codec.nil_repair import repair_nil_fields
from stardew_hostswap.core.codec.xml_codec import flatten, parse, serialize
from stardew_hostswap.core.migration.companion import update_companion
from stardew_hostswap.core.migration.engine import (
    MigrationResult,
    migrate_host,
    replace_farmhand_references,
)
from stardew_hostswap.core.players.extractor import PlayerRoster, PlayerSummary, extract_players
from stardew_hostswap.errors import (
    CodecError,
    IndexOutOfRangeError,
    MissingDataError,
    NoSecondaryPlayersError,
    SaveEditError,
)
from stardew_hostswap.models.document import Document, Element, Text

__all__ = [
    "CodecError",
    "Document",
    "Element",
    "IndexOutOfRangeError",
    "MigrationResult",
    "MissingDataError",
    "NoSecondaryPlayersError",
    "PlayerRoster",
    "PlayerSummary",
    "SaveEditError",
    "Text",
    "extract_players",
    "flatten",
    "migrate_host",
    "parse",
    "repair_nil_fields",
    "replace_farmhand_references",
    "serialize",
    "update_companion",
]
