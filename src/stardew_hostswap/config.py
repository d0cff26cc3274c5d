"""Configuration constants for stardew-hostswap."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SaveLayout:
    """Element names locating the player records inside a main save document."""

    root: str = "SaveGame"
    host: str = "player"
    container: str = "farmhands"
    record: str = "Farmer"
    unique_id: str = "UniqueMultiplayerID"
    name: str = "name"
    reference: str = "farmhandReference"


SAVE_LAYOUT = SaveLayout()

# Root element of the companion SaveGameInfo document.
COMPANION_ROOT_TAG: str = "Farmer"
COMPANION_FILENAME: str = "SaveGameInfo"

BACKUP_SUFFIX: str = ".backup"

# Pretty-print indentation used by the serializer.
INDENT: str = "  "

# Fields tied to the host/farmhand role rather than to the character. Swapped as a set.
COUPLED_FIELDS: tuple[str, ...] = (
    "houseUpgradeLevel",
    "homeLocation",
    "lastSleepLocation",
    "eventsSeen",
    "mailReceived",
)

# Copied from the host onto the promoted farmhand.
SAVE_DATE_FIELDS: tuple[str, ...] = (
    "dayOfMonthForSaveGame",
    "seasonForSaveGame",
    "yearForSaveGame",
)

NIL_ATTRIBUTE: tuple[str, str] = ("xsi:nil", "true")

# Optional fields the game's XML deserializer requires to carry xsi:nil when empty.
NULLABLE_FIELDS: tuple[str, ...] = (
    "datingFarmer",
    "divorcedFromFarmer",
    "loveInterest",
    "endOfRouteBehaviorName",
    "isBigCraftable",
    "which",
    "catPerson",
    "canUnderstandDwarves",
    "hasClubCard",
    "hasDarkTalisman",
    "hasMagicInk",
    "hasMagnifyingGlass",
    "hasRustyKey",
    "hasSkullKey",
    "hasSpecialCharm",
    "HasTownKey",
    "hasUnlockedSkullDoor",
    "daysMarried",
    "isMale",
    "averageBedtime",
    "beveragesMade",
    "caveCarrotsFound",
    "cheeseMade",
    "chickenEggsLayed",
    "copperFound",
    "cowMilkProduced",
    "cropsShipped",
    "daysPlayed",
    "diamondsFound",
    "dirtHoed",
    "duckEggsLayed",
    "fishCaught",
    "geodesCracked",
    "giftsGiven",
    "goatCheeseMade",
    "goatMilkProduced",
    "goldFound",
    "goodFriends",
    "individualMoneyEarned",
    "iridiumFound",
    "ironFound",
    "itemsCooked",
    "itemsCrafted",
    "itemsForaged",
    "itemsShipped",
    "monstersKilled",
    "mysticStonesCrushed",
    "notesFound",
    "otherPreciousGemsFound",
    "piecesOfTrashRecycled",
    "preservesMade",
    "prismaticShardsFound",
    "questsCompleted",
    "rabbitWoolProduced",
    "rocksCrushed",
    "sheepWoolProduced",
    "slimesKilled",
    "stepsTaken",
    "stoneGathered",
    "stumpsChopped",
    "timesFished",
    "timesUnconscious",
    "totalMoneyGifted",
    "trufflesFound",
    "weedsEliminated",
    "seedsSown",
)

# Namespace declarations the companion document's root must carry, in output order.
COMPANION_NAMESPACES: tuple[tuple[str, str], ...] = (
    ("xmlns:xsi", "http://www.w3.org/2001/XMLSchema-instance"),
    ("xmlns:xsd", "http://www.w3.org/2001/XMLSchema"),
)

# Game save roots. First directory which is found is used.
SAVES_DIRECTORIES: list[Path] = [
    Path(os.environ.get("APPDATA", "~/AppData/Roaming")).expanduser() / "StardewValley" / "Saves",
    Path("~/.config/StardewValley/Saves").expanduser(),
    Path("~/Library/Application Support/StardewValley/Saves").expanduser(),
]


def resolve_saves_directory() -> Path:
    """Return the first existing game save root, or the first candidate if none exist."""
    for candidate in SAVES_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return SAVES_DIRECTORIES[0]
