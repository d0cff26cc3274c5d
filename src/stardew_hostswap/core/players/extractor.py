"""List the host and farmhand records of a save document."""

from dataclasses import dataclass
from typing import Any

from stardew_hostswap.config import SAVE_LAYOUT, SaveLayout
from stardew_hostswap.errors import MissingDataError, NoSecondaryPlayersError
from stardew_hostswap.models.document import Document, Element

HOST = "host"
FARMHAND = "farmhand"


@dataclass(frozen=True)
class PlayerSummary:
    """Read-only view of one player record.

    ``record`` is the element from the document itself, not a copy.
    """

    role: str
    index: int | None
    name: str | None
    farm_name: str | None
    unique_id: str | None
    money: str | None
    total_money_earned: str | None
    year: str | None
    season: str | None
    day_of_month: str | None
    milliseconds_played: str | None
    record: Element

    @property
    def save_date(self) -> str:
        """Human readable save date, e.g. "Year 2, summer 14"."""
        return f"Year {self.year or '?'}, {self.season or '?'} {self.day_of_month or '?'}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role,
            "index": self.index,
            "name": self.name,
            "farm_name": self.farm_name,
            "unique_id": self.unique_id,
            "money": self.money,
            "total_money_earned": self.total_money_earned,
            "year": self.year,
            "season": self.season,
            "day_of_month": self.day_of_month,
            "milliseconds_played": self.milliseconds_played,
        }


@dataclass(frozen=True)
class PlayerRoster:
    """The host plus every named farmhand, farmhands in save order."""

    host: PlayerSummary
    farmhands: tuple[PlayerSummary, ...]

    @property
    def all_players(self) -> tuple[PlayerSummary, ...]:
        return (self.host, *self.farmhands)


def summarize_record(
    record: Element,
    *,
    role: str,
    index: int | None = None,
    layout: SaveLayout = SAVE_LAYOUT,
) -> PlayerSummary:
    return PlayerSummary(
        role=role,
        index=index,
        name=record.find_text(layout.name),
        farm_name=record.find_text("farmName"),
        unique_id=record.find_text(layout.unique_id),
        money=record.find_text("money"),
        total_money_earned=record.find_text("totalMoneyEarned"),
        year=record.find_text("yearForSaveGame"),
        season=record.find_text("seasonForSaveGame"),
        day_of_month=record.find_text("dayOfMonthForSaveGame"),
        milliseconds_played=record.find_text("millisecondsPlayed"),
        record=record,
    )


def host_record(
    document: Document,
    *,
    layout: SaveLayout = SAVE_LAYOUT,
    operation: str = "extract players",
) -> Element:
    """Return the record in the host slot.

    Raises:
        MissingDataError: The document is not a save game or has no host record.
    """
    root = document.root
    if root.tag != layout.root:
        msg = f"Expected a <{layout.root}> document, found <{root.tag}>"
        raise MissingDataError(msg, operation=operation)
    host = root.find(layout.host)
    if host is None:
        msg = f"<{layout.root}> has no <{layout.host}> record"
        raise MissingDataError(msg, operation=operation)
    return host


def farmhand_records(document: Document, *, layout: SaveLayout = SAVE_LAYOUT) -> tuple[Element, ...]:
    """All farmhand slots in save order, unused slots included.

    An absent container yields an empty tuple.
    """
    container = document.root.find(layout.container)
    if container is None:
        return ()
    return container.find_all(layout.record)


def is_named(record: Element, *, layout: SaveLayout = SAVE_LAYOUT) -> bool:
    """True if the record has a non-empty plain-text name (i.e. the slot is in use)."""
    return bool(record.find_text(layout.name))


def extract_players(
    document: Document,
    *,
    layout: SaveLayout = SAVE_LAYOUT,
    require_farmhands: bool = True,
) -> PlayerRoster:
    """Summarize the host and every named farmhand.

    Farmhands keep their position among all farmhand slots as ``index``, so an unused
    slot before them does not shift the index used for migration.

    Args:
        document: Parsed main save document.
        layout: Element names of the save layout.
        require_farmhands: Raise when no farmhand could become the host.

    Raises:
        MissingDataError: The document has no host record.
        NoSecondaryPlayersError: No named farmhand exists and require_farmhands is set.
    """
    host = summarize_record(host_record(document, layout=layout), role=HOST, layout=layout)
    farmhands = tuple(
        summarize_record(record, role=FARMHAND, index=i, layout=layout)
        for i, record in enumerate(farmhand_records(document, layout=layout))
        if is_named(record, layout=layout)
    )
    if require_farmhands and not farmhands:
        msg = "The save has no farmhands, there is nobody to hand the host role to"
        raise NoSecondaryPlayersError(msg, operation="extract players")
    return PlayerRoster(host=host, farmhands=farmhands)
