"""Hand the host role of a save to one of its farmhands."""

from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from stardew_hostswap.config import COUPLED_FIELDS, SAVE_DATE_FIELDS, SAVE_LAYOUT, SaveLayout
from stardew_hostswap.core.players.extractor import host_record
from stardew_hostswap.errors import IndexOutOfRangeError, MissingDataError
from stardew_hostswap.models.document import Document, Element


@dataclass(frozen=True)
class MigrationResult:
    """Outcome of a host migration."""

    document: Document
    old_host: str | None
    new_host: str | None
    old_host_id: str | None
    new_host_id: str | None
    new_host_record: Element
    references_replaced: int


def replace_farmhand_references(
    element: Element,
    *,
    old_id: str,
    new_id: str,
    reference_tag: str = SAVE_LAYOUT.reference,
) -> tuple[Element, int]:
    """Point every reference to new_id back at old_id.

    Walks the whole subtree depth-first in document order. Only subtrees containing a
    replaced reference are rebuilt.

    Returns:
        (updated element, number of references replaced)
    """
    if element.tag == reference_tag:
        if element.text == new_id:
            return element.with_text(old_id), 1
        return element, 0

    count = 0
    children = []
    for child in element.children:
        if isinstance(child, Element):
            child, n = replace_farmhand_references(
                child, old_id=old_id, new_id=new_id, reference_tag=reference_tag
            )
            count += n
        children.append(child)
    return (element.with_children(children) if count else element), count


def _put_field(record: Element, field: str, new: Element | None, source: Element) -> Element:
    """Set field on record to new, taken from source.

    A field record lacks is inserted after the last field that precedes it in source,
    so both records keep the game's field order.
    """
    if new is None or record.find(field) is not None:
        return record.set_child(field, new)
    source_tags = [e.tag for e in source.elements()]
    preceding = set(source_tags[: source_tags.index(field)])
    position = 0
    for i, child in enumerate(record.children):
        if isinstance(child, Element) and child.tag in preceding:
            position = i + 1
    children = list(record.children)
    children.insert(position, new)
    return record.with_children(children)


def _sync_fields(target: Element, source: Element, fields: Iterable[str]) -> Element:
    """Copy fields from source onto target; a field source lacks is removed from target."""
    for field in fields:
        target = _put_field(target, field, source.find(field), source)
    return target


def _swap_fields(first: Element, second: Element, fields: Iterable[str]) -> tuple[Element, Element]:
    for field in fields:
        a, b = first.find(field), second.find(field)
        first, second = _put_field(first, field, b, second), _put_field(second, field, a, first)
    return first, second


def _entry_count(record: Element, field: str) -> int:
    element = record.find(field)
    return len(element.elements()) if element is not None else 0


def migrate_host(
    document: Document,
    target_index: int,
    *,
    layout: SaveLayout = SAVE_LAYOUT,
    coupled_fields: Iterable[str] = COUPLED_FIELDS,
    date_fields: Iterable[str] = SAVE_DATE_FIELDS,
) -> MigrationResult:
    """Make the farmhand at target_index the host and demote the current host into its slot.

    Steps, all applied to new elements (the input document is left as it is):

    1. The farmhand's save date is set to the host's.
    2. Coupled fields (see COUPLED_FIELDS) are swapped between the two records and
       stay with the role.
    3. The records trade places.
    4. farmhandReference values equal to the new host's id are rewritten to the old
       host's id.

    Args:
        document: Parsed main save document.
        target_index: Position of the farmhand among all farmhand slots.
        layout: Element names of the save layout.
        coupled_fields: Fields swapped together with the role.
        date_fields: Fields copied from the host onto the new host.

    Raises:
        MissingDataError: No host record or no farmhand container.
        IndexOutOfRangeError: No farmhand record at target_index.
    """
    current_host = host_record(document, layout=layout, operation="migrate host")
    root = document.root
    container = root.find(layout.container)
    if container is None:
        msg = f"The save has no <{layout.container}> container"
        raise MissingDataError(msg, operation="migrate host")

    records = container.find_all(layout.record)
    if not 0 <= target_index < len(records):
        msg = f"No farmhand at index {target_index} (the save has {len(records)} farmhand slot(s))"
        raise IndexOutOfRangeError(msg, operation="migrate host")
    target = records[target_index]

    old_host = current_host.find_text(layout.name)
    new_host = target.find_text(layout.name)
    old_host_id = current_host.find_text(layout.unique_id)
    new_host_id = target.find_text(layout.unique_id)
    logger.info("Migrating host: {} -> {} (farmhand #{})", old_host, new_host, target_index)

    date_fields = tuple(date_fields)
    target = _sync_fields(target, current_host, date_fields)
    logger.debug("Synced save date: {}", ", ".join(f"{f}={target.find_text(f)}" for f in date_fields))

    demoted, promoted = _swap_fields(current_host, target, coupled_fields)
    logger.debug(
        "Swapped coupled fields: {} event(s) / {} mail(s) for the new host, "
        "{} event(s) / {} mail(s) for the old host",
        _entry_count(promoted, "eventsSeen"),
        _entry_count(promoted, "mailReceived"),
        _entry_count(demoted, "eventsSeen"),
        _entry_count(demoted, "mailReceived"),
    )

    container = container.replace_nth(layout.record, target_index, demoted.with_tag(layout.record))
    root = root.set_child(layout.host, promoted.with_tag(layout.host))
    root = root.set_child(layout.container, container)

    replaced = 0
    if old_host_id is None or new_host_id is None:
        logger.warning("A player record has no {}, skipping reference repair", layout.unique_id)
    elif old_host_id == new_host_id:
        logger.warning("Host and farmhand share id {}, skipping reference repair", old_host_id)
    else:
        root, replaced = replace_farmhand_references(
            root, old_id=old_host_id, new_id=new_host_id, reference_tag=layout.reference
        )
    logger.info("Replaced {} {} value(s)", replaced, layout.reference)

    return MigrationResult(
        document=document.with_root(root),
        old_host=old_host,
        new_host=new_host,
        old_host_id=old_host_id,
        new_host_id=new_host_id,
        new_host_record=root.find(layout.host),  # type: ignore[arg-type]
        references_replaced=replaced,
    )
