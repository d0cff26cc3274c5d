"""Keep the SaveGameInfo companion document in step with the main save's host."""

from collections.abc import Iterable

from loguru import logger

from stardew_hostswap.config import COMPANION_NAMESPACES, COMPANION_ROOT_TAG, SAVE_LAYOUT
from stardew_hostswap.errors import MissingDataError
from stardew_hostswap.models.document import Document, Element


def update_companion(
    companion: Document,
    new_host_record: Element,
    *,
    namespaces: Iterable[tuple[str, str]] = COMPANION_NAMESPACES,
    root_tag: str = COMPANION_ROOT_TAG,
) -> Document:
    """Replace the companion's single player record with the new host's record.

    The record is renamed to the companion's root tag. Namespace declarations the
    record lacks are added in front of its own attributes; ones it has are kept.

    Raises:
        MissingDataError: The companion document is not a single player record.
    """
    if companion.root.tag != root_tag:
        msg = f"Expected a <{root_tag}> document, found <{companion.root.tag}>"
        raise MissingDataError(msg, operation="update companion")

    record = new_host_record.with_tag(root_tag)
    present = {name for name, _value in record.attributes}
    missing = [(name, value) for name, value in namespaces if name not in present]
    if missing:
        record = record.with_attributes([*missing, *record.attributes])

    logger.info(
        "SaveGameInfo now shows {} (was {})",
        record.find_text(SAVE_LAYOUT.name),
        companion.root.find_text(SAVE_LAYOUT.name),
    )
    return companion.with_root(record)
