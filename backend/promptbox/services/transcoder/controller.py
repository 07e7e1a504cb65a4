"""Format switching: extract with the old format, re-render with the new one."""
import logging

from promptbox.services.transcoder.extractor import extract_raw
from promptbox.services.transcoder.formats import ContentFormat, ContentSlot
from promptbox.services.transcoder.formatter import format_content
from promptbox.services.transcoder.slot_store import ContentSlotStore

logger = logging.getLogger(__name__)


def transcode(text: str, source: ContentFormat, target: ContentFormat) -> str:
    """Re-render ``text`` (currently in ``source``) as ``target``.

    Unrecognized wrappers are treated as raw text, so a misfire can wrap
    already-wrapped text a second time but never loses content.
    """
    if not text:
        return ""
    source, target = ContentFormat(source), ContentFormat(target)
    if source == target:
        return text
    extraction = extract_raw(text, source)
    return format_content(extraction.text, target)


def switch_format(store: ContentSlotStore, slot: ContentSlot, new_format: ContentFormat) -> None:
    """Move one slot to ``new_format``, transcoding its text if it has any."""
    slot, new_format = ContentSlot(slot), ContentFormat(new_format)
    current = store.format_of(slot)
    text = store.read(slot)
    if not text or current == new_format:
        store.commit(slot, text, new_format)
        return
    store.commit(slot, transcode(text, current, new_format), new_format)
    logger.debug("Transcoded slot %s from %s to %s", slot.value, current.value, new_format.value)


def switch_all_formats(store: ContentSlotStore, new_format: ContentFormat) -> None:
    """Modal-wide format selector: every slot follows ``new_format``."""
    for slot in ContentSlot:
        switch_format(store, slot, new_format)
