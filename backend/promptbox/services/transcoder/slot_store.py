"""Per-session storage of the three content slots."""
from typing import Mapping, Optional

from promptbox.services.transcoder.extractor import extract
from promptbox.services.transcoder.formats import ContentFormat, ContentSlot
from promptbox.services.transcoder.formatter import format_content


class ContentSlotStore:
    """Holds slot text, the format each slot is rendered in, and the active tab.

    Stored text is the formatted string itself; there is no separate raw
    field. Formats are tracked per slot so a slot's text always agrees with
    the format recorded for it. Only ``write_active_slot`` (user edits) and
    the transcode controller mutate the store.
    """

    def __init__(
        self,
        default_format: ContentFormat = ContentFormat.JSON,
        contents: Optional[Mapping[ContentSlot, str]] = None,
        active_slot: ContentSlot = ContentSlot.PROMPT,
    ):
        default_format = ContentFormat(default_format)
        self._text: dict[ContentSlot, str] = {slot: "" for slot in ContentSlot}
        self._formats: dict[ContentSlot, ContentFormat] = {slot: default_format for slot in ContentSlot}
        for slot, text in (contents or {}).items():
            self._text[ContentSlot(slot)] = text or ""
        self._active = ContentSlot(active_slot)

    @property
    def active_slot(self) -> ContentSlot:
        return self._active

    @property
    def active_format(self) -> ContentFormat:
        return self._formats[self._active]

    def set_active_slot(self, slot: ContentSlot) -> None:
        self._active = ContentSlot(slot)

    def read(self, slot: ContentSlot) -> str:
        return self._text[ContentSlot(slot)]

    def read_active_slot(self) -> str:
        return self._text[self._active]

    def write_active_slot(self, text: str) -> None:
        """Overwrite the active slot as typed. No extraction, no validation."""
        self._text[self._active] = text

    def format_of(self, slot: ContentSlot) -> ContentFormat:
        return self._formats[ContentSlot(slot)]

    def formats(self) -> dict[str, str]:
        return {slot.value: fmt.value for slot, fmt in self._formats.items()}

    def contents(self) -> dict[str, str]:
        return {slot.value: text for slot, text in self._text.items()}

    def commit(self, slot: ContentSlot, text: str, fmt: ContentFormat) -> None:
        """Store transcoded text together with the format it is now in."""
        slot = ContentSlot(slot)
        self._text[slot] = text
        self._formats[slot] = ContentFormat(fmt)

    def preview(self) -> str:
        """Canonical rendering of the active slot in its own format."""
        text = self.read_active_slot()
        return format_content(extract(text, self.active_format), self.active_format)

    def __repr__(self) -> str:
        return (
            f"ContentSlotStore(active={self._active.value}, "
            f"formats={self.formats()})"
        )
