"""Create/edit session for a single prompt draft.

Mirrors the prompt modal: title and description fields, a category, a tag
set, and three content slots backed by a ``ContentSlotStore``. Nothing is
persisted here; ``save`` builds a ``PromptDraft`` and hands it to the
caller's callback.
"""
import logging
from typing import Callable, Optional

from promptbox.config import settings
from promptbox.schemas.prompt import PromptContent, PromptDraft
from promptbox.services.tags import TagSet
from promptbox.services.transcoder import (
    ContentFormat,
    ContentSlot,
    ContentSlotStore,
    parse_format,
    switch_all_formats,
    switch_format,
)

logger = logging.getLogger(__name__)

SaveCallback = Callable[[PromptDraft], None]

MIN_RATING = 0
MAX_RATING = 5


class DraftValidationError(ValueError):
    """Raised by ``PromptEditor.save`` when the draft can't be saved.

    ``fields`` names every offending field; ``missing`` lists only the
    required fields left blank.
    """

    def __init__(self, fields: list[str], message: Optional[str] = None, missing: Optional[list[str]] = None):
        self.fields = fields
        self.missing = missing if missing is not None else list(fields)
        super().__init__(message or f"Please fill in {' and '.join(fields)}")


class PromptEditor:
    def __init__(
        self,
        on_save: Optional[SaveCallback] = None,
        default_format: Optional[ContentFormat] = None,
    ):
        fmt = default_format or parse_format(settings.DEFAULT_CONTENT_FORMAT)
        self.title = ""
        self.description = ""
        self.category = ""
        self.rating = 0
        self.tags = TagSet()
        self.store = ContentSlotStore(default_format=fmt)
        self._on_save = on_save

    @classmethod
    def from_draft(cls, draft: PromptDraft, on_save: Optional[SaveCallback] = None) -> "PromptEditor":
        """Reopen a saved draft; every slot starts in the draft's format."""
        editor = cls(on_save=on_save, default_format=draft.format)
        editor.title = draft.title
        editor.description = draft.description
        editor.category = draft.category
        editor.rating = draft.rating
        editor.tags = TagSet(draft.tags)
        editor.store = ContentSlotStore(
            default_format=draft.format,
            contents={
                ContentSlot.PROMPT: draft.content.prompt,
                ContentSlot.EXAMPLE: draft.content.example,
                ContentSlot.HOW_TO_USE: draft.content.how_to_use,
            },
        )
        return editor

    # ── Slots and formats ────────────────────────────────────────

    def select_slot(self, slot: ContentSlot) -> None:
        self.store.set_active_slot(slot)

    def edit(self, text: str) -> None:
        """Keystroke path: the active slot takes ``text`` as-is."""
        self.store.write_active_slot(text)

    def select_format(self, new_format: ContentFormat) -> None:
        """Switch the active slot's format."""
        switch_format(self.store, self.store.active_slot, new_format)

    def copy_active(self) -> str:
        return self.store.read_active_slot()

    def preview(self) -> str:
        return self.store.preview()

    # ── Tags and category ────────────────────────────────────────

    def add_tag(self, tag: str) -> bool:
        return self.tags.add(tag)

    def remove_tag(self, tag: str) -> bool:
        return self.tags.remove(tag)

    def clear_category(self) -> None:
        self.category = ""

    # ── Save ─────────────────────────────────────────────────────

    def validate(self) -> None:
        missing = [
            name for name, value in (("title", self.title), ("description", self.description))
            if not value.strip()
        ]
        if missing:
            raise DraftValidationError(missing)
        if not isinstance(self.rating, int) or not MIN_RATING <= self.rating <= MAX_RATING:
            raise DraftValidationError(
                ["rating"],
                f"Rating must be between {MIN_RATING} and {MAX_RATING}",
                missing=[],
            )

    def build_draft(self) -> PromptDraft:
        self.validate()
        # A saved draft carries one format, so every slot follows the active one.
        target = self.store.active_format
        switch_all_formats(self.store, target)
        return PromptDraft(
            title=self.title,
            description=self.description,
            category=self.category,
            tags=self.tags.to_list(),
            rating=self.rating,
            content=PromptContent(
                prompt=self.store.read(ContentSlot.PROMPT),
                example=self.store.read(ContentSlot.EXAMPLE),
                how_to_use=self.store.read(ContentSlot.HOW_TO_USE),
            ),
            format=target,
        )

    def save(self) -> PromptDraft:
        """Validate, build the draft and pass it to the save callback."""
        draft = self.build_draft()
        logger.info("Saving prompt draft '%s' (format=%s)", draft.title, draft.format.value)
        if self._on_save:
            self._on_save(draft)
        return draft
