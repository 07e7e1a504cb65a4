"""Tests for the editor session, tags and draft schema."""
import pytest
from pydantic import ValidationError

from promptbox.schemas.prompt import PromptDraft
from promptbox.services.prompt_editor import DraftValidationError, PromptEditor
from promptbox.services.tags import TagSet, tag_color_class, tag_color_style
from promptbox.services.transcoder import ContentFormat, ContentSlot, extract, format_content


def _filled_editor(**kwargs) -> PromptEditor:
    editor = PromptEditor(**kwargs)
    editor.title = "Code Review Assistant"
    editor.description = "Analyze code quality"
    return editor


class TestTagSet:
    def test_duplicate_add_is_noop(self):
        tags = TagSet(["work", "chatgpt"])
        assert tags.add("work") is False
        assert len(tags) == 2

    def test_blank_and_whitespace(self):
        tags = TagSet()
        assert tags.add("   ") is False
        assert tags.add("  vit  ") is True
        assert tags.to_list() == ["vit"]
        assert "vit" in tags

    def test_remove(self):
        tags = TagSet(["a", "b"])
        assert tags.remove("a") is True
        assert tags.remove("missing") is False
        assert tags.to_list() == ["b"]

    def test_color_is_constant(self):
        assert tag_color_class("anything") == tag_color_class("else") == "tag-color-1"
        assert tag_color_style("x") == {"backgroundColor": "#00bcff", "color": "white"}


class TestPromptEditor:
    def test_save_requires_title_and_description(self):
        editor = PromptEditor()
        with pytest.raises(DraftValidationError) as exc:
            editor.save()
        assert exc.value.missing == ["title", "description"]

    def test_save_defaults(self):
        draft = _filled_editor().save()
        assert draft.category == "general"
        assert draft.rating == 0
        assert draft.tags == []
        assert draft.format == ContentFormat.JSON
        assert draft.content.prompt == ""

    def test_save_calls_callback(self):
        saved = []
        editor = _filled_editor(on_save=saved.append)
        editor.edit(format_content("Review this diff", ContentFormat.JSON))
        draft = editor.save()
        assert saved == [draft]
        assert extract(draft.content.prompt, ContentFormat.JSON) == "Review this diff"

    def test_save_aligns_slots_to_active_format(self):
        editor = _filled_editor()
        editor.edit(format_content("main", ContentFormat.JSON))
        editor.select_slot(ContentSlot.EXAMPLE)
        editor.edit(format_content("sample", ContentFormat.JSON))
        editor.select_format(ContentFormat.YAML)

        draft = editor.save()

        assert draft.format == ContentFormat.YAML
        assert draft.content.prompt == "prompt: |\n  main"
        assert draft.content.example == "prompt: |\n  sample"

    def test_tags_and_category(self):
        editor = _filled_editor()
        editor.add_tag("work")
        editor.add_tag("work")
        editor.category = "backend"
        editor.clear_category()
        draft = editor.save()
        assert draft.tags == ["work"]
        assert draft.category == "general"

    def test_reopen_draft(self):
        editor = _filled_editor(default_format=ContentFormat.CSV)
        editor.select_slot(ContentSlot.HOW_TO_USE)
        editor.edit(format_content('Paste "code"', ContentFormat.CSV))
        draft = editor.save()

        reopened = PromptEditor.from_draft(draft)
        reopened.select_slot(ContentSlot.HOW_TO_USE)
        assert reopened.store.active_format == ContentFormat.CSV
        assert reopened.copy_active() == draft.content.how_to_use
        assert reopened.preview() == draft.content.how_to_use


class TestPromptDraft:
    def test_camel_case_payload(self):
        draft = PromptDraft.model_validate({
            "title": "t",
            "description": "d",
            "content": {"prompt": "p", "howToUse": "h"},
            "format": "xml",
            "tags": ["a", "a", " b "],
        })
        assert draft.content.how_to_use == "h"
        assert draft.format == ContentFormat.XML
        assert draft.tags == ["a", "b"]
        assert draft.to_api()["content"]["howToUse"] == "h"

    def test_rating_bounds(self):
        with pytest.raises(ValidationError):
            PromptDraft(title="t", description="d", rating=6)

    def test_blank_category_defaults(self):
        assert PromptDraft(title="t", description="d", category="   ").category == "general"


class TestEditorValidation:
    @pytest.mark.parametrize("rating", [-1, 6, 9])
    def test_out_of_range_rating_is_a_draft_error(self, rating):
        editor = _filled_editor()
        editor.rating = rating
        with pytest.raises(DraftValidationError) as exc:
            editor.save()
        assert exc.value.fields == ["rating"]
        assert exc.value.missing == []

    def test_rating_bounds_accepted(self):
        editor = _filled_editor()
        editor.rating = 5
        assert editor.save().rating == 5
