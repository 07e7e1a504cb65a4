"""Prompt draft and prompt library request/response schemas."""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from promptbox.config import settings
from promptbox.schemas.base import CamelModel, CamelORMModel
from promptbox.services.tags import TagSet
from promptbox.services.transcoder.formats import ContentFormat


class PromptContent(CamelModel):
    """Text of the three content slots, each wrapped in the draft's format."""
    prompt: str = ""
    example: str = ""
    how_to_use: str = ""


class PromptDraft(CamelModel):
    """What the editor hands to the save callback."""
    title: str
    description: str
    category: str = ""
    tags: list[str] = []
    rating: int = Field(default=0, ge=0, le=5)
    content: PromptContent = Field(default_factory=PromptContent)
    format: ContentFormat = ContentFormat.JSON

    @field_validator("category")
    @classmethod
    def _default_category(cls, value: str) -> str:
        value = (value or "").strip()
        return value or settings.DEFAULT_CATEGORY

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, value: list[str]) -> list[str]:
        return TagSet(value).to_list()


class RatingUpdate(CamelModel):
    rating: int = Field(ge=0, le=5)


class PromptResponse(CamelORMModel):
    id: int
    title: str
    description: str
    category: str
    tags: list[str]
    rating: int
    content: PromptContent
    format: ContentFormat
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    summary: str = ""
    user_id: str = "default"


class PromptFilters(CamelModel):
    """Filter chips for the card grid, ``ALL`` first."""
    categories: list[str]
    tags: list[str]
