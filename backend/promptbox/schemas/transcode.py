"""Transcoder request/response schemas."""

from promptbox.schemas.base import CamelModel
from promptbox.services.transcoder.formats import ContentFormat, ContentSlot


class FormatRequest(CamelModel):
    raw: str = ""
    target: ContentFormat


class ExtractRequest(CamelModel):
    text: str = ""
    source: ContentFormat


class TextResponse(CamelModel):
    text: str


class ExtractResponse(CamelModel):
    text: str
    recognized: bool


class SwitchRequest(CamelModel):
    """Stateless switch: the caller sends the whole slot state."""
    content: dict[ContentSlot, str] = {}
    formats: dict[ContentSlot, ContentFormat] = {}
    slot: ContentSlot
    new_format: ContentFormat
    default_format: ContentFormat = ContentFormat.JSON


class SwitchResponse(CamelModel):
    content: dict[str, str]
    formats: dict[str, str]


class FormatInfo(CamelModel):
    name: ContentFormat
    syntax_class: str


class SlotInfo(CamelModel):
    id: ContentSlot
    label: str


class FormatsResponse(CamelModel):
    formats: list[FormatInfo]
    slots: list[SlotInfo]
    default_format: ContentFormat
