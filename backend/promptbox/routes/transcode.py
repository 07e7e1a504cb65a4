"""Transcoder API routes - format, extract and switch for the editor UI."""
from fastapi import APIRouter

from promptbox.config import settings
from promptbox.schemas.transcode import (
    ExtractRequest,
    ExtractResponse,
    FormatRequest,
    FormatsResponse,
    SwitchRequest,
    SwitchResponse,
    TextResponse,
)
from promptbox.services.transcoder import (
    SLOT_LABELS,
    ContentFormat,
    ContentSlot,
    ContentSlotStore,
    extract_raw,
    format_content,
    parse_format,
    switch_format,
    syntax_class,
)

router = APIRouter(prefix="/api", tags=["transcode"])


@router.get("/formats", response_model=FormatsResponse)
async def list_formats():
    """Formats, slots and highlighter classes the editor offers."""
    return FormatsResponse(
        formats=[{"name": fmt, "syntax_class": syntax_class(fmt)} for fmt in ContentFormat],
        slots=[{"id": slot, "label": SLOT_LABELS[slot]} for slot in ContentSlot],
        default_format=parse_format(settings.DEFAULT_CONTENT_FORMAT),
    )


@router.post("/transcode/format", response_model=TextResponse)
async def format_text(body: FormatRequest):
    return TextResponse(text=format_content(body.raw, body.target))


@router.post("/transcode/extract", response_model=ExtractResponse)
async def extract_text(body: ExtractRequest):
    """Recover raw text. Unrecognized wrappers come back unchanged."""
    extraction = extract_raw(body.text, body.source)
    return ExtractResponse(text=extraction.text, recognized=extraction.recognized)


@router.post("/transcode/switch", response_model=SwitchResponse)
async def switch_slot_format(body: SwitchRequest):
    """Switch one slot's format, given the client's full slot state."""
    store = ContentSlotStore(default_format=body.default_format, contents=body.content)
    for slot, fmt in body.formats.items():
        store.commit(slot, store.read(slot), fmt)
    switch_format(store, body.slot, body.new_format)
    return SwitchResponse(content=store.contents(), formats=store.formats())
