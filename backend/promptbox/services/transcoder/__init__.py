"""Multi-format content transcoder for prompt slots."""
from promptbox.services.transcoder.controller import switch_all_formats, switch_format, transcode
from promptbox.services.transcoder.extractor import Extraction, Recovered, Unrecognized, extract, extract_raw
from promptbox.services.transcoder.formats import SLOT_LABELS, ContentFormat, ContentSlot, parse_format, syntax_class
from promptbox.services.transcoder.formatter import format_content
from promptbox.services.transcoder.slot_store import ContentSlotStore

__all__ = [
    "ContentFormat", "ContentSlot", "SLOT_LABELS", "parse_format", "syntax_class",
    "format_content", "extract", "extract_raw", "Extraction", "Recovered", "Unrecognized",
    "transcode", "switch_format", "switch_all_formats", "ContentSlotStore",
]
