"""Content formats and slots shared by the formatter, extractor and store."""
from enum import Enum


class ContentFormat(str, Enum):
    """Structured wrapper styles a content slot can be rendered in."""

    JSON = "json"
    MARKDOWN = "markdown"
    XML = "xml"
    YAML = "yaml"
    CSV = "csv"


class ContentSlot(str, Enum):
    """The three independent text buffers of a prompt draft."""

    PROMPT = "prompt"
    EXAMPLE = "example"
    HOW_TO_USE = "howToUse"


SLOT_LABELS: dict[ContentSlot, str] = {
    ContentSlot.PROMPT: "Prompt",
    ContentSlot.EXAMPLE: "Example",
    ContentSlot.HOW_TO_USE: "How to Use",
}

# Wrapper literals. The extractor matches exactly what the formatter emits.
JSON_FIELD = "prompt"
JSON_INDENT = 2
MARKDOWN_HEADER = "# Prompt\n\n"
XML_OPEN = "<prompt>\n  <content>"
XML_CLOSE = "</content>\n</prompt>"
YAML_PREFIX = "prompt: |\n  "
YAML_INDENT = "  "
CSV_HEADER = '"prompt"\n'


def syntax_class(fmt: ContentFormat) -> str:
    """Highlighter class for a format, e.g. ``language-json``."""
    return f"language-{ContentFormat(fmt).value}"


def parse_format(value: str, default: ContentFormat = ContentFormat.JSON) -> ContentFormat:
    """Lenient lookup used for config values; unknown names give ``default``."""
    if isinstance(value, ContentFormat):
        return value
    try:
        return ContentFormat(str(value).strip().lower())
    except ValueError:
        return default
