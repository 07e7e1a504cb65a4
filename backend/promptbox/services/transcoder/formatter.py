"""Render raw slot text into one of the structured content formats.

Every function here is total over strings: no input makes them raise.
"""
import json

from promptbox.services.transcoder.formats import (
    CSV_HEADER,
    JSON_FIELD,
    JSON_INDENT,
    MARKDOWN_HEADER,
    XML_CLOSE,
    XML_OPEN,
    YAML_INDENT,
    YAML_PREFIX,
    ContentFormat,
)


def _to_json(raw: str) -> str:
    return json.dumps({JSON_FIELD: raw}, indent=JSON_INDENT, ensure_ascii=False)


def _to_markdown(raw: str) -> str:
    return f"{MARKDOWN_HEADER}{raw}"


def _to_xml(raw: str) -> str:
    # No entity escaping: raw text containing "</content>" breaks the wrapper.
    return f"{XML_OPEN}{raw}{XML_CLOSE}"


def _to_yaml(raw: str) -> str:
    return YAML_PREFIX + raw.replace("\n", "\n" + YAML_INDENT)


def _to_csv(raw: str) -> str:
    escaped = raw.replace('"', '""')
    return f'{CSV_HEADER}"{escaped}"'


_RENDERERS = {
    ContentFormat.JSON: _to_json,
    ContentFormat.MARKDOWN: _to_markdown,
    ContentFormat.XML: _to_xml,
    ContentFormat.YAML: _to_yaml,
    ContentFormat.CSV: _to_csv,
}


def format_content(raw: str, target: ContentFormat) -> str:
    """Wrap ``raw`` in the syntax of ``target``.

    Empty input short-circuits to an empty string for every format, so a
    blank slot never gets a wrapper.
    """
    if not raw:
        return ""
    return _RENDERERS[ContentFormat(target)](raw)
