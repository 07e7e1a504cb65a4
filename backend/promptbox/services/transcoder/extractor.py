"""Recover raw slot text from a formatted value.

Each extractor is the left inverse of the matching renderer in
``formatter``. Extraction never fails outward: when the wrapper can't be
recognized the input comes back as an ``Unrecognized`` result carrying the
original text, which callers treat as already-raw.
"""
import json
import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from promptbox.services.transcoder.formats import (
    JSON_FIELD,
    MARKDOWN_HEADER,
    YAML_INDENT,
    YAML_PREFIX,
    ContentFormat,
)

logger = logging.getLogger(__name__)

_XML_CONTENT = re.compile(r"<content>(.*?)</content>", re.DOTALL)
_CSV_BODY = re.compile(r'"prompt"\n"((?:[^"]|"")*)"', re.DOTALL)


@dataclass(frozen=True)
class Recovered:
    """The wrapper was recognized and ``text`` is the raw value inside it."""

    text: str
    recognized: bool = True


@dataclass(frozen=True)
class Unrecognized:
    """The wrapper was not recognized; ``text`` is the untouched input."""

    text: str
    reason: str = "malformed_wrapper"
    recognized: bool = False


Extraction = Union[Recovered, Unrecognized]


def _lookup_prompt_field(parsed: object) -> Optional[str]:
    """Return the ``prompt`` field of a parsed JSON value, or None if absent."""
    if not isinstance(parsed, dict) or JSON_FIELD not in parsed:
        return None
    value = parsed[JSON_FIELD]
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _from_json(text: str) -> Extraction:
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return Unrecognized(text, reason="parse_failure")
    field = _lookup_prompt_field(parsed)
    if field is None:
        return Unrecognized(text)
    return Recovered(field)


def _from_markdown(text: str) -> Extraction:
    if text.startswith(MARKDOWN_HEADER):
        return Recovered(text[len(MARKDOWN_HEADER):])
    return Unrecognized(text)


def _from_xml(text: str) -> Extraction:
    match = _XML_CONTENT.search(text)
    if match:
        return Recovered(match.group(1))
    return Unrecognized(text)


def _from_yaml(text: str) -> Extraction:
    start = text.find(YAML_PREFIX)
    if start == -1:
        return Unrecognized(text)
    body = text[start + len(YAML_PREFIX):]
    return Recovered(body.replace("\n" + YAML_INDENT, "\n"))


def _from_csv(text: str) -> Extraction:
    match = _CSV_BODY.search(text)
    if match:
        return Recovered(match.group(1).replace('""', '"'))
    return Unrecognized(text)


_EXTRACTORS: dict[ContentFormat, Callable[[str], Extraction]] = {
    ContentFormat.JSON: _from_json,
    ContentFormat.MARKDOWN: _from_markdown,
    ContentFormat.XML: _from_xml,
    ContentFormat.YAML: _from_yaml,
    ContentFormat.CSV: _from_csv,
}


def extract_raw(formatted: str, source: ContentFormat) -> Extraction:
    """Best-effort inverse of ``format_content(_, source)``."""
    if not formatted:
        return Recovered("")
    source = ContentFormat(source)
    result = _EXTRACTORS[source](formatted)
    if not result.recognized:
        logger.debug(
            "No %s wrapper recognized (%s), treating text as raw",
            source.value, result.reason,
        )
    return result


def extract(formatted: str, source: ContentFormat) -> str:
    """Raw text recovered from ``formatted``, or ``formatted`` itself."""
    return extract_raw(formatted, source).text
