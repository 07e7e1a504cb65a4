"""Tests for rendering raw slot text into each format."""
import json

import pytest

from promptbox.services.transcoder import ContentFormat, format_content, parse_format, syntax_class

from conftest import ALL_FORMATS


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_empty_input_has_no_wrapper(fmt):
    assert format_content("", fmt) == ""


def test_json_is_pretty_printed_object():
    result = format_content("Hello", ContentFormat.JSON)
    assert result == '{\n  "prompt": "Hello"\n}'
    assert json.loads(result) == {"prompt": "Hello"}


def test_json_escapes_quotes_and_newlines():
    result = format_content('say "hi"\nthen leave', ContentFormat.JSON)
    assert json.loads(result)["prompt"] == 'say "hi"\nthen leave'


def test_markdown_header():
    assert format_content("Body", ContentFormat.MARKDOWN) == "# Prompt\n\nBody"


def test_xml_wrapper_without_escaping():
    assert format_content("a < b & c", ContentFormat.XML) == (
        "<prompt>\n  <content>a < b & c</content>\n</prompt>"
    )


def test_yaml_block_scalar_reindents_every_line():
    assert format_content("line1\nline2", ContentFormat.YAML) == "prompt: |\n  line1\n  line2"


def test_csv_doubles_quotes():
    assert format_content('He said "hi"', ContentFormat.CSV) == '"prompt"\n"He said ""hi"""'


def test_accepts_plain_string_format_names():
    assert format_content("x", "markdown") == "# Prompt\n\nx"


def test_syntax_class():
    assert syntax_class(ContentFormat.YAML) == "language-yaml"


def test_parse_format_is_lenient():
    assert parse_format(" YAML ") == ContentFormat.YAML
    assert parse_format(ContentFormat.CSV) == ContentFormat.CSV
    assert parse_format("toml", default=ContentFormat.MARKDOWN) == ContentFormat.MARKDOWN
