"""Tests for fenced block extraction."""

from extguard.contracts import Artifact
from extguard.kernel.blocks import extract_blocks


def test_extracts_files_from_fenced_blocks():
    raw = '```manifest.json\n{"key":"val"}\n```\n\n```content.js\nconsole.log("hi");\n```'
    files = extract_blocks(raw)
    assert len(files) == 2
    assert files[0].name == "manifest.json"
    assert files[0].content == '{"key":"val"}'
    assert files[1].name == "content.js"
    assert files[1].content == 'console.log("hi");'


def test_returns_empty_for_no_blocks():
    assert extract_blocks("Just some text") == []
    assert extract_blocks("") == []


def test_keeps_special_characters():
    raw = '```popup.html\n<div class="test">&amp;</div>\n```'
    files = extract_blocks(raw)
    assert 'class="test"' in files[0].content


def test_content_is_trimmed():
    raw = "```bg.js\n\n   chrome.runtime.id;   \n\n\n```"
    assert extract_blocks(raw) == [Artifact(name="bg.js", content="chrome.runtime.id;")]


def test_surrounding_prose_is_ignored():
    raw = (
        "Here is your extension:\n\n"
        "```manifest.json\n{}\n```\n"
        "And the popup:\n"
        "```popup.html\n<html></html>\n```\n"
        "Load it unpacked."
    )
    assert [f.name for f in extract_blocks(raw)] == ["manifest.json", "popup.html"]


def test_unterminated_block_is_ignored():
    """A trailing block that is still streaming is not an artifact yet."""
    raw = "```a.js\nconst a = 1;\n```\n```b.js\nconst b ="
    files = extract_blocks(raw)
    assert [f.name for f in files] == ["a.js"]


def test_name_with_whitespace_does_not_match():
    raw = "```my file.js\nconst x = 1;\n```"
    assert extract_blocks(raw) == []


def test_nested_paths_are_kept_verbatim():
    raw = "```icons/icon16.png\nbinary\n```\n```scripts/Content.JS\nx\n```"
    assert [f.name for f in extract_blocks(raw)] == ["icons/icon16.png", "scripts/Content.JS"]


def test_crlf_line_endings():
    raw = "```content.js\r\nconsole.log(1);\r\n```\r\n"
    files = extract_blocks(raw)
    assert len(files) == 1
    assert files[0].name == "content.js"
    assert files[0].content == "console.log(1);"


def test_language_tag_is_taken_as_name():
    """Extraction is syntactic only; names are not validated."""
    raw = "```json\n{}\n```"
    assert extract_blocks(raw) == [Artifact(name="json", content="{}")]


def test_extraction_is_deterministic():
    raw = "```a.js\nA\n```\n```b.css\nbody{}\n```\n```a.js\nsecond\n```"
    first = extract_blocks(raw)
    second = extract_blocks(raw)
    assert first == second
    # Duplicate names are preserved in order
    assert [f.content for f in first] == ["A", "body{}", "second"]
