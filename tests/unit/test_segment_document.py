"""
Unit Tests for scripts/segment_document.py

Runs the CLI's main() in-process with console-only logging and a word-count
token counter.
"""

import importlib.util
import json
from pathlib import Path

import pytest
from docsegment import segmenter as segmenter_module
from docsegment.utils.logging_config import logger


SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "segment_document.py"

OUTLINE = {"index": [
    {"chapterTitle": "Intro", "subchapters": []},
    {"chapterTitle": "Café Notes", "subchapters": []},
]}

TEXT = "Intro\nOpening words.\nCafé Notes\nCrème brûlée recipe.\n"


@pytest.fixture
def script(monkeypatch):
    """Load the script as a module and avoid tiktoken downloads."""
    spec = importlib.util.spec_from_file_location("segment_document", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    monkeypatch.setattr(segmenter_module, "count_tokens", lambda text: len(text.split()))
    yield module
    logger.remove()


@pytest.fixture
def outline_file(tmp_path):
    path = tmp_path / "outline.json"
    path.write_text(json.dumps(OUTLINE), encoding="utf-8")
    return path


def _run(script, text_file, outline_file, *extra):
    return script.main([
        "--text", str(text_file),
        "--outline", str(outline_file),
        "--no-log-files",
        *extra,
    ])


class TestLoadText:
    """Tests for load_text()"""

    def test_explicit_encoding(self, script, tmp_path):
        """Text is decoded with the requested encoding"""
        path = tmp_path / "doc.txt"
        path.write_bytes(TEXT.encode("latin-1"))

        assert script.load_text(path, encoding="latin-1") == TEXT

    def test_missing_file(self, script, tmp_path):
        with pytest.raises(FileNotFoundError):
            script.load_text(tmp_path / "missing.txt")


class TestMain:
    """Tests for main()"""

    def test_writes_sections(self, script, tmp_path, outline_file):
        """Sections are written as JSON"""
        text_file = tmp_path / "doc.txt"
        text_file.write_text(TEXT, encoding="utf-8")
        output = tmp_path / "out" / "sections.json"

        assert _run(script, text_file, outline_file, "--output", str(output)) == 0

        sections = json.loads(output.read_text(encoding="utf-8"))
        assert [s["chapter"] for s in sections] == ["Intro", "Café Notes"]
        assert sections[1]["subchapter"]["text"] == "Crème brûlée recipe."

    def test_encoding_option(self, script, tmp_path, outline_file):
        """--encoding decodes a non-UTF-8 text file"""
        text_file = tmp_path / "doc.txt"
        text_file.write_bytes(TEXT.encode("latin-1"))
        output = tmp_path / "sections.json"

        assert _run(script, text_file, outline_file, "--encoding", "latin-1", "--output", str(output)) == 0

        sections = json.loads(output.read_text(encoding="utf-8"))
        assert sections[1]["subchapter"]["text"] == "Crème brûlée recipe."

    def test_wrong_encoding_fails(self, script, tmp_path, outline_file):
        """Undecodable text exits non-zero"""
        text_file = tmp_path / "doc.txt"
        text_file.write_bytes(TEXT.encode("latin-1"))

        assert _run(script, text_file, outline_file) == 1

    def test_missing_outline_fails(self, script, tmp_path):
        """Missing outline file exits non-zero"""
        text_file = tmp_path / "doc.txt"
        text_file.write_text(TEXT, encoding="utf-8")

        assert _run(script, text_file, tmp_path / "missing.json") == 1
