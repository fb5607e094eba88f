"""Shared fixtures for folder-dump tests."""

import json
import logging

import pytest


SAMPLE = {
    "checksum": "x",
    "roots": {
        "bookmark_bar": {
            "name": "bar",
            "children": [
                {"name": "Work", "children": [{"name": "site", "url": "http://a"}]},
                {"name": "Other", "children": []},
            ],
        }
    },
}


@pytest.fixture
def sample_data():
    """Small bookmarks document as parsed JSON."""
    return json.loads(json.dumps(SAMPLE))


@pytest.fixture
def write_bookmarks(tmp_path):
    """Write a bookmarks file under tmp_path/<edition>/Bookmarks."""

    def _write(edition, content):
        directory = tmp_path / edition
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "Bookmarks"
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handlers and logging.disable() left behind by main() runs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.disable(logging.NOTSET)
