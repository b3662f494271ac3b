from __future__ import annotations

import json
from pathlib import Path

import pytest

from textpng.data_handler import load_style_config, read_document


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_camel_case_keys_normalized(tmp_path: Path):
    cfg = _write(tmp_path / "style.json", json.dumps({"fontSize": 14, "bold": True, "align": "justify"}))
    assert load_style_config(cfg) == {"font_size": 14, "bold": True, "align": "justify"}


def test_unknown_keys_ignored(tmp_path: Path):
    cfg = _write(tmp_path / "style.json", json.dumps({"color": "#000", "shadow": 3}))
    assert load_style_config(cfg) == {"color": "#000"}


def test_bom_is_stripped(tmp_path: Path):
    cfg = _write(tmp_path / "style.json", "\ufeff" + json.dumps({"italic": True}))
    assert load_style_config(cfg) == {"italic": True}


def test_missing_file_returns_empty(tmp_path: Path):
    assert load_style_config(tmp_path / "nope.json") == {}


def test_malformed_json_raises(tmp_path: Path):
    cfg = _write(tmp_path / "style.json", "{bad json")
    with pytest.raises(RuntimeError, match="4001"):
        load_style_config(cfg)


def test_non_object_raises(tmp_path: Path):
    cfg = _write(tmp_path / "style.json", "[1, 2]")
    with pytest.raises(RuntimeError, match="4001"):
        load_style_config(cfg)


def test_read_document_strips_bom(tmp_path: Path):
    doc = _write(tmp_path / "doc.txt", "\ufeffhello\nworld")
    assert read_document(doc) == "hello\nworld"


def test_read_document_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError, match="1001"):
        read_document(tmp_path / "missing.txt")


def test_read_document_rejects_non_utf8(tmp_path: Path):
    doc = tmp_path / "doc.txt"
    doc.write_bytes(b"\xff\xfe\xfa bad")
    with pytest.raises(ValueError, match="4002"):
        read_document(doc)
