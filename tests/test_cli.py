from __future__ import annotations

import io
import json
from pathlib import Path

import main as cli


def test_text_export_creates_png(tmp_path: Path):
    code = cli.main(["--text", "hello world", "--title", "greeting", "--output-dir", str(tmp_path)])
    assert code == 0
    out = tmp_path / "greeting.png"
    assert out.read_bytes().startswith(b"\x89PNG")


def test_blank_text_creates_nothing(tmp_path: Path, capsys):
    code = cli.main(["--text", "\\n\\n\\n", "--escape-newlines", "--output-dir", str(tmp_path)])
    assert code == 0
    assert list(tmp_path.iterdir()) == []
    assert "未生成文件" in capsys.readouterr().out


def test_invalid_color_returns_2(tmp_path: Path):
    assert cli.main(["--text", "x", "--color", "nope", "--output-dir", str(tmp_path)]) == 2
    assert list(tmp_path.iterdir()) == []


def test_missing_input_returns_2(tmp_path: Path):
    assert cli.main(["--input", str(tmp_path / "missing.txt"), "--output-dir", str(tmp_path)]) == 2


def test_stdin_and_pdf_format(tmp_path: Path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
    assert cli.main(["--format", "pdf", "--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / "text-editor-export.pdf").read_bytes().startswith(b"%PDF")


def test_cli_flags_override_style_json(tmp_path: Path):
    cfg = tmp_path / "style.json"
    cfg.write_text(json.dumps({"fontSize": 20, "align": "center", "bold": True}), encoding="utf-8")
    args = cli.parse_args(["--text", "a", "--style-json", str(cfg), "--align", "right"])
    state = cli.build_state_from_args(args)
    assert state.style.font_size == 20
    assert state.style.align == "right"
    assert state.style.bold
    assert not state.style.italic


def test_text_escape_newlines_opt_in():
    args = cli.parse_args(["--text", "a\\nb", "--escape-newlines", "--title", " t "])
    state = cli.build_state_from_args(args)
    assert state.text == "a\nb"
    assert state.title == " t "


def test_text_backslash_kept_by_default():
    state = cli.build_state_from_args(cli.parse_args(["--text", "C:\\new"]))
    assert state.text == "C:\\new"
    assert "\n" not in state.text


def test_style_json_string_flag_rejected(tmp_path: Path):
    cfg = tmp_path / "style.json"
    cfg.write_text(json.dumps({"underline": "false"}), encoding="utf-8")
    out_dir = tmp_path / "out"
    assert cli.main(["--text", "a", "--style-json", str(cfg), "--output-dir", str(out_dir)]) == 2
    assert not out_dir.exists()
