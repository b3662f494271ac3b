"""
文件路径：main.py

命令行入口：
- 功能：读取文本（参数 / 文件 / 标准输入），按样式排版，导出为固定宽度 PNG（或 PDF）到 output 目录。
- 依赖：`textpng/exporter.py`、`textpng/style.py`、`textpng/data_handler.py`、`textpng/variables.py`。

快速使用示例：
    # 1) 直接导出一段文字（--escape-newlines 使 \\n 表示换行）
    python main.py --text "hello\\nworld" --escape-newlines --title greeting

    # 2) 从文件读取，两端对齐、加粗、放大字号，2 倍清晰度
    python main.py --input notes.txt --align justify --bold --font-size 14 --scale 2

    # 3) 使用样式预设 JSON，导出为 PDF
    python main.py --input notes.txt --style-json config/style.json --format pdf

运行说明：
- 未提供 --text 与 --input 时从标准输入读取；
- 样式优先级：命令行参数 > --style-json > 默认样式；
- 文档全为空行时不生成任何文件（正常结束）。

变量引用说明（来自 textpng/variables.py）：
- CONST_ALIGN_CHOICES, CONST_OUTPUT_FORMATS, CONST_FORMAT_PNG, PATH_OUTPUT_DIR

组件调用说明：
- get_logger, EditorState.apply_overrides/toggle_style/snapshot, TextExporter.export
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from textpng.components import get_logger
from textpng.data_handler import load_style_config, read_document
from textpng.exporter import TextExporter
from textpng.style import EditorState
from textpng.variables import (
    CONST_ALIGN_CHOICES,
    CONST_FORMAT_PNG,
    CONST_OUTPUT_FORMATS,
    PATH_OUTPUT_DIR,
)


logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="文本导出工具（按样式排版为固定宽度图片）")
    parser.add_argument("--text", type=str, default=None, help="待导出的文本（按原样使用）")
    parser.add_argument(
        "--escape-newlines",
        dest="escape_newlines",
        action="store_true",
        help="将 --text 中的字面量 \\n 视为换行（默认关闭，C:\\new 之类的文本保持原样）",
    )
    parser.add_argument("--input", type=Path, default=None, help="从文本文件读取文档")
    parser.add_argument("--title", type=str, default="", help="图片标题，作为输出文件名（可省略）")
    parser.add_argument("--bold", action="store_true", default=None, help="加粗")
    parser.add_argument("--italic", action="store_true", default=None, help="倾斜")
    parser.add_argument("--underline", action="store_true", default=None, help="下划线")
    parser.add_argument("--font-size", dest="font_size", type=float, default=None, help="字号（8~72，超出自动钳制）")
    parser.add_argument("--color", type=str, default=None, help="文字颜色，如 '#737373'")
    parser.add_argument("--align", type=str, choices=list(CONST_ALIGN_CHOICES), default=None, help="对齐方式")
    parser.add_argument("--scale", type=float, default=None, help="设备像素比（仅影响清晰度），默认 1")
    parser.add_argument("--format", dest="fmt", type=str, choices=list(CONST_OUTPUT_FORMATS), default=CONST_FORMAT_PNG, help="导出格式：png/pdf")
    parser.add_argument("--output-dir", dest="output_dir", type=Path, default=None, help=f"输出目录（默认 {PATH_OUTPUT_DIR}）")
    parser.add_argument("--style-json", dest="style_json", type=Path, default=None, help="样式预设 JSON 文件")
    return parser.parse_args(argv)


def build_state_from_args(args: argparse.Namespace) -> EditorState:
    """依据命令行参数构建编辑器状态（文本、标题、样式）。"""
    if args.text is not None:
        text = args.text.replace("\\n", "\n") if args.escape_newlines else args.text
    elif args.input is not None:
        text = read_document(args.input)
    else:
        text = sys.stdin.read()

    state = EditorState(text=text, title=args.title or "")

    if args.style_json is not None:
        state.apply_overrides(load_style_config(args.style_json))

    overrides: Dict[str, Any] = {
        "bold": args.bold,
        "italic": args.italic,
        "underline": args.underline,
        "font_size": args.font_size,
        "color": args.color,
        "align": args.align,
    }
    state.apply_overrides(overrides)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        state = build_state_from_args(args)
    except (ValueError, RuntimeError, FileNotFoundError) as exc:
        logger.error("参数错误：%s", exc)
        print(f"参数错误：{exc}", file=sys.stderr)
        return 2

    exporter = TextExporter(fmt=args.fmt, scale=args.scale, output_dir=args.output_dir)
    style = state.snapshot()
    logger.info("导出样式：%s，颜色 %s，对齐 %s", style.font().to_font_string(), style.color, style.align)
    out = exporter.export(state.text, style, title=state.title)
    if out is None:
        print("没有可导出的内容，未生成文件")
        return 0
    print(f"导出完成，保存至：{out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
