"""
文件路径：textpng/processors/__init__.py

说明：排版与绘制处理器：
  - layout.py（换行、高度、水平定位）
  - render.py（按排版结果在画布上绘制文字与下划线）
  - engines/{raster.py, reportlab.py}（两种画布实现）
"""

from .layout import (
    LayoutResult,
    PlacedLine,
    TextRun,
    build_layout,
    compute_text_height,
    device_size,
    line_height,
    place_lines,
    wrap_text_lines,
)
from .render import render_lines

__all__ = [
    "LayoutResult",
    "PlacedLine",
    "TextRun",
    "build_layout",
    "compute_text_height",
    "device_size",
    "line_height",
    "place_lines",
    "wrap_text_lines",
    "render_lines",
]
