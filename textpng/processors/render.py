"""
文件路径：textpng/processors/render.py

说明：将换行结果绘制到画布：设置字体与填充色，逐行/逐词绘制文字，按需描绘下划线。

调用前画布必须已按排版高度调整尺寸（调整尺寸会清空内容并重置绘制参数）。
绘制过程是一次连续的同步调用，中途不会让出控制权。
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from ..variables import (
    CONST_FIXED_WIDTH,
    CONST_PADDING,
    CONST_UNDERLINE_OFFSET,
    CONST_UNDERLINE_WIDTH,
)
from .layout import PlacedLine, place_lines

if TYPE_CHECKING:
    from ..style import TextStyle
    from .engines import DrawingSurface


def render_lines(
    lines: List[str],
    style: "TextStyle",
    surface: "DrawingSurface",
    fixed_width: float = CONST_FIXED_WIDTH,
    padding: float = CONST_PADDING,
) -> List[PlacedLine]:
    """在画布上绘制已换行的文本，返回实际使用的放置结果（便于日志与测试）。"""
    surface.set_font(style.font())
    surface.set_fill(style.color)

    placed = place_lines(
        lines,
        style.align,
        style.font_size,
        surface.measure_text,
        fixed_width=fixed_width,
        padding=padding,
    )
    for line in placed:
        underline_y = line.y + style.font_size + CONST_UNDERLINE_OFFSET
        for run in line.runs:
            surface.draw_text(run.text, run.x, line.y)
            if style.underline:
                surface.stroke_line(
                    run.x,
                    underline_y,
                    run.x + run.width,
                    underline_y,
                    style.color,
                    CONST_UNDERLINE_WIDTH,
                )
    return placed


__all__ = ["render_lines"]
