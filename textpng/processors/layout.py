"""
文件路径：textpng/processors/layout.py

说明：排版相关函数：按宽度贪心换行、总高度计算、逐行水平定位（含两端对齐）。

- 所有坐标均为逻辑坐标，与设备像素比无关；
- 宽度度量通过 `measure` 回调注入，由绘制引擎（Pillow / ReportLab）或测试替身提供。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Tuple

from ..components import split_document
from ..variables import (
    CONST_ALIGN_CENTER,
    CONST_ALIGN_JUSTIFY,
    CONST_ALIGN_RIGHT,
    CONST_FIXED_WIDTH,
    CONST_LINE_HEIGHT_RATIO,
    CONST_PADDING,
)

Measure = Callable[[str], float]


@dataclass
class TextRun:
    """一段需要绘制的文本：整行或（两端对齐时的）单个单词。"""

    text: str
    x: float
    width: float


@dataclass
class PlacedLine:
    """已定位的行。

    属性：
        index: 行号（0 基）。
        y: 行顶的纵坐标（文字以顶部为锚点）。
        runs: 该行需要绘制的文本段。
        justified: 是否按两端对齐拉伸。
    """

    index: int
    y: float
    runs: List[TextRun] = field(default_factory=list)
    justified: bool = False


@dataclass
class LayoutResult:
    """排版结果：换行后的行列表与派生高度。"""

    lines: List[str]
    font_size: float
    line_height: float
    text_height: float

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def logical_size(self, fixed_width: float = CONST_FIXED_WIDTH, padding: float = CONST_PADDING) -> Tuple[float, float]:
        """逻辑尺寸：(固定宽度, 文本高度 + 2 * 内边距)。"""
        return float(fixed_width), self.text_height + padding * 2

    def surface_size(
        self,
        scale: float = 1.0,
        fixed_width: float = CONST_FIXED_WIDTH,
        padding: float = CONST_PADDING,
    ) -> Tuple[int, int]:
        """位图像素尺寸：逻辑尺寸乘以设备像素比后向上取整。"""
        w, h = self.logical_size(fixed_width, padding)
        return device_size(w, h, scale)


def device_size(width: float, height: float, scale: float) -> Tuple[int, int]:
    """逻辑尺寸 -> 设备像素尺寸（向上取整）。"""
    # round 去除浮点误差，避免 600.0000001 被取整为 601
    return int(math.ceil(round(width * scale, 6))), int(math.ceil(round(height * scale, 6)))


def line_height(font_size: float) -> float:
    """行高 = 字号 * 1.5。"""
    return float(font_size) * CONST_LINE_HEIGHT_RATIO


def compute_text_height(line_count: int, font_size: float) -> float:
    """文本总高度：去掉最后一行下方多余的行间距。

    height = N * lineHeight - (lineHeight - fontSize)
    """
    if line_count <= 0:
        return 0.0
    lh = line_height(font_size)
    return line_count * lh - (lh - float(font_size))


def wrap_text_lines(raw_lines: Iterable[str], measure: Measure, max_width: float) -> List[str]:
    """按最大行宽将文本贪心换行。

    - 仅含空白的输入行整体跳过，不产生空行；
    - 行内按单个空格拆词，逐词拼接候选行，宽度 <= max_width 时继续扩展；
    - 溢出时：已有候选行则输出并以溢出词开始新行；若溢出词是行首词，
      直接单独成行（不再测量、不拆分）；
    - 源行结束时输出剩余候选行。
    """
    wrapped: List[str] = []
    for raw in raw_lines:
        if raw.strip() == "":
            continue
        current = ""
        for word in raw.split(" "):
            trial = f"{current} {word}" if current else word
            if measure(trial) <= max_width:
                current = trial
            elif current:
                wrapped.append(current)
                current = word
            else:
                wrapped.append(word)
        if current:
            wrapped.append(current)
    return wrapped


def _aligned_x(align: str, width: float, fixed_width: float, padding: float) -> float:
    if align == CONST_ALIGN_CENTER:
        return (fixed_width - width) / 2
    if align == CONST_ALIGN_RIGHT:
        return fixed_width - width - padding
    # left 以及不参与拉伸的 justify 行
    return float(padding)


def _justify_runs(line: str, measure: Measure, max_width: float, padding: float) -> List[TextRun]:
    words = line.strip().split()
    widths = [measure(w) for w in words]
    space_width = (max_width - sum(widths)) / (len(words) - 1)
    runs: List[TextRun] = []
    x = float(padding)
    for word, w in zip(words, widths):
        runs.append(TextRun(text=word, x=x, width=w))
        x += w + space_width
    return runs


def place_lines(
    lines: List[str],
    align: str,
    font_size: float,
    measure: Measure,
    fixed_width: float = CONST_FIXED_WIDTH,
    padding: float = CONST_PADDING,
) -> List[PlacedLine]:
    """计算每行的纵向位置与水平放置。

    - y = padding + index * lineHeight；
    - left: x = padding；right: x = fixedWidth - w - padding；center: x = (fixedWidth - w) / 2；
    - justify：除全文最后一行与单词行外，按词拉伸至 maxWidth；不拉伸的行按 left 放置。
    """
    max_width = fixed_width - padding * 2
    lh = line_height(font_size)
    last_index = len(lines) - 1
    placed: List[PlacedLine] = []
    for index, line in enumerate(lines):
        y = padding + index * lh
        if align == CONST_ALIGN_JUSTIFY and line.strip() and index < last_index:
            if len(line.strip().split()) > 1:
                placed.append(PlacedLine(index, y, _justify_runs(line, measure, max_width, padding), justified=True))
                continue
        width = measure(line)
        x = _aligned_x(align, width, fixed_width, padding)
        placed.append(PlacedLine(index, y, [TextRun(text=line, x=x, width=width)]))
    return placed


def build_layout(
    text: str,
    font_size: float,
    measure: Measure,
    fixed_width: float = CONST_FIXED_WIDTH,
    padding: float = CONST_PADDING,
) -> LayoutResult:
    """文档 -> 换行 -> 高度。空文档返回空结果（调用方需据此短路导出）。"""
    raw_lines = split_document(text)
    lines = wrap_text_lines(raw_lines, measure, fixed_width - padding * 2)
    return LayoutResult(
        lines=lines,
        font_size=float(font_size),
        line_height=line_height(font_size),
        text_height=compute_text_height(len(lines), font_size),
    )


__all__ = [
    "Measure",
    "TextRun",
    "PlacedLine",
    "LayoutResult",
    "device_size",
    "line_height",
    "compute_text_height",
    "wrap_text_lines",
    "place_lines",
    "build_layout",
]
