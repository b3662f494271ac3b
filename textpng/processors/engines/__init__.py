"""
文件路径：textpng/processors/engines/__init__.py

说明：绘制引擎包：定义画布能力接口 `DrawingSurface`，并按导出格式创建具体画布。
- `raster.py`：Pillow 光栅画布（PNG）
- `reportlab.py`：ReportLab 矢量画布（PDF）
"""

from __future__ import annotations

from typing import Optional, Protocol

from ...components import ErrorHandler, FontDescriptor
from ...variables import CONST_FORMAT_PDF, CONST_FORMAT_PNG, CONST_OUTPUT_FORMATS, ERR_FORMAT_UNSUPPORTED
from .raster import RasterSurface
from .reportlab import PdfSurface


class DrawingSurface(Protocol):
    """排版引擎所需的最小画布能力：测量、绘制文字、描线、编码。

    坐标均为逻辑坐标（左上原点，文字以字形框顶部为锚点）。
    """

    suffix: str

    def set_font(self, font: FontDescriptor) -> None: ...

    def measure_text(self, text: str) -> float: ...

    def resize(self, width: float, height: float) -> None: ...

    def set_fill(self, color: str) -> None: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: str, width: float = 1.0) -> None: ...

    def encode(self) -> Optional[bytes]: ...


def create_surface(fmt: str = CONST_FORMAT_PNG, scale: Optional[float] = None) -> DrawingSurface:
    """按导出格式创建画布。

    异常：
        ValueError: 不支持的格式。
    """
    key = str(fmt).strip().lower()
    if key == CONST_FORMAT_PNG:
        return RasterSurface(scale=scale)
    if key == CONST_FORMAT_PDF:
        return PdfSurface(scale=scale)
    raise ValueError(
        ErrorHandler.format_error(ERR_FORMAT_UNSUPPORTED, f"不支持的导出格式：{fmt}（可选：{', '.join(CONST_OUTPUT_FORMATS)}）")
    )


__all__ = ["DrawingSurface", "RasterSurface", "PdfSurface", "create_surface"]
