"""
文件路径：textpng/processors/engines/reportlab.py

说明：ReportLab 矢量画布：以相同排版生成单页 PDF，页面尺寸等于逻辑输出尺寸。
"""

from __future__ import annotations

from io import BytesIO
from typing import Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from ...components import FontDescriptor, get_logger, reportlab_font_name, to_unit_rgb


logger = get_logger(__name__)


class PdfSurface:
    """基于 ReportLab 的绘制画布。

    ReportLab 原点在左下角；本画布对外使用左上原点、文字顶部锚定的逻辑坐标，
    绘制时换算为 PDF 基线坐标。矢量输出与设备像素比无关，`scale` 仅作记录。
    """

    suffix = ".pdf"

    def __init__(self, scale: Optional[float] = None) -> None:
        self.scale = float(scale) if scale and scale > 0 else 1.0
        self.font_info: Optional[str] = None
        self._buffer: Optional[BytesIO] = None
        self._canvas: Optional[canvas.Canvas] = None
        self._page_height = 0.0
        self._font_name: Optional[str] = None
        self._font_size = 0.0

    def set_font(self, font: FontDescriptor) -> None:
        self._font_name = reportlab_font_name(font.bold, font.italic)
        self._font_size = float(font.size)
        self.font_info = self._font_name
        if self._canvas is not None:
            self._canvas.setFont(self._font_name, self._font_size)

    def measure_text(self, text: str) -> float:
        if self._font_name is None:
            raise RuntimeError("测量前需要先调用 set_font")
        return float(pdfmetrics.stringWidth(text, self._font_name, self._font_size))

    def resize(self, width: float, height: float) -> None:
        self._buffer = BytesIO()
        # invariant=1：固定创建时间与文档 ID，保证重复导出字节一致
        self._canvas = canvas.Canvas(self._buffer, pagesize=(width, height), invariant=1)
        self._page_height = float(height)
        self._font_name = None
        self._font_size = 0.0

    def set_fill(self, color: str) -> None:
        if self._canvas is None:
            raise RuntimeError("绘制前需要先调用 resize")
        self._canvas.setFillColorRGB(*to_unit_rgb(color))

    def draw_text(self, text: str, x: float, y: float) -> None:
        if self._canvas is None or self._font_name is None:
            raise RuntimeError("绘制前需要先调用 resize 与 set_font")
        ascent = pdfmetrics.getAscent(self._font_name, self._font_size)
        self._canvas.drawString(x, self._page_height - y - ascent, text)

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: str, width: float = 1.0) -> None:
        if self._canvas is None:
            raise RuntimeError("绘制前需要先调用 resize")
        self._canvas.setStrokeColorRGB(*to_unit_rgb(color))
        self._canvas.setLineWidth(width)
        self._canvas.line(x0, self._page_height - y0, x1, self._page_height - y1)

    def encode(self) -> Optional[bytes]:
        """结束页面并返回 PDF 字节；未初始化时返回 None。"""
        if self._canvas is None or self._buffer is None:
            return None
        try:
            self._canvas.showPage()
            self._canvas.save()
        except (OSError, ValueError) as exc:
            logger.warning("PDF 编码失败：%s", exc)
            return None
        finally:
            self._canvas = None
        return self._buffer.getvalue()


__all__ = ["PdfSurface"]
