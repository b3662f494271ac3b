"""
文件路径：textpng/processors/engines/raster.py

说明：Pillow 光栅画布：按设备像素比放大绘制，输出透明背景 PNG。
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ...components import FontDescriptor, get_logger, parse_color, pick_font_file
from ...variables import CONST_DEVICE_SCALE_DEFAULT
from ..layout import device_size


logger = get_logger(__name__)


def load_font(descriptor: FontDescriptor, scale: float = 1.0):
    """按字体描述加载 Pillow 字体，字号乘以设备像素比。

    返回 (font, font_info)；找不到 TrueType 字体时回退 Pillow 内置字体，font_info 为 None。
    """
    size = float(descriptor.size) * scale
    font_file: Optional[Path] = pick_font_file(descriptor.bold, descriptor.italic)
    if font_file is None and (descriptor.bold or descriptor.italic):
        # 缺少对应字形时退回常规字形
        font_file = pick_font_file(False, False)
        if font_file is not None:
            logger.warning("未找到字形 %s 的字体文件，使用常规字形：%s", descriptor.to_font_string(), font_file)
    if font_file is not None:
        try:
            return ImageFont.truetype(str(font_file), size), str(font_file)
        except OSError as exc:
            logger.warning("字体加载失败：%s，原因：%s，将使用内置字体", font_file, exc)
    return ImageFont.load_default(size=size), None


class RasterSurface:
    """基于 Pillow 的绘制画布。

    - 所有入参均为逻辑坐标，绘制时乘以 `scale`；
    - 文本宽度始终按逻辑字号测量，设备像素比只影响位图清晰度；
    - `resize` 会清空内容并重置字体与填充色（与浏览器画布一致），
      因此必须先调整尺寸，再设置绘制参数。
    """

    suffix = ".png"

    def __init__(self, scale: Optional[float] = None) -> None:
        self.scale = float(scale) if scale and scale > 0 else CONST_DEVICE_SCALE_DEFAULT
        self.font_info: Optional[str] = None
        self._image: Optional[Image.Image] = None
        self._draw: Optional[ImageDraw.ImageDraw] = None
        # 测量用逻辑字号字体，绘制用设备字号字体；两者分开，换行结果与 scale 无关
        self._measure_font = None
        self._font = None
        self._fill: Tuple[int, int, int, int] = (0, 0, 0, 255)

    @property
    def image(self) -> Optional[Image.Image]:
        return self._image

    def set_font(self, font: FontDescriptor) -> None:
        self._measure_font, self.font_info = load_font(font, 1.0)
        if self.scale == 1.0:
            self._font = self._measure_font
        else:
            self._font, _ = load_font(font, self.scale)

    def measure_text(self, text: str) -> float:
        """返回文本的逻辑宽度（按逻辑字号测量，不受 scale 影响）。"""
        if self._measure_font is None:
            raise RuntimeError("测量前需要先调用 set_font")
        return float(self._measure_font.getlength(text))

    def resize(self, width: float, height: float) -> None:
        """按逻辑尺寸重建位图（透明背景）。"""
        self._image = Image.new("RGBA", device_size(width, height, self.scale), (0, 0, 0, 0))
        self._draw = ImageDraw.Draw(self._image)
        self._measure_font = None
        self._font = None
        self._fill = (0, 0, 0, 255)

    def set_fill(self, color: str) -> None:
        r, g, b = parse_color(color)
        self._fill = (r, g, b, 255)

    def draw_text(self, text: str, x: float, y: float) -> None:
        """以字形框顶部为锚点绘制文本。"""
        if self._draw is None or self._font is None:
            raise RuntimeError("绘制前需要先调用 resize 与 set_font")
        self._draw.text((x * self.scale, y * self.scale), text, font=self._font, fill=self._fill)

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: str, width: float = 1.0) -> None:
        if self._draw is None:
            raise RuntimeError("绘制前需要先调用 resize")
        r, g, b = parse_color(color)
        self._draw.line(
            [(x0 * self.scale, y0 * self.scale), (x1 * self.scale, y1 * self.scale)],
            fill=(r, g, b, 255),
            width=max(1, int(round(width * self.scale))),
        )

    def encode(self) -> Optional[bytes]:
        """编码为 PNG；画布为空或编码失败时返回 None。"""
        if self._image is None:
            return None
        buf = BytesIO()
        try:
            self._image.save(buf, format="PNG")
        except (OSError, ValueError) as exc:
            logger.warning("PNG 编码失败：%s", exc)
            return None
        return buf.getvalue()


__all__ = ["RasterSurface", "load_font"]
