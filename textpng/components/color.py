"""
文件路径：textpng/components/color.py

说明：颜色字符串解析，供样式校验与各绘制引擎使用。
"""

from __future__ import annotations

from typing import Tuple

from PIL import ImageColor


def parse_color(color: str) -> Tuple[int, int, int]:
    """将颜色字符串解析为 (R, G, B)。

    支持 "#rgb"、"#rrggbb"、"rgb(r, g, b)" 以及 CSS 颜色名。

    异常：
        ValueError: 颜色字符串无法识别。
    """
    rgb = ImageColor.getrgb(str(color).strip())
    return rgb[0], rgb[1], rgb[2]


def to_unit_rgb(color: str) -> Tuple[float, float, float]:
    """返回 0~1 范围的 RGB，供 ReportLab 使用。"""
    return tuple(v / 255.0 for v in parse_color(color))  # type: ignore[return-value]


__all__ = ["parse_color", "to_unit_rgb"]
