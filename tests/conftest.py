"""
pytest 全局配置：
- 将项目根目录加入 sys.path，确保 `from textpng...` 与 `import main` 可被导入；
- 提供确定性的画布替身（每个字符固定宽度），使排版断言与系统字体无关。
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


class FakeSurface:
    """记录所有调用的画布替身：每个字符宽度固定为 char_width。"""

    suffix = ".png"

    def __init__(self, char_width: float = 6.0, encoded: bytes | None = b"fake-image-bytes") -> None:
        self.char_width = char_width
        self.encoded = encoded
        self.scale = 1.0
        self.font = None
        self.fill = None
        self.size = None
        self.calls: list[tuple] = []

    def set_font(self, font) -> None:
        self.font = font
        self.calls.append(("set_font", font.to_font_string()))

    def measure_text(self, text: str) -> float:
        return len(text) * self.char_width

    def resize(self, width: float, height: float) -> None:
        # 与浏览器画布一致：调整尺寸会重置绘制参数
        self.size = (width, height)
        self.font = None
        self.fill = None
        self.calls.append(("resize", width, height))

    def set_fill(self, color: str) -> None:
        self.fill = color
        self.calls.append(("set_fill", color))

    def draw_text(self, text: str, x: float, y: float) -> None:
        assert self.font is not None, "绘制前必须在 resize 之后重新设置字体"
        self.calls.append(("draw_text", text, x, y))

    def stroke_line(self, x0, y0, x1, y1, color, width=1.0) -> None:
        self.calls.append(("stroke_line", x0, y0, x1, y1, color, width))

    def encode(self):
        self.calls.append(("encode",))
        return self.encoded

    def named(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def fake_surface_cls():
    return FakeSurface


@pytest.fixture
def fake_surface() -> FakeSurface:
    return FakeSurface()


def char_measure(text: str) -> float:
    return len(text) * 6.0


@pytest.fixture
def measure():
    """与 FakeSurface 默认值一致的度量函数：每字符 6 个单位。"""
    return char_measure
