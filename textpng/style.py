"""
文件路径：textpng/style.py

模块职责：
- `TextStyle`：一次导出所使用的不可变样式快照（粗体、斜体、下划线、字号、颜色、对齐）。
- `EditorState`：编辑器全局状态（文本、标题、当前样式），仅通过显式操作修改。

说明：
- 排版与绘制函数只接收 `TextStyle` 快照，不读取 `EditorState`，保证导出过程是输入的纯函数。
- 字号在修改时统一钳制到 [CONST_FONT_SIZE_MIN, CONST_FONT_SIZE_MAX]。
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .components import ErrorHandler, FontDescriptor, get_logger, parse_color
from .variables import (
    CONST_ALIGN_CHOICES,
    CONST_FONT_SIZE_MAX,
    CONST_FONT_SIZE_MIN,
    ERR_STYLE_INVALID,
    STYLE_ALIGN_DEFAULT,
    STYLE_FONT_SIZE_DEFAULT,
    STYLE_TEXT_COLOR_DEFAULT,
)


logger = get_logger(__name__)

TOGGLE_PROPERTIES = ("bold", "italic", "underline")


def clamp_font_size(size: float) -> int:
    """将字号钳制到允许范围内并取整。"""
    return int(max(CONST_FONT_SIZE_MIN, min(CONST_FONT_SIZE_MAX, round(float(size)))))


def validate_align(align: str) -> str:
    """校验对齐方式，返回规范化（小写）值。"""
    value = str(align).strip().lower()
    if value not in CONST_ALIGN_CHOICES:
        raise ValueError(
            ErrorHandler.format_error(ERR_STYLE_INVALID, f"不支持的对齐方式：{align}（可选：{', '.join(CONST_ALIGN_CHOICES)}）")
        )
    return value


def validate_color(color: str) -> str:
    """校验颜色字符串，返回去除首尾空白后的原值。"""
    value = str(color).strip()
    try:
        parse_color(value)
    except ValueError as exc:
        raise ValueError(ErrorHandler.format_error(ERR_STYLE_INVALID, f"无法识别的颜色：{color}")) from exc
    return value


@dataclass(frozen=True)
class TextStyle:
    """样式快照（一次导出期间不可变）。

    属性：
        bold, italic, underline: 字形与装饰开关。
        font_size: 字号（px），范围 [8, 72]。
        color: 颜色字符串，如 "#737373"。
        align: left / center / right / justify。
    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    font_size: int = STYLE_FONT_SIZE_DEFAULT
    color: str = STYLE_TEXT_COLOR_DEFAULT
    align: str = STYLE_ALIGN_DEFAULT

    def __post_init__(self) -> None:
        object.__setattr__(self, "font_size", clamp_font_size(self.font_size))
        object.__setattr__(self, "align", validate_align(self.align))
        object.__setattr__(self, "color", validate_color(self.color))

    def font(self) -> FontDescriptor:
        """返回该样式对应的字体描述。"""
        return FontDescriptor(size=self.font_size, bold=self.bold, italic=self.italic)


class EditorState:
    """编辑器状态：当前文本、标题与样式。

    用法示例：
        state = EditorState(text="hello world")
        state.toggle_style("bold")
        state.change_font_size(+1)
        style = state.snapshot()
    """

    def __init__(self, text: str = "", title: str = "", style: Optional[TextStyle] = None) -> None:
        self.text = text
        self.title = title
        self._style = style or TextStyle()

    @property
    def style(self) -> TextStyle:
        return self._style

    def snapshot(self) -> TextStyle:
        """返回当前样式快照，供单次导出使用。"""
        return self._style

    def toggle_style(self, prop: str) -> TextStyle:
        """切换 bold / italic / underline。"""
        if prop not in TOGGLE_PROPERTIES:
            raise ValueError(ErrorHandler.format_error(ERR_STYLE_INVALID, f"不可切换的样式属性：{prop}"))
        self._style = replace(self._style, **{prop: not getattr(self._style, prop)})
        return self._style

    def set_alignment(self, align: str) -> TextStyle:
        self._style = replace(self._style, align=validate_align(align))
        return self._style

    def change_font_size(self, delta: int) -> TextStyle:
        """按增量调整字号，结果钳制到 [8, 72]。"""
        self._style = replace(self._style, font_size=clamp_font_size(self._style.font_size + int(delta)))
        return self._style

    def set_font_size(self, size: float) -> TextStyle:
        """设置绝对字号，结果钳制到 [8, 72]。"""
        clamped = clamp_font_size(size)
        if clamped != size:
            logger.info("字号 %s 超出范围，已钳制为 %s", size, clamped)
        self._style = replace(self._style, font_size=clamped)
        return self._style

    def change_color(self, color: str) -> TextStyle:
        self._style = replace(self._style, color=validate_color(color))
        return self._style

    def apply_overrides(self, overrides: Mapping[str, Any]) -> TextStyle:
        """按映射批量应用样式（来自样式 JSON 或命令行）。

        支持键：bold / italic / underline / font_size / color / align。
        布尔键直接赋值（非切换），且必须是 true/false；"false" 之类的字符串会被拒绝。

        异常：
            ValueError: 布尔键的取值不是布尔类型，或其他键校验失败。
        """
        for key in TOGGLE_PROPERTIES:
            value = overrides.get(key)
            if value is None:
                continue
            if not isinstance(value, bool):
                raise ValueError(
                    ErrorHandler.format_error(ERR_STYLE_INVALID, f"样式属性 {key} 需要布尔值，实际为：{value!r}")
                )
            self._style = replace(self._style, **{key: value})
        if overrides.get("font_size") is not None:
            self.set_font_size(overrides["font_size"])
        if overrides.get("color") is not None:
            self.change_color(overrides["color"])
        if overrides.get("align") is not None:
            self.set_alignment(overrides["align"])
        return self._style


__all__ = [
    "TextStyle",
    "EditorState",
    "clamp_font_size",
    "validate_align",
    "validate_color",
    "TOGGLE_PROPERTIES",
]
