"""
文件路径：textpng/components/fonts.py

说明：字体描述（族、字号、粗细、倾斜）与字体文件探测。
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..variables import (
    CONST_CANDIDATE_SANS_FONT_PATHS,
    CONST_FONT_FAMILY,
    CONST_REPORTLAB_FONTS,
    PATH_FONTS_DIR,
)


@dataclass(frozen=True)
class FontDescriptor:
    """字体描述，等价于画布上的组合字体字符串。

    属性：
        size: 字号（px）。
        bold: 是否加粗。
        italic: 是否倾斜。
        family: 字体族列表字符串。
    """

    size: float
    bold: bool = False
    italic: bool = False
    family: str = CONST_FONT_FAMILY

    def to_font_string(self) -> str:
        """组合字体字符串，例如 "italic bold 11px system-ui, -apple-system, sans-serif"。"""
        size = int(self.size) if float(self.size).is_integer() else self.size
        return f"{'italic ' if self.italic else ''}{'bold ' if self.bold else ''}{size}px {self.family}"


def font_variant(bold: bool, italic: bool) -> str:
    """返回字形变体键：regular / bold / italic / bold_italic。"""
    if bold and italic:
        return "bold_italic"
    if bold:
        return "bold"
    if italic:
        return "italic"
    return "regular"


def _matches_variant(path: Path, variant: str) -> bool:
    # 依据文件名判断字形：含 Bold 视为粗体，含 Italic/Oblique 视为斜体
    stem = path.stem.lower()
    is_bold = "bold" in stem
    is_italic = "italic" in stem or "oblique" in stem
    return font_variant(is_bold, is_italic) == variant


def probe_available_fonts(bold: bool = False, italic: bool = False) -> List[Path]:
    """探测可用的字体文件（TTF/OTF），按优先级返回去重列表。

    优先级：
    1) `config/fonts/` 目录下文件名与字形匹配的 .ttf/.otf 文件（按文件名排序）
    2) `CONST_CANDIDATE_SANS_FONT_PATHS` 中对应字形且存在的文件

    返回：
        `Path` 列表，按优先级与发现顺序排列，已去重。
    """
    variant = font_variant(bold, italic)
    seen: set[str] = set()
    results: List[Path] = []

    def _add(p: Path) -> None:
        key = str(p.resolve())
        if key not in seen and p.exists() and p.suffix.lower() in {".ttf", ".otf"}:
            seen.add(key)
            results.append(p)

    # 1) config/fonts 目录
    if PATH_FONTS_DIR.exists():
        for p in sorted(list(PATH_FONTS_DIR.glob("*.ttf")) + list(PATH_FONTS_DIR.glob("*.otf"))):
            if _matches_variant(p, variant):
                _add(p)

    # 2) 预置候选
    for s in CONST_CANDIDATE_SANS_FONT_PATHS.get(variant, ()):
        _add(Path(s))

    return results


def pick_font_file(bold: bool = False, italic: bool = False) -> Optional[Path]:
    """选择首个可用的字体文件，若无可用则返回 None。"""
    fonts = probe_available_fonts(bold, italic)
    return fonts[0] if fonts else None


def reportlab_font_name(bold: bool = False, italic: bool = False) -> str:
    """返回 ReportLab 内置 Helvetica 族中对应字形的字体名。"""
    return CONST_REPORTLAB_FONTS[(bool(bold), bool(italic))]


__all__ = [
    "FontDescriptor",
    "font_variant",
    "probe_available_fonts",
    "pick_font_file",
    "reportlab_font_name",
]
