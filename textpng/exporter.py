"""
文件路径：textpng/exporter.py

模块职责：
- 串联导出流程：测量 -> 换行 -> 计算高度 -> 调整画布尺寸 -> 绘制 -> 编码 -> 保存。
- 每次导出均基于传入的样式快照重新计算，结果不缓存；相同输入重复导出得到相同字节。

静默空操作（记录日志但不抛异常）：
- 画布不可用（画布工厂返回 None）；
- 有效文档为空（全部为空白行）；
- 编码失败（画布返回空数据）。

变量引用说明（来自 textpng/variables.py）：
- CONST_FIXED_WIDTH, CONST_PADDING, CONST_FORMAT_PNG, STATUS_*

组件调用说明：
- get_logger, FileHandler.export_output_path / write_bytes
- processors.build_layout / render_lines, processors.engines.create_surface
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from .components import FileHandler, get_logger
from .processors import LayoutResult, build_layout, render_lines
from .processors.engines import DrawingSurface, create_surface
from .style import TextStyle
from .variables import (
    CONST_FIXED_WIDTH,
    CONST_FORMAT_PNG,
    CONST_PADDING,
    ERR_ENCODE_FAILED,
    ERR_SURFACE_UNAVAILABLE,
    STATUS_SKIPPED,
    STATUS_SUCCESS,
    STATUS_WARNING,
)


logger = get_logger(__name__)

SurfaceFactory = Callable[[], Optional[DrawingSurface]]
Saver = Callable[[Path, bytes], object]


class TextExporter:
    """文本导出器：将文档按样式排版并导出为图片文件。

    用法示例：
        exporter = TextExporter(scale=2.0)
        path = exporter.export("hello world", TextStyle(bold=True), title="greeting")

    参数：
        fmt: 导出格式（png / pdf），决定默认画布与文件后缀。
        scale: 设备像素比，仅影响位图清晰度。
        surface_factory: 自定义画布工厂；返回 None 视为画布尚未就绪。
        saver: 文件保存回调 (path, data)；默认写入磁盘。
        output_dir: 输出目录；None 使用默认 output/。
    """

    def __init__(
        self,
        fmt: str = CONST_FORMAT_PNG,
        scale: Optional[float] = None,
        surface_factory: Optional[SurfaceFactory] = None,
        saver: Optional[Saver] = None,
        output_dir: Optional[Path] = None,
    ) -> None:
        self.fmt = fmt
        self.scale = scale
        self._surface_factory: SurfaceFactory = surface_factory or (lambda: create_surface(fmt, scale))
        self._saver: Saver = saver or FileHandler.write_bytes
        self.output_dir = output_dir
        self.fixed_width: float = CONST_FIXED_WIDTH
        self.padding: float = CONST_PADDING
        # 最近一次导出统计：status/lines/text_height/surface_size/format/font_info
        self.last_export_stats: Optional[dict] = None
        self.last_layout: Optional[LayoutResult] = None
        # 文件后缀取自实际使用的画布
        self.last_suffix: str = f".{str(fmt).strip().lower()}"

    def _record(self, status: str, **extra: object) -> None:
        stats = {"status": status, "format": self.fmt}
        stats.update(extra)
        self.last_export_stats = stats

    # -----------------------------
    # 渲染为字节（不落盘）
    # -----------------------------
    def render_bytes(self, document: str, style: TextStyle) -> Optional[bytes]:
        """排版并绘制文档，返回编码后的字节；静默空操作时返回 None。"""
        self.last_layout = None
        surface = self._surface_factory()
        if surface is None:
            logger.warning("[%s] 画布尚未就绪，已跳过导出", ERR_SURFACE_UNAVAILABLE)
            self._record(STATUS_SKIPPED, reason="surface_unavailable")
            return None
        self.last_suffix = getattr(surface, "suffix", self.last_suffix)

        # 1) 测量与换行：使用与绘制相同的字体参数
        surface.set_font(style.font())
        layout = build_layout(
            document,
            style.font_size,
            surface.measure_text,
            fixed_width=self.fixed_width,
            padding=self.padding,
        )
        if layout.is_empty:
            logger.info("有效文档为空，无需导出")
            self._record(STATUS_SKIPPED, reason="empty_document", lines=0)
            return None
        self.last_layout = layout

        # 2) 先调整尺寸（会清空画布并重置绘制参数），再绘制
        width, height = layout.logical_size(self.fixed_width, self.padding)
        surface.resize(width, height)
        render_lines(layout.lines, style, surface, fixed_width=self.fixed_width, padding=self.padding)

        # 3) 编码
        data = surface.encode()
        scale = getattr(surface, "scale", 1.0) or 1.0
        stats = {
            "lines": len(layout.lines),
            "text_height": layout.text_height,
            "surface_size": layout.surface_size(scale, self.fixed_width, self.padding),
            "font": style.font().to_font_string(),
            "font_info": getattr(surface, "font_info", None),
        }
        if not data:
            logger.warning("[%s] 编码未返回数据，已放弃保存", ERR_ENCODE_FAILED)
            self._record(STATUS_WARNING, reason="encode_failed", **stats)
            return None

        self._record(STATUS_SUCCESS, bytes=len(data), **stats)
        logger.info(
            "排版完成：%s 行，文本高度 %.1f，位图 %sx%s，字体 %s",
            stats["lines"],
            layout.text_height,
            stats["surface_size"][0],
            stats["surface_size"][1],
            stats["font"],
        )
        return data

    # -----------------------------
    # 导出为文件
    # -----------------------------
    def export(self, document: str, style: TextStyle, title: Optional[str] = None) -> Optional[Path]:
        """导出文档为文件，返回保存路径；静默空操作时返回 None。

        文件名："{title}.png"；标题为空时使用默认名 "text-editor-export.png"。
        """
        data = self.render_bytes(document, style)
        if data is None:
            return None

        out = FileHandler.export_output_path(title, suffix=self.last_suffix, output_dir=self.output_dir)
        self._saver(out, data)
        if self.last_export_stats is not None:
            self.last_export_stats["path"] = str(out)
        logger.info("导出完成：%s (%.1f KB)", out, len(data) / 1024.0)
        return out


__all__ = ["TextExporter"]
