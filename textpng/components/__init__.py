"""
文件路径：textpng/components/__init__.py

说明：
- 通用组件包入口：日志、文件与路径处理、错误信息格式化；
- 子模块按职责拆分：`text.py`（文档分行）、`fonts.py`（字体描述与探测）、
  `color.py`（颜色解析）；
- 业务模块与测试统一使用 `from textpng.components import ...` 导入。
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from ..variables import (
    PATH_LOGS_DIR,
    PATH_OUTPUT_DIR,
    PATH_LOG_FILE,
    CONST_DEFAULT_EXPORT_NAME,
    CONST_FILENAME_ILLEGAL_CHARS,
    CONST_LOG_FORMAT,
    CONST_LOG_DATEFMT,
    ERR_PATH_NOT_WRITABLE,
    ERR_FILE_NOT_FOUND,
)

# 聚合导出：拆分后的子模块
from .color import parse_color, to_unit_rgb
from .fonts import (
    FontDescriptor,
    font_variant,
    pick_font_file,
    probe_available_fonts,
    reportlab_font_name,
)
from .text import split_document


# =============================
# 日志工具
# =============================
_LOGGER_CONFIGURED: bool = False


def get_logger(name: str) -> logging.Logger:
    """获取 logger，首次调用时配置文件与控制台双输出。

    参数：
        name: 日志记录器名称（一般使用 __name__）。

    返回：
        logging.Logger 对象。
    """
    global _LOGGER_CONFIGURED
    if not _LOGGER_CONFIGURED:
        # 确保日志目录存在
        PATH_LOGS_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(PATH_LOG_FILE, encoding="utf-8")
        console_handler = logging.StreamHandler()
        logging.basicConfig(
            level=logging.INFO,
            format=CONST_LOG_FORMAT,
            datefmt=CONST_LOG_DATEFMT,
            handlers=[file_handler, console_handler],
        )
        _LOGGER_CONFIGURED = True
    return logging.getLogger(name)


# =============================
# 文件操作
# =============================
class FileHandler:
    """文件与路径相关的通用处理器。"""

    @staticmethod
    def validate_readable_file(path: Path) -> None:
        """校验文件可读。

        参数：
            path: 文件路径。
        异常：
            FileNotFoundError: 文件不存在或不可读。
        """
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"[{ERR_FILE_NOT_FOUND}] 文件不存在或不可读: {path}")

    @staticmethod
    def ensure_parent_writable(target: Path) -> None:
        """确保目标文件的父目录可写，不存在则创建。

        参数：
            target: 目标文件路径。
        异常：
            PermissionError: 目录不可写。
        """
        parent = target.parent
        parent.mkdir(parents=True, exist_ok=True)
        # Windows 上 os.access 可能不可靠，尝试创建临时文件验证
        probe = parent / f".__writable_probe_{int(time.time()*1000)}"
        try:
            with open(probe, "w", encoding="utf-8") as f:  # noqa: P103
                f.write("probe")
        except Exception as exc:  # noqa: BLE001
            raise PermissionError(f"[{ERR_PATH_NOT_WRITABLE}] 目录不可写: {parent}") from exc
        else:
            try:
                probe.unlink(missing_ok=True)
            except OSError as exc:
                logging.getLogger(__name__).debug("探针文件清理失败：%s (%s)", probe, exc)

    @staticmethod
    def export_filename(title: Optional[str], suffix: str = ".png") -> str:
        """根据标题生成导出文件名。

        参数：
            title: 用户输入的标题；为空或仅空白时使用默认名。
            suffix: 文件后缀（含点），例如 ".png"。

        返回：
            例如 "report.png"；无标题时为 "text-editor-export.png"。

        示例：
            >>> FileHandler.export_filename("a/b")
            'a_b.png'
        """
        stem = (title or "").strip()
        if stem:
            stem = "".join("_" if ch in CONST_FILENAME_ILLEGAL_CHARS else ch for ch in stem)
        else:
            stem = CONST_DEFAULT_EXPORT_NAME
        return f"{stem}{suffix}"

    @staticmethod
    def export_output_path(
        title: Optional[str],
        suffix: str = ".png",
        output_dir: Optional[Path] = None,
    ) -> Path:
        """生成导出文件的完整路径。

        参数：
            title: 标题（决定文件名）。
            suffix: 文件后缀。
            output_dir: 自定义输出目录；None 则使用默认 PATH_OUTPUT_DIR。

        返回：
            输出路径，例如 output/report.png
        """
        target_dir = output_dir if output_dir is not None else PATH_OUTPUT_DIR
        target_dir.mkdir(parents=True, exist_ok=True)
        return target_dir / FileHandler.export_filename(title, suffix)

    @staticmethod
    def write_bytes(target: Path, data: bytes) -> Path:
        """将二进制数据写入目标文件（覆盖同名文件）。"""
        FileHandler.ensure_parent_writable(target)
        with open(target, "wb") as f:  # noqa: P103
            f.write(data)
        return target


# =============================
# 错误处理
# =============================
class ErrorHandler:
    """错误处理相关工具。"""

    @staticmethod
    def format_error(err_code: int, message: str) -> str:
        """生成统一错误信息字符串。"""
        return f"[{err_code}] {message}"


# =============================
# 导出声明
# =============================
__all__ = [
    # 日志工具
    "get_logger",
    # 文件操作
    "FileHandler",
    # 错误处理
    "ErrorHandler",
    # 颜色
    "parse_color",
    "to_unit_rgb",
    # 字体
    "FontDescriptor",
    "font_variant",
    "pick_font_file",
    "probe_available_fonts",
    "reportlab_font_name",
    # 文本
    "split_document",
]
