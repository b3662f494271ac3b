"""
文件路径：textpng/data_handler.py

模块职责：
- 加载样式预设 JSON（粗体、斜体、下划线、字号、颜色、对齐），规范化键名后交给编辑器状态应用。
- 读取待导出的文档文本。

说明：
- 仅依赖标准库与 `textpng/variables.py`，不直接依赖排版与绘制模块。

变量引用说明（来自 textpng/variables.py）：
- PATH_STYLE_JSON, CONST_ENCODING, ERR_CONFIG_LOAD_FAILED, ERR_DATA_INVALID

组件调用说明（供业务模块）：
- load_style_config：读取样式预设
- read_document：读取文档文本
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .components import FileHandler, get_logger
from .variables import (
    PATH_STYLE_JSON,
    CONST_ENCODING,
    ERR_CONFIG_LOAD_FAILED,
    ERR_DATA_INVALID,
)


logger = get_logger(__name__)

# 样式 JSON 键名 -> 内部字段名（兼容驼峰写法）
_STYLE_KEY_ALIASES: Dict[str, str] = {
    "bold": "bold",
    "italic": "italic",
    "underline": "underline",
    "font_size": "font_size",
    "fontSize": "font_size",
    "color": "color",
    "align": "align",
}


def _json_loads_strip_bom(content: str):
    """解析 JSON 字符串，自动去除 UTF-8 BOM。"""
    if content.startswith("\ufeff"):
        content = content.lstrip("\ufeff")
    return json.loads(content)


def load_style_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """加载样式预设 JSON。

    参数：
        config_path: 配置路径；默认读取 `config/style.json`。

    返回：
        规范化后的样式字典，例如：{"bold": True, "font_size": 14, "align": "justify"}。
        文件不存在时返回空字典。

    异常：
        RuntimeError: JSON 解析失败或顶层不是对象。
    """
    path = config_path or PATH_STYLE_JSON
    if not path.exists():
        logger.warning("找不到样式配置文件，将使用默认样式：%s", path)
        return {}
    try:
        data = _json_loads_strip_bom(path.read_text(encoding=CONST_ENCODING))
    except (OSError, ValueError) as exc:
        raise RuntimeError(f"[{ERR_CONFIG_LOAD_FAILED}] 配置加载失败: {exc}") from exc
    if not isinstance(data, dict):
        raise RuntimeError(f"[{ERR_CONFIG_LOAD_FAILED}] 样式配置必须是对象: {path}")

    result: Dict[str, Any] = {}
    for key, value in data.items():
        target = _STYLE_KEY_ALIASES.get(str(key))
        if target is None:
            logger.warning("忽略未知样式键：%s", key)
            continue
        result[target] = value
    return result


def read_document(path: Path) -> str:
    """读取文档文本（UTF-8，自动去除 BOM）。"""
    FileHandler.validate_readable_file(path)
    try:
        content = path.read_text(encoding=CONST_ENCODING)
    except UnicodeDecodeError as exc:
        raise ValueError(f"[{ERR_DATA_INVALID}] 文档不是有效的 {CONST_ENCODING} 文本: {path}") from exc
    if content.startswith("\ufeff"):
        content = content.lstrip("\ufeff")
    return content


__all__ = ["load_style_config", "read_document"]
