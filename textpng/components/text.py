"""
文件路径：textpng/components/text.py

说明：文档分行工具函数。
"""

from __future__ import annotations

from typing import List


def split_document(text: str) -> List[str]:
    """按换行符拆分文档，丢弃去除首尾空白后为空的行。

    - 支持 "\\n"、"\\r\\n"、"\\r" 三种换行；
    - 保留非空行的原始内容（包括行内多余空格），交由换行算法处理。
    """
    if not text:
        return []
    return [line for line in text.splitlines() if line.strip() != ""]


__all__ = ["split_document"]
