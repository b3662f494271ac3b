"""
文件路径：textpng/__init__.py

说明：纯文本按样式排版并导出为固定宽度 PNG（或 PDF）的工具包。
"""

__version__ = "0.1.0"
