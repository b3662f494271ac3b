"""
文件路径：textpng/variables.py

模块职责：
- 统一管理全局跨模块变量，确保模块化、无冲突、可追溯，可复用。
- 变量命名规范：{分类前缀}_{描述性名称}（全大写+下划线）。
  - PATH_：路径相关
  - STYLE_：样式相关
  - STATUS_：状态标识
  - CONST_：通用常量
  - ERR_：错误码

使用说明：
- 业务模块严禁定义新的全局变量，必须从本模块导入所需常量。
- 目录路径均使用 pathlib.Path 对象表示，使用时如需字符串请显式 str() 转换。
"""

from pathlib import Path
from typing import Dict, Tuple


# =============================
# 路径（PATH_）
# =============================
# 项目根目录：定位到当前文件（variables.py）的上两级目录
PATH_ROOT: Path = Path(__file__).resolve().parents[1]

# 各功能目录
PATH_CONFIG_DIR: Path = PATH_ROOT / "config"
PATH_FONTS_DIR: Path = PATH_CONFIG_DIR / "fonts"  # 自带字体目录（可选，优先于系统字体）
PATH_OUTPUT_DIR: Path = PATH_ROOT / "output"
PATH_LOGS_DIR: Path = PATH_ROOT / "logs"

# 关键文件路径
PATH_STYLE_JSON: Path = PATH_CONFIG_DIR / "style.json"  # 样式预设，可选
PATH_LOG_FILE: Path = PATH_LOGS_DIR / "app.log"  # 应用运行日志


# =============================
# 样式（STYLE_）
# =============================
STYLE_FONT_SIZE_DEFAULT: int = 11  # 编辑器初始字号（px）
STYLE_TEXT_COLOR_DEFAULT: str = "#737373"  # 编辑器初始文字颜色
STYLE_ALIGN_DEFAULT: str = "left"  # 编辑器初始对齐方式


# =============================
# 状态（STATUS_）
# =============================
STATUS_SUCCESS: str = "SUCCESS"  # 导出成功
STATUS_WARNING: str = "WARNING"  # 存在告警（如编码失败），未产生文件
STATUS_SKIPPED: str = "SKIPPED"  # 被跳过（空文档、画布缺失）


# =============================
# 常量（CONST_）
# =============================
CONST_ENCODING: str = "utf-8"  # 文件读写默认编码

# 版面几何（逻辑坐标，与设备像素比无关）
CONST_FIXED_WIDTH: int = 600  # 输出固定宽度
CONST_PADDING: int = 1  # 四周内边距
CONST_LINE_HEIGHT_RATIO: float = 1.5  # 行高 = 字号 * 1.5
CONST_UNDERLINE_OFFSET: float = 2.0  # 下划线位于行顶 + 字号 + 2
CONST_UNDERLINE_WIDTH: float = 1.0  # 下划线线宽

# 设备像素比：仅用于提高清晰度，不参与排版计算
CONST_DEVICE_SCALE_DEFAULT: float = 1.0

# 字号范围（闭区间）
CONST_FONT_SIZE_MIN: int = 8
CONST_FONT_SIZE_MAX: int = 72

# 字体族（组合字体字符串时使用）
CONST_FONT_FAMILY: str = "system-ui, -apple-system, sans-serif"

# 对齐方式
CONST_ALIGN_LEFT: str = "left"
CONST_ALIGN_CENTER: str = "center"
CONST_ALIGN_RIGHT: str = "right"
CONST_ALIGN_JUSTIFY: str = "justify"
CONST_ALIGN_CHOICES: Tuple[str, ...] = (
    CONST_ALIGN_LEFT,
    CONST_ALIGN_CENTER,
    CONST_ALIGN_RIGHT,
    CONST_ALIGN_JUSTIFY,
)

# 导出格式：png 为光栅（Pillow），pdf 为矢量（ReportLab）
CONST_FORMAT_PNG: str = "png"
CONST_FORMAT_PDF: str = "pdf"
CONST_OUTPUT_FORMATS: Tuple[str, ...] = (CONST_FORMAT_PNG, CONST_FORMAT_PDF)

# 未提供标题时的默认文件名（不含后缀）
CONST_DEFAULT_EXPORT_NAME: str = "text-editor-export"
# 文件名中需要替换的字符
CONST_FILENAME_ILLEGAL_CHARS: str = '<>:"/\\|?*'

# 常见无衬线字体候选路径（用于自动探测，按顺序优先）
# 键：regular / bold / italic / bold_italic
CONST_CANDIDATE_SANS_FONT_PATHS: Dict[str, Tuple[str, ...]] = {
    "regular": (
        # Linux 常见字体
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
        # macOS 常见字体
        "/System/Library/Fonts/Supplemental/Arial.ttf",
        "/Library/Fonts/Arial.ttf",
        # Windows 常见字体
        "C:/Windows/Fonts/arial.ttf",
        "C:/Windows/Fonts/segoeui.ttf",
    ),
    "bold": (
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
        "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
        "/Library/Fonts/Arial Bold.ttf",
        "C:/Windows/Fonts/arialbd.ttf",
        "C:/Windows/Fonts/segoeuib.ttf",
    ),
    "italic": (
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Oblique.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Oblique.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Italic.ttf",
        "/System/Library/Fonts/Supplemental/Arial Italic.ttf",
        "/Library/Fonts/Arial Italic.ttf",
        "C:/Windows/Fonts/ariali.ttf",
        "C:/Windows/Fonts/segoeuii.ttf",
    ),
    "bold_italic": (
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-BoldOblique.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-BoldOblique.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-BoldItalic.ttf",
        "/System/Library/Fonts/Supplemental/Arial Bold Italic.ttf",
        "/Library/Fonts/Arial Bold Italic.ttf",
        "C:/Windows/Fonts/arialbi.ttf",
        "C:/Windows/Fonts/segoeuiz.ttf",
    ),
}

# ReportLab 内置字体（PDF 导出），按 (bold, italic) 选择
CONST_REPORTLAB_FONTS: Dict[Tuple[bool, bool], str] = {
    (False, False): "Helvetica",
    (True, False): "Helvetica-Bold",
    (False, True): "Helvetica-Oblique",
    (True, True): "Helvetica-BoldOblique",
}

# 日志格式（供 logging.basicConfig 使用）
CONST_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONST_LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


# =============================
# 错误码（ERR_）
# =============================
# 1xxx：文件/路径相关
ERR_FILE_NOT_FOUND: int = 1001  # 输入文件不存在
ERR_PATH_NOT_WRITABLE: int = 1003  # 目标路径不可写

# 2xxx：样式相关
ERR_STYLE_INVALID: int = 2001  # 样式参数非法（对齐、颜色、字号）

# 3xxx：绘制/编码相关
ERR_SURFACE_UNAVAILABLE: int = 3001  # 画布不可用
ERR_ENCODE_FAILED: int = 3002  # 位图编码失败
ERR_FORMAT_UNSUPPORTED: int = 3003  # 不支持的导出格式

# 4xxx：配置/数据相关
ERR_CONFIG_LOAD_FAILED: int = 4001  # 配置加载失败
ERR_DATA_INVALID: int = 4002  # 输入数据非法


# =============================
# 导出声明
# =============================
__all__ = [
    # PATH_
    "PATH_ROOT",
    "PATH_CONFIG_DIR",
    "PATH_FONTS_DIR",
    "PATH_OUTPUT_DIR",
    "PATH_LOGS_DIR",
    "PATH_STYLE_JSON",
    "PATH_LOG_FILE",
    # STYLE_
    "STYLE_FONT_SIZE_DEFAULT",
    "STYLE_TEXT_COLOR_DEFAULT",
    "STYLE_ALIGN_DEFAULT",
    # STATUS_
    "STATUS_SUCCESS",
    "STATUS_WARNING",
    "STATUS_SKIPPED",
    # CONST_
    "CONST_ENCODING",
    "CONST_FIXED_WIDTH",
    "CONST_PADDING",
    "CONST_LINE_HEIGHT_RATIO",
    "CONST_UNDERLINE_OFFSET",
    "CONST_UNDERLINE_WIDTH",
    "CONST_DEVICE_SCALE_DEFAULT",
    "CONST_FONT_SIZE_MIN",
    "CONST_FONT_SIZE_MAX",
    "CONST_FONT_FAMILY",
    "CONST_ALIGN_LEFT",
    "CONST_ALIGN_CENTER",
    "CONST_ALIGN_RIGHT",
    "CONST_ALIGN_JUSTIFY",
    "CONST_ALIGN_CHOICES",
    "CONST_FORMAT_PNG",
    "CONST_FORMAT_PDF",
    "CONST_OUTPUT_FORMATS",
    "CONST_DEFAULT_EXPORT_NAME",
    "CONST_FILENAME_ILLEGAL_CHARS",
    "CONST_CANDIDATE_SANS_FONT_PATHS",
    "CONST_REPORTLAB_FONTS",
    "CONST_LOG_FORMAT",
    "CONST_LOG_DATEFMT",
    # ERR_
    "ERR_FILE_NOT_FOUND",
    "ERR_PATH_NOT_WRITABLE",
    "ERR_STYLE_INVALID",
    "ERR_SURFACE_UNAVAILABLE",
    "ERR_ENCODE_FAILED",
    "ERR_FORMAT_UNSUPPORTED",
    "ERR_CONFIG_LOAD_FAILED",
    "ERR_DATA_INVALID",
]
