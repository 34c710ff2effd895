"""
PTI 批量粘贴解析引擎 - 后端核心模块

把粘贴的文本（表格Tab行 / 韩英混合的自由文本）确定性地转换为
有序的草稿箱记录，供人工确认后批量提交。解析过程不抛异常

模块结构：
- config/      业务规则与运行期配置
- models/      数据模型定义
- extraction/  分段/字段提取/归一化/记录物化
- pipeline/    解析编排
- cli          命令行入口（开发调试用）
"""

from .models import DraftRecord, ExtractedFields, ParseResult, PickupStatus, PtiStatus, RecordType, ShippingLine
from .pipeline import BulkPasteEngine, parse_bulk_text, smart_paste

__version__ = "0.1.0"

__all__ = [
    "BulkPasteEngine",
    "parse_bulk_text",
    "smart_paste",
    "DraftRecord",
    "ExtractedFields",
    "ParseResult",
    "ShippingLine",
    "PtiStatus",
    "PickupStatus",
    "RecordType",
]
