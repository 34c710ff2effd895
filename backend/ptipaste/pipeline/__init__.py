"""
流水线模块 - 解析编排

子模块：
- stages: 流水线各阶段定义
- executor: 批量粘贴引擎与模块级入口
"""

from .executor import BulkPasteEngine, coerce_record_type, default_engine, parse_bulk_text, smart_paste
from .stages import StageEnum

__all__ = [
    "StageEnum",
    "BulkPasteEngine",
    "coerce_record_type",
    "default_engine",
    "parse_bulk_text",
    "smart_paste",
]
