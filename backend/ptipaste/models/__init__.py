"""
数据模型层 - 定义引擎核心数据结构

所有模块通过这些模型交互，实现解耦：
- DraftRecord: 引擎输出的单条草稿记录
- ExtractedFields: 单个条目的字段提取结果
- PasteItem: 分段后的条目
- ParseResult: 解析结果与告警
"""

from .draft_record import DraftRecord, PickupStatus, PtiStatus, RecordType, ShippingLine
from .extraction import ExtractedFields, ModeDecision, ParseResult, PasteItem, SizeQuantity

__all__ = [
    "DraftRecord",
    "ShippingLine",
    "PtiStatus",
    "PickupStatus",
    "RecordType",
    "ExtractedFields",
    "SizeQuantity",
    "PasteItem",
    "ModeDecision",
    "ParseResult",
]
