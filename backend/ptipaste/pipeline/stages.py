"""
解析流水线阶段定义

阶段：SELECT_MODE -> SEGMENT -> EXTRACT -> MATERIALIZE
EXTRACT/MATERIALIZE 按条目执行，单条目失败不影响其他条目
"""

from __future__ import annotations

from enum import Enum


class StageEnum(str, Enum):
    """流水线阶段枚举"""
    SELECT_MODE = "SELECT_MODE"
    SEGMENT = "SEGMENT"
    EXTRACT = "EXTRACT"
    MATERIALIZE = "MATERIALIZE"
