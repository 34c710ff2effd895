"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 记录类型差异通过策略接口表达，共用同一批字段提取器
2. 客户名推断单独成接口，可替换为更严格的实现而不影响其他提取器
3. 便于单元测试和mock替换

使用方式：
    from ptipaste.interfaces import ICustomerResolver

    class LabelOnlyResolver(ICustomerResolver):
        def resolve(self, text: str) -> tuple[str | None, bool]:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ExtractedFields, RecordType


# ============================================================================
# 字段提取接口
# ============================================================================

class ICustomerResolver(ABC):
    """客户名推断接口（仅自由文本模式）"""

    @abstractmethod
    def resolve(self, text: str) -> tuple[str | None, bool]:
        """
        从条目文本推断客户名

        Args:
            text: 单个条目的原始文本

        Returns:
            (客户名或None, 是否为排除法推断)
            排除法推断的结果可能有误，调用方应标记以便人工复核
        """
        ...


class IRecordStrategy(ABC):
    """记录类型策略接口 - 选择适用的提取器子集与默认值"""

    record_type: RecordType

    @abstractmethod
    def extract(self, text: str, reference_date: date) -> ExtractedFields:
        """
        从自由文本条目提取字段

        Args:
            text: 条目文本
            reference_date: 基准日期（短日期补年份）

        Returns:
            字段提取结果（未命中的字段为None/空）
        """
        ...

    @abstractmethod
    def default_size(self) -> str:
        """未识别到箱型时的默认箱型"""
        ...

    @abstractmethod
    def default_vent(self) -> str:
        """未识别到通风时的默认值"""
        ...


# ============================================================================
# 异常定义
# ============================================================================

class PtiPasteError(Exception):
    """基础异常"""
    pass


class RulesError(PtiPasteError):
    """业务规则配置错误"""
    pass
