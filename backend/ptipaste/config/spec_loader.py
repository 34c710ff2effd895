"""
规则加载器 - 读取 ptipaste/config/rules.yaml

职责：
- 解析YAML并提供类型安全访问
- 提供订舱号前缀、堆场代码、箱型表、列布局等配置
- 缓存加载结果（避免重复解析）

使用方式：
    spec = SpecLoader.load()
    prefixes = spec.get_booking_prefixes()
    layout = spec.get_layout("compact")
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

DEFAULT_RULES_PATH = Path(__file__).resolve().parent / "rules.yaml"


class BookingPrefix(BaseModel):
    """订舱号前缀定义"""
    shipping_line: str
    digits: int


class SizeEntry(BaseModel):
    """箱型代码表条目"""
    code: str
    nominal: int
    family: str


class RecordTypeDefaults(BaseModel):
    """记录类型默认值"""
    default_size: str
    default_family: str
    default_vent: str = ""


class BusinessSpec(BaseModel):
    """业务规则（rules.yaml 的结构化表示）"""
    schema_version: str

    # 枚举定义
    enums: dict[str, Any] = Field(default_factory=dict)

    # 字段提取配置
    extraction: dict[str, Any] = Field(default_factory=dict)

    # 箱型归一化
    sizes: dict[str, Any] = Field(default_factory=dict)

    # 记录类型默认值
    record_types: dict[str, Any] = Field(default_factory=dict)

    # Tab粘贴列布局
    layouts: dict[str, list[str]] = Field(default_factory=dict)

    # === 便捷访问方法 ===

    def get_booking_prefixes(self) -> dict[str, BookingPrefix]:
        """获取订舱号前缀（长前缀优先）"""
        raw = self.enums.get("booking_prefixes", {})
        items = sorted(raw.items(), key=lambda kv: -len(kv[0]))
        return {k.upper(): BookingPrefix(**v) for k, v in items}

    def get_locations(self) -> list[str]:
        """获取堆场代码"""
        return [str(loc).upper() for loc in self.enums.get("locations", [])]

    def get_shipping_line_cells(self) -> dict[str, str]:
        """获取LINE列取值映射"""
        raw = self.enums.get("shipping_line_cells", {})
        return {str(k).upper(): str(v) for k, v in raw.items()}

    def get_header_markers(self) -> list[str]:
        return [str(m).upper() for m in self.extraction.get("header_markers", [])]

    def get_header_check_columns(self) -> list[int]:
        return list(self.extraction.get("header_check_columns", [0]))

    def get_status_keywords(self) -> dict[str, list[str]]:
        """获取状态关键词（状态值 -> 关键词列表）"""
        raw = self.extraction.get("status_keywords", {})
        return {k: [str(w).upper() for w in v] for k, v in raw.items()}

    def get_label_keywords(self) -> list[str]:
        return [str(w).upper() for w in self.extraction.get("label_keywords", [])]

    def get_customer_labels(self) -> list[str]:
        return [str(w).upper() for w in self.extraction.get("customer_labels", [])]

    def get_nominal_aliases(self) -> dict[str, int]:
        return {str(k): int(v) for k, v in self.sizes.get("nominal_aliases", {}).items()}

    def get_family_aliases(self) -> dict[str, str]:
        return {str(k).upper(): str(v) for k, v in self.sizes.get("family_aliases", {}).items()}

    def get_neutral_markers(self) -> list[str]:
        return [str(m).upper() for m in self.sizes.get("neutral_markers", [""])]

    def get_size_table(self) -> list[SizeEntry]:
        return [SizeEntry(**row) for row in self.sizes.get("table", [])]

    def get_size_codes(self) -> list[str]:
        """获取闭集箱型代码（去重保序）"""
        codes: list[str] = []
        for entry in self.get_size_table():
            if entry.code not in codes:
                codes.append(entry.code)
        return codes

    def get_record_type_defaults(self, record_type: str) -> RecordTypeDefaults:
        """获取记录类型默认值"""
        raw = self.record_types.get(str(record_type).upper())
        if raw is None:
            raw = self.record_types.get("STANDARD", {"default_size": "40RE", "default_family": "reefer"})
        return RecordTypeDefaults(**raw)

    def get_layout(self, name: str) -> list[str]:
        """获取列布局"""
        return list(self.layouts.get(name, []))


class SpecLoader:
    """规则加载器（类方法+缓存）"""

    @classmethod
    @lru_cache(maxsize=4)
    def load(cls, spec_path: str | Path = DEFAULT_RULES_PATH) -> BusinessSpec:
        """加载并缓存规则"""
        path = Path(spec_path)
        if not path.exists():
            raise FileNotFoundError(f"规则文件不存在: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        return BusinessSpec(**data)

    @classmethod
    def reload(cls, spec_path: str | Path = DEFAULT_RULES_PATH) -> BusinessSpec:
        """强制重新加载（清除缓存）"""
        cls.load.cache_clear()
        return cls.load(spec_path)


# 便捷函数
def load_spec(spec_path: str | Path = DEFAULT_RULES_PATH) -> BusinessSpec:
    """加载业务规则"""
    return SpecLoader.load(spec_path)
