"""
提取中间结构 - 分段条目、字段提取结果、解析报告

对应流水线 SELECT_MODE -> SEGMENT -> EXTRACT -> MATERIALIZE 的中间数据
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .draft_record import DraftRecord, PtiStatus, RecordType, ShippingLine


class ModeDecision(BaseModel):
    """模式判定结果"""
    delimited: bool
    record_type: RecordType

    @property
    def mode_name(self) -> str:
        return "delimited" if self.delimited else "freeform"


class PasteItem(BaseModel):
    """分段后的单个条目"""
    index: int = Field(..., description="1-based序号")
    text: str = ""
    cells: list[str] = Field(default_factory=list, description="Tab模式下的列")


class SizeQuantity(BaseModel):
    """箱型+数量"""
    size: str
    quantity: int = 1
    rule: str = ""


class ExtractedFields(BaseModel):
    """单个条目的字段提取结果"""
    booking_no: str | None = Field(None, description="订舱号(HASLK+11位/SNKO+12位)")
    shipping_line: ShippingLine = ShippingLine.UNKNOWN
    container_numbers: list[str] = Field(default_factory=list, description="箱号(4字母+7数字)")
    size_quantities: list[SizeQuantity] = Field(default_factory=list)
    temperature: str | None = None
    vent: str | None = None
    humidity: str | None = None
    request_date: str | None = None
    pickup_date: str | None = None
    location: str | None = None
    customer: str | None = None
    remarks: str | None = None
    status_hint: PtiStatus | None = Field(None, description="状态关键词提示（不直接生效）")

    # 命中的规则名（用于调试）
    matched_rules: dict[str, str] = Field(default_factory=dict)

    @property
    def total_quantity(self) -> int:
        return sum(sq.quantity for sq in self.size_quantities)


class ParseResult(BaseModel):
    """一次解析的结果与告警"""
    records: list[DraftRecord] = Field(default_factory=list)
    mode: str = "delimited"
    record_type: RecordType = RecordType.STANDARD
    item_count: int = 0
    flags: list[str] = Field(default_factory=list, description="告警标记")

    def add_flag(self, flag: str) -> None:
        """添加告警标记（不中断）"""
        if flag not in self.flags:
            self.flags.append(flag)
