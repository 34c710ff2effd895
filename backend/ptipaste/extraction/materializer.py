"""
记录物化 - 条目字段 -> 1..n 条草稿记录

展开规则（自由文本）：
1. 有箱号：每个箱号一条；箱型按数量展开的槽位依次分配，多出的箱号沿用最后一个槽位的箱型
2. 无箱号但有数量（含默认）：按数量生成空箱号记录
3. 否则：一条默认记录

Tab模式每行1:1，不展开。顺序ID在单次解析内连续分配
"""

from __future__ import annotations

from datetime import date, timedelta

from ..config import ExtractionConfig
from ..interfaces import IRecordStrategy
from ..models import DraftRecord, ExtractedFields
from .status_policy import derive_pti_status, initial_pickup_status

SEQUENCE_PREFIX = "bulk"


def make_sequence_id(n: int) -> str:
    return f"{SEQUENCE_PREFIX}-{n:04d}"


class RecordMaterializer:
    """草稿记录物化器"""

    def __init__(self, config: ExtractionConfig | None = None):
        self.config = config or ExtractionConfig()

    def slots(self, fields: ExtractedFields, default_size: str, expand: bool = True) -> list[tuple[str, str]]:
        """计算 (箱号, 箱型) 槽位"""
        sizes = [sq.size for sq in fields.size_quantities for _ in range(sq.quantity)]
        containers = fields.container_numbers

        if not expand:
            size = sizes[0] if sizes else default_size
            return [(containers[0] if containers else "", size)]

        if containers:
            if not sizes:
                sizes = [default_size]
            return [(no, sizes[min(i, len(sizes) - 1)]) for i, no in enumerate(containers)]

        if sizes:
            return [("", size) for size in sizes]

        return [("", default_size)]

    def materialize(
        self,
        fields: ExtractedFields,
        strategy: IRecordStrategy,
        reference_date: date,
        *,
        expand: bool = True,
        start: int = 1,
    ) -> list[DraftRecord]:
        """
        生成草稿记录

        Args:
            fields: 条目字段
            strategy: 记录类型策略（提供默认箱型/通风）
            reference_date: 基准日期（默认申请日/提货日）
            expand: 自由文本为True；Tab行为False
            start: 本条目第一条记录的顺序号
        """
        request_date = fields.request_date or reference_date.isoformat()
        pickup_date = fields.pickup_date or ""
        if not pickup_date and expand:
            pickup_date = (reference_date + timedelta(days=self.config.pickup_offset_days)).isoformat()

        vent = fields.vent if fields.vent is not None else strategy.default_vent()

        records = []
        for offset, (container_no, size) in enumerate(self.slots(fields, strategy.default_size(), expand)):
            records.append(
                DraftRecord(
                    shipping_line=fields.shipping_line,
                    location=fields.location or "",
                    customer=fields.customer or "",
                    booking_no=fields.booking_no or "",
                    container_no=container_no,
                    size=size,
                    temperature=fields.temperature or "",
                    vent=vent,
                    humidity=fields.humidity or "",
                    request_date=request_date,
                    pickup_date=pickup_date,
                    pti_status=derive_pti_status(container_no),
                    pickup_status=initial_pickup_status(),
                    remarks=fields.remarks or "",
                    record_type=strategy.record_type,
                    sequence_id=make_sequence_id(start + offset),
                )
            )
        return records
