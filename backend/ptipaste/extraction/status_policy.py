"""
状态推断策略

- 创建时：有箱号 -> IN_PROGRESS，无箱号 -> PENDING
- 已被人工推进到 PASS/CANCELLED 的记录，重新推断时保持不变
- 提箱状态始终初始化为 NOT_PICKED_UP（不从文本推断）
"""

from __future__ import annotations

from ..models import DraftRecord, PickupStatus, PtiStatus

STICKY_STATUSES = frozenset({PtiStatus.PASS, PtiStatus.CANCELLED})


def derive_pti_status(container_no: str | None, current: PtiStatus | None = None) -> PtiStatus:
    """由箱号是否为空推断PTI状态（PASS/CANCELLED 不被覆盖）"""
    if current in STICKY_STATUSES:
        return current
    if container_no and container_no.strip():
        return PtiStatus.IN_PROGRESS
    return PtiStatus.PENDING


def initial_pickup_status() -> PickupStatus:
    return PickupStatus.NOT_PICKED_UP


def refresh_status(record: DraftRecord) -> DraftRecord:
    """编辑后重新推断状态，返回新记录（原记录不变）"""
    status = derive_pti_status(record.container_no, record.pti_status)
    if status == record.pti_status:
        return record
    return record.model_copy(update={"pti_status": status})
