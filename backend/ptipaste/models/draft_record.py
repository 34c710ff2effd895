"""
草稿记录模型 - 批量粘贴引擎的唯一输出单元

记录之间互不引用；同一订舱的关联只通过相同的 booking_no 表达
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ShippingLine(str, Enum):
    """船公司（由订舱号前缀推断）"""
    UNKNOWN = ""
    HAL = "HAL"
    SKR = "SKR"


class PtiStatus(str, Enum):
    """PTI检验状态"""
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    PASS = "Pass"
    CANCELLED = "Cancelled"


class PickupStatus(str, Enum):
    """提箱状态"""
    NOT_PICKED_UP = "Not Picked Up"
    PICKED_UP = "Picked Up"


class RecordType(str, Enum):
    """记录类型"""
    STANDARD = "STANDARD"   # 冷藏箱PTI
    SPECIAL = "SPECIAL"     # 框架箱/开顶箱


class DraftRecord(BaseModel):
    """待人工确认的单条箱记录"""
    shipping_line: ShippingLine = ShippingLine.UNKNOWN
    location: str = ""
    customer: str = ""
    booking_no: str = ""
    container_no: str = ""
    size: str = ""

    # 空字符串表示"未指定"，不是0
    temperature: str = ""
    vent: str = ""
    humidity: str = ""

    request_date: str = Field("", description="YYYY-MM-DD 或空")
    pickup_date: str = Field("", description="YYYY-MM-DD 或空")

    pti_status: PtiStatus = PtiStatus.PENDING
    pickup_status: PickupStatus = PickupStatus.NOT_PICKED_UP
    remarks: str = ""
    record_type: RecordType = RecordType.STANDARD

    # 本次解析内的顺序ID，持久化层另行分配正式ID
    sequence_id: str = ""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @property
    def has_container(self) -> bool:
        return bool(self.container_no.strip())

    def to_payload(self) -> dict[str, Any]:
        """转换为持久化层批量创建接口的camelCase字典"""
        return self.model_dump(by_alias=True, mode="json")
