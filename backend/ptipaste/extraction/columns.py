"""
Tab行读取 - 按列布局把单元格映射为字段

列布局（rules.yaml 的 layouts）：
- full:    LINE, LOC, CUST, BKG, CNTR, SIZE, TEMP, VENT, HUM, REQ, PICK, STATUS, REMARK
- compact: BKG, CNTR, SIZE, TEMP, VENT, HUM, REQ, PICK, STATUS, REMARK

首列是订舱号时使用 compact，否则使用 full。每行1:1对应一条记录，不做数量展开
"""

from __future__ import annotations

import re
from datetime import date

from ..interfaces import RulesError
from ..models import ExtractedFields, RecordType, ShippingLine, SizeQuantity
from .field_extractors import CONTAINER_PATTERN, FieldExtractor
from .normalizers import (
    infer_shipping_line,
    normalize_date,
    normalize_humidity,
    normalize_temperature,
    normalize_vent,
    shipping_line_from_cell,
)

_HAS_ALNUM = re.compile(r"[0-9A-Za-z가-힣]")


class DelimitedRowReader:
    """Tab行 -> ExtractedFields"""

    def __init__(self, extractor: FieldExtractor):
        self.extractor = extractor
        self.spec = extractor.spec
        self.layouts = {name: self.spec.get_layout(name) for name in ("full", "compact")}
        for name, layout in self.layouts.items():
            if "booking_no" not in layout:
                raise RulesError(f"列布局缺少booking_no列: {name}")

    def choose_layout(self, cells: list[str]) -> str:
        """首列为订舱号 -> compact"""
        if cells and self.extractor.is_booking_no(cells[0]):
            return "compact"
        return "full"

    def read(
        self,
        cells: list[str],
        record_type: RecordType,
        reference_date: date,
        default_size: str,
        default_vent: str,
    ) -> ExtractedFields:
        """读取单行（缺失列取默认值）"""
        layout_name = self.choose_layout(cells)
        layout = self.layouts[layout_name]
        raw = {name: (cells[i] if i < len(cells) else "") for i, name in enumerate(layout)}

        fields = ExtractedFields()
        fields.matched_rules["layout"] = layout_name

        booking = raw.get("booking_no", "").strip()
        fields.booking_no = booking.upper() if self.extractor.is_booking_no(booking) else booking

        # 订舱号前缀优先于LINE列
        line = infer_shipping_line(fields.booking_no, self.spec)
        if line == ShippingLine.UNKNOWN:
            line = shipping_line_from_cell(raw.get("shipping_line"), self.spec)
        fields.shipping_line = line

        fields.location = raw.get("location", "").upper() or None
        fields.customer = raw.get("customer") or None

        container = raw.get("container_no", "")
        m = CONTAINER_PATTERN.search(container)
        if m:
            fields.container_numbers = [m.group(1).upper()]
        elif _HAS_ALNUM.search(container):
            fields.container_numbers = [container]

        size = self.extractor.sizes.normalize(raw.get("size"), record_type) or default_size
        fields.temperature = normalize_temperature(raw.get("temperature"))
        fields.vent = normalize_vent(raw.get("vent"), default=default_vent)
        fields.humidity = normalize_humidity(raw.get("humidity"))
        fields.request_date = normalize_date(raw.get("request_date"), reference_date) or reference_date.isoformat()
        fields.pickup_date = normalize_date(raw.get("pickup_date"), reference_date)
        fields.status_hint = self.extractor.extract_status_hint(raw.get("status", ""))
        fields.remarks = raw.get("remarks", "")

        fields.size_quantities = [SizeQuantity(size=size, quantity=1, rule="column")]
        return fields
