"""
数据模型单元测试

每个模块完成后必须运行：pytest backend/tests/unit/test_models.py -v
"""

from ptipaste.models import (
    DraftRecord,
    ExtractedFields,
    ModeDecision,
    ParseResult,
    PickupStatus,
    PtiStatus,
    RecordType,
    ShippingLine,
    SizeQuantity,
)


class TestDraftRecord:
    """草稿记录测试"""

    def test_defaults(self):
        """测试默认值"""
        record = DraftRecord()
        assert record.shipping_line == ShippingLine.UNKNOWN
        assert record.pti_status == PtiStatus.PENDING
        assert record.pickup_status == PickupStatus.NOT_PICKED_UP
        assert record.temperature == ""
        assert not record.has_container

    def test_to_payload(self):
        """测试camelCase载荷"""
        record = DraftRecord(
            shipping_line=ShippingLine.SKR,
            booking_no="SNKO123456789012",
            container_no="TCLU1234567",
            pti_status=PtiStatus.IN_PROGRESS,
            record_type=RecordType.SPECIAL,
            sequence_id="bulk-0001",
        )
        payload = record.to_payload()
        assert payload["shippingLine"] == "SKR"
        assert payload["bookingNo"] == "SNKO123456789012"
        assert payload["ptiStatus"] == "In Progress"
        assert payload["pickupStatus"] == "Not Picked Up"
        assert payload["recordType"] == "SPECIAL"
        assert payload["sequenceId"] == "bulk-0001"
        assert "booking_no" not in payload

    def test_populate_by_alias(self):
        """测试可按camelCase名称构造"""
        record = DraftRecord(bookingNo="HASLK12345678901", containerNo="MSCU1234567")
        assert record.booking_no == "HASLK12345678901"
        assert record.has_container

    def test_unknown_shipping_line_payload(self):
        """测试未知船公司输出空串"""
        assert DraftRecord().to_payload()["shippingLine"] == ""


class TestExtractionModels:
    """提取中间结构测试"""

    def test_total_quantity(self):
        """测试数量合计"""
        fields = ExtractedFields(
            size_quantities=[SizeQuantity(size="42PC", quantity=2), SizeQuantity(size="22UT")]
        )
        assert fields.total_quantity == 3
        assert ExtractedFields().total_quantity == 0

    def test_mode_name(self):
        """测试模式名称"""
        assert ModeDecision(delimited=True, record_type=RecordType.STANDARD).mode_name == "delimited"
        assert ModeDecision(delimited=False, record_type=RecordType.SPECIAL).mode_name == "freeform"

    def test_add_flag_dedup(self):
        """测试告警标记去重"""
        result = ParseResult()
        result.add_flag("customer_inferred:1")
        result.add_flag("customer_inferred:1")
        result.add_flag("item_degraded:2")
        assert result.flags == ["customer_inferred:1", "item_degraded:2"]
