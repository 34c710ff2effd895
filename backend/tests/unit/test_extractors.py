"""
字段提取器单元测试

测试要点：
- 订舱号/箱号识别
- 箱型+数量多种写法与数量上限
- 温度/通风/湿度规则优先级
- 提货日期、状态关键词、堆场、客户名
"""

from datetime import date

from ptipaste.extraction import EliminationCustomerResolver, FieldExtractor, NullCustomerResolver
from ptipaste.extraction.rules import DATE_RULES, TEMPERATURE_RULES, first_match
from ptipaste.models import PtiStatus, RecordType, ShippingLine


class TestIdentifiers:
    """订舱号/箱号测试"""

    def test_extract_booking_no(self, extractor: FieldExtractor):
        """测试订舱号与船公司"""
        assert extractor.extract_booking_no("bkg haslk12345678901 please") == ("HASLK12345678901", ShippingLine.HAL)
        assert extractor.extract_booking_no("SNKO123456789012") == ("SNKO123456789012", ShippingLine.SKR)

    def test_booking_wrong_length(self, extractor: FieldExtractor):
        """测试位数不符的订舱号不识别"""
        assert extractor.extract_booking_no("HASLK123456789012") == (None, ShippingLine.UNKNOWN)
        assert extractor.extract_booking_no("") == (None, ShippingLine.UNKNOWN)

    def test_is_booking_no(self, extractor: FieldExtractor):
        """测试整格判定"""
        assert extractor.is_booking_no(" HASLK12345678901 ")
        assert not extractor.is_booking_no("BOOKING")

    def test_extract_container_numbers(self, extractor: FieldExtractor):
        """测试箱号去重保序"""
        text = "msku1234567, MSKU1234567 TCLU7654321"
        assert extractor.extract_container_numbers(text) == ["MSKU1234567", "TCLU7654321"]

    def test_booking_not_container(self, extractor: FieldExtractor):
        """测试订舱号不被误识别为箱号"""
        assert extractor.extract_container_numbers("SNKO123456789012") == []


class TestSizeQuantity:
    """箱型+数量测试"""

    def test_extract_size_quantities(self, extractor: FieldExtractor):
        """测试多组箱型按文本顺序"""
        result = extractor.extract_size_quantities("20RF x 2, 40RF 3대")
        assert [(sq.size, sq.quantity, sq.rule) for sq in result] == [
            ("20RE", 2, "multiplier"),
            ("40RE", 3, "count_unit"),
        ]

    def test_unit_separator(self, extractor: FieldExtractor):
        """测试单位词作为分隔符"""
        result = extractor.extract_size_quantities("42PC 대 4", RecordType.SPECIAL)
        assert [(sq.size, sq.quantity) for sq in result] == [("42PC", 4)]

    def test_colon_separator(self, extractor: FieldExtractor):
        """测试冒号作为数量分隔符"""
        result = extractor.extract_size_quantities("42PC: 3, 40FR:2", RecordType.SPECIAL)
        assert [(sq.size, sq.quantity, sq.rule) for sq in result] == [
            ("42PC", 3, "multiplier"),
            ("42PC", 2, "multiplier"),
        ]

    def test_size_only(self, extractor: FieldExtractor):
        """测试只有箱型（需带代码）时数量为1"""
        result = extractor.extract_size_quantities("need 40RF asap")
        assert [(sq.size, sq.quantity, sq.rule) for sq in result] == [("40RE", 1, "size_only")]
        assert extractor.extract_size_quantities("need 40 asap") == []

    def test_quantity_clamped(self, extractor: FieldExtractor):
        """测试数量截断到 [1, 15]"""
        assert extractor.extract_size_quantities("42PC X 99", RecordType.SPECIAL)[0].quantity == 15
        assert extractor.extract_size_quantities("42PC X 0", RecordType.SPECIAL)[0].quantity == 1

    def test_record_type_family(self, extractor: FieldExtractor):
        """测试无代码时按记录类型补全箱型族"""
        result = extractor.extract_size_quantities("40' x 2", RecordType.SPECIAL)
        assert [(sq.size, sq.quantity) for sq in result] == [("42PC", 2)]


class TestMeasurements:
    """温度/通风/湿度测试"""

    def test_temperature_rule_priority(self, extractor: FieldExtractor):
        """测试 labeled > unit_suffixed > signed"""
        assert extractor.extract_temperature("5C Temp: -20") == ("labeled", "-20")
        assert extractor.extract_temperature("set -18C please") == ("unit_suffixed", "-18")
        assert extractor.extract_temperature("40RF -25") == ("signed", "-25")

    def test_temperature_not_from_date(self, extractor: FieldExtractor):
        """测试日期片段不被读作温度"""
        assert extractor.extract_temperature("2024-01-05") is None
        assert extractor.extract_temperature("2024-01-05 -18") == ("signed", "-18")
        assert extractor.extract_temperature("2026-11-05 도착") is None
        assert extractor.extract_temperature("11/05 도착") is None
        assert extractor.extract_temperature("HASLK12345678901 40RF x 1 2026-11-05 도착") is None
        assert extractor.extract_temperature("2026-11-05 -18도") == ("unit_suffixed", "-18")
        assert extractor.extract_temperature("영하 18도 유지") == ("unit_suffixed", "18")

    def test_temperature_rules_are_individually_testable(self):
        """测试单条规则可独立命中"""
        rule, match = first_match(TEMPERATURE_RULES, "온도 3")
        assert rule.name == "labeled"
        assert rule.value(match) == "3"

    def test_extract_vent(self, extractor: FieldExtractor):
        """测试通风规则"""
        assert extractor.extract_vent("VENT: OPEN") == ("labeled", "OPEN")
        assert extractor.extract_vent("vent 30%") == ("labeled", "30")
        assert extractor.extract_vent("환기 0%") == ("labeled", "CLOSED")
        assert extractor.extract_vent("close") == ("close_keyword", "CLOSED")
        assert extractor.extract_vent("nothing here") is None

    def test_extract_humidity(self, extractor: FieldExtractor):
        """测试湿度"""
        assert extractor.extract_humidity("HUM 60%") == ("labeled", "60")
        assert extractor.extract_humidity("습도: 75") == ("labeled", "75")
        assert extractor.extract_humidity("60%") is None


class TestDatesAndHints:
    """日期/状态/堆场测试"""

    def test_extract_pickup_date(self, extractor: FieldExtractor, reference_date: date):
        """测试完整/短日期"""
        assert extractor.extract_pickup_date("pick 2024.1.5", reference_date) == ("full", "2024-01-05")
        assert extractor.extract_pickup_date("픽업 날짜: 11/05", reference_date) == ("short", "2026-11-05")

    def test_invalid_short_date(self, extractor: FieldExtractor, reference_date: date):
        """测试月日超出范围的短日期跳过"""
        assert extractor.extract_pickup_date("13/45", reference_date) is None

    def test_date_rule_order(self):
        """测试完整日期规则在前"""
        assert [rule.name for rule in DATE_RULES] == ["full", "short"]

    def test_extract_status_hint(self, extractor: FieldExtractor):
        """测试状态关键词"""
        assert extractor.extract_status_hint("PTI PASS") == PtiStatus.PASS
        assert extractor.extract_status_hint("Completed") == PtiStatus.PASS
        assert extractor.extract_status_hint("예약 취소") == PtiStatus.CANCELLED
        assert extractor.extract_status_hint("CANCELLED") == PtiStatus.CANCELLED
        assert extractor.extract_status_hint("passenger") is None

    def test_extract_location(self, extractor: FieldExtractor):
        """测试堆场代码取最早出现者"""
        assert extractor.extract_location("at hjit then SNCT") == "HJIT"
        assert extractor.extract_location("ICTX yard") is None
        assert extractor.extract_location("") is None


class TestCustomerResolver:
    """客户名推断测试"""

    def test_labeled_customer(self, customer_resolver: EliminationCustomerResolver):
        """测试显式标签"""
        assert customer_resolver.resolve("고객: 삼성전자 SNKO123456789012 42PC X 1") == ("삼성전자", False)
        assert customer_resolver.resolve("CUSTOMER = LG Chem, 40RF") == ("LG Chem", False)

    def test_elimination(self, customer_resolver: EliminationCustomerResolver):
        """测试排除法取第一个普通词"""
        assert customer_resolver.resolve("SNKO123456789012 SAMSUNG 42PC X 1") == ("SAMSUNG", True)

    def test_no_candidate(self, customer_resolver: EliminationCustomerResolver):
        """测试全部为已知字段时返回空"""
        text = "SNKO123456789012 42PC X 3 픽업 날짜: 11/05"
        assert customer_resolver.resolve(text) == (None, False)

    def test_length_bounds(self, customer_resolver: EliminationCustomerResolver):
        """测试过短的词不作为客户名"""
        assert customer_resolver.resolve("A 42PC") == (None, False)

    def test_null_resolver(self):
        """测试严格模式"""
        assert NullCustomerResolver().resolve("SAMSUNG") == (None, False)
