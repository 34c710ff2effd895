"""
记录类型策略 - 共用字段提取器，按记录类型选择提取器子集与默认值

- StandardStrategy: 冷藏箱，提取温度/通风/湿度，默认箱型 40RE
- SpecialStrategy:  框架箱/开顶箱，温度/通风不适用，默认箱型 42PC
"""

from __future__ import annotations

from datetime import date

from ..interfaces import ICustomerResolver, IRecordStrategy
from ..models import ExtractedFields, RecordType
from .customer import NullCustomerResolver
from .field_extractors import FieldExtractor


class BaseRecordStrategy(IRecordStrategy):
    """策略基类"""

    record_type = RecordType.STANDARD
    extract_measurements = True

    def __init__(self, extractor: FieldExtractor, customer_resolver: ICustomerResolver | None = None):
        self.extractor = extractor
        self.customer_resolver = customer_resolver or NullCustomerResolver()
        self.defaults = extractor.spec.get_record_type_defaults(self.record_type.value)

    def default_size(self) -> str:
        return self.defaults.default_size

    def default_vent(self) -> str:
        return self.defaults.default_vent

    def extract(self, text: str, reference_date: date) -> ExtractedFields:
        """提取自由文本条目的全部适用字段"""
        ex = self.extractor
        fields = ExtractedFields()

        fields.booking_no, fields.shipping_line = ex.extract_booking_no(text)
        fields.container_numbers = ex.extract_container_numbers(text)
        fields.size_quantities = ex.extract_size_quantities(text, self.record_type)

        if self.extract_measurements:
            self._apply(fields, "temperature", ex.extract_temperature(text))
            self._apply(fields, "vent", ex.extract_vent(text))
            self._apply(fields, "humidity", ex.extract_humidity(text))

        self._apply(fields, "pickup_date", ex.extract_pickup_date(text, reference_date))
        fields.location = ex.extract_location(text)
        fields.status_hint = ex.extract_status_hint(text)

        customer, inferred = self.customer_resolver.resolve(text)
        if customer:
            fields.customer = customer
            fields.matched_rules["customer"] = "elimination" if inferred else "labeled"

        return fields

    @staticmethod
    def _apply(fields: ExtractedFields, name: str, hit: tuple[str, str] | None) -> None:
        """写入 (规则名, 值) 命中结果"""
        if hit:
            rule, value = hit
            setattr(fields, name, value)
            fields.matched_rules[name] = rule


class StandardStrategy(BaseRecordStrategy):
    """冷藏箱PTI"""

    record_type = RecordType.STANDARD
    extract_measurements = True


class SpecialStrategy(BaseRecordStrategy):
    """特种箱（框架箱/开顶箱）"""

    record_type = RecordType.SPECIAL
    extract_measurements = False


STRATEGY_CLASSES: dict[RecordType, type[BaseRecordStrategy]] = {
    RecordType.STANDARD: StandardStrategy,
    RecordType.SPECIAL: SpecialStrategy,
}
