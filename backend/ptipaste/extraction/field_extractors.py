"""
字段提取器 - 从条目文本中识别各字段

职责：
1. 订舱号（前缀决定船公司）
2. 箱号（4字母+7数字，可多个）
3. 箱型+数量（可多组，数量截断到上限）
4. 温度/通风/湿度（有序命名规则，先命中者生效）
5. 提货日期（完整日期优先，短日期补当前年）
6. 状态关键词（仅提示）、堆场代码

所有方法对未命中返回None/空列表，不抛异常

测试要点：
- test_extract_booking_no: 订舱号与船公司
- test_extract_container_numbers: 箱号去重保序
- test_extract_size_quantities: 多种数量写法
- test_temperature_rule_priority: labeled > unit_suffixed > signed
- test_extract_pickup_date: 完整/短日期
"""

from __future__ import annotations

import re
from datetime import date

from ..config import BusinessSpec, ExtractionConfig, load_spec
from ..models import PtiStatus, RecordType, ShippingLine, SizeQuantity
from .normalizers import (
    CLOSED,
    SizeNormalizer,
    infer_shipping_line,
    normalize_date_parts,
    normalize_humidity,
    normalize_temperature,
    normalize_vent,
)
from .rules import (
    DATE_RULES,
    HUMIDITY_RULES,
    SIZE_QUANTITY_RULES,
    TEMPERATURE_RULES,
    VENT_RULES,
    first_match,
)

CONTAINER_PATTERN = re.compile(r"(?<![A-Za-z])([A-Za-z]{4}\d{7})(?!\d)")


def build_booking_pattern(spec: BusinessSpec) -> re.Pattern[str]:
    """按前缀定义构造订舱号正则（长前缀优先）"""
    parts = [
        rf"{re.escape(prefix)}\d{{{definition.digits}}}"
        for prefix, definition in spec.get_booking_prefixes().items()
    ]
    if not parts:
        return re.compile(r"(?!x)x")
    return re.compile(r"(?<![A-Za-z0-9])(" + "|".join(parts) + r")(?!\d)", re.IGNORECASE)


class FieldExtractor:
    """字段提取器实现（两种记录类型共用）"""

    def __init__(self, spec: BusinessSpec | None = None, config: ExtractionConfig | None = None):
        self.spec = spec or load_spec()
        self.config = config or ExtractionConfig()
        self.sizes = SizeNormalizer(self.spec)
        self.booking_pattern = build_booking_pattern(self.spec)
        self.locations = self.spec.get_locations()
        self._location_patterns = [
            (code, re.compile(rf"(?<![A-Za-z0-9]){re.escape(code)}(?![A-Za-z0-9])", re.IGNORECASE))
            for code in self.locations
        ]
        self._status_keywords = self.spec.get_status_keywords()

    # === 标识类 ===

    def extract_booking_no(self, text: str) -> tuple[str | None, ShippingLine]:
        """提取订舱号，并由前缀确定船公司"""
        m = self.booking_pattern.search(text or "")
        if not m:
            return None, ShippingLine.UNKNOWN
        booking_no = m.group(1).upper()
        return booking_no, infer_shipping_line(booking_no, self.spec)

    def is_booking_no(self, text: str) -> bool:
        return bool(self.booking_pattern.fullmatch((text or "").strip()))

    def extract_container_numbers(self, text: str) -> list[str]:
        """提取全部箱号（大写，去重保序）"""
        result: list[str] = []
        for m in CONTAINER_PATTERN.finditer(text or ""):
            no = m.group(1).upper()
            if no not in result:
                result.append(no)
        return result

    # === 箱型与数量 ===

    def extract_size_quantities(
        self,
        text: str,
        record_type: RecordType = RecordType.STANDARD,
    ) -> list[SizeQuantity]:
        """
        提取箱型+数量（按文本顺序）

        规则顺序：multiplier > count_unit > size_only；
        已被前序规则占用的区间不再重复识别
        """
        text = text or ""
        taken: list[tuple[int, int]] = []
        found: list[tuple[int, SizeQuantity]] = []

        for rule in SIZE_QUANTITY_RULES:
            for m in rule.finditer(text):
                span = m.span()
                if any(span[0] < end and start < span[1] for start, end in taken):
                    continue
                size = self.sizes.lookup(m.group("nominal"), m.group("code") or "", record_type)
                if size is None:
                    continue
                qty = 1 if rule.name == "size_only" else self.clamp_quantity(int(m.group("qty")))
                taken.append(span)
                found.append((span[0], SizeQuantity(size=size, quantity=qty, rule=rule.name)))

        found.sort(key=lambda item: item[0])
        return [sq for _, sq in found]

    def clamp_quantity(self, qty: int) -> int:
        """数量截断到 [1, max_quantity]"""
        return max(1, min(qty, self.config.max_quantity))

    # === 测量值 ===

    def extract_temperature(self, text: str) -> tuple[str, str] | None:
        """返回 (规则名, 温度值)"""
        hit = first_match(TEMPERATURE_RULES, text or "")
        if not hit:
            return None
        rule, m = hit
        return rule.name, normalize_temperature(rule.value(m))

    def extract_vent(self, text: str) -> tuple[str, str] | None:
        """返回 (规则名, 通风值)；CLOSE/0 -> CLOSED"""
        hit = first_match(VENT_RULES, text or "")
        if not hit:
            return None
        rule, m = hit
        return rule.name, normalize_vent(rule.value(m), default=CLOSED)

    def extract_humidity(self, text: str) -> tuple[str, str] | None:
        hit = first_match(HUMIDITY_RULES, text or "")
        if not hit:
            return None
        rule, m = hit
        return rule.name, normalize_humidity(rule.value(m))

    # === 日期 ===

    def extract_pickup_date(self, text: str, reference_date: date) -> tuple[str, str] | None:
        """
        提取提货日期，返回 (规则名, YYYY-MM-DD)

        完整日期（2/4位年份）优先；短日期 M/D 补基准年份，
        月/日超出范围的短日期跳过
        """
        text = text or ""
        full, short = DATE_RULES
        m = full.search(text)
        if m:
            return full.name, normalize_date_parts(m.group(1), m.group(2), m.group(3))

        for m in short.finditer(text):
            month, day = int(m.group(1)), int(m.group(2))
            if 1 <= month <= 12 and 1 <= day <= 31:
                return short.name, normalize_date_parts(str(reference_date.year), m.group(1), m.group(2))
        return None

    def looks_like_date(self, token: str) -> bool:
        return any(rule.pattern.search(token) for rule in DATE_RULES)

    # === 状态/堆场 ===

    def extract_status_hint(self, text: str) -> PtiStatus | None:
        """状态关键词（PASS/취소 等），仅作提示"""
        upper = (text or "").upper()
        for status, keywords in self._status_keywords.items():
            for keyword in keywords:
                if self._contains_keyword(upper, keyword):
                    return PtiStatus(status)
        return None

    def extract_location(self, text: str) -> str | None:
        """堆场代码（取文本中最早出现者）"""
        best: tuple[int, str] | None = None
        for code, pattern in self._location_patterns:
            m = pattern.search(text or "")
            if m and (best is None or m.start() < best[0]):
                best = (m.start(), code)
        return best[1] if best else None

    def is_location(self, token: str) -> bool:
        return token.strip().upper() in self.locations

    def is_size_token(self, token: str) -> bool:
        """整段是箱型（可带数量）"""
        return any(rule.pattern.fullmatch(token) for rule in SIZE_QUANTITY_RULES)

    def _contains_keyword(self, upper_text: str, keyword: str) -> bool:
        if keyword.isascii():
            return re.search(rf"(?<![A-Z]){re.escape(keyword)}(?![A-Z])", upper_text) is not None
        return keyword in upper_text


__all__ = ["FieldExtractor", "CONTAINER_PATTERN", "build_booking_pattern"]
