"""
归一化函数 - 日期/箱型/船公司/通风/温度

职责：
1. 日期统一输出 YYYY-MM-DD（2位年份按20xx补全）
2. 箱型原始写法映射到闭集代码，无法映射的原样保留
3. 订舱号前缀 -> 船公司（无匹配返回UNKNOWN）
4. 通风/温度值清理

测试要点：
- test_normalize_date_formats: 24/01/05、2024-01-05、2024.01.05 均为 2024-01-05
- test_normalize_size_aliases: 40RF/40' -> 40RE，42PC/40FR -> 42PC
- test_infer_shipping_line: HASLK -> HAL，SNKO -> SKR
"""

from __future__ import annotations

import re
from datetime import date

from ..config import BusinessSpec
from ..models import RecordType, ShippingLine

CLOSED = "CLOSED"

_FULL_DATE = re.compile(r"^(\d{4}|\d{2})[./\-](\d{1,2})[./\-](\d{1,2})(?:[ T].*)?$")
_SHORT_DATE = re.compile(r"^(\d{1,2})[./\-](\d{1,2})$")
_COMPACT_DATE = re.compile(r"^(\d{4})(\d{2})(\d{2})$")

_TEMP_UNIT = re.compile(r"\s*(?:°\s*C|℃|'C|C|도)$", re.IGNORECASE)
_MINUS_SIGNS = str.maketrans({"−": "-", "–": "-", "－": "-", "＋": "+"})

_SIZE_RAW = re.compile(r"^(\d{2})\s*([A-Z']*)$")


def normalize_date_parts(year: str, month: str, day: str) -> str:
    """年月日拼接为 YYYY-MM-DD（2位年份补20）"""
    if len(year) == 2:
        year = "20" + year
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def normalize_date(text: str | None, reference_date: date | None = None) -> str:
    """
    归一化日期单元格

    支持：
      - Y.M.D / Y-M-D / Y/M/D（2或4位年份，可带时间部分）
      - YYYYMMDD
      - M/D（年份取基准日期的年份）
    无法识别的文本原样返回（去除首尾空白）
    """
    s = (text or "").strip()
    if not s:
        return ""

    m = _FULL_DATE.match(s)
    if m:
        return normalize_date_parts(*m.groups())

    m = _COMPACT_DATE.match(s)
    if m:
        return normalize_date_parts(*m.groups())

    m = _SHORT_DATE.match(s)
    if m:
        year = (reference_date or date.today()).year
        return normalize_date_parts(str(year), m.group(1), m.group(2))

    return s


def normalize_temperature(text: str | None) -> str:
    """温度清理：统一负号，去掉单位后缀，保留原有正负号"""
    s = (text or "").strip().translate(_MINUS_SIGNS)
    if not s:
        return ""
    s = _TEMP_UNIT.sub("", s).strip()
    return s.replace(" ", "")


def normalize_vent(text: str | None, default: str = CLOSED) -> str:
    """
    通风值清理

    CLOSE/CLOSED/0/0% -> CLOSED；OPEN -> OPEN；30% -> 30；其他原样
    """
    s = (text or "").strip().upper()
    if not s:
        return default
    if s in ("CLOSE", "CLOSED"):
        return CLOSED
    if s == "OPEN":
        return "OPEN"
    pct = s.rstrip("%").strip()
    if pct.isdigit():
        return CLOSED if int(pct) == 0 else str(int(pct))
    return (text or "").strip()


def normalize_humidity(text: str | None) -> str:
    s = (text or "").strip()
    return s.rstrip("%").strip()


def infer_shipping_line(booking_no: str | None, spec: BusinessSpec) -> ShippingLine:
    """订舱号前缀 -> 船公司（全函数：未知前缀/空值返回UNKNOWN）"""
    if not booking_no:
        return ShippingLine.UNKNOWN
    upper = booking_no.strip().upper()
    for prefix, definition in spec.get_booking_prefixes().items():
        if upper.startswith(prefix):
            return ShippingLine(definition.shipping_line)
    return ShippingLine.UNKNOWN


def shipping_line_from_cell(text: str | None, spec: BusinessSpec) -> ShippingLine:
    """Tab模式LINE列 -> 船公司"""
    key = (text or "").strip().upper()
    value = spec.get_shipping_line_cells().get(key)
    return ShippingLine(value) if value else ShippingLine.UNKNOWN


class SizeNormalizer:
    """箱型归一化（名义长度 + 箱型族 -> 闭集代码）"""

    def __init__(self, spec: BusinessSpec):
        self.spec = spec
        self.nominal_aliases = spec.get_nominal_aliases()
        self.family_aliases = spec.get_family_aliases()
        self.neutral_markers = set(spec.get_neutral_markers())
        self.codes = spec.get_size_codes()
        self._table = {(e.nominal, e.family): e.code for e in spec.get_size_table()}

    def normalize(self, raw: str | None, record_type: RecordType = RecordType.STANDARD) -> str:
        """
        归一化箱型

        Args:
            raw: 原始写法（40RF、42PC、40'、20 FLAT ...）
            record_type: 无箱型代码时决定箱型族

        Returns:
            闭集代码；无法映射时返回去除首尾空白的原文；空输入返回空串
        """
        s = (raw or "").strip()
        if not s:
            return ""

        compact = s.upper().replace("’", "'").replace(" ", "")
        if compact in self.codes:
            return compact

        m = _SIZE_RAW.match(compact)
        if not m:
            return s

        code = self.lookup(m.group(1), m.group(2), record_type)
        return code or s

    def lookup(self, nominal: str, family_code: str, record_type: RecordType) -> str | None:
        """名义长度 + 箱型代码 -> 闭集代码（无法映射返回None）"""
        length = self.nominal_aliases.get(nominal)
        if length is None:
            return None

        marker = (family_code or "").upper()
        if marker in self.neutral_markers:
            family = self.spec.get_record_type_defaults(record_type.value).default_family
        else:
            family = self.family_aliases.get(marker)
            if family is None:
                return None

        return self._table.get((length, family))
