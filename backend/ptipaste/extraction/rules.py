"""
有序命名规则 - 依赖顺序的正则启发式

每组规则按列表顺序尝试，先命中者生效：
- TEMPERATURE_RULES: labeled > unit_suffixed > signed（避免把日期片段误读为温度）
- VENT_RULES: labeled > close_keyword
- DATE_RULES: full > short
- SIZE_QUANTITY_RULES: multiplier > count_unit > size_only

注意：Python 的 \\b 把韩文当作单词字符，边界一律用显式的前后断言
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

SIZE_TOKEN = (
    r"(?<![A-Za-z0-9])(?P<nominal>20|22|40|42|45)\s*"
    r"(?P<code>REEFER|FLAT|RF|RE|RH|HR|PC|FR|PF|UT|OT|FT|')?(?![A-Za-z])"
)
SIZE_TOKEN_WITH_CODE = (
    r"(?<![A-Za-z0-9])(?P<nominal>20|22|40|42|45)\s*"
    r"(?P<code>REEFER|FLAT|RF|RE|RH|HR|PC|FR|PF|UT|OT|FT|')(?![A-Za-z])"
)
UNIT_WORD = r"(?:대|개|UNITS?|EA|VANS?)"


@dataclass(frozen=True)
class PatternRule:
    """命名正则规则"""
    name: str
    pattern: re.Pattern[str]
    group: int | str = 1

    def search(self, text: str) -> re.Match[str] | None:
        return self.pattern.search(text)

    def finditer(self, text: str) -> Iterator[re.Match[str]]:
        return self.pattern.finditer(text)

    def value(self, match: re.Match[str]) -> str:
        return match.group(self.group)


def first_match(rules: Iterable[PatternRule], text: str) -> tuple[PatternRule, re.Match[str]] | None:
    """按顺序返回第一条命中的规则及匹配结果"""
    for rule in rules:
        m = rule.search(text)
        if m:
            return rule, m
    return None


TEMPERATURE_RULES: list[PatternRule] = [
    PatternRule(
        "labeled",
        re.compile(r"(?:TEMP(?:ERATURE)?|온도)\s*[:=]?\s*([+\-−]?\d+(?:\.\d+)?)", re.IGNORECASE),
    ),
    PatternRule(
        "unit_suffixed",
        # 无符号时前一字符不能是 -/+（日期片段）；도 后不能紧跟韩文（도착 等）
        re.compile(
            r"(?<![\d.])((?:[+\-−]|(?<![\-−/+]))\d{1,2}(?:\.\d+)?)\s*"
            r"(?:°\s*C|℃|'C|C(?![A-Za-z])|도(?![가-힣]))",
            re.IGNORECASE,
        ),
    ),
    PatternRule(
        "signed",
        re.compile(r"(?<![\w/\-−.+])([+\-−]\d{1,2}(?:\.\d+)?)(?!\d|[/.]\d)"),
    ),
]

VENT_RULES: list[PatternRule] = [
    PatternRule(
        "labeled",
        re.compile(
            r"(?:VENT(?:ILATION)?|환기구|개폐구|환기)\s*[:=]?\s*(CLOSED?|OPEN|\d{1,3})\s*%?",
            re.IGNORECASE,
        ),
    ),
    PatternRule(
        "close_keyword",
        re.compile(r"(?<![A-Za-z])(CLOSED?)(?![A-Za-z])", re.IGNORECASE),
    ),
]

HUMIDITY_RULES: list[PatternRule] = [
    PatternRule(
        "labeled",
        re.compile(r"(?:HUMIDITY|HUMID|HUM|습도)\s*[:=]?\s*(\d{1,3}(?:\.\d+)?)\s*%?", re.IGNORECASE),
    ),
]

DATE_RULES: list[PatternRule] = [
    PatternRule(
        "full",
        re.compile(r"(?<![\d.\-/])(\d{4}|\d{2})[./\-](\d{1,2})[./\-](\d{1,2})(?!\d|[./\-]\d)"),
        group=0,
    ),
    PatternRule(
        "short",
        re.compile(r"(?<![\d.\-/+])(\d{1,2})[./\-](\d{1,2})(?!\d|[./\-]\d)"),
        group=0,
    ),
]

SIZE_QUANTITY_RULES: list[PatternRule] = [
    PatternRule(
        "multiplier",
        re.compile(SIZE_TOKEN + r"\s*(?:[xX*×:]|" + UNIT_WORD + r")\s*(?P<qty>\d{1,3})(?!\d|[./\-]\d)", re.IGNORECASE),
        group="qty",
    ),
    PatternRule(
        "count_unit",
        re.compile(SIZE_TOKEN + r"\s*(?P<qty>\d{1,3})\s*" + UNIT_WORD + r"(?![A-Za-z])", re.IGNORECASE),
        group="qty",
    ),
    PatternRule(
        "size_only",
        re.compile(SIZE_TOKEN_WITH_CODE, re.IGNORECASE),
        group="nominal",
    ),
]
