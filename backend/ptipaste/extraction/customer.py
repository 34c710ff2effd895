"""
客户名推断 - 自由文本模式

实现：
- EliminationCustomerResolver: 先找显式标签（고객/CUSTOMER: xxx），
  否则取第一个不符合任何已知字段模式、长度合理的词（排除法）
- NullCustomerResolver: 严格模式，始终返回空（客户名只能来自Tab列）

排除法对刻意构造的输入可能误判（例如把短的堆场/箱型片段当成客户名），
结果需人工复核，调用方据第二个返回值打标记
"""

from __future__ import annotations

import re

from ..config import ExtractionConfig
from ..interfaces import ICustomerResolver
from .field_extractors import CONTAINER_PATTERN, FieldExtractor

_TOKEN_SPLIT = re.compile(r"[\s,;/|()\[\]{}<>\"]+")
_EDGE_PUNCT = ".:;-_=#~!?*'`"
_NUMERIC = re.compile(r"^[+\-−]?\d+(?:[.,]\d+)?\s*(?:%|°C|℃|C|도|대|개)?$", re.IGNORECASE)
_SEPARATORS = {"X", "*", "×", "+", "&", "-", ":"}


class NullCustomerResolver(ICustomerResolver):
    """严格模式：不从自由文本推断客户名"""

    def resolve(self, text: str) -> tuple[str | None, bool]:
        return None, False


class EliminationCustomerResolver(ICustomerResolver):
    """标签优先 + 排除法兜底"""

    def __init__(self, extractor: FieldExtractor, config: ExtractionConfig | None = None):
        self.extractor = extractor
        self.config = config or extractor.config
        self.label_keywords = extractor.spec.get_label_keywords()
        labels = "|".join(re.escape(label) for label in extractor.spec.get_customer_labels())
        self._labeled = (
            re.compile(rf"(?:{labels})\s*[:=]\s*([^\n,;/|]+)", re.IGNORECASE) if labels else None
        )

    def resolve(self, text: str) -> tuple[str | None, bool]:
        text = text or ""

        if self._labeled:
            m = self._labeled.search(text)
            if m:
                words: list[str] = []
                for raw in m.group(1).split():
                    token = raw.strip(_EDGE_PUNCT)
                    if not token or self._is_field_token(token):
                        break
                    words.append(token)
                value = " ".join(words)[: self.config.customer_max_len].strip()
                if value:
                    return value, False

        for raw in _TOKEN_SPLIT.split(text):
            token = raw.strip(_EDGE_PUNCT)
            if self._is_candidate(token):
                return token, True
        return None, False

    def _is_candidate(self, token: str) -> bool:
        if not token:
            return False
        if not (self.config.customer_min_len <= len(token) <= self.config.customer_max_len):
            return False
        return not self._is_field_token(token)

    def _is_field_token(self, token: str) -> bool:
        """是否符合其他已知字段模式（订舱号/箱号/日期/箱型/堆场/数字/标签）"""
        return not self._is_plain(token)

    def _is_plain(self, token: str) -> bool:
        upper = token.upper()
        if upper in _SEPARATORS or _NUMERIC.match(token):
            return False
        if self.extractor.booking_pattern.search(token) or CONTAINER_PATTERN.search(token):
            return False
        if self.extractor.looks_like_date(token):
            return False
        if self.extractor.is_size_token(token) or self.extractor.is_location(token):
            return False
        if self._is_label(upper):
            return False
        # 以数字开头的片段（序号、数量、温度等）
        if token[0].isdigit():
            return False
        return True

    def _is_label(self, upper: str) -> bool:
        """标签/关键词：ASCII词整词或前缀匹配，韩文词包含匹配（单字只整词）"""
        for keyword in self.label_keywords:
            if keyword.isascii():
                if upper == keyword or re.match(rf"{re.escape(keyword)}(?![A-Z])", upper):
                    return True
            elif len(keyword) == 1:
                if upper == keyword:
                    return True
            elif keyword in upper:
                return True
        return False
