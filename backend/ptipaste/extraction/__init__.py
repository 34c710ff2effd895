"""
提取模块 - 文本分段/字段识别/归一化/记录物化

子模块：
- mode_selector: Tab分隔 / 自由文本判定
- segmenter: 行/序号条目切分
- rules: 有序命名正则规则（温度/通风/湿度/日期/箱型数量）
- normalizers: 日期/箱型/船公司/通风/温度归一化
- field_extractors: 各字段提取器
- customer: 客户名推断（排除法/严格模式）
- columns: Tab行列布局读取
- strategies: 记录类型策略
- materializer: 数量/箱号展开为草稿记录
- status_policy: PTI/提箱状态推断
"""

from .columns import DelimitedRowReader
from .customer import EliminationCustomerResolver, NullCustomerResolver
from .field_extractors import CONTAINER_PATTERN, FieldExtractor
from .materializer import RecordMaterializer, make_sequence_id
from .mode_selector import select_mode
from .normalizers import SizeNormalizer, normalize_date, normalize_temperature, normalize_vent
from .segmenter import segment_delimited, segment_freeform
from .status_policy import derive_pti_status, refresh_status
from .strategies import STRATEGY_CLASSES, SpecialStrategy, StandardStrategy

__all__ = [
    "select_mode",
    "segment_delimited",
    "segment_freeform",
    "FieldExtractor",
    "CONTAINER_PATTERN",
    "SizeNormalizer",
    "normalize_date",
    "normalize_temperature",
    "normalize_vent",
    "EliminationCustomerResolver",
    "NullCustomerResolver",
    "DelimitedRowReader",
    "StandardStrategy",
    "SpecialStrategy",
    "STRATEGY_CLASSES",
    "RecordMaterializer",
    "make_sequence_id",
    "derive_pti_status",
    "refresh_status",
]
