"""
批量粘贴引擎 - 编排各阶段执行

职责：
1. 模式判定 -> 分段 -> 逐条目提取 -> 物化为草稿记录
2. 单条目失败隔离（记录告警，降级为一条默认记录）
3. 汇总告警标记（状态关键词提示、排除法推断的客户名）

测试要点：
- test_parse_delimited_row: Tab行1:1
- test_quantity_expansion: 数量展开
- test_item_failure_isolation: 条目失败隔离
- test_idempotent: 同一文本两次解析结果一致
"""

from __future__ import annotations

import logging
from datetime import date

from ..config import BusinessSpec, RuntimeConfig, get_config, load_spec
from ..extraction import (
    STRATEGY_CLASSES,
    DelimitedRowReader,
    EliminationCustomerResolver,
    FieldExtractor,
    RecordMaterializer,
    segment_delimited,
    segment_freeform,
    select_mode,
)
from ..interfaces import ICustomerResolver, IRecordStrategy
from ..models import DraftRecord, ExtractedFields, ModeDecision, ParseResult, PasteItem, RecordType
from .stages import StageEnum

logger = logging.getLogger(__name__)


def coerce_record_type(value: RecordType | str | None) -> RecordType:
    """记录类型容错转换（大小写不敏感，非法值抛ValueError）"""
    if isinstance(value, RecordType):
        return value
    if value is None:
        return RecordType.STANDARD
    return RecordType(str(value).strip().upper())


class BulkPasteEngine:
    """批量粘贴解析引擎（无状态，可重复调用）"""

    def __init__(
        self,
        spec: BusinessSpec | None = None,
        config: RuntimeConfig | None = None,
        customer_resolver: ICustomerResolver | None = None,
    ):
        self.spec = spec or load_spec()
        self.config = config or get_config()

        self.extractor = FieldExtractor(self.spec, self.config.extraction)
        self.customer_resolver = customer_resolver or EliminationCustomerResolver(
            self.extractor, self.config.extraction
        )
        self.strategies: dict[RecordType, IRecordStrategy] = {
            record_type: cls(self.extractor, self.customer_resolver)
            for record_type, cls in STRATEGY_CLASSES.items()
        }
        self.row_reader = DelimitedRowReader(self.extractor)
        self.materializer = RecordMaterializer(self.config.extraction)

    def parse(
        self,
        text: str | None,
        record_type: RecordType | str = RecordType.STANDARD,
        reference_date: date | None = None,
    ) -> list[DraftRecord]:
        """解析粘贴文本，返回有序草稿记录"""
        return self.parse_with_report(text, record_type, reference_date).records

    def parse_with_report(
        self,
        text: str | None,
        record_type: RecordType | str = RecordType.STANDARD,
        reference_date: date | None = None,
    ) -> ParseResult:
        """解析粘贴文本，返回记录与告警标记"""
        ref = reference_date or date.today()
        result = ParseResult()

        try:
            rt = coerce_record_type(record_type)
        except ValueError:
            logger.warning(f"未知记录类型: {record_type!r}，按STANDARD处理")
            result.add_flag(f"unknown_record_type:{record_type}")
            rt = RecordType.STANDARD
        result.record_type = rt
        strategy = self.strategies[rt]

        logger.debug(f"开始阶段: {StageEnum.SELECT_MODE.value}")
        decision = select_mode(text, rt)
        result.mode = decision.mode_name

        logger.debug(f"开始阶段: {StageEnum.SEGMENT.value} ({decision.mode_name})")
        items = self._segment(text, decision)
        result.item_count = len(items)

        for item in items:
            start = len(result.records) + 1
            try:
                records = self._process_item(item, decision, strategy, ref, start, result)
            except Exception as e:
                logger.warning(f"条目{item.index}解析失败，降级为默认记录: {e}")
                result.add_flag(f"item_degraded:{item.index}")
                records = self.materializer.materialize(
                    ExtractedFields(), strategy, ref, expand=not decision.delimited, start=start
                )
            result.records.extend(records)

        logger.info(
            f"批量解析完成: 模式={result.mode} 类型={rt.value} "
            f"条目={result.item_count} 记录={len(result.records)} 告警={len(result.flags)}"
        )
        return result

    def smart_paste(
        self,
        text: str | None,
        record_type: RecordType | str = RecordType.STANDARD,
        reference_date: date | None = None,
    ) -> ExtractedFields:
        """单条录入表单的智能粘贴：只提取字段，不展开记录"""
        ref = reference_date or date.today()
        try:
            strategy = self.strategies[coerce_record_type(record_type)]
            return strategy.extract(text or "", ref)
        except Exception as e:
            logger.warning(f"智能粘贴提取失败: {e}")
            return ExtractedFields()

    # =========================================================================
    # 阶段实现
    # =========================================================================

    def _segment(self, text: str | None, decision: ModeDecision) -> list[PasteItem]:
        if decision.delimited:
            return segment_delimited(
                text,
                header_markers=self.spec.get_header_markers(),
                header_columns=self.spec.get_header_check_columns(),
            )
        return segment_freeform(text)

    def _process_item(
        self,
        item: PasteItem,
        decision: ModeDecision,
        strategy: IRecordStrategy,
        reference_date: date,
        start: int,
        result: ParseResult,
    ) -> list[DraftRecord]:
        """EXTRACT + MATERIALIZE 单个条目"""
        logger.debug(f"[条目{item.index}] {StageEnum.EXTRACT.value}")
        if decision.delimited:
            fields = self.row_reader.read(
                item.cells,
                strategy.record_type,
                reference_date,
                strategy.default_size(),
                strategy.default_vent(),
            )
        else:
            fields = strategy.extract(item.text, reference_date)

        if fields.status_hint is not None:
            result.add_flag(f"status_hint:{item.index}:{fields.status_hint.value}")
        if fields.matched_rules.get("customer") == "elimination":
            result.add_flag(f"customer_inferred:{item.index}")

        logger.debug(f"[条目{item.index}] {StageEnum.MATERIALIZE.value}")
        return self.materializer.materialize(
            fields,
            strategy,
            reference_date,
            expand=not decision.delimited,
            start=start,
        )


# 默认引擎实例（随全局配置重建）
_default_engine: BulkPasteEngine | None = None


def default_engine() -> BulkPasteEngine:
    """默认引擎（内置规则 + 全局运行期配置；reload_config 后自动重建）"""
    global _default_engine
    config = get_config()
    if _default_engine is None or _default_engine.config is not config:
        _default_engine = BulkPasteEngine(config=config)
    return _default_engine


def parse_bulk_text(
    text: str | None,
    record_type: RecordType | str = RecordType.STANDARD,
    *,
    reference_date: date | None = None,
) -> list[DraftRecord]:
    """解析粘贴文本为草稿记录"""
    return default_engine().parse(text, record_type, reference_date)


def smart_paste(
    text: str | None,
    record_type: RecordType | str = RecordType.STANDARD,
    reference_date: date | None = None,
) -> ExtractedFields:
    return default_engine().smart_paste(text, record_type, reference_date)
