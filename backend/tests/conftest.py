"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(spec, engine, reference_date):
        records = engine.parse(text, RecordType.SPECIAL, reference_date)
"""

from __future__ import annotations

from datetime import date

import pytest

from ptipaste.config import BusinessSpec, ExtractionConfig, RuntimeConfig, SpecLoader
from ptipaste.extraction import (
    EliminationCustomerResolver,
    FieldExtractor,
    RecordMaterializer,
    SpecialStrategy,
    StandardStrategy,
)
from ptipaste.pipeline import BulkPasteEngine


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def spec() -> BusinessSpec:
    """加载内置业务规则（会话级别缓存）"""
    return SpecLoader.load()


@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置（不读YAML，使用默认值）"""
    return RuntimeConfig(extraction=ExtractionConfig())


@pytest.fixture
def reference_date() -> date:
    """固定基准日期，保证短日期/默认日期可复现"""
    return date(2026, 10, 17)


# ============================================================================
# 提取器 Fixtures
# ============================================================================

@pytest.fixture
def extractor(spec: BusinessSpec, runtime_config: RuntimeConfig) -> FieldExtractor:
    return FieldExtractor(spec, runtime_config.extraction)


@pytest.fixture
def customer_resolver(extractor: FieldExtractor) -> EliminationCustomerResolver:
    return EliminationCustomerResolver(extractor)


@pytest.fixture
def standard_strategy(extractor: FieldExtractor, customer_resolver) -> StandardStrategy:
    return StandardStrategy(extractor, customer_resolver)


@pytest.fixture
def special_strategy(extractor: FieldExtractor, customer_resolver) -> SpecialStrategy:
    return SpecialStrategy(extractor, customer_resolver)


@pytest.fixture
def materializer(runtime_config: RuntimeConfig) -> RecordMaterializer:
    return RecordMaterializer(runtime_config.extraction)


# ============================================================================
# 引擎 Fixtures
# ============================================================================

@pytest.fixture
def engine(spec: BusinessSpec, runtime_config: RuntimeConfig) -> BulkPasteEngine:
    """默认引擎（排除法客户名推断）"""
    return BulkPasteEngine(spec=spec, config=runtime_config)
