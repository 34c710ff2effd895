"""
配置层 - 加载业务规则与运行期配置

职责：
- 加载 config/rules.yaml（业务规则：前缀/堆场/箱型/列布局）
- 加载 ptipaste_runtime.yaml（运行期参数）
- 提供类型安全的配置访问接口
"""

from .runtime_config import (
    ExtractionConfig,
    RuntimeConfig,
    configure_logging,
    get_config,
    reload_config,
)
from .spec_loader import BusinessSpec, SpecLoader, load_spec

__all__ = [
    "SpecLoader",
    "BusinessSpec",
    "load_spec",
    "RuntimeConfig",
    "ExtractionConfig",
    "get_config",
    "reload_config",
    "configure_logging",
]
