"""
运行期配置 - 读取 ptipaste_runtime.yaml

职责：
- 加载数量上限/默认提货日偏移/客户名长度等运行参数
- 提供环境变量覆盖机制（PTIPASTE_ 前缀）
- 类型安全的配置访问
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

DEFAULT_RUNTIME_PATH = Path("ptipaste_runtime.yaml")
FALLBACK_RUNTIME_PATH = Path("config/ptipaste_runtime.yaml")


class ExtractionConfig(BaseModel):
    """提取配置"""

    max_quantity: int = 15
    pickup_offset_days: int = 2
    customer_min_len: int = 2
    customer_max_len: int = 30


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "PTIPASTE_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        return cls(
            extraction=ExtractionConfig(**cls._extract(runtime_opts, "extraction")),
            logging=LoggingConfig(**cls._extract(runtime_opts, "logging")),
        )

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key, {}) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        default_path = DEFAULT_RUNTIME_PATH
        if not default_path.exists() and FALLBACK_RUNTIME_PATH.exists():
            default_path = FALLBACK_RUNTIME_PATH
        _config = RuntimeConfig.from_yaml(default_path)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_RUNTIME_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config


def configure_logging(config: RuntimeConfig | None = None) -> None:
    """按配置设置根日志级别（库代码不调用，供CLI使用）"""
    cfg = config or get_config()
    level = getattr(logging, cfg.logging.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=cfg.logging.log_format)
