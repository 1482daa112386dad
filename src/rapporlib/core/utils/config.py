"""
Runtime configuration utilities.

Centralises the library's runtime switches (validation strictness, logging
level, log masking) and exposes helpers to read them from environment
variables or update them at runtime. Study parameters are deliberately not
kept here; they travel explicitly as ``RapporParams``.
"""
# 说明：运行时配置管理工具，只管理库级运行开关，研究参数通过 RapporParams 显式传递。
# 职责：
# - RuntimeConfig：封装严格校验开关、日志等级、敏感字段掩码、随机种子等配置项
# - load_from_env(...)：按统一前缀（RAPPOR_）从环境变量加载并解析配置值
# - get_config()：获取全局 RuntimeConfig 实例
# - configure(...)：通过关键字参数更新全局配置并返回更新后的实例
# 约定：
# - 布尔类环境变量使用 {"1", "true", "yes"}（大小写不敏感）视为 True
# - 未知配置键在 update(...) 中会触发 AttributeError

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

_BOOL_KEYS = ("STRICT_VALIDATION", "MASK_SENSITIVE_FIELDS")


@dataclass
class RuntimeConfig:
    strict_validation: bool = True
    log_level: str = field(default_factory=lambda: os.environ.get("RAPPOR_LOG_LEVEL", "INFO"))
    mask_sensitive_fields: bool = True
    rng_seed: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def update(self, **kwargs: Any) -> None:
        # 按关键字参数更新当前配置实例，未知字段名将显式报错
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "RAPPOR_") -> None:
        # 从带有指定前缀的环境变量中加载配置，并进行类型转换后写回实例字段
        for key in ("STRICT_VALIDATION", "LOG_LEVEL", "MASK_SENSITIVE_FIELDS", "RNG_SEED"):
            env_key = f"{prefix}{key}"
            if env_key not in os.environ:
                continue
            value: Any = os.environ[env_key]
            if key in _BOOL_KEYS:
                value = value.lower() in {"1", "true", "yes"}
            elif key == "RNG_SEED":
                value = int(value)
            setattr(self, key.lower(), value)


_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    # 返回全局 RuntimeConfig 实例，供日志等库级组件读取
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    # 以关键字参数更新全局配置，并返回更新后的实例
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
