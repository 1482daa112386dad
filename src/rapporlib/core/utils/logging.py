"""
Lightweight logging helpers with privacy-aware defaults.
"""
# 说明：轻量级日志工具，提供隐私友好的默认配置与统一的 logger 获取入口。
# 职责：
# - PrivacyFilter：根据运行时配置对日志记录中的敏感字段（原始取值、客户端密钥等）进行脱敏
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载隐私过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 日志级别优先级：显式参数 level > 环境变量 RAPPOR_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config

SENSITIVE_ATTRIBUTES = ("value", "client_secret", "payload")


class PrivacyFilter(logging.Filter):
    """Filter that masks sensitive record attributes if configured."""

    def filter(self, record: logging.LogRecord) -> bool:
        config = get_config()
        if not config.mask_sensitive_fields:
            return True
        # 保留字段结构但隐藏具体内容，真实取值绝不进入日志
        for attr in SENSITIVE_ATTRIBUTES:
            if hasattr(record, attr):
                setattr(record, attr, "***")
        return True


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别、设置格式，并挂载 PrivacyFilter
    log_level = level or os.environ.get("RAPPOR_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if not any(isinstance(f, PrivacyFilter) for f in root.filters):
        root.addFilter(PrivacyFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    if not any(isinstance(f, PrivacyFilter) for f in logger.filters):
        logger.addFilter(PrivacyFilter())
    return logger
