"""
Unit tests for logging utilities.
"""
# 说明：日志配置与隐私脱敏过滤相关的单元测试。
# 覆盖：
# - get_logger(...)：获取带 PrivacyFilter 的 logger 实例
# - 启用掩码时 value/client_secret 等字段被替换，关闭掩码时保持原值

import logging

from rapporlib.core.utils import PrivacyFilter, configure, configure_logging, get_config, get_logger


def test_get_logger_installs_privacy_filter() -> None:
    logger = get_logger("rapporlib.test")
    assert any(isinstance(f, PrivacyFilter) for f in logger.filters)
    get_logger("rapporlib.test")
    assert sum(isinstance(f, PrivacyFilter) for f in logger.filters) == 1


def test_sensitive_fields_masked(caplog) -> None:
    configure_logging(level="INFO")
    logger = get_logger("rapporlib.test.mask")
    with caplog.at_level(logging.INFO, logger="rapporlib.test.mask"):
        logger.info("message", extra={"value": "hello", "client_secret": b"k"})
    record = caplog.records[-1]
    assert "message" in caplog.text
    assert record.value == "***"
    assert record.client_secret == "***"


def test_masking_can_be_disabled(caplog) -> None:
    logger = get_logger("rapporlib.test.nomask")
    previous = get_config().mask_sensitive_fields
    configure(mask_sensitive_fields=False)
    try:
        with caplog.at_level(logging.INFO, logger="rapporlib.test.nomask"):
            logger.info("message", extra={"value": "hello"})
    finally:
        configure(mask_sensitive_fields=previous)
    assert caplog.records[-1].value == "hello"
