"""
Reusable validation helpers.
"""
# 说明：参数验证相关的辅助函数，用于在库内部统一进行轻量级参数检查。
# 职责：
# - ParamValidationError：参数校验失败的异常基类，库内所有输入错误均派生自此
# - ensure：基于布尔条件触发参数校验错误的轻量断言工具
# - ensure_type：检查参数是否属于指定类型集合，并在失败时给出带 label 的错误提示

from __future__ import annotations

from typing import Any, Tuple, Type


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_type(
    value: Any,
    expected: Tuple[type, ...],
    *,
    label: str = "value",
    error: Type[Exception] = ParamValidationError,
) -> None:
    # 检查 value 是否为 expected 集合中的任意类型，否则抛出带字段标签的异常
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise error(f"{label} must be instance of {names}")
