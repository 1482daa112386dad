"""LDP-focused parameter validation helpers shared by encoders, mechanisms and aggregators."""
# 说明：为 RAPPOR 子系统提供概率、正整数与 cohort 等关键参数的统一校验函数。
# 职责：
# - 校验概率参数范围与整数参数的正值约束
# - 校验 cohort 取值以及 Bloom Filter 参数组合 (k, h) 的合法性

from __future__ import annotations

import numbers
from typing import Any, Optional

from .exceptions import InvalidParametersError

# cohort 以 32 位无符号整数参与哈希与密钥派生
MAX_COHORT = 2**32 - 1


def ensure_probability(p: Any, name: str = "p") -> float:
    """Ensure p is a real number within [0, 1]; return it as float."""
    # 拒绝 bool 与非实数，避免 True/False 被静默当成概率
    if isinstance(p, bool) or not isinstance(p, numbers.Real):
        raise InvalidParametersError(f"{name} must be a real number")
    if not (0.0 <= float(p) <= 1.0):
        raise InvalidParametersError(f"{name} must be within [0, 1]")
    return float(p)


def ensure_positive_int(value: Any, name: str) -> int:
    """Ensure value is a positive integer; return it as int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParametersError(f"{name} must be an integer")
    if value <= 0:
        raise InvalidParametersError(f"{name} must be positive")
    return int(value)


def ensure_cohort(cohort: Any, num_cohorts: Optional[int] = None) -> int:
    """Ensure cohort is an integer in [0, 2**32), below num_cohorts when given."""
    if isinstance(cohort, bool) or not isinstance(cohort, numbers.Integral):
        raise InvalidParametersError("cohort must be an integer")
    if cohort < 0:
        raise InvalidParametersError("cohort must be non-negative")
    if cohort > MAX_COHORT:
        raise InvalidParametersError(f"cohort must not exceed {MAX_COHORT}")
    if num_cohorts is not None and cohort >= num_cohorts:
        raise InvalidParametersError(f"cohort {cohort} out of range for num_cohorts={num_cohorts}")
    return int(cohort)


def ensure_bloom_params(num_bytes: Any, num_hashes: Any) -> tuple[int, int]:
    """Validate (k, h): both positive and h no larger than the number of bits."""
    k = ensure_positive_int(num_bytes, "num_bytes")
    h = ensure_positive_int(num_hashes, "num_hashes")
    if h > k * 8:
        raise InvalidParametersError(f"num_hashes={h} exceeds the {k * 8} available bits")
    return k, h
