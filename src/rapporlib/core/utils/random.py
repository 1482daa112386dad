"""
Random number generation helpers.

Responsibilities
  - Centralize numpy Generator creation and seeding.
  - Provide a uniform source backed by operating-system entropy for
    production reports.
  - Derive reproducible generators from a keyed digest so a client can
    replay its permanent randomized response without storing it.

Usage Context
  - Mechanisms accept either a numpy Generator (tests, simulations) or fall
    back to the secure source.

Limitations
  - Derived generators are only as secret as the key they are built from.
"""
# 说明：随机数生成辅助工具，统一管理 numpy Generator 的创建与安全随机源。
# 职责：
# - create_rng：将种子或已有 Generator 规范化为 numpy.random.Generator
# - secure_uniform：基于操作系统熵源（secrets）生成 [0, 1) 均匀分布样本
# - derived_rng：使用 HMAC-SHA256(key, message) 派生出可复现的 Generator

from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Callable, Optional, Union

import numpy as np

UniformSource = Callable[[int], np.ndarray]
# 接收样本数量并返回 [0, 1) 区间 float64 数组的均匀随机源

SeedLike = Union[None, int, np.random.Generator]

_MANTISSA_BITS = 53


def create_rng(seed: SeedLike = None) -> np.random.Generator:
    """Create a numpy Generator from a seed or return an existing generator."""
    # 若已是 Generator 则直接返回，避免重复包装导致状态分叉
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def secure_uniform(size: int) -> np.ndarray:
    """Draw ``size`` uniform floats in [0, 1) from operating-system entropy."""
    if size < 0:
        raise ValueError("size must be non-negative")
    raw = np.frombuffer(secrets.token_bytes(8 * size), dtype=np.uint64)
    # 取高 53 位映射到 [0, 1) 的双精度浮点数
    return (raw >> np.uint64(64 - _MANTISSA_BITS)).astype(np.float64) / float(1 << _MANTISSA_BITS)


def derived_rng(key: bytes, message: bytes) -> np.random.Generator:
    """Return a Generator seeded by HMAC-SHA256(key, message)."""
    digest = hmac.new(key, message, hashlib.sha256).digest()
    return np.random.default_rng(int.from_bytes(digest, "big"))


def uniform_source(rng: Optional[np.random.Generator]) -> UniformSource:
    # 有显式 Generator 时使用其 random 接口，否则退回到安全随机源
    if rng is None:
        return secure_uniform
    return lambda size: rng.random(size)
