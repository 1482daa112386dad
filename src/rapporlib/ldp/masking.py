"""
Per-bit select between two buffers under a mask, plus mask sampling.

``mask(m, lhs, rhs)`` keeps ``lhs`` where ``m`` has a 0 bit and takes ``rhs``
where ``m`` has a 1 bit. The randomized-response layer builds both of its
stages out of this single primitive and Bernoulli-sampled mask buffers.
"""
# 说明：RAPPOR 随机响应层的基础构件：按掩码逐位选择左右操作数。
# 职责：
# - mask：输出字节 = (lhs & ~m) | (rhs & m)，输入不被修改
# - bernoulli_buffer：按给定概率独立采样每一位，生成掩码/噪声缓冲区

from __future__ import annotations

from typing import Sequence

import numpy as np

from rapporlib.core.utils.random import UniformSource
from .exceptions import LengthMismatchError
from .ldp_utils import ensure_positive_int, ensure_probability


def mask(mask_buf: Sequence[int], lhs: Sequence[int], rhs: Sequence[int]) -> bytearray:
    """Return a new buffer taking ``rhs`` bits where ``mask_buf`` is 1, else ``lhs`` bits."""
    if not (len(mask_buf) == len(lhs) == len(rhs)):
        raise LengthMismatchError(
            f"mask/lhs/rhs lengths differ: {len(mask_buf)}/{len(lhs)}/{len(rhs)}"
        )
    return bytearray((a & ~m & 0xFF) | (b & m) for m, a, b in zip(mask_buf, lhs, rhs))


def bernoulli_buffer(num_bytes: int, prob: float, uniform: UniformSource) -> bytearray:
    """Sample a buffer whose bits are independently 1 with probability ``prob``."""
    num_bytes = ensure_positive_int(num_bytes, "num_bytes")
    prob = ensure_probability(prob, name="prob")
    draws = np.asarray(uniform(num_bytes * 8), dtype=float)
    return bytearray(np.packbits(draws < prob, bitorder="little").tobytes())
