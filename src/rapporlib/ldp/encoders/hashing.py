"""
Cohort-keyed hash family for Bloom filter bit selection.

Responsibilities
  - Define the pluggable ``CohortHash(cohort, round, value) -> int`` capability.
  - Ship a few named implementations (hashlib digests and xxhash).
  - Keep a small registry so studies can name their hash in configuration.

Usage Context
  - The Bloom encoder reduces the returned integer modulo the filter width.

Limitations
  - Hash outputs are not secret; privacy comes from the randomized response.
  - Collisions are possible by design.
"""
# 说明：Bloom Filter 比特选择所用的哈希族，以 (cohort, round, value) 为键，可插拔替换。
# 职责：
# - 定义 CohortHash 可调用协议，返回非负整数，由编码器对 k*8 取模
# - 提供基于 hashlib 摘要与 xxhash 的若干命名实现
# - 维护名称到实现的注册表，支持自定义哈希注册与按名称获取

from __future__ import annotations

import hashlib
import struct
from typing import Callable, Dict, List, Union

import xxhash

from ..exceptions import InvalidParametersError

CohortHash = Callable[[int, int, str], int]

_FIXED_PREFIX = struct.Struct(">II")


def _value_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise InvalidParametersError(f"value must be str or bytes, got {type(value).__name__}")


def _concat_payload(cohort: int, round_index: int, value: Union[str, bytes]) -> bytes:
    # 十进制 cohort、轮次与取值直接拼接，与既有部署产生的报告逐位一致
    return f"{cohort}{round_index}".encode("ascii") + _value_bytes(value)


def _fixed_payload(cohort: int, round_index: int, value: Union[str, bytes]) -> bytes:
    # cohort 与轮次以定长大端整数前置，避免 "1"+"11" 与 "11"+"1" 之类的拼接歧义
    return _FIXED_PREFIX.pack(cohort, round_index) + _value_bytes(value)


def digest_hash(algorithm: str) -> CohortHash:
    """
    Build a CohortHash from a hashlib algorithm name.

    The digest of ``f"{cohort}{round}{value}"`` is read as one big-endian
    integer. With a power-of-two filter width only the low bits of the last
    digest byte select the filter bit.
    """
    if algorithm not in hashlib.algorithms_available:
        raise InvalidParametersError(f"hash algorithm '{algorithm}' is not available")

    def _fn(cohort: int, round_index: int, value: str) -> int:
        digest = hashlib.new(algorithm, _concat_payload(cohort, round_index, value)).digest()
        return int.from_bytes(digest, "big")

    _fn.__name__ = f"{algorithm}_cohort_hash"
    return _fn


def fixed_width_digest_hash(algorithm: str) -> CohortHash:
    """Like :func:`digest_hash` but with a fixed-width ``>II`` cohort/round prefix; first 8 digest bytes."""
    if algorithm not in hashlib.algorithms_available:
        raise InvalidParametersError(f"hash algorithm '{algorithm}' is not available")

    def _fn(cohort: int, round_index: int, value: str) -> int:
        digest = hashlib.new(algorithm, _fixed_payload(cohort, round_index, value)).digest()
        return int.from_bytes(digest[:8], "big")

    _fn.__name__ = f"{algorithm}_fixed_cohort_hash"
    return _fn


def xxh64_cohort_hash(cohort: int, round_index: int, value: str) -> int:
    """xxHash64 of the value, seeded by ``cohort << 32 | round``."""
    seed = (cohort << 32) | round_index
    return xxhash.xxh64(_value_bytes(value), seed=seed).intdigest()


_HASH_REGISTRY: Dict[str, CohortHash] = {
    "sha256": digest_hash("sha256"),
    "sha1": digest_hash("sha1"),
    "md5": digest_hash("md5"),
    "sha256-fixed": fixed_width_digest_hash("sha256"),
    "xxh64": xxh64_cohort_hash,
}

DEFAULT_HASH = "sha256"


def register_hash_function(name: str, fn: CohortHash, *, overwrite: bool = False) -> None:
    """Register a CohortHash under ``name``."""
    key = name.lower()
    if not callable(fn):
        raise InvalidParametersError("hash function must be callable")
    if key in _HASH_REGISTRY and not overwrite:
        raise InvalidParametersError(f"hash function '{name}' is already registered")
    _HASH_REGISTRY[key] = fn


def get_hash_function(name: str = DEFAULT_HASH) -> CohortHash:
    """Look up a registered CohortHash by name."""
    try:
        return _HASH_REGISTRY[name.lower()]
    except KeyError:
        raise InvalidParametersError(
            f"unknown hash function '{name}'; registered: {registered_hash_functions()}"
        ) from None


def registered_hash_functions() -> List[str]:
    return sorted(_HASH_REGISTRY)
