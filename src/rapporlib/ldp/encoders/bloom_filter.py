"""Bloom filter encoder producing the true RAPPOR report."""
# 说明：将取值通过 h 轮以 cohort 为键的哈希映射到 k 字节 Bloom Filter 的若干比特位，得到真实报告；编码确定且不可逆。
# 职责：
# - encode(...)：函数式入口，按 (value, k, h, cohort) 确定性地生成报告缓冲区
# - RapporBloomEncoder：保存 k/h/cohort/哈希等静态配置的编码器对象
# - 提供编码配置的元数据视图以便调试与文档生成
# 约定：
# - 不同轮次选中同一比特时只置位一次，输出置位数可能少于 h，这不是错误
# - 编码阶段不引入任何随机性，隐私噪声全部由随机响应层添加

from __future__ import annotations

import numbers
from typing import Any, Mapping, Union

from rapporlib.core.utils.logging import get_logger
from ..bits import make_buffer, set_bit
from ..exceptions import InvalidParametersError
from ..ldp_utils import ensure_bloom_params, ensure_cohort
from .base import StatelessEncoder
from .hashing import DEFAULT_HASH, CohortHash, get_hash_function

logger = get_logger(__name__)


def _resolve_hash(hash_fn: Union[None, str, CohortHash]) -> CohortHash:
    if hash_fn is None:
        return get_hash_function(DEFAULT_HASH)
    if isinstance(hash_fn, str):
        return get_hash_function(hash_fn)
    if not callable(hash_fn):
        raise InvalidParametersError("hash_fn must be a registered name or a callable")
    return hash_fn


def encode(
    value: Union[str, bytes],
    k: int,
    h: int,
    cohort: int,
    hash_fn: Union[None, str, CohortHash] = None,
) -> bytearray:
    """
    Encode ``value`` into a ``k``-byte buffer with at most ``h`` bits set.

    Bit ``i`` of the procedure is ``hash_fn(cohort, i, value) % (k * 8)``.
    The same arguments always produce the same buffer.
    """
    k, h = ensure_bloom_params(k, h)
    cohort = ensure_cohort(cohort)
    if not isinstance(value, (str, bytes, bytearray)):
        raise InvalidParametersError(f"value must be str or bytes, got {type(value).__name__}")
    fn = _resolve_hash(hash_fn)
    num_bits = k * 8

    indices = []
    for round_index in range(h):
        try:
            digest = fn(cohort, round_index, value)
        except InvalidParametersError:
            raise
        except Exception as exc:
            raise InvalidParametersError(f"hash round {round_index} could not be computed: {exc}") from exc
        if isinstance(digest, bool) or not isinstance(digest, numbers.Integral) or digest < 0:
            raise InvalidParametersError(f"hash round {round_index} returned {digest!r}, expected a non-negative int")
        indices.append(int(digest) % num_bits)

    # 先完成全部哈希轮次再写入缓冲区，哈希失败时不会留下半成品
    buffer = make_buffer(k)
    for n in indices:
        set_bit(buffer, n)
    return buffer


class RapporBloomEncoder(StatelessEncoder):
    """Encode values into a cohort's Bloom filter using ``num_hashes`` hash rounds."""

    def __init__(
        self,
        num_bytes: int,
        num_hashes: int,
        cohort: int = 0,
        hash_fn: Union[None, str, CohortHash] = None,
    ):
        self.num_bytes, self.num_hashes = ensure_bloom_params(num_bytes, num_hashes)
        self.cohort = ensure_cohort(cohort)
        self.hash_fn = _resolve_hash(hash_fn)
        if hash_fn is None:
            self.hash_name = DEFAULT_HASH
        elif isinstance(hash_fn, str):
            self.hash_name = hash_fn.lower()
        else:
            self.hash_name = getattr(hash_fn, "__name__", "custom")

    @property
    def num_bits(self) -> int:
        return self.num_bytes * 8

    def encode(self, value: Any) -> bytearray:
        """Return the true report for ``value`` in this encoder's cohort."""
        buffer = encode(str(value), self.num_bytes, self.num_hashes, self.cohort, self.hash_fn)
        logger.debug("encoded value into %d-byte bloom filter for cohort %d", self.num_bytes, self.cohort)
        return buffer

    def decode(self, encoded: bytes) -> Any:
        """Bloom filter encoding is not reversible."""
        raise NotImplementedError("RapporBloomEncoder decode is not supported")

    def get_metadata(self) -> Mapping[str, Any]:
        return {
            "type": "rappor_bloom_filter",
            "num_bytes": self.num_bytes,
            "num_bits": self.num_bits,
            "num_hashes": self.num_hashes,
            "cohort": self.cohort,
            "hash": self.hash_name,
        }
