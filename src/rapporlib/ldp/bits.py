"""
Bit-level addressing over fixed-length byte buffers.

Bit ``n`` lives in byte ``n >> 3`` at position ``n & 7``, least-significant
bit first. Buffers are never resized; ``set_bit`` mutates in place only after
the index has been validated.
"""
# 说明：报告缓冲区的比特寻址原语，字节内低位优先。
# 职责：
# - set_bit / get_bit：带范围检查的比特置位与读取
# - make_buffer：分配固定长度、全零的报告缓冲区
# - count_ones / buffer_to_indices：统计与枚举被置位的比特
# - buffer_to_bits / bits_to_buffer：与 numpy 0/1 数组之间按低位优先顺序互转

from __future__ import annotations

import numbers
from typing import Any, Iterable, List, MutableSequence, Sequence

import numpy as np

from .exceptions import IndexOutOfRangeError, InvalidParametersError
from .ldp_utils import ensure_positive_int

Buffer = Sequence[int]
MutableBuffer = MutableSequence[int]


def _check_index(buffer: Buffer, n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise IndexOutOfRangeError(f"bit index must be an integer, got {type(n).__name__}")
    capacity = len(buffer) * 8
    if n < 0 or n >= capacity:
        raise IndexOutOfRangeError(f"bit index {n} out of range for {capacity} bits")
    return int(n)


def make_buffer(num_bytes: int) -> bytearray:
    """Allocate a zero-filled report buffer of ``num_bytes`` bytes."""
    return bytearray(ensure_positive_int(num_bytes, "num_bytes"))


def set_bit(buffer: MutableBuffer, n: int) -> None:
    """Set bit ``n`` of ``buffer`` to 1 in place."""
    n = _check_index(buffer, n)
    buffer[n >> 3] |= 1 << (n & 7)


def get_bit(buffer: Buffer, n: int) -> bool:
    """Return True when bit ``n`` of ``buffer`` is 1."""
    n = _check_index(buffer, n)
    return (buffer[n >> 3] & (1 << (n & 7))) != 0


def count_ones(buffer: Buffer) -> int:
    """Count the number of set bits."""
    return sum(bin(b).count("1") for b in buffer)


def buffer_to_indices(buffer: Buffer) -> List[int]:
    """Return the indices of set bits in ascending order."""
    return [n for n in range(len(buffer) * 8) if buffer[n >> 3] & (1 << (n & 7))]


def buffer_to_bits(buffer: Buffer) -> np.ndarray:
    """Unpack a buffer into a uint8 array of 0/1 values, LSB first per byte."""
    return np.unpackbits(np.frombuffer(bytes(buffer), dtype=np.uint8), bitorder="little")


def bits_to_buffer(bits: Iterable[Any]) -> bytearray:
    """Pack a 0/1 sequence (length a multiple of 8) back into a buffer."""
    if not isinstance(bits, np.ndarray):
        bits = list(bits)
    arr = np.asarray(bits).astype(bool).ravel()
    if arr.size == 0 or arr.size % 8:
        raise InvalidParametersError("bit sequence length must be a positive multiple of 8")
    return bytearray(np.packbits(arr, bitorder="little").tobytes())
