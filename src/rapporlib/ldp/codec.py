"""
Textual and binary conversions for report buffers.

Responsibilities
  - Turn an octet string (one character per byte) into a buffer.
  - Render a buffer as lowercase hex for the telemetry payload, and parse it
    back on the collecting side.

Limitations
  - ``bytes_from_octet_string`` is not hex parsing: ``"fc"`` decodes to the
    code points of ``'f'`` and ``'c'`` (0x66, 0x63), not to 0xFC.
  - ``bytes_from_octet_string`` keeps only the low byte of each code point,
    so non-Latin-1 text is not preserved.
"""
# 说明：报告缓冲区与文本表示之间的转换工具。
# 职责：
# - bytes_from_octet_string：逐字符取码点低 8 位得到字节（并非十六进制解析）
# - bytes_to_hex：每字节两位小写十六进制，按缓冲区顺序拼接
# - bytes_from_hex：bytes_to_hex 的逆过程，用于聚合端解析上报的报告

from __future__ import annotations

from typing import Sequence

from .exceptions import InvalidLengthError, InvalidParametersError


def bytes_from_octet_string(text: str) -> bytearray:
    """
    Map each character of ``text`` to the low 8 bits of its code point.

    Lossy outside Latin-1: characters above U+00FF are truncated, so U+0141
    decodes to 0x41.
    """
    if not isinstance(text, str):
        raise InvalidParametersError("octet string must be str")
    if len(text) % 2:
        raise InvalidLengthError(f"octet string length must be even, got {len(text)}")
    return bytearray(ord(ch) & 0xFF for ch in text)


def bytes_to_hex(buffer: Sequence[int]) -> str:
    """Render each byte as two lowercase hex digits."""
    return "".join(f"{b:02x}" for b in bytes(buffer))


def bytes_from_hex(text: str) -> bytearray:
    """Parse lowercase or uppercase hex text produced by ``bytes_to_hex``."""
    if len(text) % 2:
        raise InvalidLengthError(f"hex string length must be even, got {len(text)}")
    try:
        return bytearray.fromhex(text)
    except ValueError as exc:
        raise InvalidParametersError(f"invalid hex string: {exc}") from exc
