"""
Error hierarchy for the RAPPOR encoding layer.

Responsibilities
  - Name each local failure kind raised by the bit, codec, mask and encoder
    primitives.
  - Keep every error a ParamValidationError so callers can catch input
    problems uniformly.

Limitations
  - Exceptions only carry message text; no error is retried internally.
"""
# 说明：RAPPOR 编码层的异常体系，所有错误均为同步、本地的输入错误。
# 职责：
# - IndexOutOfRangeError：比特索引超出缓冲区容量
# - LengthMismatchError：mask/lhs/rhs 等缓冲区长度不一致
# - InvalidLengthError：八位字节串或十六进制串长度为奇数
# - InvalidParametersError：k/h 非正、cohort 非法或哈希依赖不可用

from __future__ import annotations

from rapporlib.core.utils.param_validation import ParamValidationError


class IndexOutOfRangeError(ParamValidationError, IndexError):
    """
    Raised when a bit index falls outside ``[0, len(buffer) * 8)``.

    - Usage Notes
      - Also an IndexError, so generic sequence handling keeps working.
    """


class LengthMismatchError(ParamValidationError):
    """Raised when buffers that must share a length do not."""


class InvalidLengthError(ParamValidationError):
    """Raised when a textual byte representation has an odd length."""


class InvalidParametersError(ParamValidationError):
    """
    Raised for unusable encoding parameters.

    - Behavior
      - Covers non-positive sizes or hash counts, out-of-range cohorts and
        probabilities, and hash capabilities that are unknown or fail.
    """
