"""Base abstractions for deterministic RAPPOR encoders."""
# 说明：定义编码层的基础接口，负责原始值与报告缓冲区之间的确定性映射，不引入任何随机性。
# 职责：
# - 为编码器定义统一的抽象基类
# - 约定 fit/encode/decode/get_metadata 最小方法集合

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping


class BaseEncoder(ABC):
    """
    Minimal deterministic encoding interface.

    Encoders transform raw values into report buffers without adding noise;
    all randomness belongs to the mechanism layer.
    """

    @abstractmethod
    def fit(self, data: Iterable[Any]) -> "BaseEncoder":
        """Optional pre-processing step; returns self for chaining."""
        raise NotImplementedError

    @abstractmethod
    def encode(self, value: Any) -> bytearray:
        """Encode a raw value into a report buffer."""
        raise NotImplementedError

    @abstractmethod
    def decode(self, encoded: bytes) -> Any:
        """Decode a buffer back to the raw representation when feasible."""
        raise NotImplementedError

    @abstractmethod
    def get_metadata(self) -> Mapping[str, Any]:
        """Return JSON-serializable metadata describing the encoding scheme."""
        raise NotImplementedError


class StatelessEncoder(BaseEncoder):
    """Base class for encoders that require no fitting state."""

    def fit(self, data: Iterable[Any]) -> "StatelessEncoder":
        # 无状态编码器忽略输入数据直接返回自身以兼容统一接口
        del data
        return self

    def get_metadata(self) -> Mapping[str, Any]:
        return {"type": self.__class__.__name__}
