"""
Shared type definitions for the RAPPOR subsystem.

Responsibilities
  - Define the explicit per-study encoding parameters.
  - Define the report payload a client hands to its telemetry transport.
  - Define the estimate container produced by aggregators.

Usage Context
  - Passed between clients, transports and aggregators; all types offer
    JSON-friendly ``to_dict`` / ``from_dict`` helpers.

Limitations
  - Payloads store declared values; they do not prove which mechanism
    actually produced a report.
"""
# 说明：RAPPOR 子系统中共享的类型定义：研究参数、上报载荷与聚合估计结果。
# 职责：
# - RapporParams：显式传递的编码与随机响应参数（k, h, cohort 数, f/p/q, 哈希名）
# - RapporReport：客户端交给遥测通道的报告，序列化为 {"cohort": str, "report": hex}
# - Estimate：聚合端输出的估计结果容器

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .codec import bytes_from_hex, bytes_to_hex
from .exceptions import InvalidParametersError
from .ldp_utils import ensure_bloom_params, ensure_cohort, ensure_positive_int, ensure_probability


@dataclass(frozen=True)
class RapporParams:
    """
    Encoding and randomized-response parameters fixed for one study.

    - Configuration
      - num_bytes: Report length ``k`` in bytes.
      - num_hashes: Hash rounds ``h`` (bits set per true value).
      - num_cohorts: Number of cohorts clients are spread over.
      - prob_f: Permanent randomized-response probability.
      - prob_p: Probability of reporting 1 when the permanent bit is 0.
      - prob_q: Probability of reporting 1 when the permanent bit is 1.
      - hash_name: Name of the registered cohort hash.

    - Behavior
      - Validated on construction; invalid values raise InvalidParametersError.
    """

    num_bytes: int = 16
    num_hashes: int = 2
    num_cohorts: int = 64
    prob_f: float = 0.5
    prob_p: float = 0.5
    prob_q: float = 0.75
    hash_name: str = "sha256"

    def __post_init__(self) -> None:
        ensure_bloom_params(self.num_bytes, self.num_hashes)
        ensure_positive_int(self.num_cohorts, "num_cohorts")
        ensure_probability(self.prob_f, name="prob_f")
        ensure_probability(self.prob_p, name="prob_p")
        ensure_probability(self.prob_q, name="prob_q")
        if not isinstance(self.hash_name, str) or not self.hash_name:
            raise InvalidParametersError("hash_name must be a non-empty string")

    @property
    def num_bits(self) -> int:
        return self.num_bytes * 8

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num_bytes": self.num_bytes,
            "num_hashes": self.num_hashes,
            "num_cohorts": self.num_cohorts,
            "prob_f": self.prob_f,
            "prob_p": self.prob_p,
            "prob_q": self.prob_q,
            "hash_name": self.hash_name,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RapporParams":
        # 未出现的字段沿用默认值，多余字段显式报错以免拼写错误被静默忽略
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise InvalidParametersError(f"unknown RapporParams fields: {sorted(unknown)}")
        return cls(**dict(data))


@dataclass
class RapporReport:
    """
    A single client report ready for the telemetry transport.

    - Configuration
      - cohort: Cohort the client belongs to.
      - report: Final noisy report buffer.
      - metadata: Optional routing metadata (never the true value).

    - Behavior
      - ``to_dict`` renders the cohort as decimal text and the report as hex.
    """

    cohort: int
    report: bytes
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.cohort = ensure_cohort(self.cohort)
        self.report = bytes(self.report)

    @property
    def report_hex(self) -> str:
        return bytes_to_hex(self.report)

    def to_dict(self) -> Dict[str, Any]:
        """Export to the telemetry payload shape."""
        payload: Dict[str, Any] = {"cohort": str(self.cohort), "report": self.report_hex}
        if self.metadata:
            payload["metadata"] = dict(self.metadata)
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RapporReport":
        """Parse a telemetry payload back into a report."""
        try:
            cohort = int(data["cohort"])
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidParametersError("payload needs an integer 'cohort' field") from exc
        if "report" not in data:
            raise InvalidParametersError("payload needs a 'report' field")
        return cls(
            cohort=cohort,
            report=bytes(bytes_from_hex(str(data["report"]))),
            metadata=data.get("metadata", {}),
        )


@dataclass
class Estimate:
    """
    Container for aggregated estimates.

    - Configuration
      - metric: Name of the estimated statistic.
      - point: Point estimate value (usually a numpy array).
      - variance: Optional variance of the point estimate.
      - metadata: Additional metadata about the estimate.
    """

    metric: str
    point: Any
    variance: Optional[Any] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)
