"""
Client-side report creation.

Responsibilities
  - Assign a cohort to a client.
  - Combine the Bloom encoder and the randomized-response mechanism under one
    explicit ``RapporParams`` value.
  - Produce the payload handed to the telemetry transport.

Usage Context
  - A study creates one client per participant, keeps its cohort (and
    optionally its secret) for the participant's lifetime, and submits
    ``create_report(value).to_dict()``.

Limitations
  - Transport, persistence and study lifecycle stay with the caller.
"""
# 说明：客户端报告生成流程：cohort 分配、Bloom 编码与两阶段随机响应的组合。
# 职责：
# - assign_cohort：在 [0, num_cohorts) 中均匀分配 cohort
# - RapporClient：以显式 RapporParams 组装编码器与机制，生成 RapporReport
# - 日志中只记录参数与 cohort，真实取值通过 PrivacyFilter 掩码

from __future__ import annotations

from typing import Any, Mapping, Optional

from rapporlib.core.utils.logging import get_logger
from rapporlib.core.utils.random import create_rng, secure_uniform
from .encoders.bloom_filter import RapporBloomEncoder
from .ldp_utils import ensure_cohort, ensure_positive_int
from .mechanisms.rappor import RapporMechanism
from .types import RapporParams, RapporReport

logger = get_logger(__name__)


def assign_cohort(num_cohorts: int, rng: Optional[Any] = None) -> int:
    """Pick a cohort uniformly from ``[0, num_cohorts)``."""
    num_cohorts = ensure_positive_int(num_cohorts, "num_cohorts")
    if rng is None:
        draw = float(secure_uniform(1)[0])
    else:
        draw = float(create_rng(rng).random())
    return min(int(draw * num_cohorts), num_cohorts - 1)


class RapporClient:
    """
    Encode and randomize values for one participant.

    - Configuration
      - params: Study parameters (k, h, cohorts, f/p/q, hash).
      - cohort: The participant's cohort; assigned at random when omitted.
      - client_secret: Optional key that keeps the permanent response stable.
      - rng: Optional numpy Generator or seed, for simulations and tests.
    """

    def __init__(
        self,
        params: RapporParams,
        cohort: Optional[int] = None,
        *,
        client_secret: Optional[bytes] = None,
        rng: Optional[Any] = None,
    ):
        self.params = params
        self._rng = None if rng is None else create_rng(rng)
        if cohort is None:
            cohort = assign_cohort(params.num_cohorts, self._rng)
        self.cohort = ensure_cohort(cohort, params.num_cohorts)
        self.encoder = RapporBloomEncoder(
            params.num_bytes, params.num_hashes, cohort=self.cohort, hash_fn=params.hash_name
        )
        self.mechanism = RapporMechanism(
            params.prob_f,
            params.prob_p,
            params.prob_q,
            rng=self._rng,
            client_secret=client_secret,
        )

    def encode(self, value: str) -> bytearray:
        """Return the true (noise-free) report for ``value``."""
        return self.encoder.encode(value)

    def create_report(self, value: str, metadata: Optional[Mapping[str, Any]] = None) -> RapporReport:
        """Encode, randomize and wrap ``value`` as a RapporReport."""
        value = str(value)
        bloom = self.encode(value)
        noisy = self.mechanism.randomise(bloom, cohort=self.cohort, value=value)
        logger.debug(
            "created report for cohort %d (k=%d, h=%d)",
            self.cohort,
            self.params.num_bytes,
            self.params.num_hashes,
            extra={"value": value},
        )
        return RapporReport(cohort=self.cohort, report=bytes(noisy), metadata=dict(metadata or {}))
