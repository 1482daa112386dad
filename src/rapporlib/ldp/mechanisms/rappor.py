"""
Two-stage RAPPOR randomized response over report buffers.

Responsibilities
  - Permanent randomized response (PRR): with probability ``f`` replace each
    true bit by a fair coin, otherwise keep it.
  - Instantaneous randomized response (IRR): report 1 with probability ``q``
    where the permanent bit is 1 and ``p`` where it is 0.
  - Serialize the (f, p, q) configuration for the collecting side.

Usage Context
  - Applied by a client to the true report produced by the Bloom encoder.
  - Both stages are expressed with ``mask`` over Bernoulli-sampled buffers.

Limitations
  - Without ``client_secret`` the permanent response is redrawn on every
    call; callers that need a memoized PRR pass a secret instead of storing
    state.
"""
# 说明：在报告缓冲区上实现 RAPPOR 两阶段随机响应（永久随机响应 + 瞬时随机响应）。
# 职责：
# - 校验并保存 f/p/q 概率参数与随机源
# - permanent_response：mask(f 位, 真实报告, 公平硬币位)
# - instantaneous_response：mask(永久报告, p 位, q 位)
# - 提供配置序列化/反序列化，便于聚合端按相同参数去偏

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

import numpy as np

from rapporlib.core.utils.logging import get_logger
from rapporlib.core.utils.random import UniformSource, create_rng, derived_rng, uniform_source
from ..exceptions import InvalidParametersError
from ..ldp_utils import ensure_cohort, ensure_probability
from ..masking import bernoulli_buffer, mask

logger = get_logger(__name__)


class RapporMechanism:
    """
    RAPPOR permanent plus instantaneous randomized response.

    - Configuration
      - prob_f: Probability that a permanent bit is replaced by a fair coin.
      - prob_p: Probability of reporting 1 when the permanent bit is 0.
      - prob_q: Probability of reporting 1 when the permanent bit is 1.
      - rng: Optional numpy Generator or seed; OS entropy is used when omitted.
      - client_secret: Optional key making the PRR stable per (cohort, value).

    - Behavior
      - Never mutates the input buffer; every stage returns a new buffer.
    """

    mechanism_id = "rappor"

    def __init__(
        self,
        prob_f: float,
        prob_p: float,
        prob_q: float,
        *,
        rng: Optional[Any] = None,
        client_secret: Optional[bytes] = None,
    ):
        self.prob_f = ensure_probability(prob_f, name="prob_f")
        self.prob_p = ensure_probability(prob_p, name="prob_p")
        self.prob_q = ensure_probability(prob_q, name="prob_q")
        if client_secret is not None and not isinstance(client_secret, (bytes, bytearray)):
            raise InvalidParametersError("client_secret must be bytes")
        self._client_secret = bytes(client_secret) if client_secret is not None else None
        self._rng: Optional[np.random.Generator] = None if rng is None else create_rng(rng)
        self._uniform: UniformSource = uniform_source(self._rng)

    def _prr_source(self, cohort: int, value: str) -> UniformSource:
        # 有客户端密钥时，PRR 随机性由 HMAC(密钥, cohort‖value) 派生，同一取值的永久响应保持不变
        if self._client_secret is None:
            return self._uniform
        message = cohort.to_bytes(4, "big") + value.encode("utf-8")
        return uniform_source(derived_rng(self._client_secret, message))

    def permanent_response(self, bloom: Sequence[int], cohort: int = 0, value: str = "") -> bytearray:
        """Apply the permanent randomized response to a true report."""
        cohort = ensure_cohort(cohort)
        num_bytes = len(bloom)
        source = self._prr_source(cohort, value)
        f_bits = bernoulli_buffer(num_bytes, self.prob_f, source)
        coin_bits = bernoulli_buffer(num_bytes, 0.5, source)
        return mask(f_bits, bloom, coin_bits)

    def instantaneous_response(self, prr: Sequence[int]) -> bytearray:
        """Apply the instantaneous randomized response to a permanent report."""
        num_bytes = len(prr)
        p_bits = bernoulli_buffer(num_bytes, self.prob_p, self._uniform)
        q_bits = bernoulli_buffer(num_bytes, self.prob_q, self._uniform)
        return mask(prr, p_bits, q_bits)

    def randomise(self, bloom: Sequence[int], cohort: int = 0, value: str = "") -> bytearray:
        """Run PRR then IRR; returns the final noisy report."""
        prr = self.permanent_response(bloom, cohort=cohort, value=value)
        irr = self.instantaneous_response(prr)
        logger.debug("randomised %d-byte report for cohort %d", len(bloom), cohort)
        return irr

    def report_one_probabilities(self) -> tuple[float, float]:
        """P(report bit = 1) given a true bit of 0 and of 1 respectively."""
        # 真实比特为 b 时，永久比特为 1 的概率为 f/2 + (1 - f) b
        f, p, q = self.prob_f, self.prob_p, self.prob_q
        prr_one_given_zero = 0.5 * f
        prr_one_given_one = 0.5 * f + (1.0 - f)
        p_star = prr_one_given_zero * q + (1.0 - prr_one_given_zero) * p
        q_star = prr_one_given_one * q + (1.0 - prr_one_given_one) * p
        return p_star, q_star

    def serialize(self) -> Dict[str, Any]:
        return {
            "mechanism": self.mechanism_id,
            "prob_f": self.prob_f,
            "prob_p": self.prob_p,
            "prob_q": self.prob_q,
        }

    @classmethod
    def deserialize(cls, data: Mapping[str, Any]) -> "RapporMechanism":
        # 密钥与随机源属于客户端本地状态，不参与序列化
        try:
            return cls(prob_f=data["prob_f"], prob_p=data["prob_p"], prob_q=data["prob_q"])
        except KeyError as exc:
            raise InvalidParametersError(f"serialized data missing {exc.args[0]!r} field") from exc
