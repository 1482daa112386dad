"""
Server-side aggregation of RAPPOR reports.

Per cohort ``j`` and bit ``i``, with ``N_j`` reports of which ``c_ij`` have
the bit set, the estimated number of clients whose true Bloom filter has the
bit set is::

    t_ij = (c_ij - N_j * (p + f*q/2 - f*p/2)) / ((1 - f) * (q - p))

The variance comes from the binomial model of ``c_ij`` around its expected
value under the observed rate.
"""
# 说明：聚合端按 cohort 与比特位统计上报报告，并按 f/p/q 去偏估计真实 Bloom Filter 的置位人数。
# 职责：
# - bit_counts：按 cohort 汇总每个比特位被置 1 的次数与报告总数
# - aggregate：对计数执行闭式去偏并给出方差估计，输出 Estimate
# - 接受 RapporReport 对象或其遥测 dict 形式

from __future__ import annotations

from typing import Any, Mapping, Sequence, Tuple, Union

import numpy as np

from rapporlib.core.utils.logging import get_logger
from ..bits import buffer_to_bits
from ..exceptions import InvalidParametersError, LengthMismatchError
from ..ldp_utils import ensure_cohort
from ..types import Estimate, RapporParams, RapporReport

logger = get_logger(__name__)

ReportLike = Union[RapporReport, Mapping[str, Any]]


class RapporAggregator:
    """
    Aggregate RAPPOR reports into per-cohort bit count estimates.

    - Configuration
      - params: The study parameters the reports were produced with.

    - Behavior
      - Estimates have shape (num_cohorts, num_bits); cohorts without
        reports estimate to zero with zero variance.
    """

    def __init__(self, params: RapporParams):
        f, p, q = params.prob_f, params.prob_p, params.prob_q
        if np.isclose(f, 1.0):
            raise InvalidParametersError("prob_f == 1 leaves no signal to estimate")
        if np.isclose(p, q):
            raise InvalidParametersError("prob_p == prob_q leaves no signal to estimate")
        self.params = params

    def _coerce(self, report: ReportLike) -> RapporReport:
        if isinstance(report, RapporReport):
            return report
        return RapporReport.from_dict(report)

    def bit_counts(self, reports: Sequence[ReportLike]) -> Tuple[np.ndarray, np.ndarray]:
        """Return (counts[num_cohorts, num_bits], totals[num_cohorts])."""
        params = self.params
        counts = np.zeros((params.num_cohorts, params.num_bits), dtype=np.int64)
        totals = np.zeros(params.num_cohorts, dtype=np.int64)
        for raw in reports:
            report = self._coerce(raw)
            cohort = ensure_cohort(report.cohort, params.num_cohorts)
            if len(report.report) != params.num_bytes:
                raise LengthMismatchError(
                    f"report has {len(report.report)} bytes, expected {params.num_bytes}"
                )
            counts[cohort] += buffer_to_bits(report.report)
            totals[cohort] += 1
        return counts, totals

    def aggregate(self, reports: Sequence[ReportLike]) -> Estimate:
        """Debias per-cohort bit counts into estimated true counts."""
        if len(reports) == 0:
            raise InvalidParametersError("reports must be non-empty")
        f, p, q = self.params.prob_f, self.params.prob_p, self.params.prob_q
        counts, totals = self.bit_counts(reports)
        n = totals[:, None].astype(float)
        scale = (1.0 - f) * (q - p)

        background = p + 0.5 * f * q - 0.5 * f * p
        estimate = (counts - n * background) / scale

        # 以观测频率作为二项分布成功率估计 c_ij 的方差
        with np.errstate(invalid="ignore", divide="ignore"):
            rate = np.where(n > 0, counts / n, 0.0)
        variance = n * rate * (1.0 - rate) / (scale ** 2)

        logger.info("aggregated %d reports over %d cohorts", int(totals.sum()), int((totals > 0).sum()))
        metadata = {
            "mechanism": "rappor",
            "n_reports": int(totals.sum()),
            "reports_per_cohort": totals.tolist(),
            "params": self.params.to_dict(),
        }
        return Estimate(metric="bit_counts", point=estimate, variance=variance, metadata=metadata)

    def get_metadata(self) -> Mapping[str, Any]:
        return {"type": "rappor", "params": self.params.to_dict()}
