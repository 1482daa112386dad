"""
Unit tests for the RAPPOR aggregator.
"""
# 说明：聚合端按 cohort 统计与去偏估计的单元测试。
# 覆盖：
# - 恒等随机响应参数下估计值精确等于真实置位人数
# - 接受遥测 dict 形式的报告
# - 大样本下带噪声报告的估计值接近真实比例
# - 空输入、f=1、p=q、报告宽度或 cohort 非法时的异常

import numpy as np
import pytest

from rapporlib.ldp.aggregators.rappor import RapporAggregator
from rapporlib.ldp.client import RapporClient
from rapporlib.ldp.exceptions import InvalidParametersError, LengthMismatchError
from rapporlib.ldp.types import RapporParams, RapporReport


def _identity_params() -> RapporParams:
    return RapporParams(num_bytes=1, num_hashes=1, num_cohorts=2, prob_f=0.0, prob_p=0.0, prob_q=1.0)


def test_identity_parameters_recover_exact_counts() -> None:
    reports = [
        RapporReport(cohort=0, report=bytes([0b0000_0101])),
        RapporReport(cohort=0, report=bytes([0b0000_0001])),
        RapporReport(cohort=1, report=bytes([0b1000_0000])),
    ]
    aggregator = RapporAggregator(_identity_params())
    estimate = aggregator.aggregate(reports)
    assert estimate.metric == "bit_counts"
    assert estimate.point.shape == (2, 8)
    assert estimate.point[0].tolist() == [2, 0, 1, 0, 0, 0, 0, 0]
    assert estimate.point[1].tolist() == [0, 0, 0, 0, 0, 0, 0, 1]
    assert estimate.metadata["reports_per_cohort"] == [2, 1]
    assert estimate.metadata["n_reports"] == 3


def test_bit_counts_accepts_payload_dicts() -> None:
    aggregator = RapporAggregator(_identity_params())
    counts, totals = aggregator.bit_counts([{"cohort": "1", "report": "03"}])
    assert totals.tolist() == [0, 1]
    assert counts[1].tolist() == [1, 1, 0, 0, 0, 0, 0, 0]


def test_noisy_reports_estimate_population_share() -> None:
    params = RapporParams(num_bytes=4, num_hashes=2, num_cohorts=1, prob_f=0.25, prob_p=0.25, prob_q=0.75)
    rng = np.random.default_rng(11)
    client = RapporClient(params, cohort=0, rng=rng)
    true_bits = np.flatnonzero(
        np.unpackbits(np.frombuffer(bytes(client.encode("apple")), dtype=np.uint8), bitorder="little")
    )
    n = 4000
    reports = [client.create_report("apple") for _ in range(n)]
    estimate = RapporAggregator(params).aggregate(reports)
    shares = estimate.point[0] / n
    for bit in range(params.num_bits):
        expected = 1.0 if bit in true_bits else 0.0
        assert abs(shares[bit] - expected) < 0.15
    assert np.all(estimate.variance >= 0)


def test_aggregator_rejects_degenerate_params() -> None:
    with pytest.raises(InvalidParametersError):
        RapporAggregator(RapporParams(prob_f=1.0))
    with pytest.raises(InvalidParametersError):
        RapporAggregator(RapporParams(prob_p=0.5, prob_q=0.5))


def test_aggregator_input_validation() -> None:
    aggregator = RapporAggregator(_identity_params())
    with pytest.raises(InvalidParametersError):
        aggregator.aggregate([])
    with pytest.raises(LengthMismatchError):
        aggregator.aggregate([RapporReport(cohort=0, report=b"\x00\x00")])
    with pytest.raises(InvalidParametersError):
        aggregator.aggregate([RapporReport(cohort=5, report=b"\x00")])
