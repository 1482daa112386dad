"""
Shared Hypothesis strategies for property-based testing across rapporlib.
"""
# 说明：属性测试中共享的 Hypothesis 策略集。
# 职责：
# - 生成任意长度受控的报告缓冲区以及等长缓冲区三元组
# - 生成合法的 (k, h, cohort) 编码参数组合

from hypothesis import strategies as st


@st.composite
def buffers(draw, min_size=1, max_size=32):
    # 生成随机内容的 bytearray 报告缓冲区
    return bytearray(draw(st.binary(min_size=min_size, max_size=max_size)))


@st.composite
def buffer_triples(draw, max_size=32):
    # 生成长度一致的 (mask, lhs, rhs) 三元组
    size = draw(st.integers(min_value=0, max_value=max_size))
    return tuple(bytearray(draw(st.binary(min_size=size, max_size=size))) for _ in range(3))


@st.composite
def bloom_params(draw):
    # 生成满足 h <= k * 8 的 (k, h, cohort) 组合
    k = draw(st.integers(min_value=1, max_value=16))
    h = draw(st.integers(min_value=1, max_value=min(k * 8, 8)))
    cohort = draw(st.integers(min_value=0, max_value=255))
    return k, h, cohort
