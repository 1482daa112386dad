"""
Property-based tests for the RAPPOR encoding primitives.
"""
# 说明：比特寻址、掩码合并、编码确定性与十六进制渲染的属性测试。
# 覆盖：
# - set_bit 仅改变目标比特，get_bit 在置位前后分别为假/真
# - mask 的逐位选择律
# - encode 的确定性与置位数上限
# - bytes_to_hex 的长度、小写字符集与可逆性

import string

from hypothesis import given, strategies as st

from rapporlib.ldp.bits import count_ones, get_bit, set_bit
from rapporlib.ldp.codec import bytes_from_hex, bytes_to_hex
from rapporlib.ldp.encoders.bloom_filter import encode
from rapporlib.ldp.masking import mask

from .conftest import bloom_params, buffer_triples, buffers


@given(st.data(), buffers())
def test_set_bit_touches_only_target(data, buffer):
    n = data.draw(st.integers(min_value=0, max_value=len(buffer) * 8 - 1))
    before = [get_bit(buffer, i) for i in range(len(buffer) * 8)]
    set_bit(buffer, n)
    after = [get_bit(buffer, i) for i in range(len(buffer) * 8)]
    assert after[n] is True
    assert all(after[i] == before[i] for i in range(len(before)) if i != n)


@given(st.data(), st.integers(min_value=1, max_value=32))
def test_get_bit_false_then_true_on_zero_buffer(data, size):
    buffer = bytearray(size)
    n = data.draw(st.integers(min_value=0, max_value=size * 8 - 1))
    assert get_bit(buffer, n) is False
    set_bit(buffer, n)
    assert get_bit(buffer, n) is True
    assert count_ones(buffer) == 1


@given(buffer_triples())
def test_mask_selection_law(triple):
    m, lhs, rhs = triple
    out = mask(m, lhs, rhs)
    assert len(out) == len(m)
    for n in range(len(m) * 8):
        source = rhs if get_bit(m, n) else lhs
        assert get_bit(out, n) == get_bit(source, n)


@given(st.text(max_size=40), bloom_params())
def test_encode_deterministic_and_bounded(value, params):
    k, h, cohort = params
    first = encode(value, k, h, cohort)
    second = encode(value, k, h, cohort)
    assert first == second
    assert len(first) == k
    assert 1 <= count_ones(first) <= h


@given(st.binary(max_size=64))
def test_hex_rendering(data):
    text = bytes_to_hex(data)
    assert len(text) == 2 * len(data)
    assert set(text) <= set(string.hexdigits.lower())
    assert bytes(bytes_from_hex(text)) == data
