"""
Unit tests for the cohort hash family and its registry.
"""
# 说明：以 (cohort, round, value) 为键的哈希族及注册表的单元测试。
# 覆盖：
# - 内置哈希实现的确定性与对 cohort/round 的敏感性
# - 注册、覆盖与未知名称查询的行为

import hashlib
import struct

import pytest

from rapporlib.ldp.encoders.hashing import (
    digest_hash,
    fixed_width_digest_hash,
    get_hash_function,
    register_hash_function,
    registered_hash_functions,
    xxh64_cohort_hash,
)
from rapporlib.ldp.exceptions import InvalidParametersError


@pytest.mark.parametrize("name", ["sha256", "sha1", "md5", "sha256-fixed", "xxh64"])
def test_builtin_hashes_are_deterministic_and_keyed(name: str) -> None:
    fn = get_hash_function(name)
    assert fn(3, 0, "hello") == fn(3, 0, "hello")
    assert fn(3, 0, "hello") != fn(4, 0, "hello")
    assert fn(3, 0, "hello") != fn(3, 1, "hello")
    assert fn(3, 0, "hello") >= 0


def test_lookup_is_case_insensitive() -> None:
    assert get_hash_function("SHA256") is get_hash_function("sha256")
    assert get_hash_function("XXH64") is xxh64_cohort_hash


def test_digest_hash_rejects_unknown_algorithm() -> None:
    with pytest.raises(InvalidParametersError):
        digest_hash("not-a-digest")
    with pytest.raises(InvalidParametersError):
        fixed_width_digest_hash("not-a-digest")


def test_digest_hash_reads_concatenated_payload() -> None:
    expected = int.from_bytes(hashlib.sha256(b"100hello").digest(), "big")
    assert digest_hash("sha256")(10, 0, "hello") == expected
    assert digest_hash("sha256")(10, 0, b"hello") == expected


def test_fixed_width_hash_uses_64_bit_prefix() -> None:
    fn = fixed_width_digest_hash("sha256")
    expected = int.from_bytes(hashlib.sha256(struct.pack(">II", 1, 11) + b"v").digest()[:8], "big")
    assert fn(1, 11, "v") == expected
    # 定长前缀下 (1, 11) 与 (11, 1) 不再拼接成同一载荷
    assert fn(1, 11, "v") != fn(11, 1, "v")
    assert digest_hash("sha256")(1, 11, "v") == digest_hash("sha256")(11, 1, "v")


@pytest.mark.parametrize("name", ["sha256", "sha256-fixed", "xxh64"])
@pytest.mark.parametrize("value", [5, None, 2.0])
def test_hashes_reject_non_text_values(name: str, value) -> None:
    with pytest.raises(InvalidParametersError):
        get_hash_function(name)(0, 0, value)


def test_register_and_lookup_custom_hash() -> None:
    def constant(cohort: int, round_index: int, value: str) -> int:
        return 7

    register_hash_function("test-constant", constant, overwrite=True)
    assert get_hash_function("test-constant") is constant
    assert "test-constant" in registered_hash_functions()
    with pytest.raises(InvalidParametersError):
        register_hash_function("test-constant", constant)
    with pytest.raises(InvalidParametersError):
        register_hash_function("not-callable", 3)  # type: ignore[arg-type]


def test_unknown_hash_name() -> None:
    with pytest.raises(InvalidParametersError):
        get_hash_function("missing")
