"""
Unit tests for octet-string and hex conversions.
"""
# 说明：报告缓冲区文本转换工具的单元测试。
# 覆盖：
# - bytes_from_octet_string 逐字符取码点（非十六进制解析）与奇数长度异常
# - bytes_to_hex 的两位小写补零渲染
# - bytes_from_hex 的解析与非法输入

import pytest

from rapporlib.ldp.codec import bytes_from_hex, bytes_from_octet_string, bytes_to_hex
from rapporlib.ldp.exceptions import InvalidLengthError, InvalidParametersError


def test_octet_string_maps_characters_to_code_points() -> None:
    assert bytes_from_octet_string("fcfc") == bytearray([102, 99, 102, 99])
    assert bytes_from_octet_string("fcfg") != bytearray([102, 99, 102, 99])


def test_octet_string_keeps_low_byte_of_code_point() -> None:
    assert bytes_from_octet_string("Ł\x00") == bytearray([0x41, 0x00])
    # 超出 Latin-1 的字符与其低字节字符无法区分
    assert bytes_from_octet_string("ŁA") == bytes_from_octet_string("AA")


def test_octet_string_empty() -> None:
    assert bytes_from_octet_string("") == bytearray()


def test_octet_string_odd_length_raises() -> None:
    with pytest.raises(InvalidLengthError):
        bytes_from_octet_string("abc")


def test_bytes_to_hex() -> None:
    assert bytes_to_hex(bytearray([102, 99])) == "6663"
    assert bytes_to_hex(bytearray([102, 9])) == "6609"
    assert bytes_to_hex(b"") == ""
    assert bytes_to_hex([0, 255, 16]) == "00ff10"


def test_bytes_from_hex() -> None:
    assert bytes_from_hex("6663") == bytearray([102, 99])
    assert bytes_from_hex("00FF") == bytearray([0, 255])
    with pytest.raises(InvalidLengthError):
        bytes_from_hex("abc")
    with pytest.raises(InvalidParametersError):
        bytes_from_hex("zz")
