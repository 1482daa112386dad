"""
Low-level primitives grouped under one namespace.

Exposes exactly the six building blocks of report encoding: bit addressing,
masking, Bloom encoding and the two codec conversions.
"""

from __future__ import annotations

from rapporlib.ldp.bits import get_bit, set_bit
from rapporlib.ldp.codec import bytes_from_octet_string, bytes_to_hex
from rapporlib.ldp.encoders.bloom_filter import encode
from rapporlib.ldp.masking import mask

__all__ = [
    "set_bit",
    "get_bit",
    "mask",
    "encode",
    "bytes_from_octet_string",
    "bytes_to_hex",
]
