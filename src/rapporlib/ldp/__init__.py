"""Entry point for the RAPPOR encoding subsystem."""

from __future__ import annotations

from .aggregators import RapporAggregator
from .bits import buffer_to_bits, buffer_to_indices, bits_to_buffer, count_ones, get_bit, make_buffer, set_bit
from .client import RapporClient, assign_cohort
from .codec import bytes_from_hex, bytes_from_octet_string, bytes_to_hex
from .encoders import RapporBloomEncoder, encode, get_hash_function, register_hash_function
from .exceptions import IndexOutOfRangeError, InvalidLengthError, InvalidParametersError, LengthMismatchError
from .masking import bernoulli_buffer, mask
from .mechanisms import RapporMechanism
from .types import Estimate, RapporParams, RapporReport

__all__ = [
    "RapporAggregator",
    "RapporBloomEncoder",
    "RapporClient",
    "RapporMechanism",
    "RapporParams",
    "RapporReport",
    "Estimate",
    "assign_cohort",
    "encode",
    "get_hash_function",
    "register_hash_function",
    "make_buffer",
    "set_bit",
    "get_bit",
    "count_ones",
    "buffer_to_indices",
    "buffer_to_bits",
    "bits_to_buffer",
    "mask",
    "bernoulli_buffer",
    "bytes_from_octet_string",
    "bytes_to_hex",
    "bytes_from_hex",
    "IndexOutOfRangeError",
    "LengthMismatchError",
    "InvalidLengthError",
    "InvalidParametersError",
]
