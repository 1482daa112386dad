"""Unified entry point for RAPPOR encoders."""

from __future__ import annotations

from .base import BaseEncoder, StatelessEncoder
from .bloom_filter import RapporBloomEncoder, encode
from .hashing import (
    DEFAULT_HASH,
    CohortHash,
    digest_hash,
    fixed_width_digest_hash,
    get_hash_function,
    register_hash_function,
    registered_hash_functions,
    xxh64_cohort_hash,
)

__all__ = [
    "BaseEncoder",
    "StatelessEncoder",
    "RapporBloomEncoder",
    "encode",
    "DEFAULT_HASH",
    "CohortHash",
    "digest_hash",
    "fixed_width_digest_hash",
    "get_hash_function",
    "register_hash_function",
    "registered_hash_functions",
    "xxh64_cohort_hash",
]
