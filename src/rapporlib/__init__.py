"""RAPPOR randomized-response encoding for privacy-preserving telemetry."""

from __future__ import annotations

from . import internal
from .core.utils import ParamValidationError, RuntimeConfig, configure, get_config, get_logger
from .ldp import (
    Estimate,
    IndexOutOfRangeError,
    InvalidLengthError,
    InvalidParametersError,
    LengthMismatchError,
    RapporAggregator,
    RapporBloomEncoder,
    RapporClient,
    RapporMechanism,
    RapporParams,
    RapporReport,
    assign_cohort,
)

__version__ = "0.1.0"

__all__ = [
    "internal",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
    "Estimate",
    "IndexOutOfRangeError",
    "InvalidLengthError",
    "InvalidParametersError",
    "LengthMismatchError",
    "RapporAggregator",
    "RapporBloomEncoder",
    "RapporClient",
    "RapporMechanism",
    "RapporParams",
    "RapporReport",
    "assign_cohort",
    "__version__",
]
