"""Shared utility helpers used across the core library."""

from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    get_logger,
    configure_logging,
    PrivacyFilter,
)
from .param_validation import (
    ensure,
    ensure_type,
    ParamValidationError,
)
from .random import (
    create_rng,
    derived_rng,
    secure_uniform,
    uniform_source,
)

__all__ = [
    "RuntimeConfig",
    "get_config",
    "configure",
    "get_logger",
    "configure_logging",
    "PrivacyFilter",
    "ensure",
    "ensure_type",
    "ParamValidationError",
    "create_rng",
    "derived_rng",
    "secure_uniform",
    "uniform_source",
]
