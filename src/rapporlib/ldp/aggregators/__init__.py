"""Server-side aggregators for collected reports."""

from .rappor import RapporAggregator

__all__ = ["RapporAggregator"]
