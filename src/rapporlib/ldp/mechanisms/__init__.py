"""Randomized-response mechanisms applied on top of encoded reports."""

from .rappor import RapporMechanism

__all__ = ["RapporMechanism"]
