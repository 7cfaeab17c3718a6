"""Hevy API access."""

from .client import HevyClient

__all__ = ["HevyClient"]
