"""Sequence helpers."""
from .flatten import flatten

__all__ = ["flatten"]
