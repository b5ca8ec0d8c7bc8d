"""Utility exports."""
from .text import is_ascii_compatible, like, to_bytes

__all__ = ["is_ascii_compatible", "like", "to_bytes"]
