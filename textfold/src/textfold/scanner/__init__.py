"""Scanner package exports."""
from .utf8 import seems_utf8, trailing_count

__all__ = ["seems_utf8", "trailing_count"]
