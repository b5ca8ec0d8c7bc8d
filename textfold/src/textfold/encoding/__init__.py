"""Interpretation-mode helpers."""
from .guard import (
    BINARY_SAFE_ENCODING,
    binary_safe_encoding,
    encoding_stack_depth,
    enter_binary_safe_encoding,
    reset_encoding,
    with_byte_safe_encoding,
)
from .mode import internal_encoding, strlen, substr

__all__ = [
    "BINARY_SAFE_ENCODING",
    "binary_safe_encoding",
    "encoding_stack_depth",
    "enter_binary_safe_encoding",
    "internal_encoding",
    "reset_encoding",
    "strlen",
    "substr",
    "with_byte_safe_encoding",
]
