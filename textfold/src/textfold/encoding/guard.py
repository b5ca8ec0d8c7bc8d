"""Scoped switch to a byte-transparent interpretation encoding."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

from . import mode

BINARY_SAFE_ENCODING = "ISO-8859-1"

T = TypeVar("T")


def enter_binary_safe_encoding() -> None:
    """Switch the interpretation encoding to ISO-8859-1 when overloading is active.

    When length helpers are overloaded for a multi-byte encoding, counts follow
    characters instead of bytes. This saves the current encoding and swaps in a
    single-byte one so that each byte counts as one unit again.

    Calls nest. Each call must be balanced by exactly one :func:`reset_encoding`,
    which is easiest with :func:`binary_safe_encoding`.
    """

    if not mode.func_overload_enabled():
        return
    mode.push_encoding(BINARY_SAFE_ENCODING)


def reset_encoding() -> None:
    """Restore the encoding saved by the matching :func:`enter_binary_safe_encoding`.

    An unmatched call is ignored.
    """

    mode.pop_encoding()


@contextmanager
def binary_safe_encoding() -> Iterator[None]:
    enter_binary_safe_encoding()
    try:
        yield
    finally:
        reset_encoding()


def with_byte_safe_encoding(callback: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run ``callback`` with byte-transparent length semantics and return its result."""
    with binary_safe_encoding():
        return callback(*args, **kwargs)


encoding_stack_depth = mode.encoding_stack_depth

__all__ = [
    "BINARY_SAFE_ENCODING",
    "binary_safe_encoding",
    "encoding_stack_depth",
    "enter_binary_safe_encoding",
    "reset_encoding",
    "with_byte_safe_encoding",
]
