"""Interpretation mode used by the byte-length and substring helpers.

Python strings carry no ambient encoding, so the "current interpretation mode"
is modelled here: a named codec plus a flag saying whether :func:`strlen` and
:func:`substr` count characters in that codec (overloaded) or plain bytes.

The active encoding and its saved stack are thread-local. Every thread starts
from the configured default, and pushes or pops in one thread never leak into
another.
"""
from __future__ import annotations

import codecs
import os
import threading
from functools import lru_cache
from typing import List, Optional

from ..config import EncodingConfig
from ..exceptions import EncodingModeError
from ..utils.text import is_ascii_compatible

OVERLOAD_ENV = "TEXTFOLD_FUNC_OVERLOAD"
_TRUTHY = {"1", "true", "yes", "on"}

_settings = EncodingConfig()


class _ThreadState(threading.local):
    def __init__(self) -> None:
        self.encoding: Optional[str] = None
        self.saved: List[Optional[str]] = []


_state = _ThreadState()


def configure(config: EncodingConfig) -> None:
    """Install the default encoding and overload flag for the process."""
    global _settings
    _settings = config
    func_overload_enabled.cache_clear()


@lru_cache(maxsize=1)
def func_overload_enabled() -> bool:
    """Return whether length helpers follow the interpretation encoding.

    Detected once from the configuration or ``TEXTFOLD_FUNC_OVERLOAD`` and cached
    until :func:`configure` is called again.
    """
    if _settings.func_overload:
        return True
    return os.getenv(OVERLOAD_ENV, "").strip().lower() in _TRUTHY


def _checked(encoding: str) -> str:
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise EncodingModeError(f"Unknown encoding: {encoding}") from exc
    # Undecodable bytes survive only through surrogateescape, which covers 0x80-0xFF.
    if not is_ascii_compatible(encoding):
        raise EncodingModeError(f"Encoding is not ASCII-compatible: {encoding}")
    return encoding


def internal_encoding(encoding: str | None = None) -> str:
    """Return the active interpretation encoding, replacing it first when given."""
    if encoding is not None:
        _state.encoding = _checked(encoding)
    return _state.encoding or _settings.internal_encoding


def push_encoding(encoding: str) -> int:
    """Save the active encoding, switch to ``encoding`` and return the stack depth."""
    _checked(encoding)
    _state.saved.append(_state.encoding)
    _state.encoding = encoding
    return len(_state.saved)


def pop_encoding() -> bool:
    """Restore the most recently saved encoding. Returns ``False`` when nothing was saved."""
    if not _state.saved:
        return False
    _state.encoding = _state.saved.pop()
    return True


def encoding_stack_depth() -> int:
    return len(_state.saved)


def reset_thread_state() -> None:
    """Forget the current thread's override and saved encodings."""
    _state.encoding = None
    _state.saved = []


def strlen(data: bytes) -> int:
    if not func_overload_enabled():
        return len(data)
    return len(data.decode(internal_encoding(), errors="surrogateescape"))


def substr(data: bytes, start: int, length: int | None = None) -> bytes:
    """Slice ``data`` in units of the interpretation mode.

    A negative ``start`` counts from the end. ``length`` must not be negative.
    """
    if length is not None and length < 0:
        raise ValueError("length must not be negative")
    if not func_overload_enabled():
        return _slice(data, start, length)
    encoding = internal_encoding()
    text = data.decode(encoding, errors="surrogateescape")
    return _slice(text, start, length).encode(encoding, errors="surrogateescape")


def _slice(sequence, start: int, length: int | None):
    if start < 0:
        start = max(len(sequence) + start, 0)
    if length is None:
        return sequence[start:]
    return sequence[start : start + length]


__all__ = [
    "OVERLOAD_ENV",
    "configure",
    "encoding_stack_depth",
    "func_overload_enabled",
    "internal_encoding",
    "pop_encoding",
    "push_encoding",
    "reset_thread_state",
    "strlen",
    "substr",
]
