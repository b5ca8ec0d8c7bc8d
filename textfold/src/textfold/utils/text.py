"""Byte/text conversions shared across modules."""
from __future__ import annotations

_ASCII_BYTES = bytes(range(128))
_ASCII_TEXT = _ASCII_BYTES.decode("ascii")


def to_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogatepass")
    return bytes(data)


def like(data: bytes, original: str | bytes | bytearray) -> str | bytes | bytearray:
    """Return ``data`` in the same flavour (``str``/``bytes``/``bytearray``) as ``original``."""
    if isinstance(original, str):
        return data.decode("utf-8", errors="surrogatepass")
    if isinstance(original, bytearray):
        return bytearray(data)
    return data


def is_ascii_compatible(encoding: str) -> bool:
    """Return whether ``encoding`` maps every byte below 0x80 to the same ASCII character.

    Unknown names and bytes-to-bytes codecs (``rot13``, ``hex``) are not compatible.
    """
    try:
        return (
            _ASCII_BYTES.decode(encoding) == _ASCII_TEXT
            and _ASCII_TEXT.encode(encoding) == _ASCII_BYTES
        )
    except (LookupError, UnicodeError):
        return False


__all__ = ["is_ascii_compatible", "like", "to_bytes"]
