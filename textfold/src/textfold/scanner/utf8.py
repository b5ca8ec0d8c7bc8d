"""UTF-8 shape detection."""
from __future__ import annotations

from typing import Optional, Tuple

from ..encoding.guard import binary_safe_encoding
from ..encoding.mode import strlen
from ..utils.text import to_bytes

# (mask, value, trailing bytes) for each leader form, including the pre-RFC 3629
# five and six byte sequences.
_LEADERS: Tuple[Tuple[int, int, int], ...] = (
    (0x80, 0x00, 0),  # 0bbbbbbb
    (0xE0, 0xC0, 1),  # 110bbbbb
    (0xF0, 0xE0, 2),  # 1110bbbb
    (0xF8, 0xF0, 3),  # 11110bbb
    (0xFC, 0xF8, 4),  # 111110bb
    (0xFE, 0xFC, 5),  # 1111110b
)


def trailing_count(lead: int) -> Optional[int]:
    """Return how many continuation bytes ``lead`` announces, or ``None``."""
    for mask, value, trailing in _LEADERS:
        if lead & mask == value:
            return trailing
    return None


def seems_utf8(data: str | bytes | bytearray) -> bool:
    """Check whether ``data`` fits the UTF-8 model.

    This is the historical, lenient model: leader bytes may announce up to five
    continuation bytes, so 5- and 6-byte sequences are accepted even though
    modern UTF-8 stops at 4. Overlong forms and surrogates are not rejected.
    An empty input is valid.
    """

    raw = to_bytes(data)
    with binary_safe_encoding():
        length = strlen(raw)

    index = 0
    while index < length:
        trailing = trailing_count(raw[index])
        if trailing is None:
            return False
        for _ in range(trailing):
            index += 1
            if index == length or raw[index] & 0xC0 != 0x80:
                return False
        index += 1
    return True


__all__ = ["seems_utf8", "trailing_count"]
