"""Accent folding for UTF-8 and legacy single-byte text."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Mapping, Optional

import regex

from ..scanner import seems_utf8
from ..utils.text import like, to_bytes
from .tables import (
    LATIN1_DIGRAPHS,
    LATIN1_SOURCE,
    LATIN1_TARGET,
    LOCALE_DIGRAPHS,
    UTF8_TABLE,
    locale_group,
)

_HIGH_BIT = regex.compile(rb"[\x80-\xff]")
_LATIN1_TRANSLATION = bytes.maketrans(LATIN1_SOURCE, LATIN1_TARGET)


@dataclass(frozen=True, slots=True)
class Utf8Folder:
    """Single-pass multi-pattern replacement over UTF-8 bytes."""

    table: Mapping[bytes, bytes]
    pattern: regex.Pattern[bytes]

    @classmethod
    def from_table(cls, table: Mapping[bytes, str]) -> "Utf8Folder":
        # Longest keys first so multi-character keys (``l·l``) win over their parts.
        keys = sorted(table, key=len, reverse=True)
        pattern = regex.compile(b"|".join(_literal(key) for key in keys))
        encoded = {key: value.encode("ascii") for key, value in table.items()}
        return cls(table=encoded, pattern=pattern)

    def fold(self, data: bytes) -> bytes:
        return self.pattern.sub(lambda match: self.table[match.group()], data)


def _literal(key: bytes) -> bytes:
    return b"".join(b"\\x%02x" % byte for byte in key)


@lru_cache(maxsize=None)
def _folder_for(group: Optional[str]) -> Utf8Folder:
    table: Dict[bytes, str] = dict(UTF8_TABLE)
    if group is not None:
        table.update(LOCALE_DIGRAPHS[group])
    return Utf8Folder.from_table(table)


def fold_utf8(data: bytes, *, locale: str | None = None) -> bytes:
    return _folder_for(locale_group(locale)).fold(data)


def fold_latin1(data: bytes) -> bytes:
    """Fold ISO-8859-1 bytes: one-to-one substitutions, then digraph expansion."""
    folded = data.translate(_LATIN1_TRANSLATION)
    for source, target in LATIN1_DIGRAPHS:
        folded = folded.replace(source, target)
    return folded


def remove_accents(text: str | bytes | bytearray, *, locale: str | None = None):
    """Convert accented characters to their closest ASCII equivalents.

    Input without any byte above 0x7F is returned unchanged (the same object).
    Otherwise UTF-8 input goes through the UTF-8 table and anything else is
    treated as ISO-8859-1. Characters outside the tables pass through untouched.

    ``locale`` enables extra digraphs on the UTF-8 path: German locales
    (``de_DE``, ``de_DE_formal``, ``de_CH``, ``de_CH_informal``) fold umlauts to
    ``ae``/``oe``/``ue`` and ``ß`` to ``ss``, ``da_DK`` folds ``æ ø å`` to
    ``ae oe aa`` and ``ca`` folds ``l·l`` to ``ll``.

    The result has the same type as ``text``.
    """

    raw = to_bytes(text)
    if not _HIGH_BIT.search(raw):
        return text

    if seems_utf8(raw):
        folded = fold_utf8(raw, locale=locale)
    else:
        folded = fold_latin1(raw)
    return like(folded, text)


__all__ = ["Utf8Folder", "fold_latin1", "fold_utf8", "remove_accents"]
