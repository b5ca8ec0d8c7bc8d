"""Transliteration package exports."""
from .engine import Utf8Folder, fold_latin1, fold_utf8, remove_accents
from .tables import LATIN1_DIGRAPHS, LOCALE_DIGRAPHS, UTF8_TABLE, locale_group

__all__ = [
    "LATIN1_DIGRAPHS",
    "LOCALE_DIGRAPHS",
    "UTF8_TABLE",
    "Utf8Folder",
    "fold_latin1",
    "fold_utf8",
    "locale_group",
    "remove_accents",
]
