"""String normalization helpers: UTF-8 detection, accent folding and flattening."""
from .encoding import binary_safe_encoding, enter_binary_safe_encoding, reset_encoding, with_byte_safe_encoding
from .exceptions import EncodingModeError, InvalidInputError, TextfoldError
from .scanner import seems_utf8
from .sequences import flatten
from .transliterate import remove_accents
from .version import __version__

__all__ = [
    "EncodingModeError",
    "InvalidInputError",
    "TextfoldError",
    "__version__",
    "binary_safe_encoding",
    "enter_binary_safe_encoding",
    "flatten",
    "remove_accents",
    "reset_encoding",
    "seems_utf8",
    "with_byte_safe_encoding",
]
