"""Bundled word lists."""

from .dictionary import (
    Dictionary,
    DictionaryLoadError,
    get_dictionary,
    get_default_words,
    load_words_file,
    parse_words,
)

__all__ = [
    "Dictionary",
    "DictionaryLoadError",
    "get_dictionary",
    "get_default_words",
    "load_words_file",
    "parse_words",
]
