"""
Bundled dictionaries.

Each word list ships next to this module and is read, parsed and cached
once per process. Later calls share the same immutable tuple.
"""

import json
import logging
import threading
from enum import Enum
from importlib.resources import files
from pathlib import Path
from typing import Dict, Iterable, List, Literal, Tuple, Union

logger = logging.getLogger(__name__)

WordFormat = Literal["lines", "json"]


class DictionaryLoadError(RuntimeError):
    """A bundled dictionary is missing or unreadable."""

    code = "DICTIONARY_LOAD"


class Dictionary(str, Enum):
    """Word lists bundled with the package."""

    COMMON = "common"
    WORDLE = "wordle"

    @property
    def asset(self) -> str:
        return _ASSETS[self]

    @property
    def asset_format(self) -> WordFormat:
        return "json" if self.asset.endswith(".json") else "lines"


_ASSETS = {
    Dictionary.COMMON: "words-common.txt",
    Dictionary.WORDLE: "words-wordle.json",
}

_cache: Dict[Dictionary, Tuple[str, ...]] = {}
_lock = threading.Lock()


def parse_words(text: str, fmt: WordFormat = "lines") -> Tuple[str, ...]:
    """
    Parse a word list into a sorted tuple.

    Lines (or JSON array items) are trimmed and blanks dropped.

    Raises:
        ValueError: If a JSON list is not an array of strings
    """
    items: Iterable[str]
    if fmt == "json":
        data = json.loads(text)
        if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
            raise ValueError("expected a JSON array of strings")
        items = data
    else:
        items = text.splitlines()

    words: List[str] = [w.strip() for w in items]
    return tuple(sorted(w for w in words if w))


def load_words_file(path: Union[str, Path]) -> Tuple[str, ...]:
    """Read a caller-supplied word list; `.json` files are parsed as arrays."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    fmt: WordFormat = "json" if path.suffix == ".json" else "lines"
    return parse_words(path.read_text(encoding="utf-8"), fmt)


def _load(dictionary: Dictionary) -> Tuple[str, ...]:
    try:
        text = files(__package__).joinpath(dictionary.asset).read_text(encoding="utf-8")
        words = parse_words(text, dictionary.asset_format)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise DictionaryLoadError(f"could not load {dictionary.asset}: {e}") from e

    if not words:
        raise DictionaryLoadError(f"{dictionary.asset} contains no words")

    logger.debug("loaded %d words from %s", len(words), dictionary.asset)
    return words


def get_dictionary(dictionary: Dictionary = Dictionary.COMMON) -> Tuple[str, ...]:
    """Return a bundled word list, loading it on first use."""
    dictionary = Dictionary(dictionary)
    words = _cache.get(dictionary)
    if words is not None:
        return words

    with _lock:
        if dictionary not in _cache:
            _cache[dictionary] = _load(dictionary)
        return _cache[dictionary]


def get_default_words() -> Tuple[str, ...]:
    """The word list used when a caller supplies none."""
    return get_dictionary(Dictionary.COMMON)
