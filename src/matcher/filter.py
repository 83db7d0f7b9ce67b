"""
Word filtering.

A word matches when it:
1. Has the pattern's length (at least its fixed length when the pattern has `**`)
2. Uses only letters from `within`, if given
3. Contains every letter of `include`
4. Contains no letter of `exclude`
5. Satisfies every positional token
"""

import re
from typing import List, Optional, Sequence, Union

from ..data import get_default_words
from .models import MatchToken, Pattern
from .parsing import compile_pattern


TokensLike = Union[Pattern, Sequence[MatchToken]]


def _as_pattern(tokens: TokensLike) -> Pattern:
    if isinstance(tokens, Pattern):
        return tokens
    return Pattern(tokens=list(tokens))


def pattern_regex(pattern: Pattern) -> "re.Pattern[str]":
    """Compile a pattern into an anchored regular expression."""
    parts = []
    for token in pattern.tokens:
        if token.kind == "any":
            parts.append(".")
        elif token.kind == "any_length":
            parts.append(".*")
        elif token.kind == "any_in":
            parts.append(f"[{token.letters}]")
        else:
            parts.append(f"[^{token.letters}]")
    return re.compile("".join(parts), re.DOTALL)


def _letters_ok(word: str, include: str, exclude: str, within: str) -> bool:
    # word can only contain letters within this group
    if within and any(c not in within for c in word):
        return False

    # word must include all of these letters
    if include and any(c not in word for c in include):
        return False

    # word must not include any of these letters
    if exclude and any(c in word for c in exclude):
        return False

    return True


def _positions_ok(word: str, tokens: Sequence[MatchToken]) -> bool:
    return all(token.accepts(char) for token, char in zip(tokens, word))


def word_matches(
    word: str,
    pattern: TokensLike,
    include: str = "",
    exclude: str = "",
    within: str = "",
) -> bool:
    """Check one word against a pattern and the letter-set constraints."""
    pattern = _as_pattern(pattern)

    if pattern.is_positional:
        if len(word) != len(pattern):
            return False
        return _letters_ok(word, include, exclude, within) and _positions_ok(word, pattern.tokens)

    if len(word) < pattern.min_length:
        return False
    return (
        _letters_ok(word, include, exclude, within)
        and pattern_regex(pattern).fullmatch(word) is not None
    )


def match_words_from_tokens(
    tokens: TokensLike,
    include: str = "",
    exclude: str = "",
    within: str = "",
    words: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Filter a word source with an already-compiled pattern.

    Args:
        tokens: A Pattern or a sequence of MatchTokens
        include: Letters that must all appear somewhere in the word
        exclude: Letters that must not appear anywhere in the word
        within: If non-empty, the only letters a word may use
        words: Word source; the default dictionary when None

    Returns:
        Matching words, in source order
    """
    pattern = _as_pattern(tokens)
    source = get_default_words() if words is None else words

    if pattern.is_positional:
        size = len(pattern)
        return [
            word for word in source
            if len(word) == size
            and _letters_ok(word, include, exclude, within)
            and _positions_ok(word, pattern.tokens)
        ]

    regex = pattern_regex(pattern)
    min_length = pattern.min_length
    return [
        word for word in source
        if len(word) >= min_length
        and _letters_ok(word, include, exclude, within)
        and regex.fullmatch(word) is not None
    ]


def match_words(
    pattern: str,
    include: str = "",
    exclude: str = "",
    within: str = "",
    words: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Compile a pattern string and filter a word source with it.

    Raises:
        EmptyPatternError: If the pattern is blank
        PatternSyntaxError: If a pattern token is malformed
    """
    return match_words_from_tokens(compile_pattern(pattern), include, exclude, within, words)
