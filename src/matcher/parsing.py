"""Pattern string parsing."""

import re
from typing import List

from .errors import EmptyPatternError, PatternSyntaxError
from .models import MatchToken, Pattern


# Optional `!` followed by one or more lowercase letters
LETTERS_TOKEN = re.compile(r'^(!)?([a-z]+)$')


def split_parts(text: str) -> List[str]:
    """Split on single spaces, skipping the empty parts left by repeated spaces."""
    return [part for part in text.strip().split(' ') if part]


def tokenize(part: str) -> MatchToken:
    """
    Convert one pattern part into a token.

    `*` is any single character, `**` any run of characters, `abc` one of
    the letters and `!abc` none of them.
    """
    if part == '**':
        return MatchToken.any_length()
    if part == '*':
        return MatchToken.any()

    match = LETTERS_TOKEN.fullmatch(part)
    if not match:
        raise PatternSyntaxError(part)

    if match.group(1):
        return MatchToken.exclude_all_in(match.group(2))
    return MatchToken.any_in(match.group(2))


def tokenize_pattern(text: str) -> List[MatchToken]:
    """
    Parse a pattern string into tokens.

    Consecutive `**` parts collapse into a single wildcard.

    Raises:
        EmptyPatternError: If the pattern has no parts
        PatternSyntaxError: On the first part that is not a valid token
    """
    parts = split_parts(text)
    if not parts:
        raise EmptyPatternError()

    collapsed: List[str] = []
    for part in parts:
        if part == '**' and collapsed and collapsed[-1] == '**':
            continue
        collapsed.append(part)

    return [tokenize(part) for part in collapsed]


def compile_pattern(text: str) -> Pattern:
    """Parse a pattern string into a Pattern."""
    return Pattern(tokens=tokenize_pattern(text))
