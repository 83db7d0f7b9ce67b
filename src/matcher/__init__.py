"""Pattern compilation and word filtering."""

from .errors import (
    WrdError,
    EmptyPatternError,
    PatternSyntaxError,
    GuessResultSyntaxError,
    GuessLengthMismatchError,
)
from .models import MatchToken, Pattern, TokenKind
from .parsing import tokenize_pattern, compile_pattern
from .filter import match_words, match_words_from_tokens, word_matches, pattern_regex

__all__ = [
    # Errors
    "WrdError",
    "EmptyPatternError",
    "PatternSyntaxError",
    "GuessResultSyntaxError",
    "GuessLengthMismatchError",
    # Models
    "MatchToken",
    "Pattern",
    "TokenKind",
    # Compiler
    "tokenize_pattern",
    "compile_pattern",
    # Filter
    "match_words",
    "match_words_from_tokens",
    "word_matches",
    "pattern_regex",
]
