"""Guess-result string parsing."""

import re
from typing import List

from ..matcher.errors import GuessResultSyntaxError
from ..matcher.parsing import split_parts
from .models import GuessOutcomeToken, GuessResult


# `x` right, `?x` wrong position, `!x` wrong
GUESS_TOKEN = re.compile(r'^([!?])?([a-z])$')


def tokenize_guess_result(text: str) -> GuessResult:
    """
    Parse a guess result such as `"p ?l !a ?t !e"`.

    Raises:
        GuessResultSyntaxError: On an empty input or the first bad entry
    """
    entries = split_parts(text)
    if not entries:
        raise GuessResultSyntaxError(None)

    result: List[GuessOutcomeToken] = []
    for entry in entries:
        match = GUESS_TOKEN.fullmatch(entry)
        if not match:
            raise GuessResultSyntaxError(entry)

        marker, letter = match.group(1), match.group(2)
        if marker == '!':
            result.append(GuessOutcomeToken.wrong(letter))
        elif marker == '?':
            result.append(GuessOutcomeToken.wrong_position(letter))
        else:
            result.append(GuessOutcomeToken.right(letter))

    return result
