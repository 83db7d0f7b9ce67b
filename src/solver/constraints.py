"""
Folding guess results into a single constraint state.

Rules, applied per position across the whole history:
- A right letter pins the position and is never downgraded afterwards
- Wrong and wrong-position letters are excluded from their position
- Right and wrong-position letters must appear somewhere in the word
- Wrong letters are excluded everywhere, unless some guess showed them present
"""

import logging
from typing import List, Optional, Sequence

from ..matcher.models import MatchToken, unique_letters
from .models import ConstraintState, GuessOutcomeToken, GuessResult

logger = logging.getLogger(__name__)


def fold_token(current: Optional[MatchToken], outcome: GuessOutcomeToken) -> MatchToken:
    """Merge one letter outcome into the token already held for its position."""
    if outcome.kind == "right":
        if current is not None and current.kind == "any_in":
            return MatchToken.any_in(current.letters + outcome.letter)
        return MatchToken.any_in(outcome.letter)

    if current is None or current.kind == "any":
        return MatchToken.exclude_all_in(outcome.letter)
    if current.kind == "any_in":
        return current
    return MatchToken.exclude_all_in(current.letters + outcome.letter)


def fold_guess_results(history: Sequence[GuessResult]) -> ConstraintState:
    """Recompute the constraint state from every guess result so far."""
    positional: List[MatchToken] = []
    include = ""
    wrong = ""

    for result in history:
        for i, outcome in enumerate(result):
            if i < len(positional):
                positional[i] = fold_token(positional[i], outcome)
            else:
                positional.append(fold_token(None, outcome))

            if outcome.is_present:
                include += outcome.letter
            else:
                wrong += outcome.letter

    include = unique_letters(include)
    exclude = unique_letters("".join(c for c in wrong if c not in include))

    state = ConstraintState(
        positional=positional,
        include=include,
        exclude=exclude,
    )
    logger.debug(
        "folded %d guesses: pattern=%r include=%r exclude=%r",
        len(history),
        " ".join(str(t) for t in state.positional),
        state.include,
        state.exclude,
    )
    return state
