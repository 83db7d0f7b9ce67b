"""Guess-result solving."""

from .models import GuessOutcomeToken, GuessResult, ConstraintState, GuessRegistration, Outcome
from .parsing import tokenize_guess_result
from .constraints import fold_guess_results, fold_token
from .notwordle import Notwordle

__all__ = [
    # Models
    "GuessOutcomeToken",
    "GuessResult",
    "ConstraintState",
    "GuessRegistration",
    "Outcome",
    # Solving
    "tokenize_guess_result",
    "fold_guess_results",
    "fold_token",
    "Notwordle",
]
