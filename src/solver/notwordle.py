from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from ..data import Dictionary, get_dictionary
from ..matcher.errors import GuessLengthMismatchError
from ..matcher.filter import match_words_from_tokens
from .constraints import fold_guess_results
from .models import ConstraintState, GuessRegistration, GuessResult
from .parsing import tokenize_guess_result


class Notwordle(BaseModel):
    """
    A guess-result solving session.

    Each registered guess result narrows the candidate words. The state is
    refolded from the full history on every call, so it never depends on
    how earlier calls were made.

    Attributes:
        words: Explicit word source; the bundled dictionary is used when None
        dictionary: Bundled dictionary to use when no words are given
        guess_results: Every accepted guess result, oldest first
    """

    words: Optional[List[str]] = None
    dictionary: Dictionary = Dictionary.COMMON
    guess_results: List[GuessResult] = Field(default_factory=list)

    @property
    def word_length(self) -> Optional[int]:
        """Positions per guess, fixed by the first accepted guess."""
        if not self.guess_results:
            return None
        return len(self.guess_results[-1])

    @property
    def history(self) -> List[GuessResult]:
        return [list(r) for r in self.guess_results]

    @property
    def state(self) -> ConstraintState:
        return fold_guess_results(self.guess_results)

    def candidate_source(self) -> Sequence[str]:
        if self.words is not None:
            return self.words
        return get_dictionary(self.dictionary)

    def register_guess_result(self, raw: str) -> GuessRegistration:
        """
        Add one guess result and return the words still possible.

        Args:
            raw: Guess result such as `"p ?l !a ?t !e"`

        Returns:
            The remaining matches and this guess's parsed outcome

        Raises:
            GuessResultSyntaxError: If the input cannot be parsed
            GuessLengthMismatchError: If its length differs from earlier guesses
        """
        outcome = tokenize_guess_result(raw)

        expected = self.word_length
        if expected is not None and expected != len(outcome):
            raise GuessLengthMismatchError(expected, len(outcome))

        self.guess_results.append(outcome)

        state = self.state
        matches = match_words_from_tokens(
            state.positional,
            include=state.include,
            exclude=state.exclude,
            within="",
            words=self.candidate_source(),
        )
        return GuessRegistration(matches=matches, outcome=list(outcome))

    def register_guess_results(self, batch: str) -> List[GuessRegistration]:
        """
        Register comma-separated guess results in order.

        Stops at the first bad segment; segments before it stay registered.
        """
        return [self.register_guess_result(segment) for segment in batch.split(',')]

    def reset(self) -> None:
        """Forget every registered guess."""
        self.guess_results = []
