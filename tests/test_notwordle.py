"""
Test suite for the guess-result solver.

Covers tokenizing guess results, folding a guess history into
constraints, and the solving session built on top of them.
"""

import itertools

import pytest

from src.matcher import MatchToken, GuessLengthMismatchError, GuessResultSyntaxError
from src.solver import (
    ConstraintState,
    GuessOutcomeToken,
    Notwordle,
    fold_guess_results,
    fold_token,
    tokenize_guess_result,
)

R = GuessOutcomeToken.right
P = GuessOutcomeToken.wrong_position
W = GuessOutcomeToken.wrong


# Target "pilot"
PLATE = [R("p"), P("l"), W("a"), P("t"), W("e")]
POLIT = [R("p"), P("o"), R("l"), P("i"), R("t")]

# Target "datum"
DATUM_GUESSES = [
    "!p !l ?a ?t !e",
    "?a !c t !o !r",
    "!s a t !i !n",
    "?m a t !z !a",
]


class TestTokenizeGuessResult:
    """Parsing guess-result strings."""

    def test_parses_outcomes(self):
        """Bare, `?` and `!` letters map to right, wrong-position and wrong."""
        assert tokenize_guess_result("p ?l !a t !e") == [R("p"), P("l"), W("a"), R("t"), W("e")]

    def test_str_round_trip(self):
        """Tokens render back in guess-result notation."""
        tokens = tokenize_guess_result("p ?l !a")
        assert " ".join(str(t) for t in tokens) == "p ?l !a"

    @pytest.mark.parametrize("raw, entry", [
        ("p ?q !r aa", "aa"),
        ("p ??q !r a", "??q"),
        ("p ?q !?r a", "!?r"),
        ("p? ?q !r a", "p?"),
        ("P ?q", "P"),
        ("p ?1", "?1"),
    ])
    def test_rejects_invalid_entries(self, raw, entry):
        """The error names the offending entry."""
        with pytest.raises(GuessResultSyntaxError) as exc:
            tokenize_guess_result(raw)
        assert str(exc.value) == f"invalid input {entry}"
        assert exc.value.entry == entry
        assert exc.value.code == "INVALID_GUESS_TOKEN"

    def test_rejects_empty(self):
        """A blank guess result is an error."""
        with pytest.raises(GuessResultSyntaxError):
            tokenize_guess_result("   ")


class TestFoldToken:
    """Merging one outcome into a position."""

    def test_right_wins(self):
        """A right letter replaces exclusions and is never downgraded."""
        token = fold_token(MatchToken.exclude_all_in("ab"), R("c"))
        assert token == MatchToken.any_in("c")
        assert fold_token(token, W("d")) == MatchToken.any_in("c")
        assert fold_token(token, P("e")) == MatchToken.any_in("c")

    def test_exclusions_grow(self):
        """Exclusions at a position union without duplicates."""
        token = fold_token(None, W("l"))
        token = fold_token(token, P("o"))
        token = fold_token(token, W("l"))
        assert token.kind == "exclude_all_in"
        assert token.letters == "lo"


class TestFoldGuessResults:
    """Recomputing constraint state from guess histories."""

    def test_empty_history(self):
        """No guesses means no constraints."""
        assert fold_guess_results([]) == ConstraintState()

    def test_single_guess(self):
        """One guess pins right letters and excludes the others in place."""
        state = fold_guess_results([PLATE])
        assert state.include == "plt"
        assert state.exclude == "ae"
        assert state.positional == [
            MatchToken.any_in("p"),
            MatchToken.exclude_all_in("l"),
            MatchToken.exclude_all_in("a"),
            MatchToken.exclude_all_in("t"),
            MatchToken.exclude_all_in("e"),
        ]

    def test_two_guesses(self):
        """A second guess adds right letters and grows exclusions."""
        state = fold_guess_results([PLATE, POLIT])
        assert state.include == "pltoi"
        assert state.exclude == "ae"
        assert [str(t) for t in state.positional] == ["p", "!lo", "l", "!ti", "t"]

    def test_four_guesses(self):
        """Wrong letters seen elsewhere as present are not excluded."""
        history = [tokenize_guess_result(g) for g in DATUM_GUESSES]
        state = fold_guess_results(history)
        assert state.include == "atm"
        assert state.exclude == "plecorsinz"
        assert state.positional == [
            MatchToken.exclude_all_in("pasm"),
            MatchToken.any_in("a"),
            MatchToken.any_in("t"),
            MatchToken.exclude_all_in("toiz"),
            MatchToken.exclude_all_in("erna"),
        ]

    def test_wrong_before_present(self):
        """A letter marked wrong before it shows up as present ends up included."""
        state = fold_guess_results([
            [W("e"), R("a")],
            [P("e"), R("a")],
        ])
        assert "e" in state.include
        assert "e" not in state.exclude

    def test_repeated_letter_in_one_guess(self):
        """A wrong repeat of a present letter only excludes its own position."""
        state = fold_guess_results([[R("s"), W("s"), R("a")]])
        assert state.include == "sa"
        assert state.exclude == ""
        assert state.positional[1] == MatchToken.exclude_all_in("s")

    @pytest.mark.parametrize("history", [
        [PLATE, POLIT],
        [tokenize_guess_result(g) for g in DATUM_GUESSES],
    ])
    def test_include_exclude_disjoint(self, history):
        """include and exclude never share a letter."""
        state = fold_guess_results(history)
        assert not set(state.include) & set(state.exclude)

    def test_order_independent(self):
        """Every ordering of the same guesses folds to the same state."""
        history = [tokenize_guess_result(g) for g in DATUM_GUESSES]
        expected = fold_guess_results(history)
        for ordering in itertools.permutations(history):
            assert fold_guess_results(list(ordering)) == expected


class TestNotwordle:
    """The solving session."""

    def test_refines_words(self):
        """Successive guesses narrow the candidates to the target."""
        nw = Notwordle(words=["plate", "pastor", "panda", "datum"])
        result = []
        for guess in DATUM_GUESSES:
            result = nw.register_guess_result(guess).matches
        assert result == ["datum"]

    def test_pilot_session(self):
        """The target survives both guesses; words breaking a constraint do not."""
        nw = Notwordle(words=["plate", "pastor", "panda", "datum", "pilot"])
        first = nw.register_guess_result("p ?l !a ?t !e")
        second = nw.register_guess_result("p ?o l ?i t")

        assert first.matches == ["pilot"]
        assert second.matches == ["pilot"]
        assert second.outcome == POLIT
        assert set(nw.state.include) == {"p", "l", "t", "o", "i"}
        assert set(nw.state.exclude) == {"a", "e"}

    def test_right_letter_is_permanent(self):
        """A later wrong-position mark cannot undo an earlier right letter."""
        nw = Notwordle(words=["plate", "pastor", "panda", "datum", "pilot"])
        nw.register_guess_result("p ?l !a t !e")
        registration = nw.register_guess_result("p ?o l ?i t")

        assert nw.state.positional[3] == MatchToken.any_in("t")
        assert set(nw.state.include) == {"p", "l", "t", "o", "i"}
        assert set(nw.state.exclude) == {"a", "e"}
        assert registration.matches == []

    def test_returns_own_outcome(self):
        """Each registration reports the guess it parsed."""
        nw = Notwordle(words=["plate"])
        registration = nw.register_guess_result("p ?l !a ?t !e")
        assert registration.outcome == PLATE
        assert str(registration) == "p ?l !a ?t !e"

    def test_length_mismatch_keeps_state(self):
        """A guess of the wrong length is rejected and changes nothing."""
        nw = Notwordle(words=["plate", "pilot", "datum"])
        before = nw.register_guess_result("p ?l !a ?t !e")
        state = nw.state

        with pytest.raises(GuessLengthMismatchError) as exc:
            nw.register_guess_result("p ?o l ?i")
        assert exc.value.expected == 5
        assert exc.value.got == 4
        assert str(exc.value) == "previous had 5 items, got 4 items"

        assert nw.state == state
        assert len(nw.history) == 1

        retry = nw.register_guess_result("p ?l !a ?t !e")
        assert retry.matches == before.matches

    def test_syntax_error_keeps_state(self):
        """Bad input is rejected without touching the history."""
        nw = Notwordle(words=["pilot"])
        nw.register_guess_result("p ?l !a ?t !e")
        with pytest.raises(GuessResultSyntaxError):
            nw.register_guess_result("p ?o l ?i tt")
        assert len(nw.history) == 1
        assert nw.word_length == 5

    def test_batch(self):
        """Comma-separated batches register each segment in order."""
        nw = Notwordle(words=["plate", "pastor", "panda", "datum"])
        registrations = nw.register_guess_results(",".join(DATUM_GUESSES))
        assert len(registrations) == 4
        assert registrations[-1].matches == ["datum"]
        assert len(nw.history) == 4

    def test_batch_stops_at_first_error(self):
        """Segments before a bad one stay registered."""
        nw = Notwordle(words=["plate"])
        with pytest.raises(GuessResultSyntaxError):
            nw.register_guess_results("p ?l !a ?t !e,p ?l !!a ?t !e")
        assert len(nw.history) == 1

    def test_sessions_are_independent(self):
        """Two sessions never share state."""
        first = Notwordle(words=["pilot"])
        second = Notwordle(words=["pilot"])
        first.register_guess_result("p ?l !a ?t !e")
        assert second.history == []
        assert second.word_length is None

    def test_reset(self):
        """reset forgets all guesses."""
        nw = Notwordle(words=["pilot"])
        nw.register_guess_result("p ?l !a ?t !e")
        nw.reset()
        assert nw.history == []
        assert nw.register_guess_result("p i").matches == []

    def test_default_dictionary(self):
        """Without explicit words the bundled dictionary is searched."""
        nw = Notwordle()
        registration = nw.register_guess_result("p i l o !t")
        assert registration.matches == []
        registration = Notwordle().register_guess_result("p i l o t")
        assert registration.matches == ["pilot"]
