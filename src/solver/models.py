"""Data models for the guess-result solver."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..matcher.models import MatchToken


Outcome = Literal["right", "wrong_position", "wrong"]

_PREFIXES = {"right": "", "wrong_position": "?", "wrong": "!"}


class GuessOutcomeToken(BaseModel):
    """The result for one letter of a guess."""

    model_config = ConfigDict(frozen=True)

    kind: Outcome
    letter: str = Field(..., pattern=r'^[a-z]$')

    @classmethod
    def right(cls, letter: str) -> "GuessOutcomeToken":
        return cls(kind="right", letter=letter)

    @classmethod
    def wrong_position(cls, letter: str) -> "GuessOutcomeToken":
        return cls(kind="wrong_position", letter=letter)

    @classmethod
    def wrong(cls, letter: str) -> "GuessOutcomeToken":
        return cls(kind="wrong", letter=letter)

    @property
    def is_present(self) -> bool:
        """True for letters known to be in the target word."""
        return self.kind != "wrong"

    def __str__(self) -> str:
        return f"{_PREFIXES[self.kind]}{self.letter}"


GuessResult = List[GuessOutcomeToken]


class ConstraintState(BaseModel):
    """
    Constraints accumulated over a solving session.

    `include` and `exclude` keep letters in first-seen order; equality
    compares them as sets.
    """

    positional: List[MatchToken] = Field(default_factory=list)
    include: str = ""
    exclude: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintState):
            return NotImplemented
        return (
            self.positional == other.positional
            and set(self.include) == set(other.include)
            and set(self.exclude) == set(other.exclude)
        )


class GuessRegistration(BaseModel):
    """What registering one guess result produced."""

    matches: List[str] = Field(default_factory=list)
    outcome: GuessResult = Field(default_factory=list)

    def __str__(self) -> str:
        return " ".join(str(t) for t in self.outcome)
