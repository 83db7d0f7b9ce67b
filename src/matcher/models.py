"""Data models for pattern matching."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


TokenKind = Literal["any", "any_length", "any_in", "exclude_all_in"]

LETTER_KINDS = ("any_in", "exclude_all_in")


def unique_letters(letters: str) -> str:
    """Drop repeated letters, keeping the first occurrence of each."""
    return "".join(dict.fromkeys(letters))


class MatchToken(BaseModel):
    """
    A single constraint in a pattern.

    `any` matches exactly one character, `any_length` matches zero or more,
    `any_in` requires the character to be one of `letters` and
    `exclude_all_in` requires it not to be.

    Tokens compare by kind and letter set, so `any_in("ab") == any_in("ba")`.
    """

    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    letters: str = Field("", pattern=r"^[a-z]*$")

    @model_validator(mode="after")
    def check_letters(self) -> "MatchToken":
        if self.kind in LETTER_KINDS and not self.letters:
            raise ValueError(f"{self.kind} token needs at least one letter")
        if self.kind not in LETTER_KINDS and self.letters:
            raise ValueError(f"{self.kind} token takes no letters")
        return self

    @classmethod
    def any(cls) -> "MatchToken":
        return cls(kind="any")

    @classmethod
    def any_length(cls) -> "MatchToken":
        return cls(kind="any_length")

    @classmethod
    def any_in(cls, letters: str) -> "MatchToken":
        return cls(kind="any_in", letters=unique_letters(letters))

    @classmethod
    def exclude_all_in(cls, letters: str) -> "MatchToken":
        return cls(kind="exclude_all_in", letters=unique_letters(letters))

    def accepts(self, char: str) -> bool:
        """Check a single character against this token."""
        if self.kind == "any_in":
            return char in self.letters
        if self.kind == "exclude_all_in":
            return char not in self.letters
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchToken):
            return NotImplemented
        return self.kind == other.kind and set(self.letters) == set(other.letters)

    def __hash__(self) -> int:
        return hash((self.kind, frozenset(self.letters)))

    def __str__(self) -> str:
        if self.kind == "any":
            return "*"
        if self.kind == "any_length":
            return "**"
        if self.kind == "exclude_all_in":
            return f"!{self.letters}"
        return self.letters


class Pattern(BaseModel):
    """A compiled pattern: one token per position, possibly with `**` wildcards."""

    model_config = ConfigDict(frozen=True)

    tokens: List[MatchToken] = Field(default_factory=list)

    @classmethod
    def any_word(cls) -> "Pattern":
        """The whole-word wildcard, matching words of every length."""
        return cls(tokens=[MatchToken.any_length()])

    @property
    def is_positional(self) -> bool:
        """True when every token stands for exactly one character."""
        return all(t.kind != "any_length" for t in self.tokens)

    @property
    def min_length(self) -> int:
        return sum(1 for t in self.tokens if t.kind != "any_length")

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        return " ".join(str(t) for t in self.tokens)
