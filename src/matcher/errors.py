"""Error types raised by the pattern compiler and the guess-result solver."""

from typing import Optional


class WrdError(ValueError):
    """Base class for recoverable input errors."""

    code = "INVALID_INPUT"


class EmptyPatternError(WrdError):
    code = "EMPTY_PATTERN"

    def __init__(self, message: str = "invalid empty input"):
        super().__init__(message)


class PatternSyntaxError(WrdError):
    """A pattern token does not match the pattern grammar."""

    code = "INVALID_TOKEN"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid input {token}")


class GuessResultSyntaxError(WrdError):
    """A guess-result entry is not `x`, `?x` or `!x`."""

    code = "INVALID_GUESS_TOKEN"

    def __init__(self, entry: Optional[str]):
        self.entry = entry
        if entry is None:
            super().__init__("invalid empty input")
        else:
            super().__init__(f"invalid input {entry}")


class GuessLengthMismatchError(WrdError):
    """A guess result has a different number of positions than the session."""

    code = "LENGTH_MISMATCH"

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"previous had {expected} items, got {got} items")
