from typing import Sequence

from ..solver.models import GuessOutcomeToken


def format_word_grid(words: Sequence[str], columns: int = 14) -> str:
    """Lay words out in rows of `columns`, each word preceded by a tab."""
    rows = []
    for start in range(0, len(words), columns):
        rows.append("".join(f"\t{word}" for word in words[start:start + columns]))
    return "\n".join(rows)


def format_guess_result(outcome: Sequence[GuessOutcomeToken]) -> str:
    """Render a parsed guess result: right letters in upper case, the rest as typed."""
    parts = []
    for token in outcome:
        if token.kind == "right":
            parts.append(token.letter.upper())
        else:
            parts.append(str(token))
    return " ".join(parts)
