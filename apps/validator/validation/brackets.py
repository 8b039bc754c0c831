"""Single-pass bracket balance checking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BracketPair:
    """An opening/closing bracket pair and the label used in messages."""

    open: str
    close: str
    label: str


PARENS = BracketPair("(", ")", "()")
BRACES = BracketPair("{", "}", "{}")
SQUARE_BRACKETS = BracketPair("[", "]", "[]")

EMMET_BRACKET_PAIRS: tuple[BracketPair, ...] = (PARENS, BRACES, SQUARE_BRACKETS)


def check_balanced(text: str, pair: BracketPair, prefix: str = "Emmet") -> str | None:
    """Return an error if ``pair`` is unbalanced in ``text``, else None.

    The scan stops at the first closing bracket that has no opening one,
    so at most one error is produced per pair.
    """
    balance = 0
    for char in text:
        if char == pair.open:
            balance += 1
        elif char == pair.close:
            balance -= 1
        if balance < 0:
            return f"{prefix}: unbalanced {pair.label} (closing bracket without matching opening)."

    if balance != 0:
        return f"{prefix}: unbalanced {pair.label} (missing closing bracket)."
    return None
