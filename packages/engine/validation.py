"""
Boundary validation for what a turn driver hands to the engine.

A guess is valid iff:
  - it is a string
  - it is alphabetic A-Z only (case-insensitive; canonical form is uppercase)
  - it has exact length 5
  - it exists in `allowed`, when an allowed collection is supplied

A feedback pattern is valid iff it has 5 symbols from G / Y / B. Lowercase
and '-' (gray) are accepted and canonicalized to the uppercase G/Y/B form.

Both validators return the canonical string or raise InvalidInput.
"""

from typing import Collection, Optional

from .errors import InvalidInput
from .scoring import BLACK, GREEN, WORD_SIZE, YELLOW

_FEEDBACK_ALIASES = {"G": GREEN, "Y": YELLOW, "B": BLACK, "-": BLACK}


def is_word(word: object, N: int = WORD_SIZE) -> bool:
    """True for an N-letter ASCII alphabetic string (any case)."""
    if not isinstance(word, str):
        return False
    w = word.strip()
    return len(w) == N and w.isascii() and w.isalpha()


def validate_guess(word: object, allowed: Optional[Collection[str]] = None) -> str:
    """
    Return the uppercase form of `word`, or raise InvalidInput.

    Notes:
      - `allowed` should already be uppercase; a set gives O(1) membership.
    """
    if not is_word(word):
        raise InvalidInput(f"guess must be {WORD_SIZE} letters A-Z, got {word!r}")

    w = word.strip().upper()
    if allowed is not None and w not in allowed:
        raise InvalidInput(f"{w} is not in the word list")
    return w


def validate_feedback(pattern: object) -> str:
    """Return the canonical G/Y/B form of `pattern`, or raise InvalidInput."""
    if not isinstance(pattern, str):
        raise InvalidInput(f"feedback must be a string, got {type(pattern).__name__}")

    p = pattern.strip().upper()
    if len(p) != WORD_SIZE:
        raise InvalidInput(f"feedback must have {WORD_SIZE} symbols, got {pattern!r}")

    out = []
    for ch in p:
        mark = _FEEDBACK_ALIASES.get(ch)
        if mark is None:
            raise InvalidInput(f"invalid feedback symbol {ch!r}; use only B, G or Y")
        out.append(mark)
    return "".join(out)
