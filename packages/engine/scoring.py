"""
Feedback oracle for a single (guess, answer) pair.

Conventions:
  - 'G' : green  = correct letter in the correct position
  - 'Y' : yellow = letter present elsewhere (capped by its multiplicity)
  - 'B' : black  = letter absent, or present fewer times than guessed

Patterns also have a ternary code (B=0, Y=1, G=2, first position most
significant) in the range 0..242, used to bucket outcomes in a fixed table.

Algorithm (two-pass, duplicate-safe):
  1) Mark all greens and tally the answer letters that were NOT matched.
  2) For each non-green position, mark yellow while the tally for that letter
     is positive (consuming one instance), otherwise black.
"""

from collections import Counter
from typing import List, Literal

WORD_SIZE = 5

GREEN, YELLOW, BLACK = "G", "Y", "B"
Mark = Literal["G", "Y", "B"]

# Ternary digit of each mark
_DIGIT = {BLACK: 0, YELLOW: 1, GREEN: 2}
_MARKS = (BLACK, YELLOW, GREEN)

NUM_PATTERNS = 3 ** WORD_SIZE  # 243
SOLVED_PATTERN = GREEN * WORD_SIZE


def _marks(guess: str, answer: str) -> List[str]:
    pattern = [BLACK] * len(guess)

    # Pass 1: greens, plus leftover counts of the answer's unmatched letters
    remaining: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = GREEN
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by what is left over
    for i, g in enumerate(guess):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1

    return pattern


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Both words are expected as uppercase strings of equal length.

    Examples:
      score("SPEED", "ERASE") -> "YBYYB"
      score("CRANE", "TRACE") -> "YGGBG"
    """
    assert len(guess) == len(answer), "Guess and answer must be the same length"
    return "".join(_marks(guess, answer))


def score_code(guess: str, answer: str) -> int:
    """Same as score(), returned as the ternary pattern code."""
    code = 0
    for m in _marks(guess, answer):
        code = code * 3 + _DIGIT[m]
    return code


def pattern_code(pattern: str) -> int:
    code = 0
    for m in pattern:
        code = code * 3 + _DIGIT[m]
    return code


def decode_pattern(code: int, n: int = WORD_SIZE) -> str:
    """Inverse of pattern_code() for an n-position pattern."""
    out = []
    for _ in range(n):
        code, d = divmod(code, 3)
        out.append(_MARKS[d])
    return "".join(reversed(out))
