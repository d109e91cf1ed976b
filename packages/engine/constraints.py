"""
Constraint tracking and candidate filtering across turns.

A ConstraintState accumulates four kinds of knowledge from (guess, feedback)
pairs:
  - green_mask            : letters known exactly at each position
  - required_counts       : minimum number of times a letter must appear
                            (only ever raised, never lowered)
  - excluded_letters      : letters known to be absent from the answer
  - positional_exclusions : per turn and position, a letter ruled out at that
                            exact slot by a yellow or black mark

`fits(word)` checks a word against all of the above, and
`filter_possible_answers(words)` keeps the consistent ones (order preserved).
The state is mutated only by `update`, once per turn.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from .errors import InvalidInput
from .scoring import BLACK, GREEN, WORD_SIZE, YELLOW
from .validation import validate_feedback, validate_guess

log = logging.getLogger(__name__)

MAX_TURNS = 6


def _empty_mask() -> List[Optional[str]]:
    return [None] * WORD_SIZE


def _empty_exclusions() -> List[List[Optional[str]]]:
    return [_empty_mask() for _ in range(MAX_TURNS)]


@dataclass
class ConstraintState:
    green_mask: List[Optional[str]] = field(default_factory=_empty_mask)
    required_counts: Dict[str, int] = field(default_factory=dict)
    excluded_letters: Set[str] = field(default_factory=set)
    positional_exclusions: List[List[Optional[str]]] = field(default_factory=_empty_exclusions)

    def update(self, guess: str, feedback: str, turn: int) -> None:
        """
        Fold one turn of feedback into the state.

        Args:
          guess    : the 5-letter word that was played
          feedback : 5 symbols from G / Y / B ('-' accepted for B)
          turn     : 1-based turn number (1..6); selects the exclusion row

        Raises:
          InvalidInput on a malformed guess, feedback or turn number.
        """
        guess = validate_guess(guess)
        feedback = validate_feedback(feedback)
        if not 1 <= turn <= MAX_TURNS:
            raise InvalidInput(f"turn must be between 1 and {MAX_TURNS}, got {turn}")

        # Occurrences of each letter confirmed present by THIS guess alone
        confirmed = Counter(g for g, m in zip(guess, feedback) if m in (GREEN, YELLOW))
        row = self.positional_exclusions[turn - 1]

        for pos, (letter, mark) in enumerate(zip(guess, feedback)):
            if mark == GREEN:
                self.green_mask[pos] = letter
                self._raise_required(letter, confirmed[letter], turn)
            elif mark == YELLOW:
                row[pos] = letter
                self._raise_required(letter, confirmed[letter], turn)
            else:
                row[pos] = letter
                if confirmed[letter] > 0:
                    # Duplicate guessed beyond the answer's multiplicity
                    continue
                if self.required_counts.get(letter, 0) > 0:
                    log.warning("%s was confirmed on an earlier turn but is black on turn %d; "
                                "not excluding it", letter, turn)
                    continue
                self.excluded_letters.add(letter)

        log.debug("turn %d: mask=%s required=%s excluded=%s", turn, self.mask_string(),
                  self.required_string(), "".join(sorted(self.excluded_letters)))

    def _raise_required(self, letter: str, count: int, turn: int) -> None:
        if count > self.required_counts.get(letter, 0):
            self.required_counts[letter] = count
        if letter in self.excluded_letters:
            log.warning("%s was black on an earlier turn but is confirmed on turn %d; "
                        "no longer excluding it", letter, turn)
            self.excluded_letters.discard(letter)

    def fits(self, word: str) -> bool:
        """True iff `word` is consistent with every constraint gathered so far."""
        counts = Counter(word)

        # (a) minimum occurrence counts from greens and yellows
        for letter, need in self.required_counts.items():
            if counts[letter] < need:
                return False

        for pos, ch in enumerate(word):
            # (b) letters known to be absent
            if ch in self.excluded_letters:
                return False
            # (c) known greens
            fixed = self.green_mask[pos]
            if fixed is not None and fixed != ch:
                return False
            # (d) letters ruled out at this slot on any turn
            for row in self.positional_exclusions:
                if row[pos] == ch:
                    return False

        return True

    def filter_possible_answers(self, words: Iterable[str]) -> List[str]:
        """Keep the words that fit, in their original order."""
        return [w for w in words if self.fits(w)]

    @property
    def is_solved(self) -> bool:
        return all(ch is not None for ch in self.green_mask)

    @property
    def solution(self) -> Optional[str]:
        """The fully green word, once every position is known."""
        return "".join(self.green_mask) if self.is_solved else None

    def mask_string(self, blank: str = "*") -> str:
        return "".join(ch or blank for ch in self.green_mask)

    def required_string(self) -> str:
        """Required letters spelled out with multiplicity, e.g. 'AEE'."""
        return "".join(letter * n for letter, n in sorted(self.required_counts.items()))
