"""
Game session and self-play harness.

- Advisor:   one game's state (constraints + possible answers), driven turn
             by turn with the player's guess and the colors it got back.
- run_case:  play a single hidden answer with a pick policy (self-play).
- run_batch: run many hidden answers in sequence.
- Enforces Wordle's 6-turn limit.

These are UI-agnostic so they can be reused by the interactive CLI, the batch
CLI, a notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional, Tuple

from packages.datasets.dictionary import DictionaryIndex, initial_possible_answers
from packages.engine import (
    ConstraintState, Exhausted, InvalidInput, MAX_TURNS, SOLVED_PATTERN,
    score, validate_feedback, validate_guess,
)
from packages.solvers import BaseSolver, Recommendation, recommend
from packages.solvers.ranking import ENTROPY_RANK_THRESHOLD, SMALL_SET_LIMIT

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = MAX_TURNS


class Advisor:
    """
    Per turn: apply(guess, feedback) updates the constraints and filters the
    possible answers; recommend() scores what is left.

    The game is terminal once every position is green or a single possible
    answer remains. An empty possible set raises Exhausted.
    """

    def __init__(
            self,
            dictionary: DictionaryIndex,
            used_words: Iterable[str] = (),
            *,
            workers: Optional[int] = None,
            small_set_limit: int = SMALL_SET_LIMIT,
            threshold: float = ENTROPY_RANK_THRESHOLD,
    ):
        self.dictionary = dictionary
        self.workers = workers
        self.small_set_limit = small_set_limit
        self.threshold = threshold

        self.state = ConstraintState()
        self.possible: List[str] = initial_possible_answers(dictionary, used_words)
        self.turn = 0
        self.history: List[Tuple[str, str]] = []
        log.info("%d possible answers at start (%d dictionary words)",
                 len(self.possible), len(dictionary))

    def recommend(self) -> Recommendation:
        return recommend(self.possible, self.dictionary, self.state, workers=self.workers,
                         small_set_limit=self.small_set_limit, threshold=self.threshold)

    def apply(self, guess: str, feedback: str) -> List[str]:
        """
        Fold in one turn and return the surviving possible answers.

        Raises:
          InvalidInput on malformed input or when all turns are used up.
          Exhausted when no possible answer survives (and the mask is not solved).
        """
        if self.turn >= WORDLE_MAX_TURNS:
            raise InvalidInput(f"all {WORDLE_MAX_TURNS} turns have been played")

        guess = validate_guess(guess)
        feedback = validate_feedback(feedback)
        self.state.update(guess, feedback, self.turn + 1)
        self.turn += 1
        self.history.append((guess, feedback))

        self.possible = self.state.filter_possible_answers(self.possible)
        log.debug("turn %d: %d possible answers remain", self.turn, len(self.possible))

        if not self.possible and not self.state.is_solved:
            raise Exhausted(self.turn)
        return self.possible

    @property
    def solution(self) -> Optional[str]:
        if self.state.is_solved:
            return self.state.solution
        if len(self.possible) == 1:
            return self.possible[0]
        return None

    @property
    def is_terminal(self) -> bool:
        return self.solution is not None or not self.possible or self.turn >= WORDLE_MAX_TURNS


def run_case(
        solver: BaseSolver,
        answer: str,
        *,
        dictionary: DictionaryIndex,
        used_words: Iterable[str] = (),
        workers: Optional[int] = None,
) -> Dict:
    """
    Play one game against a hidden answer until solved or out of turns.

    Args:
        solver:     a registered pick policy
        answer:     the hidden word for this case
        dictionary: the dictionary index
        used_words: words removed from the initial possible answers
        workers:    entropy worker processes (None = in-process)

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float), exhausted (bool),
            history (list[(guess, pattern)]), answer (str)
    """
    answer = answer.strip().upper()
    advisor = Advisor(dictionary, used_words, workers=workers)
    history: List[Tuple[str, str]] = []
    success = False
    exhausted = False

    t0 = time.perf_counter()
    for _ in range(WORDLE_MAX_TURNS):
        guess = solver.next_guess(advisor.recommend())
        if guess is None:
            exhausted = True
            break

        patt = score(guess, answer)
        history.append((guess, patt))
        if patt == SOLVED_PATTERN:
            success = True
            break

        try:
            advisor.apply(guess, patt)
        except Exhausted:
            # The answer itself was not a possible answer (used or unknown)
            exhausted = True
            break

    return {
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "exhausted": exhausted,
        "history": history,
        "answer": answer,
    }


def run_batch(
        solver: BaseSolver,
        answers: List[str],
        *,
        dictionary: DictionaryIndex,
        used_words: Iterable[str] = (),
        workers: Optional[int] = None,
        sample: int | None = None,
        progress=None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments. `progress` wraps the
    iterable (e.g. a tqdm factory) when given.
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    used = list(used_words)
    it = progress(pool) if progress is not None else pool

    out: List[Dict] = []
    for ans in it:
        r = run_case(solver, ans, dictionary=dictionary, used_words=used, workers=workers)
        r["solver_id"] = solver.id
        out.append(r)
    return out
