# apps/cli/advise.py
"""
Interactive Wordle advisor.

This script:
  1) Validates and loads the dictionary (word + rank + noun/verb codes).
  2) Loads previously used answers (text file, or downloaded with --fetch-used)
     and removes them from the possible answers.
  3) Prints the opening recommendation, then loops for up to 6 turns:
       - read your guess and the colors Wordle gave it (e.g. BGYBB),
       - show the game state, the two-column recommendation table and the
         final pick, until solved, out of turns, or no answers remain.

Enter 'q' at the guess prompt to quit.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List

import requests

from packages.datasets import (
    load_dictionary, load_used_words, fetch_used_words_page, parse_used_words,
    validate_dictionary, pretty_summary,
)
from packages.datasets.used_words import URL
from packages.engine import Exhausted, InvalidInput, validate_feedback, validate_guess
from packages.harness import (
    Advisor, WORDLE_MAX_TURNS, format_final_pick, format_recommendation_table, format_state,
)
from packages.harness.report import MAX_TOP_PICKS
from packages.solvers.ranking import ENTROPY_RANK_THRESHOLD, SMALL_SET_LIMIT

log = logging.getLogger("apps.cli.advise")


def _used_words(args) -> List[str]:
    if args.used_words:
        return load_used_words(args.used_words)
    if args.fetch_used:
        try:
            return parse_used_words(fetch_used_words_page(args.used_url), replay=args.replay)
        except requests.RequestException as e:
            log.warning("could not fetch used words (%s); continuing without them", e)
    return []


def _show(advisor: Advisor, top: int) -> None:
    rec = advisor.recommend()
    print(format_recommendation_table(rec, top=top))
    print(format_final_pick(rec))


def play(advisor: Advisor, *, top: int = MAX_TOP_PICKS, read: Callable[[str], str] = input) -> int:
    """
    Run the turn loop against `read` (input() by default).
    Returns a process exit code: 0 solved/quit, 1 no answers remain.
    """
    _show(advisor, top)
    print("It is recommended you enter one of these words first.")

    while advisor.turn < WORDLE_MAX_TURNS:
        print(f"\n--- Turn {advisor.turn + 1} of {WORDLE_MAX_TURNS} ---")
        raw = read("Enter your 5-letter word guess: ").strip()
        if raw.lower() == "q":
            return 0
        try:
            guess = validate_guess(raw)
        except InvalidInput as e:
            print(f"{e}. Try again!")
            continue

        while True:
            try:
                feedback = validate_feedback(
                    read("Enter the 5-character result (B=Black/Gray, G=Green, Y=Yellow) e.g. 'BGYBB': "))
                break
            except InvalidInput as e:
                print(e)

        try:
            possible = advisor.apply(guess, feedback)
        except Exhausted:
            print(f"\n{format_state(advisor.state)}")
            print("\n*** ERROR: No possible words remain. Check your input! ***")
            return 1

        print(f"\n{format_state(advisor.state)}")
        if advisor.state.is_solved:
            print(f"\n*** SOLVED! The word is {advisor.state.solution} ***")
            return 0

        print(f"\nFiltered. {len(possible)} possible answers remain.")
        _show(advisor, top)
        if len(possible) == 1:
            print(f"\n*** SOLUTION IDENTIFIED: {possible[0]} ***")
            return 0

    return 0


def main():
    ap = argparse.ArgumentParser(description="Wordle advisor: entropy + frequency next-guess recommendations")
    ap.add_argument("--dictionary", default="data/AllWords.txt",
                    help="dictionary file (WORD + 3-digit rank + noun code + verb code per line)")
    ap.add_argument("--used-words", help="text file of previously used answers (one per line)")
    ap.add_argument("--fetch-used", action="store_true",
                    help="download previously used answers instead of reading a file")
    ap.add_argument("--used-url", default=URL,
                    help="page listing past answers (with --fetch-used)")
    ap.add_argument("--replay", nargs="*", default=[],
                    help="past answers to keep as possible answers anyway")
    ap.add_argument("--top", type=int, default=MAX_TOP_PICKS, help="rows in the recommendation table")
    ap.add_argument("--workers", type=int, help="processes for the entropy computation")
    ap.add_argument("--small-set-limit", type=int, default=SMALL_SET_LIMIT,
                    help="at or below this many possible answers, pick the most common word")
    ap.add_argument("--threshold", type=float, default=ENTROPY_RANK_THRESHOLD,
                    help="entropy gain (bits) needed for the entropy pick to beat the rank pick")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print(f"Fatal Error: dictionary could not be loaded ({args.dictionary}).", file=sys.stderr)
        sys.exit(2)

    dictionary = load_dictionary(args.dictionary)
    try:
        used = _used_words(args)
    except OSError as e:
        print(f"Fatal Error: used words could not be loaded ({e}).", file=sys.stderr)
        sys.exit(2)
    print(f"Loaded {len(dictionary)} words; {len(used)} previously used answers excluded.")

    advisor = Advisor(dictionary, used, workers=args.workers,
                      small_set_limit=args.small_set_limit, threshold=args.threshold)
    try:
        code = play(advisor, top=args.top)
    except (EOFError, KeyboardInterrupt):
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
