"""
Download the list of past Wordle answers and write a clean used-words file.

What it does:
- Downloads the past-answers page.
- Reads the list under its "All Wordle answers" heading.
- Uppercases, de-duplicates while preserving page order, leaves out any
  --replay words, and writes one word per line.

Usage:
    python -m script.extract_wordle_answers --out data/used_words.txt
    # keep a few past answers eligible, alphabetically sorted:
    python -m script.extract_wordle_answers --replay ABHOR LATHE --sort --out data/used_words.txt
"""

import argparse
import logging

from packages.datasets import fetch_used_words_page, parse_used_words, write_lines
from packages.datasets.used_words import URL


def main():
    ap = argparse.ArgumentParser(description="Extract previously used Wordle answers")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/used_words.txt")
    ap.add_argument("--replay", nargs="*", default=[],
                    help="past answers to leave out of the file")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    answers = parse_used_words(fetch_used_words_page(args.url), replay=args.replay)
    if args.sort:
        answers = sorted(answers)

    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} used answers -> {args.out}")


if __name__ == "__main__":
    main()
