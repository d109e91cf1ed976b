# apps/cli/run.py
"""
CLI entry point for self-play runs of the advisor.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads the dictionary, the optional used-words list and the hidden
     answers to play (a text file, or a sample of the possible answers).
  3) Plays every answer with the requested pick policy, with a progress bar,
     and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, dictionary hash, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from functools import partial
from pathlib import Path

from tqdm import tqdm

from packages.datasets import (
    initial_possible_answers, load_dictionary, load_used_words, read_words,
    validate_dictionary, pretty_summary,
)
from packages.harness import run_batch, summarize
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.solvers import create_solver, get_solver_ids


def main():
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="Wordle advisor: self-play experiments")
    ap.add_argument("--solver", default="blended",
                    help=f"pick policy id (one of: {solver_choices})")
    ap.add_argument("--dictionary", default="data/AllWords.txt",
                    help="dictionary file (WORD + 3-digit rank + noun code + verb code per line)")
    ap.add_argument("--used-words", help="text file of previously used answers (one per line)")
    ap.add_argument("--answers",
                    help="hidden answers to play (default: the possible answers themselves)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--workers", type=int, help="processes for the entropy computation")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto = only when stderr is a terminal)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"]:
        sys.exit(f"dictionary not found: {args.dictionary}")

    # 2) Load inputs
    dictionary = load_dictionary(args.dictionary)
    used = load_used_words(args.used_words) if args.used_words else []
    if args.answers:
        cases = read_words(args.answers)
    else:
        cases = initial_possible_answers(dictionary, used)

    # Deterministic sample without replacement
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        cases = rng.sample(cases, args.sample)

    solver = create_solver(args.solver)

    disable = args.progress == "off" or (args.progress == "auto" and not sys.stderr.isatty())
    progress = partial(tqdm, ncols=80, desc=f"Running {solver.id}", unit="game", disable=disable)

    # 3) Run and write outputs
    results = run_batch(solver, cases, dictionary=dictionary, used_words=used,
                        workers=args.workers, progress=progress)
    summary = summarize(results)

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    mean = summary["mean_guesses"]
    print(f"{solver.id}: won {summary['wins']}/{summary['num_cases']} "
          f"({100.0 * summary['win_rate']:.1f}%), mean guesses "
          f"{'n/a' if mean is None else f'{mean:.3f}'}, exhausted {summary['exhausted']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
